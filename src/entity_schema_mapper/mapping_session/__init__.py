"""Mapping session exports."""

from .session import SchemaMappingSession

__all__ = ["SchemaMappingSession"]
