"""Mapping directive exports."""

from .directive_models import (
    DefineCompositeIndex,
    ExcludeType,
    MappingDirective,
    PropertyAccessMode,
    RenameColumn,
    RenameTable,
    SetBackingStorage,
    SetKeyName,
    SetSchema,
)
from .directive_set import MappingDirectiveSet

__all__ = [
    "DefineCompositeIndex",
    "ExcludeType",
    "MappingDirective",
    "PropertyAccessMode",
    "RenameColumn",
    "RenameTable",
    "SetBackingStorage",
    "SetKeyName",
    "SetSchema",
    "MappingDirectiveSet",
]
