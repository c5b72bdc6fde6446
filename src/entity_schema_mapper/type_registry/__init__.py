"""Type registry exports."""

from .descriptor_models import MemberDescriptor, TypeDescriptor, ValueKind
from .type_catalog import DuplicateTypeError, TypeRegistry, UnknownTypeError

__all__ = [
    "MemberDescriptor",
    "TypeDescriptor",
    "ValueKind",
    "DuplicateTypeError",
    "TypeRegistry",
    "UnknownTypeError",
]
