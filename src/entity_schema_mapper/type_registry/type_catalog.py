"""Registry of mapped entity types."""

from __future__ import annotations

from collections.abc import Iterator

from .descriptor_models import TypeDescriptor


class DuplicateTypeError(Exception):
    """Raised when a type name is registered twice."""


class UnknownTypeError(Exception):
    """Raised when a type, or a type-level mapping target, cannot be resolved."""


class TypeRegistry:
    """Holds registered type descriptors in registration order.

    Descriptors are immutable, so a registered type can never change; the only
    mutation exposed is adding a new type.
    """

    def __init__(self) -> None:
        self._types: dict[str, TypeDescriptor] = {}

    def register(self, descriptor: TypeDescriptor) -> None:
        """Add a type descriptor.

        Raises:
          DuplicateTypeError: If a type with the same name is already registered.
        """
        if descriptor.name in self._types:
            raise DuplicateTypeError(f"Type already registered: {descriptor.name}")
        self._types[descriptor.name] = descriptor

    def lookup(self, name: str) -> TypeDescriptor:
        """Return the registered descriptor for `name`.

        Raises:
          UnknownTypeError: If no type with that name is registered.
        """
        try:
            return self._types[name]
        except KeyError as exc:
            raise UnknownTypeError(f"Type is not registered: {name}") from exc

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(tuple(self._types.values()))

    def __len__(self) -> int:
        return len(self._types)
