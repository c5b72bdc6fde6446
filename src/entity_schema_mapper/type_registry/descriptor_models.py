"""Type and member descriptor entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValueKind(str, Enum):
    """Declared value kind of an entity member."""

    PRIMITIVE = "primitive"
    STRING = "string"
    DATE = "date"
    REFERENCE = "reference"


@dataclass(frozen=True)
class MemberDescriptor:
    """One property or field of a mapped entity type."""

    name: str
    value_kind: ValueKind
    nullable: bool
    backing_storage: str | None = None
    reference_type: str | None = None


@dataclass(frozen=True)
class TypeDescriptor:
    """Mapped entity type with its members in declaration order."""

    name: str
    members: tuple[MemberDescriptor, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Type name must not be empty.")
        seen: set[str] = set()
        for member in self.members:
            if member.name in seen:
                raise ValueError(f"Duplicate member '{member.name}' on type '{self.name}'.")
            seen.add(member.name)

    def member(self, name: str) -> MemberDescriptor | None:
        """Return the member with the given name, if declared."""
        for member in self.members:
            if member.name == name:
                return member
        return None
