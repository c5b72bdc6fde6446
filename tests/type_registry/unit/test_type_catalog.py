"""Type registry tests."""

from __future__ import annotations

import pytest
from entity_schema_mapper.type_registry import (
    DuplicateTypeError,
    MemberDescriptor,
    TypeDescriptor,
    TypeRegistry,
    UnknownTypeError,
    ValueKind,
)


def _blog() -> TypeDescriptor:
    return TypeDescriptor(
        name="Blog",
        members=(
            MemberDescriptor(name="BlogId", value_kind=ValueKind.PRIMITIVE, nullable=False),
            MemberDescriptor(name="Url", value_kind=ValueKind.STRING, nullable=True),
        ),
    )


def test_register_and_lookup_returns_same_descriptor() -> None:
    registry = TypeRegistry()
    blog = _blog()

    registry.register(blog)

    assert registry.lookup("Blog") is blog
    assert "Blog" in registry
    assert len(registry) == 1


def test_registering_same_type_name_twice_fails() -> None:
    registry = TypeRegistry()
    registry.register(_blog())

    with pytest.raises(DuplicateTypeError, match="Blog"):
        registry.register(TypeDescriptor(name="Blog"))


def test_lookup_of_unregistered_type_fails() -> None:
    registry = TypeRegistry()

    with pytest.raises(UnknownTypeError, match="Post"):
        registry.lookup("Post")


def test_iteration_follows_registration_order() -> None:
    registry = TypeRegistry()
    for name in ("Post", "Blog", "Author"):
        registry.register(TypeDescriptor(name=name))

    assert [descriptor.name for descriptor in registry] == ["Post", "Blog", "Author"]


def test_type_descriptor_rejects_duplicate_member_names() -> None:
    with pytest.raises(ValueError, match="Duplicate member 'Url'"):
        TypeDescriptor(
            name="Blog",
            members=(
                MemberDescriptor(name="Url", value_kind=ValueKind.STRING, nullable=True),
                MemberDescriptor(name="Url", value_kind=ValueKind.STRING, nullable=False),
            ),
        )


def test_type_descriptor_member_lookup() -> None:
    blog = _blog()

    assert blog.member("Url") == blog.members[1]
    assert blog.member("Title") is None
