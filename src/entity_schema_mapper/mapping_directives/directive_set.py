"""Ordered collection of mapping directives."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .directive_models import ExcludeType, MappingDirective


class MappingDirectiveSet:
    """Directives in issuance order.

    Appending never validates: a directive may name a type that is registered
    later, or never. Resolution happens when the schema is built.
    """

    def __init__(self, directives: Iterable[MappingDirective] = ()) -> None:
        self._directives: list[MappingDirective] = list(directives)

    def append(self, directive: MappingDirective) -> None:
        """Append one directive."""
        self._directives.append(directive)

    def extend(self, directives: Iterable[MappingDirective]) -> None:
        """Append directives in the given order."""
        self._directives.extend(directives)

    def excluded_type_names(self) -> frozenset[str]:
        """Return every excluded type name, wherever its directive sits."""
        return frozenset(
            directive.type_name
            for directive in self._directives
            if isinstance(directive, ExcludeType)
        )

    def __iter__(self) -> Iterator[MappingDirective]:
        return iter(tuple(self._directives))

    def __len__(self) -> int:
        return len(self._directives)
