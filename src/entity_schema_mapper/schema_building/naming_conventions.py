"""Table naming conventions applied to types without an explicit table name."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping

TableNamingConvention = Callable[[str], str]

_IRREGULAR_PLURALS: Mapping[str, str] = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "datum": "data",
}
_UNCOUNTABLE = frozenset({"metadata", "information", "equipment", "series", "species", "news"})
_WORD_SPLIT = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def identity_table_name(type_name: str) -> str:
    """Use the type name unchanged."""
    return type_name


def pluralized_table_name(type_name: str) -> str:
    """Pluralize the last word of a PascalCase or snake_case type name."""
    if not type_name:
        return type_name
    words = _WORD_SPLIT.split(type_name)
    head, last = "".join(words[:-1]), words[-1]
    return head + _pluralize_word(last)


def _pluralize_word(word: str) -> str:
    lowered = word.lower()
    if lowered in _UNCOUNTABLE:
        return word
    if lowered in _IRREGULAR_PLURALS:
        return _match_case(word, _IRREGULAR_PLURALS[lowered])
    if re.search(r"(s|x|z|ch|sh)$", lowered):
        return word + "es"
    if re.search(r"[^aeiou]y$", lowered):
        return word[:-1] + "ies"
    return word + "s"


def _match_case(original: str, replacement: str) -> str:
    if original.isupper():
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


TABLE_NAMING_CONVENTIONS: Mapping[str, TableNamingConvention] = {
    "identity": identity_table_name,
    "plural": pluralized_table_name,
}
