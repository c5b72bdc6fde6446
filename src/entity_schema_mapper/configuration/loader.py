"""Mapping document loader service."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from entity_schema_mapper.mapping_directives.directive_models import (
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
from entity_schema_mapper.schema_building.naming_conventions import TABLE_NAMING_CONVENTIONS
from entity_schema_mapper.schema_building.schema_builder import BuildSettings
from entity_schema_mapper.type_registry.descriptor_models import (
    MemberDescriptor,
    TypeDescriptor,
    ValueKind,
)

from .runtime_settings import MappingDocument

_PLACEHOLDERS = frozenset({"<REQUIRED>", "<OPTIONAL>"})


class ConfigurationError(Exception):
    """Raised when the mapping document is invalid."""


def load_configuration(config_path: Path | str) -> MappingDocument:
    """Load and validate a YAML or JSON mapping document."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Mapping document not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read mapping document {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse mapping document: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Mapping document root must be a mapping.")

    settings, table_naming = _parse_settings_section(parsed.get("settings"))
    types = _parse_types_section(parsed.get("types"))
    directives = _parse_directives_section(parsed.get("directives"))

    return MappingDocument(
        path=path,
        settings=settings,
        table_naming=table_naming,
        types=types,
        directives=directives,
    )


def _parse_settings_section(value: Any) -> tuple[BuildSettings, str]:
    if value is None:
        value = {}
    section = _require_mapping(value, "settings")
    default_schema = _optional_string(section.get("default_schema"), "settings.default_schema")
    table_naming = _require_non_empty_string(
        section.get("table_naming", "identity"), "settings.table_naming"
    ).lower()
    convention = TABLE_NAMING_CONVENTIONS.get(table_naming)
    if convention is None:
        supported = ", ".join(sorted(TABLE_NAMING_CONVENTIONS))
        raise ConfigurationError(f"settings.table_naming must be one of: {supported}.")
    return BuildSettings(default_schema=default_schema, table_naming=convention), table_naming


def _parse_types_section(value: Any) -> tuple[TypeDescriptor, ...]:
    entries = _require_sequence(value, "types")
    return tuple(_parse_type(entry, f"types[{index}]") for index, entry in enumerate(entries))


def _parse_type(value: Any, label: str) -> TypeDescriptor:
    section = _require_mapping(value, label)
    name = _require_non_empty_string(section.get("name"), f"{label}.name")
    members_value = section.get("members", [])
    members = tuple(
        _parse_member(entry, f"{label}.members[{index}]")
        for index, entry in enumerate(_require_sequence(members_value, f"{label}.members"))
    )
    try:
        return TypeDescriptor(name=name, members=members)
    except ValueError as exc:
        raise ConfigurationError(f"{label}: {exc}") from exc


def _parse_member(value: Any, label: str) -> MemberDescriptor:
    section = _require_mapping(value, label)
    name = _require_non_empty_string(section.get("name"), f"{label}.name")
    kind = _require_enum(section.get("kind", "primitive"), ValueKind, f"{label}.kind")
    nullable = _require_bool(
        section.get("nullable", kind != ValueKind.PRIMITIVE), f"{label}.nullable"
    )
    backing_storage = _optional_string(section.get("backing_storage"), f"{label}.backing_storage")
    reference_type = _optional_string(section.get("references"), f"{label}.references")
    if kind == ValueKind.REFERENCE and reference_type is None:
        raise ConfigurationError(f"{label}.references is required for reference members.")
    if kind != ValueKind.REFERENCE and reference_type is not None:
        raise ConfigurationError(f"{label}.references is only valid for reference members.")
    return MemberDescriptor(
        name=name,
        value_kind=kind,
        nullable=nullable,
        backing_storage=backing_storage,
        reference_type=reference_type,
    )


def _parse_directives_section(value: Any) -> tuple[MappingDirective, ...]:
    if value is None:
        return ()
    entries = _require_sequence(value, "directives")
    return tuple(
        _parse_directive(entry, f"directives[{index}]") for index, entry in enumerate(entries)
    )


def _parse_directive(value: Any, label: str) -> MappingDirective:
    entry = _require_mapping(value, label)
    if len(entry) != 1:
        raise ConfigurationError(f"{label} must contain exactly one directive.")
    kind, body = next(iter(entry.items()))
    parser = _DIRECTIVE_PARSERS.get(kind)
    if parser is None:
        supported = ", ".join(_DIRECTIVE_PARSERS)
        raise ConfigurationError(
            f"{label} has unknown directive '{kind}'; expected one of: {supported}."
        )
    return parser(_require_mapping(body, f"{label}.{kind}"), f"{label}.{kind}")


def _parse_rename_table(section: Mapping[str, Any], label: str) -> RenameTable:
    return RenameTable(
        type_name=_require_non_empty_string(section.get("type"), f"{label}.type"),
        table_name=_require_non_empty_string(section.get("name"), f"{label}.name"),
    )


def _parse_set_schema(section: Mapping[str, Any], label: str) -> SetSchema:
    return SetSchema(
        schema=_require_non_empty_string(section.get("schema"), f"{label}.schema"),
        type_name=_optional_string(section.get("type"), f"{label}.type"),
    )


def _parse_rename_column(section: Mapping[str, Any], label: str) -> RenameColumn:
    return RenameColumn(
        type_name=_require_non_empty_string(section.get("type"), f"{label}.type"),
        member_name=_require_non_empty_string(section.get("member"), f"{label}.member"),
        column_name=_require_non_empty_string(section.get("name"), f"{label}.name"),
    )


def _parse_set_key_name(section: Mapping[str, Any], label: str) -> SetKeyName:
    return SetKeyName(
        type_name=_require_non_empty_string(section.get("type"), f"{label}.type"),
        key_name=_require_non_empty_string(section.get("name"), f"{label}.name"),
    )


def _parse_define_composite_index(
    section: Mapping[str, Any], label: str
) -> DefineCompositeIndex:
    members = _require_sequence(section.get("members"), f"{label}.members")
    if not members:
        raise ConfigurationError(f"{label}.members must contain at least one member.")
    return DefineCompositeIndex(
        type_name=_require_non_empty_string(section.get("type"), f"{label}.type"),
        member_names=tuple(
            _require_non_empty_string(member, f"{label}.members[{index}]")
            for index, member in enumerate(members)
        ),
        index_name=_optional_string(section.get("name"), f"{label}.name"),
        unique=_require_bool(section.get("unique", False), f"{label}.unique"),
    )


def _parse_exclude_type(section: Mapping[str, Any], label: str) -> ExcludeType:
    return ExcludeType(type_name=_require_non_empty_string(section.get("type"), f"{label}.type"))


def _parse_set_backing_storage(section: Mapping[str, Any], label: str) -> SetBackingStorage:
    return SetBackingStorage(
        type_name=_require_non_empty_string(section.get("type"), f"{label}.type"),
        member_name=_require_non_empty_string(section.get("member"), f"{label}.member"),
        storage_name=_require_non_empty_string(section.get("storage"), f"{label}.storage"),
        access_mode=_require_enum(
            section.get("access_mode", PropertyAccessMode.PREFER_FIELD.value),
            PropertyAccessMode,
            f"{label}.access_mode",
        ),
    )


_DIRECTIVE_PARSERS: Mapping[str, Callable[[Mapping[str, Any], str], MappingDirective]] = {
    "rename_table": _parse_rename_table,
    "set_schema": _parse_set_schema,
    "rename_column": _parse_rename_column,
    "set_key_name": _parse_set_key_name,
    "define_composite_index": _parse_define_composite_index,
    "exclude_type": _parse_exclude_type,
    "set_backing_storage": _parse_set_backing_storage,
}


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_sequence(value: Any, section_name: str) -> Sequence[Any]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a list.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped in _PLACEHOLDERS:
        raise ConfigurationError(f"{field_name} still holds the placeholder {stripped}.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped in _PLACEHOLDERS:
        return None
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _require_enum(value: Any, enum_type: Any, field_name: str) -> Any:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    try:
        return enum_type(value.strip().lower())
    except ValueError as exc:
        supported = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(f"{field_name} must be one of: {supported}.") from exc
