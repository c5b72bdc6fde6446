"""Schema builder service.

Turns registered types plus an ordered directive set into a `LogicalSchema`.
The build never mutates its inputs; all intermediate state lives in private
draft records that are frozen into logical entities at the end.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

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
from entity_schema_mapper.mapping_directives.directive_set import MappingDirectiveSet
from entity_schema_mapper.type_registry.descriptor_models import (
    MemberDescriptor,
    TypeDescriptor,
    ValueKind,
)
from entity_schema_mapper.type_registry.type_catalog import TypeRegistry, UnknownTypeError

from .logical_schema import LogicalColumn, LogicalIndex, LogicalKey, LogicalSchema, LogicalTable
from .naming_conventions import TableNamingConvention, identity_table_name

_LOGGER = logging.getLogger(__name__)


class ConflictError(Exception):
    """Raised when a directive would give two tables or two columns the same name."""


class InvalidMemberError(Exception):
    """Raised when a directive references a member the type does not map."""


@dataclass(frozen=True)
class BuildSettings:
    """Settings fixed before a build starts and read-only for its duration."""

    default_schema: str | None = None
    table_naming: TableNamingConvention = identity_table_name


DEFAULT_BUILD_SETTINGS = BuildSettings()


@dataclass
class _ColumnDraft:
    member: MemberDescriptor
    name: str
    access_mode: PropertyAccessMode | None = None


@dataclass
class _IndexDraft:
    member_names: tuple[str, ...]
    name: str | None
    unique: bool


@dataclass
class _TableDraft:
    type_name: str
    name: str
    columns: dict[str, _ColumnDraft]
    key_member: str | None
    dropped_members: frozenset[str] = frozenset()
    schema: str | None = None
    key_name: str | None = None
    renamed_by: RenameTable | None = None
    indexes: list[_IndexDraft] = field(default_factory=list)

    def qualified_name(self, schema: str | None) -> str:
        return self.name if schema is None else f"{schema}.{self.name}"


@dataclass
class _BuildState:
    tables: dict[str, _TableDraft]
    excluded: frozenset[str]
    default_schema: str | None

    def effective_schema(self, table: _TableDraft) -> str | None:
        return table.schema if table.schema is not None else self.default_schema


def build_logical_schema(
    registry: TypeRegistry,
    directives: MappingDirectiveSet,
    settings: BuildSettings = DEFAULT_BUILD_SETTINGS,
) -> LogicalSchema:
    """Apply directives to the registered types and return the logical schema.

    Args:
      registry: Registered entity types; tables follow registration order.
      directives: Directives applied in issuance order. `ExcludeType` is
        evaluated first wherever it sits, and directives targeting an excluded
        type, or a member that references one, are skipped.
      settings: Default schema and table naming convention for this build.

    Returns:
      The immutable logical schema. It has not been validated.

    Raises:
      UnknownTypeError: A directive names an unregistered type, or names a key
        on a type that has no implicit key.
      ConflictError: A renamed table shares its final name and schema with
        another table, or a column rename collides with an existing column.
      InvalidMemberError: A directive references a member the type does not map.
    """
    excluded = directives.excluded_type_names()
    if excluded:
        _LOGGER.debug("Excluding types from the model: %s", ", ".join(sorted(excluded)))

    state = _BuildState(
        tables={
            descriptor.name: _default_table(descriptor, excluded, settings.table_naming)
            for descriptor in registry
            if descriptor.name not in excluded
        },
        excluded=excluded,
        default_schema=settings.default_schema,
    )
    for directive in directives:
        if isinstance(directive, ExcludeType):
            continue
        handler = _DIRECTIVE_HANDLERS.get(type(directive))
        if handler is None:
            raise TypeError(f"Unsupported mapping directive: {directive!r}")
        handler(state, directive)
    _check_table_name_conflicts(state)

    schema = LogicalSchema(
        tables=tuple(_freeze_table(state, table) for table in state.tables.values())
    )
    _LOGGER.debug("Built logical schema with %d table(s).", len(schema.tables))
    return schema


def _default_table(
    descriptor: TypeDescriptor,
    excluded: frozenset[str],
    table_naming: TableNamingConvention,
) -> _TableDraft:
    columns = {
        member.name: _ColumnDraft(member=member, name=member.name)
        for member in descriptor.members
        if not _references_excluded_type(member, excluded)
    }
    return _TableDraft(
        type_name=descriptor.name,
        name=table_naming(descriptor.name),
        columns=columns,
        key_member=_implicit_key_member(descriptor.name, columns),
        dropped_members=frozenset(
            member.name for member in descriptor.members if member.name not in columns
        ),
    )


def _references_excluded_type(member: MemberDescriptor, excluded: frozenset[str]) -> bool:
    return member.value_kind == ValueKind.REFERENCE and member.reference_type in excluded


def _implicit_key_member(type_name: str, columns: Mapping[str, _ColumnDraft]) -> str | None:
    candidates = {"id", f"{type_name}id".lower()}
    for member_name in columns:
        if member_name.lower() in candidates:
            return member_name
    return None


def _target_table(state: _BuildState, type_name: str) -> _TableDraft | None:
    if type_name in state.excluded:
        _LOGGER.debug("Skipping directive for excluded type %s.", type_name)
        return None
    table = state.tables.get(type_name)
    if table is None:
        raise UnknownTypeError(f"Directive targets an unregistered type: {type_name}")
    return table


def _target_column(table: _TableDraft, member_name: str) -> _ColumnDraft | None:
    if member_name in table.dropped_members:
        _LOGGER.debug(
            "Skipping directive for %s.%s, which references an excluded type.",
            table.type_name,
            member_name,
        )
        return None
    column = table.columns.get(member_name)
    if column is None:
        raise InvalidMemberError(f"Type '{table.type_name}' has no mapped member '{member_name}'.")
    return column


def _apply_rename_table(state: _BuildState, directive: RenameTable) -> None:
    table = _target_table(state, directive.type_name)
    if table is None:
        return
    table.name = directive.table_name
    table.renamed_by = directive


def _check_table_name_conflicts(state: _BuildState) -> None:
    # Renames are checked against final names so directive order cannot matter.
    for table in state.tables.values():
        if table.renamed_by is None:
            continue
        schema = state.effective_schema(table)
        for other in state.tables.values():
            if other is table:
                continue
            if other.name == table.name and state.effective_schema(other) == schema:
                raise ConflictError(
                    f"Renaming type '{table.type_name}' to table '{table.renamed_by.table_name}' "
                    f"conflicts with type '{other.type_name}': both map to "
                    f"'{table.qualified_name(schema)}'."
                )


def _apply_set_schema(state: _BuildState, directive: SetSchema) -> None:
    if directive.type_name is None:
        state.default_schema = directive.schema
        return
    table = _target_table(state, directive.type_name)
    if table is not None:
        table.schema = directive.schema


def _apply_rename_column(state: _BuildState, directive: RenameColumn) -> None:
    table = _target_table(state, directive.type_name)
    if table is None:
        return
    column = _target_column(table, directive.member_name)
    if column is None:
        return
    for other in table.columns.values():
        if other is not column and other.name == directive.column_name:
            raise ConflictError(
                f"Column name '{directive.column_name}' is already used by member "
                f"'{other.member.name}' on type '{table.type_name}'."
            )
    column.name = directive.column_name


def _apply_set_key_name(state: _BuildState, directive: SetKeyName) -> None:
    table = _target_table(state, directive.type_name)
    if table is None:
        return
    if table.key_member is None:
        raise UnknownTypeError(f"Type '{table.type_name}' has no implicit key to name.")
    table.key_name = directive.key_name


def _apply_define_composite_index(state: _BuildState, directive: DefineCompositeIndex) -> None:
    table = _target_table(state, directive.type_name)
    if table is None:
        return
    member_names = tuple(directive.member_names)
    if not member_names:
        raise InvalidMemberError(f"Index on type '{table.type_name}' must reference members.")
    columns = [_target_column(table, member_name) for member_name in member_names]
    if any(column is None for column in columns):
        return
    index = _IndexDraft(
        member_names=member_names, name=directive.index_name, unique=directive.unique
    )
    for position, existing in enumerate(table.indexes):
        if existing.member_names == member_names:
            table.indexes[position] = index
            return
    table.indexes.append(index)


def _apply_set_backing_storage(state: _BuildState, directive: SetBackingStorage) -> None:
    table = _target_table(state, directive.type_name)
    if table is None:
        return
    column = _target_column(table, directive.member_name)
    if column is None:
        return
    column.member = dataclasses.replace(column.member, backing_storage=directive.storage_name)
    column.access_mode = directive.access_mode


_DIRECTIVE_HANDLERS: Mapping[type[MappingDirective], Callable[[_BuildState, Any], None]] = {
    RenameTable: _apply_rename_table,
    SetSchema: _apply_set_schema,
    RenameColumn: _apply_rename_column,
    SetKeyName: _apply_set_key_name,
    DefineCompositeIndex: _apply_define_composite_index,
    SetBackingStorage: _apply_set_backing_storage,
}


def _freeze_table(state: _BuildState, table: _TableDraft) -> LogicalTable:
    columns = {
        member_name: LogicalColumn(
            name=draft.name,
            source=draft.member,
            nullable=draft.member.nullable,
            access_mode=draft.access_mode,
        )
        for member_name, draft in table.columns.items()
    }
    key = None
    if table.key_member is not None:
        key = LogicalKey(
            columns=(columns[table.key_member],),
            name=table.key_name or f"PK_{table.name}",
            is_name_explicit=table.key_name is not None,
        )
    indexes = tuple(_freeze_index(table.name, draft, columns) for draft in table.indexes)
    return LogicalTable(
        schema=state.effective_schema(table),
        name=table.name,
        columns=tuple(columns.values()),
        key=key,
        indexes=indexes,
        source_type=table.type_name,
    )


def _freeze_index(
    table_name: str, draft: _IndexDraft, columns: Mapping[str, LogicalColumn]
) -> LogicalIndex:
    index_columns = tuple(columns[member_name] for member_name in draft.member_names)
    generated_name = "_".join(("IX", table_name, *(column.name for column in index_columns)))
    return LogicalIndex(
        columns=index_columns,
        name=draft.name or generated_name,
        is_unique=draft.unique,
        is_name_explicit=draft.name is not None,
    )
