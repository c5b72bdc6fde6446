"""Mapping document loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from entity_schema_mapper.configuration.loader import ConfigurationError, load_configuration
from entity_schema_mapper.mapping_directives import (
    DefineCompositeIndex,
    ExcludeType,
    PropertyAccessMode,
    RenameColumn,
    RenameTable,
    SetBackingStorage,
    SetKeyName,
    SetSchema,
)
from entity_schema_mapper.schema_building import identity_table_name, pluralized_table_name
from entity_schema_mapper.type_registry import ValueKind


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_mapping_document_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "mapping.yaml",
        """
types:
  - name: Blog
    members:
      - name: BlogId
      - name: Url
        kind: string
      - name: Metadata
        kind: reference
        references: BlogMetadata
  - name: BlogMetadata
    members:
      - name: LoadedFromDatabase
        kind: date
        nullable: false
""",
    )

    document = load_configuration(config_path)

    assert document.path == config_path
    assert document.settings.default_schema is None
    assert document.settings.table_naming is identity_table_name
    assert document.table_naming == "identity"
    assert document.directives == ()
    blog, metadata = document.types
    assert [member.name for member in blog.members] == ["BlogId", "Url", "Metadata"]
    assert blog.members[0].value_kind is ValueKind.PRIMITIVE
    assert blog.members[0].nullable is False
    assert blog.members[1].nullable is True
    assert blog.members[2].reference_type == "BlogMetadata"
    assert metadata.members[0].value_kind is ValueKind.DATE
    assert metadata.members[0].nullable is False


def test_parses_every_directive_kind_in_order(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "mapping.yaml",
        """
settings:
  default_schema: blogging
  table_naming: plural
types:
  - name: Blog
    members:
      - name: BlogId
directives:
  - rename_table: {type: Blog, name: blogs}
  - set_schema: {schema: blogging}
  - set_schema: {type: Blog, schema: archive}
  - rename_column: {type: Blog, member: BlogId, name: blog_id}
  - set_key_name: {type: Blog, name: PrimaryKey_BlogId}
  - define_composite_index:
      type: Person
      members: [FirstName, LastName]
      unique: true
  - exclude_type: {type: BlogMetadata}
  - set_backing_storage:
      type: Blog
      member: Url
      storage: _validatedUrl
      access_mode: prefer_field_during_construction
""",
    )

    document = load_configuration(config_path)

    assert document.settings.default_schema == "blogging"
    assert document.settings.table_naming is pluralized_table_name
    assert document.directives == (
        RenameTable(type_name="Blog", table_name="blogs"),
        SetSchema(schema="blogging"),
        SetSchema(schema="archive", type_name="Blog"),
        RenameColumn(type_name="Blog", member_name="BlogId", column_name="blog_id"),
        SetKeyName(type_name="Blog", key_name="PrimaryKey_BlogId"),
        DefineCompositeIndex(
            type_name="Person", member_names=("FirstName", "LastName"), unique=True
        ),
        ExcludeType(type_name="BlogMetadata"),
        SetBackingStorage(
            type_name="Blog",
            member_name="Url",
            storage_name="_validatedUrl",
            access_mode=PropertyAccessMode.PREFER_FIELD_DURING_CONSTRUCTION,
        ),
    )


def test_loads_json_mapping_document(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "mapping.json",
        json.dumps(
            {
                "types": [{"name": "Blog", "members": [{"name": "BlogId"}]}],
                "directives": [{"rename_table": {"type": "Blog", "name": "blogs"}}],
            }
        ),
    )

    document = load_configuration(config_path)

    assert document.types[0].name == "Blog"
    assert document.directives == (RenameTable(type_name="Blog", table_name="blogs"),)


def test_missing_file_raises_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_non_utf8_file_raises_configuration_error(tmp_path: Path) -> None:
    config_path = tmp_path / "mapping.yaml"
    config_path.write_bytes(b"\xff\xfe\x00types: []")

    with pytest.raises(ConfigurationError, match="Failed to read mapping document"):
        load_configuration(config_path)


def test_directory_path_raises_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Failed to read mapping document"):
        load_configuration(tmp_path)


def test_root_must_be_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "mapping.yaml", "- just\n- a list\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)


def test_types_section_is_required(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "mapping.yaml", "settings: {}\n")

    with pytest.raises(ConfigurationError, match="'types' must be a list"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("settings: {table_naming: snake}\ntypes: []\n", "settings.table_naming must be one of"),
        ("types:\n  - name: Blog\n    members:\n      - name: A\n        kind: blob\n", "kind"),
        (
            "types:\n  - name: Blog\n    members:\n      - name: A\n        kind: reference\n",
            "references is required",
        ),
        (
            "types:\n  - name: Blog\n    members:\n      - name: A\n        references: B\n",
            "only valid for reference members",
        ),
        (
            "types:\n  - name: Blog\n    members:\n      - name: A\n      - name: A\n",
            "Duplicate member 'A'",
        ),
        (
            "types:\n  - name: Blog\n    members:\n      - name: A\n        nullable: maybe\n",
            "nullable must be true or false",
        ),
        ("types:\n  - name: '<REQUIRED>'\n", "placeholder"),
        ("types: []\ndirectives:\n  - drop_table: {type: Blog}\n", "unknown directive"),
        (
            "types: []\ndirectives:\n  - {exclude_type: {type: A}, rename_table: {type: A}}\n",
            "exactly one directive",
        ),
        ("types: []\ndirectives:\n  - rename_table: {type: Blog}\n", "rename_table.name"),
        (
            "types: []\ndirectives:\n  - define_composite_index: {type: Blog, members: []}\n",
            "at least one member",
        ),
        (
            "types: []\ndirectives:\n  - set_backing_storage:"
            " {type: Blog, member: Url, storage: _u, access_mode: lazy}\n",
            "access_mode must be one of",
        ),
    ],
)
def test_invalid_documents_raise_configuration_error(
    tmp_path: Path, body: str, message: str
) -> None:
    config_path = _write_file(tmp_path / "mapping.yaml", body)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
