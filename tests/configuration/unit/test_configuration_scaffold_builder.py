"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from entity_schema_mapper.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from entity_schema_mapper.configuration.loader import ConfigurationError, load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Mapping document template" in scaffold
    assert "settings:" in scaffold
    assert "types:" in scaffold
    assert "directives:" in scaffold
    for directive in (
        "rename_table",
        "set_schema",
        "rename_column",
        "set_key_name",
        "define_composite_index",
        "exclude_type",
        "set_backing_storage",
    ):
        assert directive in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "mapping.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_unfilled_placeholder_configuration_is_rejected(tmp_path: Path) -> None:
    output_path = write_placeholder_configuration(tmp_path / "mapping.yaml")

    with pytest.raises(ConfigurationError, match="placeholder"):
        load_configuration(output_path)


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "mapping.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
