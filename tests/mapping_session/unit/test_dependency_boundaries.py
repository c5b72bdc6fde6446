"""Boundary tests for the schema mapping core."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_mapping_core_does_not_import_io_layers() -> None:
    package_dir = _project_root() / "src" / "entity_schema_mapper"
    core_dirs = (
        package_dir / "type_registry",
        package_dir / "mapping_directives",
        package_dir / "schema_building",
        package_dir / "schema_validation",
        package_dir / "mapping_session",
    )
    forbidden_import_fragments = (
        "entity_schema_mapper.configuration",
        "entity_schema_mapper.schema_export",
        "entity_schema_mapper.build_execution",
        "entity_schema_mapper.cli",
        "import yaml",
        "import openpyxl",
        "from openpyxl",
        "import click",
    )

    for core_dir in core_dirs:
        for module_path in core_dir.glob("*.py"):
            text = module_path.read_text(encoding="utf-8")
            for fragment in forbidden_import_fragments:
                assert (
                    fragment not in text
                ), f"Forbidden core dependency in {module_path}: {fragment}"
