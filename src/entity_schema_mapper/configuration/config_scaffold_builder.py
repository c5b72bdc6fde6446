"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "mapping.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Mapping document template for entity-schema-mapper.
# Replace every <REQUIRED> placeholder before running build, validate or show.
# Replace <OPTIONAL> placeholders only when your model needs them.

settings:
  # Schema for every table without an explicit schema directive.
  # default_schema: "<OPTIONAL>"
  # Table naming convention: identity (type name as-is) or plural.
  table_naming: identity

types:
  - name: "<REQUIRED>"
    members:
      # kind is one of: primitive, string, date, reference.
      - name: "<REQUIRED>"
        kind: primitive
        nullable: false
      # - name: "<OPTIONAL>"
      #   kind: reference
      #   references: "<OPTIONAL>"
      #   nullable: true

directives:
  # Each entry holds exactly one directive; order matters for repeated directives.
  # - rename_table: {type: "<REQUIRED>", name: "<REQUIRED>"}
  # - set_schema: {schema: "<REQUIRED>"}
  # - set_schema: {type: "<REQUIRED>", schema: "<REQUIRED>"}
  # - rename_column: {type: "<REQUIRED>", member: "<REQUIRED>", name: "<REQUIRED>"}
  # - set_key_name: {type: "<REQUIRED>", name: "<REQUIRED>"}
  # - define_composite_index:
  #     type: "<REQUIRED>"
  #     members: ["<REQUIRED>", "<REQUIRED>"]
  #     name: "<OPTIONAL>"
  #     unique: false
  # - exclude_type: {type: "<REQUIRED>"}
  # - set_backing_storage:
  #     type: "<REQUIRED>"
  #     member: "<REQUIRED>"
  #     storage: "<REQUIRED>"
  #     access_mode: prefer_field
"""


def build_placeholder_configuration() -> str:
    """Build a YAML mapping document template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder mapping document to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Mapping document already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
