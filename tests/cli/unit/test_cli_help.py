"""CLI smoke tests."""

from click.testing import CliRunner
from entity_schema_mapper.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("generate-config", "build", "validate", "show"):
        assert command in result.output


def test_show_help_says_the_schema_is_not_validated() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["show", "--help"])

    assert result.exit_code == 0
    assert "not validated" in result.output
