"""Smoke tests: imports work, CLI --help works."""

from click.testing import CliRunner

from ascii_tree.__main__ import main


def test_import():
    import ascii_tree

    assert ascii_tree.render is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Outline or JSON tree" in result.output
