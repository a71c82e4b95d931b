"""Tests for flexver CLI."""

import json
from pathlib import Path

from typer.testing import CliRunner

from flexver.cli.main import app

runner = CliRunner()


# parse tests
def test_parse_exact(workdir: Path) -> None:
    """Test parsing a well-formed version."""
    result = runner.invoke(app, ["parse", "1.2.3"])

    assert result.exit_code == 0
    assert "EXACT (0)" in result.stdout
    assert "1.2.3" in result.stdout


def test_parse_shows_leftovers(workdir: Path) -> None:
    """Test non-empty leftovers are listed."""
    result = runner.invoke(app, ["parse", "1.2.3.4abc"])

    assert result.exit_code == 0
    assert "TRUNCATED_REVISION (4)" in result.stdout
    assert "leftover revision" in result.stdout
    assert "abc" in result.stdout
    assert "leftover major" not in result.stdout


def test_parse_json(workdir: Path) -> None:
    """Test JSON output."""
    result = runner.invoke(app, ["parse", "1.2.2147483700.4", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["status"] == "TRUNCATED_BUILD"
    assert data["version"] == "1.2.2147483647"
    assert data["leftovers"] == ["", "", "53", "4", ""]


def test_parse_unparseable(workdir: Path) -> None:
    """Test an unparseable version exits with 1."""
    result = runner.invoke(app, ["parse", "onlyoneword"])

    assert result.exit_code == 1
    assert "✗" in result.stdout
    assert "Unparseable version" in result.stdout


def test_parse_no_bignum_flag(workdir: Path) -> None:
    """Test --no-bignum approximates overflow with floats."""
    digits = "9" * 25
    result = runner.invoke(app, ["parse", f"1.{digits}", "--json", "--no-bignum"])

    assert result.exit_code == 0
    assert "e+" in json.loads(result.stdout)["leftovers"][1]


def test_parse_bignum_from_config(workdir: Path) -> None:
    """Test the configured capability flag is used by default."""
    (workdir / "flexver.toml").write_text("[flexver]\nhas_bignum = false\n")
    digits = "9" * 25

    from_config = runner.invoke(app, ["parse", f"1.{digits}", "--json"])
    overridden = runner.invoke(app, ["parse", f"1.{digits}", "--json", "--bignum"])

    assert "e+" in json.loads(from_config.stdout)["leftovers"][1]
    assert json.loads(overridden.stdout)["leftovers"][1].isdigit()


def test_parse_require_exact(workdir: Path) -> None:
    """Test require_exact turns an inexact parse into a failure."""
    (workdir / "pyproject.toml").write_text("[tool.flexver]\nrequire_exact = true\n")

    inexact = runner.invoke(app, ["parse", "1.2beta"])
    exact = runner.invoke(app, ["parse", "1.2"])

    assert inexact.exit_code == 1
    assert "Inexact version" in inexact.stdout
    assert exact.exit_code == 0


def test_parse_invalid_config(workdir: Path) -> None:
    """Test an invalid config file is reported."""
    (workdir / "flexver.toml").write_text("[flexver]\nunknown = 1\n")

    result = runner.invoke(app, ["parse", "1.2"])

    assert result.exit_code == 1
    assert "Invalid settings" in result.stdout


def test_parse_explicit_config(workdir: Path) -> None:
    """Test --config with a missing file."""
    result = runner.invoke(app, ["parse", "1.2", "--config", "missing.toml"])

    assert result.exit_code == 1
    assert "Config file not found" in result.stdout


# compare tests
def test_compare_update_available(workdir: Path) -> None:
    """Test a newer available version."""
    result = runner.invoke(app, ["compare", "1.2.0", "1.3.0"])

    assert result.exit_code == 0
    assert "✓" in result.stdout
    assert "Update available" in result.stdout


def test_compare_up_to_date(workdir: Path) -> None:
    """Test an older or equal available version."""
    result = runner.invoke(app, ["compare", "1.3.0", "1.3.0"])

    assert result.exit_code == 0
    assert "Up to date: 1.3.0" in result.stdout


def test_compare_warns_on_inexact(workdir: Path) -> None:
    """Test a recovered available version is flagged."""
    result = runner.invoke(app, ["compare", "1.2.0", "1.3.0-final"])

    assert result.exit_code == 0
    assert "TRUNCATED_BUILD" in result.stdout
    assert "Update available" in result.stdout


def test_compare_unparseable_available(workdir: Path) -> None:
    """Test an unparseable available version exits with 1."""
    result = runner.invoke(app, ["compare", "1.2.0", "latest"])

    assert result.exit_code == 1
    assert "Cannot compare" in result.stdout


def test_compare_invalid_installed(workdir: Path) -> None:
    """Test a malformed installed version exits with 1."""
    result = runner.invoke(app, ["compare", "1.2.0-dev", "1.3.0"])

    assert result.exit_code == 1
    assert "Installed version" in result.stdout


def test_compare_require_exact(workdir: Path) -> None:
    """Test require_exact rejects a recovered available version."""
    (workdir / "flexver.toml").write_text("[flexver]\nrequire_exact = true\n")

    result = runner.invoke(app, ["compare", "1.2.0", "1.3.0-final"])

    assert result.exit_code == 1
    assert "Inexact available version" in result.stdout


def test_parse_pyproject_tool_not_table(workdir: Path) -> None:
    """Test a malformed [tool] entry exits cleanly."""
    (workdir / "pyproject.toml").write_text('tool = "x"\n')

    result = runner.invoke(app, ["parse", "1.2"])

    assert result.exit_code == 1
    assert "[tool] in" in result.stdout
