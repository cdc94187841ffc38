"""Test the linewrap CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from linewrap.cli.main import app

TEXT = "Hello there, how are you this fine day?\n"


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    """Test that version prints the package version."""
    from linewrap import __version__

    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_wrap_prints_one_line_per_output_line(runner):
    """Test wrap reading stdin."""
    result = runner.invoke(app, ["wrap", "-w", "12"], input=TEXT)
    assert result.exit_code == 0
    assert result.stdout == "Hello there,\nhow are you\nthis fine\nday?\n"


def test_wrap_json_format(runner):
    """Test wrap with JSON output."""
    result = runner.invoke(app, ["wrap", "-w", "12", "--format", "json"], input=TEXT)
    assert result.exit_code == 0
    assert json.loads(result.stdout) == ["Hello there,", "how are you", "this fine", "day?"]


def test_wrap_unknown_format(runner):
    """Test that an unknown output format is a usage error."""
    result = runner.invoke(app, ["wrap", "--format", "xml"], input=TEXT)
    assert result.exit_code == 2


def test_wrap_reads_file(runner, tmp_path):
    """Test wrap reading a file argument."""
    source = tmp_path / "para.txt"
    source.write_text(TEXT, encoding="utf-8")
    result = runner.invoke(app, ["wrap", str(source), "-w", "20", "--max-lines", "1"])
    assert result.exit_code == 0
    assert result.stdout == "Hello there, [...]\n"


def test_fill_with_indents(runner):
    """Test fill with initial and subsequent indents."""
    result = runner.invoke(
        app,
        ["fill", "-w", "16", "--initial-indent", "* ", "--subsequent-indent", "  "],
        input=TEXT,
    )
    assert result.exit_code == 0
    assert result.stdout == "* Hello there,\n  how are you\n  this fine day?\n"


def test_fill_bad_width_exits_with_error(runner):
    """Test that an unusable width exits with status 1."""
    result = runner.invoke(app, ["fill", "-w", "0"], input=TEXT)
    assert result.exit_code == 1
    assert "invalid width" in result.output


def test_fill_invalid_option_value(runner):
    """Test that a rejected option value exits with status 1."""
    result = runner.invoke(app, ["fill", "--max-lines", "0"], input=TEXT)
    assert result.exit_code == 1
    assert "❌" in result.output


def test_fill_placeholder_too_large(runner):
    """Test the placeholder check through the CLI."""
    result = runner.invoke(
        app, ["fill", "-w", "4", "--max-lines", "1"], input=TEXT
    )
    assert result.exit_code == 1
    assert "placeholder too large" in result.output


def test_shorten(runner):
    """Test shorten collapsing whitespace and truncating."""
    result = runner.invoke(app, ["shorten", "12"], input="Hello  world!")
    assert result.exit_code == 0
    assert result.stdout == "Hello world!\n"

    result = runner.invoke(app, ["shorten", "11"], input="Hello  world!")
    assert result.stdout == "Hello [...]\n"

    result = runner.invoke(app, ["shorten", "8", "--placeholder", "..."], input="Hello  world!")
    assert result.stdout == "Hello...\n"


def test_dedent(runner):
    """Test dedent passes text through unchanged apart from the margin."""
    result = runner.invoke(app, ["dedent"], input="  a\n    b\n")
    assert result.exit_code == 0
    assert result.stdout == "a\n  b\n"


def test_indent(runner):
    """Test indent with and without blank lines."""
    result = runner.invoke(app, ["indent", "--prefix", "> "], input="a\n\nb\n")
    assert result.exit_code == 0
    assert result.stdout == "> a\n\n> b\n"

    result = runner.invoke(app, ["indent", "--prefix", "> ", "--all-lines"], input="a\n\nb\n")
    assert result.stdout == "> a\n> \n> b\n"


def test_width_from_environment(runner, monkeypatch):
    """Test that LINEWRAP_WIDTH sets the default width."""
    monkeypatch.setenv("LINEWRAP_WIDTH", "12")
    result = runner.invoke(app, ["fill"], input=TEXT)
    assert result.exit_code == 0
    assert result.stdout == "Hello there,\nhow are you\nthis fine\nday?\n"


def test_width_from_discovered_config_file(runner, tmp_path):
    """Test that .linewrap.yaml in the working directory is picked up."""
    (tmp_path / ".linewrap.yaml").write_text("LINEWRAP_WIDTH: 12\n")
    result = runner.invoke(app, ["fill"], input=TEXT)
    assert result.exit_code == 0
    assert result.stdout == "Hello there,\nhow are you\nthis fine\nday?\n"


def test_explicit_config_file_and_cli_override(runner, tmp_path):
    """Test --config, with a command-line width winning over the file."""
    config = tmp_path / "wrap.toml"
    config.write_text('LINEWRAP_WIDTH = 12\nLINEWRAP_PLACEHOLDER = "..."\n')

    result = runner.invoke(app, ["--config", str(config), "fill", "--max-lines", "1"], input=TEXT)
    assert result.exit_code == 0
    assert result.stdout == "Hello...\n"

    result = runner.invoke(app, ["--config", str(config), "fill", "-w", "80"], input=TEXT)
    assert result.stdout == TEXT


def test_missing_input_file(runner, tmp_path):
    """Test that an unreadable source exits with status 1."""
    result = runner.invoke(app, ["fill", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "❌ Cannot read" in result.output
    assert not isinstance(result.exception, FileNotFoundError)


def test_invalid_config_value(runner, tmp_path):
    """Test that a bad value in the config file exits with status 1."""
    (tmp_path / ".linewrap.yaml").write_text("LINEWRAP_WIDTH: abc\n")
    result = runner.invoke(app, ["fill"], input=TEXT)
    assert result.exit_code == 1
    assert "❌ Invalid configuration" in result.output


def test_malformed_config_file(runner, tmp_path):
    (tmp_path / ".linewrap.yaml").write_text("LINEWRAP_WIDTH: [12\n")
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 1
    assert "❌ Invalid configuration" in result.output


def test_shorten_uses_configured_hyphen_policy(runner, monkeypatch):
    """Test that shorten honours settings beyond the placeholder."""
    text = "yaba daba-doo-dee"
    result = runner.invoke(app, ["shorten", "15", "--placeholder", "..."], input=text)
    assert result.stdout == "yaba daba-...\n"

    monkeypatch.setenv("LINEWRAP_BREAK_ON_HYPHENS", "false")
    result = runner.invoke(app, ["shorten", "15", "--placeholder", "..."], input=text)
    assert result.exit_code == 0
    assert result.stdout == "yaba...\n"

    result = runner.invoke(
        app, ["shorten", "15", "--placeholder", "...", "--break-on-hyphens"], input=text
    )
    assert result.stdout == "yaba daba-...\n"
