import json
import sys
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import typer
import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from ..core.config import SETTINGS, Settings
from ..core.logging import log, setup_logging
from ..wrapping import TextWrapper, WrapConfigError, dedent, indent, shorten

app = typer.Typer(add_completion=False, help="Linewrap CLI")

T = TypeVar("T")

# Shared option declarations; None means "use the configured default"
SOURCE = typer.Argument(None, help="Input file (default: stdin, or '-')")
WIDTH = typer.Option(None, "--width", "-w", help="Maximum line width")
INITIAL_INDENT = typer.Option(None, "--initial-indent", help="Prefix for the first line")
SUBSEQUENT_INDENT = typer.Option(
    None, "--subsequent-indent", help="Prefix for all lines after the first"
)
MAX_LINES = typer.Option(None, "--max-lines", help="Truncate after this many lines")
PLACEHOLDER = typer.Option(None, "--placeholder", help="Marker for truncated text")
TAB_SIZE = typer.Option(None, "--tab-size", help="Tab stop interval")
BREAK_LONG_WORDS = typer.Option(
    None, "--break-long-words/--no-break-long-words", help="Split words wider than a line"
)
BREAK_ON_HYPHENS = typer.Option(
    None, "--break-on-hyphens/--no-break-on-hyphens", help="Allow breaks after hyphens"
)
FIX_SENTENCE_ENDINGS = typer.Option(
    None,
    "--fix-sentence-endings/--no-fix-sentence-endings",
    help="Put two spaces after sentence ends",
)
DROP_WHITESPACE = typer.Option(
    None,
    "--drop-whitespace/--keep-whitespace",
    help="Drop whitespace at line starts and ends",
)


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else SETTINGS


def _read_input(source: Optional[Path]) -> str:
    if source is None or str(source) == "-":
        return sys.stdin.read()
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.warning("cli.input_error", path=str(source), error=str(e))
        typer.echo(f"❌ Cannot read {source}: {e}", err=True)
        raise typer.Exit(1) from e


def _guarded(action: Callable[[], T]) -> T:
    """Run a wrapping action, turning option errors into exit status 1."""
    try:
        return action()
    except (WrapConfigError, ValidationError) as e:
        log.warning("cli.config_error", error=str(e))
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e


def _wrapper(ctx: typer.Context, **overrides: Any) -> TextWrapper:
    return _guarded(lambda: TextWrapper(_settings(ctx).wrap_options(**overrides)))


@app.callback()
def _init(
    ctx: typer.Context,
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        help="Config file (.linewrap.yaml auto-discovered)",
    ),
) -> None:
    try:
        settings = Settings.load_config(config_file)
    except (ValueError, yaml.YAMLError) as e:
        # Logging is not set up yet, so only report on stderr
        typer.echo(f"❌ Invalid configuration: {e}", err=True)
        raise typer.Exit(1) from e
    setup_logging(settings.LOG_FORMAT, settings.LOG_LEVEL)  # type: ignore[arg-type]
    ctx.obj = settings


@app.command()
def version() -> None:
    from .. import __version__

    typer.echo(__version__)


@app.command("wrap")
def wrap_cmd(
    ctx: typer.Context,
    source: Optional[Path] = SOURCE,
    width: Optional[int] = WIDTH,
    initial_indent: Optional[str] = INITIAL_INDENT,
    subsequent_indent: Optional[str] = SUBSEQUENT_INDENT,
    max_lines: Optional[int] = MAX_LINES,
    placeholder: Optional[str] = PLACEHOLDER,
    tab_size: Optional[int] = TAB_SIZE,
    break_long_words: Optional[bool] = BREAK_LONG_WORDS,
    break_on_hyphens: Optional[bool] = BREAK_ON_HYPHENS,
    fix_sentence_endings: Optional[bool] = FIX_SENTENCE_ENDINGS,
    drop_whitespace: Optional[bool] = DROP_WHITESPACE,
    output_format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Wrap a paragraph and print one line per output line."""
    if output_format not in ("text", "json"):
        typer.echo(f"❌ Unknown format: {output_format}", err=True)
        raise typer.Exit(2)

    wrapper = _wrapper(
        ctx,
        width=width,
        initial_indent=initial_indent,
        subsequent_indent=subsequent_indent,
        max_lines=max_lines,
        placeholder=placeholder,
        tab_size=tab_size,
        break_long_words=break_long_words,
        break_on_hyphens=break_on_hyphens,
        fix_sentence_endings=fix_sentence_endings,
        drop_whitespace=drop_whitespace,
    )
    text = _read_input(source)
    lines = _guarded(lambda: wrapper.wrap(text))

    if output_format == "json":
        typer.echo(json.dumps(lines))
    else:
        for line in lines:
            typer.echo(line)


@app.command("fill")
def fill_cmd(
    ctx: typer.Context,
    source: Optional[Path] = SOURCE,
    width: Optional[int] = WIDTH,
    initial_indent: Optional[str] = INITIAL_INDENT,
    subsequent_indent: Optional[str] = SUBSEQUENT_INDENT,
    max_lines: Optional[int] = MAX_LINES,
    placeholder: Optional[str] = PLACEHOLDER,
    tab_size: Optional[int] = TAB_SIZE,
    break_long_words: Optional[bool] = BREAK_LONG_WORDS,
    break_on_hyphens: Optional[bool] = BREAK_ON_HYPHENS,
    fix_sentence_endings: Optional[bool] = FIX_SENTENCE_ENDINGS,
    drop_whitespace: Optional[bool] = DROP_WHITESPACE,
) -> None:
    """Fill a paragraph and print it as a single block."""
    wrapper = _wrapper(
        ctx,
        width=width,
        initial_indent=initial_indent,
        subsequent_indent=subsequent_indent,
        max_lines=max_lines,
        placeholder=placeholder,
        tab_size=tab_size,
        break_long_words=break_long_words,
        break_on_hyphens=break_on_hyphens,
        fix_sentence_endings=fix_sentence_endings,
        drop_whitespace=drop_whitespace,
    )
    text = _read_input(source)
    typer.echo(_guarded(lambda: wrapper.fill(text)))


@app.command("shorten")
def shorten_cmd(
    ctx: typer.Context,
    width: int = typer.Argument(..., help="Maximum width of the result"),
    source: Optional[Path] = SOURCE,
    placeholder: Optional[str] = PLACEHOLDER,
    break_long_words: Optional[bool] = BREAK_LONG_WORDS,
    break_on_hyphens: Optional[bool] = BREAK_ON_HYPHENS,
) -> None:
    """Collapse whitespace and truncate text to fit in WIDTH."""
    options = _guarded(
        lambda: _settings(ctx).wrap_options(
            width=width,
            placeholder=placeholder,
            break_long_words=break_long_words,
            break_on_hyphens=break_on_hyphens,
        )
    )
    # shorten() takes the width itself and always truncates to one line
    overrides = options.model_dump(exclude={"width", "max_lines"})
    text = _read_input(source)
    typer.echo(_guarded(lambda: shorten(text, width, **overrides)))


@app.command("dedent")
def dedent_cmd(source: Optional[Path] = SOURCE) -> None:
    """Remove the common leading margin from every line."""
    typer.echo(dedent(_read_input(source)), nl=False)


@app.command("indent")
def indent_cmd(
    source: Optional[Path] = SOURCE,
    prefix: str = typer.Option("    ", "--prefix", help="Text to prepend"),
    all_lines: bool = typer.Option(
        False, "--all-lines", help="Prefix blank lines too"
    ),
) -> None:
    """Prefix every non-blank line (or every line with --all-lines)."""
    predicate = (lambda line: True) if all_lines else None
    typer.echo(indent(_read_input(source), prefix, predicate), nl=False)


if __name__ == "__main__":
    app()
