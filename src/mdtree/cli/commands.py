"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdtree.config import Settings, load_config
from mdtree.core.emit import emit_markdown
from mdtree.core.errors import ParseError
from mdtree.core.parse import parse
from mdtree.core.pipeline import run_parse
from mdtree.log import configure_logging


FrontmatterOpt = Annotated[
    Optional[str], typer.Option("--frontmatter", help="Header loader: simple or yaml"),
]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def parse_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to parse")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    frontmatter: FrontmatterOpt = None,
    ):
    """Parse markdown files and write one JSON document tree per file."""
    settings = _settings(overrides={"output_dir": out, "frontmatter": frontmatter})
    output_dir = Path(settings.output_dir)
    try:
        results = run_parse(path, output_dir, settings.frontmatter, settings.json_indent)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found at: {path}")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Parsed {len(results)} document(s) to {output_dir}/")


def show_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to parse")],
    frontmatter: FrontmatterOpt = None,
    ):
    """Print the parsed document tree of a single file as JSON."""
    settings = _settings(overrides={"frontmatter": frontmatter})
    try:
        document = parse(_read(path), settings.frontmatter)
    except ParseError as e:
        _fail(f"Failed to parse {path}", e)
    typer.echo(document.model_dump_json(indent=settings.json_indent or None))


def fmt_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to normalize")],
    frontmatter: FrontmatterOpt = None,
    ):
    """Parse a file and print it back as normalized markdown."""
    settings = _settings(overrides={"frontmatter": frontmatter})
    try:
        document = parse(_read(path), settings.frontmatter)
    except ParseError as e:
        _fail(f"Failed to parse {path}", e)
    typer.echo(emit_markdown(document), nl=False)
