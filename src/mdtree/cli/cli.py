"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdtree.cli.commands import fmt_cmd, parse_cmd, show_cmd


app = typer.Typer(name="mdtree", no_args_is_help=True, help="Markdown to structured document tree parser")

app.command(name="parse")(parse_cmd)
app.command(name="show")(show_cmd)
app.command(name="fmt")(fmt_cmd)
