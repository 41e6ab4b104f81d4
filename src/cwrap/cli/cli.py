"""CLI entrypoint: Typer app definition and command registration"""

import typer

from cwrap.cli.commands import build_cmd, init_cmd, routes_cmd, serve_cmd


app = typer.Typer(name="cwrap", no_args_is_help=True, help="JSON skeleton static-site generator")

app.command(name="build")(build_cmd)
app.command(name="routes")(routes_cmd)
app.command(name="init")(init_cmd)
app.command(name="serve")(serve_cmd)
