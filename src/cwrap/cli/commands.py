"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from cwrap.config import Settings, configure_logging, load_config
from cwrap.core.compile import SKELETON_FILE
from cwrap.core.errors import MissingSkeleton
from cwrap.core.models import RouteStatus
from cwrap.core.pipeline import run_build
from cwrap.core.routes import discover_routes


STARTER_SKELETON = {
    "head": {
        "title": "cwrap",
        "meta": [
            {"charset": "UTF-8"},
            {"name": "viewport", "content": "width=device-width, initial-scale=1.0"},
        ],
    },
    "root": {"--main-color": "#222"},
    "element": "body",
    "style": "margin:0; color:var(--main-color);",
    "children": [
        {"element": "h1", "text": "Hello cwrapGetParams[name]"},
        {
            "element": "ul",
            "blueprint": {"count": 3, "element": "li", "text": "Item cwrapIndex+1"},
        },
    ],
}


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and set up logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def build_cmd(
    routes: Annotated[Optional[str], typer.Option("--routes-dir", help="Routes directory")] = None,
    out: Annotated[Optional[str], typer.Option("--build-dir", help="Output directory")] = None,
    static: Annotated[Optional[str], typer.Option("--static-dir", help="Static assets directory")] = None,
    ):
    """Compile every route's skeleton.json into index.html + styles.css."""
    settings = _settings(overrides={"routes_dir": routes, "build_dir": out, "static_dir": static})
    try:
        report = run_build(settings)
    except MissingSkeleton as e:
        _fail("Build failed", e)

    for result in report.results:
        detail = result.output if result.status == RouteStatus.compiled else result.error
        typer.echo(f"  {result.status.value}: {result.route.as_posix()} ({detail})")
    typer.echo(
        f"Build complete - "
        f"{report.count(RouteStatus.compiled)} compiled, "
        f"{report.count(RouteStatus.skipped)} skipped, "
        f"{report.count(RouteStatus.failed)} failed"
    )
    if not report.ok:
        raise typer.Exit(1)


def routes_cmd(
    routes: Annotated[Optional[str], typer.Option("--routes-dir", help="Routes directory")] = None,
    ):
    """List route directories in build order."""
    settings = _settings(overrides={"routes_dir": routes})
    try:
        found = discover_routes(Path(settings.routes_dir))
    except MissingSkeleton as e:
        _fail(str(e))
    for route in found:
        typer.echo(route.as_posix())


def init_cmd(
    routes: Annotated[Optional[str], typer.Option("--routes-dir", help="Routes directory")] = None,
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing skeleton.json")] = False,
    ):
    """Write a starter skeleton.json into the routes directory."""
    settings = _settings(overrides={"routes_dir": routes})
    target = Path(settings.routes_dir) / SKELETON_FILE
    if target.exists() and not force:
        _fail(f"{target} already exists (use --force to overwrite)")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(STARTER_SKELETON, indent=2) + "\n", encoding="utf-8")
    typer.echo(f"Created {target}")


def serve_cmd(
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="HTTP port")] = None,
    open_browser: Annotated[bool, typer.Option("--open", help="Open the browser once started")] = False,
    ):
    """Run the development server."""
    from cwrap.server.app import create_app
    from cwrap.util.opener import open_target

    settings = _settings(overrides={"host": host, "port": port})
    app = create_app(settings)
    url = f"http://{settings.host}:{settings.port}"
    typer.echo(f"Server running at {url}")
    if open_browser and not open_target(url):
        typer.echo(f"Please open {url} in your browser.")
    app.run(host=settings.host, port=settings.port)
