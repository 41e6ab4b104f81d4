"""Build orchestration: assets, route discovery, per-route compilation"""

import logging
from pathlib import Path

from cwrap.config import Settings
from cwrap.core.compile import compile_route
from cwrap.core.errors import CwrapError, MissingSkeleton
from cwrap.core.models import BuildReport, RouteResult, RouteStatus
from cwrap.core.routes import discover_routes, route_depth
from cwrap.util.fs import copy_file, copy_tree


logger = logging.getLogger(__name__)

CLIENT_SCRIPT_SOURCE = Path(__file__).parent.parent / "assets" / "cwrapFunctions.js"


def copy_assets(settings: Settings, build_dir: Path) -> None:
    """Copy static/, the favicon, and the client script into build_dir."""
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        copy_tree(static_dir, build_dir / "static")
    else:
        logger.warning("Static directory %s does not exist", static_dir)

    favicon = Path(settings.favicon)
    if favicon.is_file():
        copy_file(favicon, build_dir / "favicon.ico")
    else:
        logger.warning("Favicon %s does not exist", favicon)

    copy_file(CLIENT_SCRIPT_SOURCE, build_dir / "scripts" / CLIENT_SCRIPT_SOURCE.name)


def build_route(route: Path, routes_dir: Path, build_dir: Path, placeholder: str) -> RouteResult:
    """Compile one relative route, converting route-level errors into a result."""
    try:
        html_path = compile_route(
            routes_dir / route, build_dir / route, route_depth(route), placeholder,
        )
    except MissingSkeleton as e:
        logger.warning("Skipping route %s: %s", route, e)
        return RouteResult(route=route, status=RouteStatus.skipped, error=str(e))
    except (CwrapError, OSError) as e:
        logger.error("Route %s failed: %s", route, e)
        return RouteResult(route=route, status=RouteStatus.failed, error=str(e))
    return RouteResult(route=route, status=RouteStatus.compiled, output=html_path)


def run_build(settings: Settings) -> BuildReport:
    """Copy assets, then compile every discovered route into the mirrored build tree.

    Route failures are isolated: each is logged and recorded, and the build continues.
    A missing routes directory raises MissingSkeleton.
    """
    routes_dir = Path(settings.routes_dir)
    build_dir = Path(settings.build_dir)
    routes = discover_routes(routes_dir)

    build_dir.mkdir(parents=True, exist_ok=True)
    copy_assets(settings, build_dir)

    report = BuildReport()
    for route in routes:
        report.results.append(build_route(route, routes_dir, build_dir, settings.placeholder))
    logger.info(
        "Build finished: %d compiled, %d skipped, %d failed",
        report.count(RouteStatus.compiled),
        report.count(RouteStatus.skipped),
        report.count(RouteStatus.failed),
    )
    return report
