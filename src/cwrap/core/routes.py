"""Route directory discovery"""

from pathlib import Path

from cwrap.core.errors import MissingSkeleton


ROOT_ROUTE = Path(".")


def _walk(root: Path, rel: Path) -> list[Path]:
    found = []
    for entry in sorted((root / rel).iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            child = rel / entry.name
            found.append(child)
            found.extend(_walk(root, child))
    return found


def discover_routes(routes_dir: Path) -> list[Path]:
    """Return the routes root (as Path('.')) then every descendant directory, depth-first by name."""
    if not routes_dir.is_dir():
        raise MissingSkeleton("routes directory not found", routes_dir)
    return [ROOT_ROUTE] + _walk(routes_dir, ROOT_ROUTE)


def route_depth(route: Path) -> int:
    """Directory levels between a relative route and the routes root."""
    return len(route.parts)
