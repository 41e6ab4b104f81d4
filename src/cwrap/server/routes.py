"""Editor API endpoints and working-tree file serving"""

from __future__ import annotations

import json
import logging
import subprocess
import sys
from pathlib import Path

from flask import Blueprint, abort, current_app, jsonify, request, send_from_directory

from cwrap.core.compile import HTML_FILE, SKELETON_FILE
from cwrap.core.errors import MissingSkeleton
from cwrap.core.routes import ROOT_ROUTE, discover_routes
from cwrap.util.opener import open_target

logger = logging.getLogger(__name__)

editor_bp = Blueprint("editor", __name__)
files_bp = Blueprint("files", __name__)

TEMP_DIR = "dist"
SETTINGS_FILE = "settings.json"
FOLDERS = {"routes", "static"}


def _settings():
    return current_app.extensions["cwrap_settings"]


def _root() -> Path:
    return current_app.extensions["cwrap_root"]


def _skeleton_path(base: Path, sub_path: str) -> Path:
    """Resolve base/sub_path/skeleton.json, rejecting paths that escape base."""
    base = base.resolve()
    target = (base / sub_path / SKELETON_FILE).resolve()
    if base not in target.parents:
        abort(400, description=f"invalid route path: {sub_path}")
    return target


def _page_dir(build_dir: Path, path: str) -> Path | None:
    """Resolve a built route directory, or None when path leaves build_dir."""
    page_dir = (build_dir / path).resolve()
    if page_dir != build_dir and build_dir not in page_dir.parents:
        return None
    return page_dir


def _error(err: Exception, status: int = 500):
    return jsonify({"success": False, "error": str(err)}), status


def _save(base: Path, sub_path: str):
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"success": False, "error": "JSON body required"}), 400
    target = _skeleton_path(base, sub_path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as e:
        logger.error("Error saving %s: %s", target, e)
        return _error(e)
    logger.info("Saved %s", target)
    return jsonify({"success": True})


@editor_bp.route("/save-skeleton", methods=["POST"], defaults={"sub_path": ""})
@editor_bp.route("/save-skeleton/<path:sub_path>", methods=["POST"])
def save_skeleton(sub_path: str):
    """Persist the editor's skeleton to routes/<sub_path>/skeleton.json."""
    return _save(_root() / _settings().routes_dir, sub_path)


@editor_bp.route("/save-skeleton-temp", methods=["POST"], defaults={"sub_path": ""})
@editor_bp.route("/save-skeleton-temp/<path:sub_path>", methods=["POST"])
def save_skeleton_temp(sub_path: str):
    """Persist a draft skeleton under dist/ without touching the route."""
    return _save(_root() / TEMP_DIR, sub_path)


@editor_bp.route("/api/skeleton", defaults={"sub_path": ""})
@editor_bp.route("/api/skeleton/<path:sub_path>")
def get_skeleton(sub_path: str):
    target = _skeleton_path(_root() / _settings().routes_dir, sub_path)
    if not target.is_file():
        return jsonify({"success": False, "message": f"{SKELETON_FILE} not found"}), 404
    try:
        return jsonify(json.loads(target.read_text(encoding="utf-8")))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Error reading %s: %s", target, e)
        return _error(e)


@editor_bp.route("/api/all-routes")
def all_routes():
    """List route paths relative to the routes root, root excluded."""
    try:
        found = discover_routes(_root() / _settings().routes_dir)
    except MissingSkeleton:
        return jsonify({"success": False, "message": "Routes directory not found"}), 404
    return jsonify([r.as_posix() for r in found if r != ROOT_ROUTE])


@editor_bp.route("/api/build")
def build():
    """Run a full build in a subprocess and report its output."""
    proc = subprocess.run(
        [sys.executable, "-m", "cwrap", "build"],
        cwd=_root(), capture_output=True, text=True,
    )
    if proc.returncode != 0:
        logger.error("Build exited with %d", proc.returncode)
        return jsonify({"success": False, "output": proc.stdout, "error": proc.stderr}), 500
    return jsonify({"success": True, "output": proc.stdout, "error": proc.stderr})


def _settings_file() -> Path:
    return Path(_settings().settings_home).expanduser() / SETTINGS_FILE


@editor_bp.route("/api/initial-settings")
def initial_settings():
    path = _settings_file()
    if not path.is_file():
        return jsonify({"success": False, "message": f"{SETTINGS_FILE} file not found"}), 404
    try:
        return jsonify(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Error reading %s: %s", path, e)
        return _error(e)


@editor_bp.route("/api/create-initial-settings", methods=["POST"])
def create_initial_settings():
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"success": False, "error": "JSON body required"}), 400
    path = _settings_file()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as e:
        logger.error("Error saving %s: %s", path, e)
        return _error(e)
    return jsonify({"success": True})


@editor_bp.route("/api/open-folder/<name>")
def open_folder(name: str):
    """Open routes/ or static/ in the OS file browser; static/ is created if missing."""
    if name not in FOLDERS:
        abort(404)
    settings = _settings()
    folder = _root() / (settings.routes_dir if name == "routes" else settings.static_dir)
    folder.mkdir(parents=True, exist_ok=True)
    try:
        opened = open_target(str(folder))
    except OSError as e:
        logger.error("Error opening folder %s: %s", folder, e)
        return _error(e)
    if not opened:
        return jsonify({"success": False, "error": "unsupported platform"}), 501
    return jsonify({"success": True})


@files_bp.route("/", defaults={"path": ""})
@files_bp.route("/<path:path>")
def serve_file(path: str):
    """Serve working-tree files; anything else falls back to the built index page."""
    root = _root()
    if path and (root / path).is_file():
        return send_from_directory(root, path)
    build_dir = (root / _settings().build_dir).resolve()
    page_dir = _page_dir(build_dir, path)
    if page_dir is not None and (page_dir / HTML_FILE).is_file():
        return send_from_directory(page_dir, HTML_FILE)
    if (build_dir / HTML_FILE).is_file():
        return send_from_directory(build_dir, HTML_FILE)
    abort(404)
