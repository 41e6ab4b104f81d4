"""Development server: Flask app factory"""

from __future__ import annotations

from pathlib import Path

from flask import Flask

from cwrap.config import Settings, load_config


def create_app(settings: Settings | None = None, root_dir: Path | None = None) -> Flask:
    """Create and configure the Flask app serving the project at root_dir (default: cwd)."""
    app = Flask(__name__, static_folder=None)
    settings = settings or load_config()
    root_dir = (root_dir or Path.cwd()).resolve()

    app.extensions["cwrap_settings"] = settings
    app.extensions["cwrap_root"] = root_dir

    from cwrap.server.routes import editor_bp, files_bp

    app.register_blueprint(editor_bp)
    app.register_blueprint(files_bp)
    return app
