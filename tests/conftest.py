"""Root test configuration - shared skeleton helpers"""

import json
from pathlib import Path

import pytest


@pytest.fixture(name="write_skeleton")
def write_skeleton_fixture():
    """Return a helper that writes a skeleton dict (or raw text) to <dir>/skeleton.json."""
    def _write(route_dir: Path, skeleton) -> Path:
        route_dir.mkdir(parents=True, exist_ok=True)
        path = route_dir / "skeleton.json"
        text = skeleton if isinstance(skeleton, str) else json.dumps(skeleton)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so relative paths and cwrap.yaml are isolated."""
    for name in ("ROUTES_DIR", "BUILD_DIR", "STATIC_DIR", "PORT", "LOG_LEVEL", "PLACEHOLDER"):
        monkeypatch.delenv(f"CWRAP_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
