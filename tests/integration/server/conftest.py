"""Fixtures for dev server tests"""

import pytest

from cwrap.config import Settings
from cwrap.server.app import create_app


@pytest.fixture()
def app(tmp_path):
    settings = Settings(settings_home=str(tmp_path / "home"))
    app = create_app(settings, root_dir=tmp_path)
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
