"""Application configuration: settings schema and cwrap.yaml loader"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "cwrap.yaml"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    app_name:      str = "cwrap"
    routes_dir:    str = Field(default="routes", description="Directory holding one skeleton.json per route")
    build_dir:     str = Field(default="build",  description="Directory receiving index.html + styles.css per route")
    static_dir:    str = Field(default="static", description="Directory copied verbatim into the build")
    favicon:       str = Field(default="static/favicon/favicon.ico", description="Favicon copied to the build root")
    placeholder:   str = Field(default="cwrapIndex", min_length=1, description="Blueprint index token")
    host:          str = "127.0.0.1"
    port:          int = Field(default=36969, ge=1, le=65535)
    settings_home: str = Field(default="~/.cwrap", description="Directory holding the editor's settings.json")
    log_level:     str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from cwrap.yaml, then CWRAP_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"CWRAP_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e


def configure_logging(level: str = "INFO") -> None:
    """Install the root log handler used by the CLI and dev server."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
