"""Verbatim file and directory copies for build assets"""

import logging
import shutil
from pathlib import Path


logger = logging.getLogger(__name__)


def copy_file(source: Path, destination: Path) -> Path:
    """Copy one file, creating the destination's parent directories."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)
    logger.info("Copied %s to %s", source, destination)
    return destination


def copy_tree(source: Path, destination: Path) -> Path:
    """Mirror a directory tree into destination, overwriting existing files."""
    shutil.copytree(source, destination, dirs_exist_ok=True)
    logger.info("Copied directory %s to %s", source, destination)
    return destination
