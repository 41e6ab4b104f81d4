"""Open a URL or folder with the platform's default handler"""

import logging
import platform
import subprocess


logger = logging.getLogger(__name__)


def open_command(target: str, system: str = None) -> list[str] | None:
    """Return the argv that opens target on this platform, or None when unsupported."""
    system = system or platform.system()
    if system == "Windows":
        return ["cmd", "/c", "start", "", target]
    if system == "Darwin":
        return ["open", target]
    if system == "Linux":
        return ["xdg-open", target]
    return None


def open_target(target: str) -> bool:
    """Launch the default handler for target. Returns False if the platform is unsupported."""
    cmd = open_command(target)
    if cmd is None:
        logger.info("Please open %s manually", target)
        return False
    subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    return True
