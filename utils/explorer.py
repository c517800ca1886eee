"""
Reveal a saved file in the platform file manager.
"""
import subprocess
import sys
from pathlib import Path

from locimport_logger import get_logger

logger = get_logger("utils.explorer")


def reveal_command(path: Path, platform: str = sys.platform):
    """Command that opens the file manager at ``path`` on the given platform."""
    if platform.startswith("win"):
        # explorer needs the quotes right after the comma, so pass a command string
        return f'explorer.exe /select,"{path}"'
    if platform == "darwin":
        return ["open", "-R", str(path)]
    return ["xdg-open", str(path.parent)]


def reveal_in_file_manager(path) -> bool:
    """
    Open the file manager with the saved file selected (or its folder shown).

    Returns:
        True if the file manager was started
    """
    path = Path(path).resolve()
    if not path.is_file():
        logger.warning(f"Cannot reveal missing file: {path}")
        return False

    command = reveal_command(path)
    try:
        subprocess.Popen(command)
    except OSError as e:
        logger.warning(f"Could not open file manager ({command}): {e}")
        return False
    logger.debug(f"Revealed {path}")
    return True
