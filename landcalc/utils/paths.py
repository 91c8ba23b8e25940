import os
import sys
from pathlib import Path

from landcalc.utils.logger import get_logger

logger = get_logger("Paths")

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_DIR_NAME = ".landcalc"


def get_user_dir():
    """Per-user directory, overridable with LANDCALC_HOME."""
    override = os.environ.get("LANDCALC_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / USER_DIR_NAME


def get_base_dir(project_root=None):
    """
    Directory holding data/ and logs/.

    Frozen builds use the executable's folder and source checkouts the
    project root. An installed package has no pyproject.toml above it and
    uses the per-user directory.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    root = Path(project_root) if project_root else PROJECT_ROOT
    if (root / "pyproject.toml").is_file():
        return root
    return get_user_dir()


def get_resource_path(relative_path):
    """Resource path for both bundled and source runs."""
    if getattr(sys, "frozen", False):
        if hasattr(sys, "_MEIPASS"):
            base_path = Path(getattr(sys, "_MEIPASS"))
        else:
            base_path = Path(sys.executable).parent
    else:
        base_path = PROJECT_ROOT
    return base_path / relative_path


BASE_DIR = get_base_dir()
DATA_DIR = BASE_DIR / "data"
LOG_DIR = BASE_DIR / "logs"
SETTINGS_PATH = DATA_DIR / "settings.json"


def ensure_directories():
    """Create the data and log directories if missing."""
    for directory in [DATA_DIR, LOG_DIR]:
        try:
            directory.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Directory ready: {directory}")
        except OSError as e:
            logger.error(f"Could not create directory: {directory} - {e}")
