# src/tagscan_cli/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    @staticmethod
    def get_cli_package_root() -> Path:
        """Returns the directory of the installed tagscan_cli package."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        """
        Returns the path of settings.json inside the package root.
        (e.g., .../site-packages/tagscan_cli/settings.json)
        """
        return PathUtils.get_cli_package_root() / "settings.json"

    @staticmethod
    def resolve_input_path(path: str) -> Path:
        """Expands '~' and makes a user supplied markup path absolute."""
        return Path(path).expanduser().resolve()
