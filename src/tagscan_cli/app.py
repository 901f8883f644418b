from __future__ import annotations

import logging
import sys
from typing import List, Optional

from tagscan_cli.core.handlers.extract_handler import handle_extract
from tagscan_cli.core.managers.config_manager import config_manager
from tagscan_cli.core.utils.configure_logging import configure_logger_from_config

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point: `tagscan <markup> <tag> ...`."""
    configure_logger_from_config(config_manager.get_all())
    args = sys.argv[1:] if argv is None else list(argv)
    logger.debug("tagscan invoked with %d arguments.", len(args))
    return handle_extract(args)


if __name__ == "__main__":
    sys.exit(main())
