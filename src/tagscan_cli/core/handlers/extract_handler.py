# ============================================
# file: src/tagscan_cli/core/handlers/extract_handler.py
# ============================================
from __future__ import annotations

import logging
from typing import List

from tagscan.controllers.extract_controller import ExtractController
from tagscan.model import MarkupDocument
from tagscan_cli.core.cli_parser import CliArgumentError, parse_cli_args, usage_text
from tagscan_cli.core.managers.config_manager import config_manager
from tagscan_cli.core.services.markup_load_service import MarkupLoadError, load_markup
from tagscan_cli.core.services.output_service import format_results
from tagscan_cli.core.utils.configure_logging import configure_logger_from_config
from tagscan_cli.model import CliSettings

logger = logging.getLogger(__name__)


def handle_extract(args: List[str]) -> int:
    """
    Runs one extraction from command line arguments and prints the results.

    Args:
        args: Command line arguments without the program name.

    Returns:
        0 for success (and for the usage text), 1 for errors.
    """
    try:
        cli_args = parse_cli_args(args)
    except CliArgumentError as e:
        print(f"Argument Error: {e}")
        print(usage_text)
        return 1

    if cli_args is None:
        print(usage_text)
        return 0

    rejected = config_manager.apply_overrides(cli_args.overrides)
    if rejected:
        print(f"❌ Error: Cannot override setting(s): {', '.join(rejected)}")
        return 1

    if cli_args.log_level or any(key.startswith("debug.") for key, _ in cli_args.overrides):
        configure_logger_from_config(config_manager.get_all(), cli_args.log_level)

    settings = CliSettings.from_config(config_manager.get_all())

    if cli_args.file_path is not None:
        try:
            document = load_markup(cli_args.file_path, settings.file_encoding)
        except MarkupLoadError as e:
            logger.error("Loading markup failed: %s", e)
            print(f"❌ Error: {e}")
            return 1
    else:
        document = MarkupDocument(markup=cli_args.markup)

    controller = ExtractController()
    try:
        results = controller.run(document, cli_args.request)
    except Exception as e:
        logger.error("Extraction failed: %s", e, exc_info=True)
        print(f"❌ Extraction error: {e}")
        return 1

    print(format_results(results, settings.output_format))
    return 0
