import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"


def _to_level(level, fallback: int) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        resolved = getattr(logging, level.upper(), None)
        if isinstance(resolved, int):
            return resolved
    return fallback


def configure_logger(general_level='WARNING', module_specific_levels=None, silenced_loggers=None):
    """
    Configures the root logger with a single stderr handler, plus optional
    per-module levels. Stdout is left to the extraction results.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.WARNING))

    # Replace handlers from earlier calls instead of stacking them.
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if module_specific_levels:
        for name, level in module_specific_levels.items():
            logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    if silenced_loggers:
        for name, level in silenced_loggers.items():
            logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))


def configure_logger_from_config(config, general_level=None):
    """
    Configures logging from the `debug` section of settings.json:
    `level`, `modules` (logger name -> level) and `silenced` (logger name -> level,
    CRITICAL when unset). A given `general_level` wins over `debug.level`.
    """
    debug = config.get("debug") or {}
    configure_logger(
        general_level or debug.get("level") or "WARNING",
        module_specific_levels=debug.get("modules") or {},
        silenced_loggers=debug.get("silenced") or {},
    )
