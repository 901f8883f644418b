from __future__ import annotations

import logging

from tagscan.model import MarkupDocument
from tagscan_cli.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class MarkupLoadError(OSError):
    """The markup file could not be found, read or decoded."""


def load_markup(path: str, encoding: str = "utf-8") -> MarkupDocument:
    """
    Reads a markup file into a MarkupDocument.

    Args:
        path (str): Path to the file, '~' is expanded.
        encoding (str): Text encoding of the file.

    Returns:
        MarkupDocument: The document, with `source` set to the resolved path.

    Raises:
        MarkupLoadError: If the file is missing, unreadable or not valid text in `encoding`.
    """
    resolved = PathUtils.resolve_input_path(path)
    try:
        with open(resolved, "r", encoding=encoding) as f:
            markup = f.read()
    except FileNotFoundError as e:
        raise MarkupLoadError(f"File not found: {resolved}") from e
    except IsADirectoryError as e:
        raise MarkupLoadError(f"Not a file: {resolved}") from e
    except UnicodeDecodeError as e:
        raise MarkupLoadError(f"Could not decode {resolved} as {encoding}: {e.reason}") from e
    except LookupError as e:
        raise MarkupLoadError(f"Unknown encoding '{encoding}'") from e
    except OSError as e:
        raise MarkupLoadError(f"Could not read {resolved}: {e.strerror or e}") from e

    logger.debug("Loaded %d chars of markup from %s.", len(markup), resolved)
    return MarkupDocument(markup=markup, source=str(resolved))
