from __future__ import annotations

import logging
from typing import List

from tagscan.model import MarkupDocument
from tagscan.services.attribute_filter_service import find_attribute
from tagscan.services.tag_match_service import match_occurrences

logger = logging.getLogger(__name__)


def extract_attribute_values(document: MarkupDocument, tag: str, attr_name: str) -> List[str]:
    """
    Collects the quoted value of `attr_name` from every occurrence of `tag`.

    Occurrences without the attribute are skipped, so the result can be
    shorter than the list of matched tags.
    """
    if not attr_name:
        return []

    values: List[str] = []
    for occ in match_occurrences(document, tag):
        attr = find_attribute(occ.text, attr_name)
        if attr is None:
            continue
        values.append(attr.value)

    logger.debug("Extracted %d '%s' values from <%s> occurrences.", len(values), attr_name, tag)
    return values
