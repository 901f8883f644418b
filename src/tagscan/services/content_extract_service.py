from __future__ import annotations

from typing import List

from tagscan.model import MarkupDocument
from tagscan.services.pattern_service import paired_pattern


def extract_content(document: MarkupDocument, tag: str) -> List[str]:
    """
    Returns the inner text of every paired `<tag>...</tag>` occurrence.

    Nested markup is returned as raw text and entities are left as written.
    An element with nothing between its markers contributes an empty string.
    Self-closing and bare openers have no content and are not considered.
    """
    if not tag or not document.markup:
        return []
    return [m.group("inner") for m in paired_pattern(tag).finditer(document.markup)]
