from __future__ import annotations

import logging
from typing import Iterable, List, Optional, TypeVar, Union

from tagscan.model import AttributeOccurrence, TagOccurrence
from tagscan.services.pattern_service import attribute_pattern

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Union[str, TagOccurrence])


def _source_text(occurrence: Union[str, TagOccurrence]) -> str:
    return occurrence.text if isinstance(occurrence, TagOccurrence) else occurrence


def find_attribute(text: str, attr_name: str) -> Optional[AttributeOccurrence]:
    """Returns the first quoted `attr_name` attribute found in `text`, or None."""
    if not attr_name or not text:
        return None
    m = attribute_pattern(attr_name).search(text)
    if not m:
        return None
    if m.group("dq") is not None:
        return AttributeOccurrence(name=attr_name, value=m.group("dq"), quote='"')
    return AttributeOccurrence(name=attr_name, value=m.group("sq"), quote="'")


def has_attribute(text: str, attr_name: str, attr_value: Optional[str] = None) -> bool:
    """True if `text` carries a quoted `attr_name`, equal to `attr_value` when given."""
    if not attr_name:
        return False
    return attribute_pattern(attr_name, attr_value).search(text) is not None


def filter_by_attribute(
        occurrences: Iterable[T],
        attr_name: str,
        attr_value: Optional[str] = None,
) -> List[T]:
    """
    Keeps the occurrences that carry `attr_name` with a quoted value.

    When `attr_value` is given the value must match it exactly. Input order
    is preserved and duplicates are kept.
    """
    if not attr_name:
        logger.debug("Empty attribute name; nothing can match.")
        return []
    return [occ for occ in occurrences if has_attribute(_source_text(occ), attr_name, attr_value)]
