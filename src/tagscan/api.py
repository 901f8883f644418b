"""
Library entry points.

Each function takes the raw markup and returns a new list of strings; no state
is kept between calls, so the functions are safe to call from several threads
on the same markup.

    >>> extract_tags("<p>Test</p><a href='x'>L1</a>", "a")
    ["<a href='x'>L1</a>"]
    >>> extract_tag_text("<p></p>", "p")
    ['']
"""
from __future__ import annotations

from typing import List, Optional

from tagscan.model import MarkupDocument, TagOccurrence
from tagscan.services.attribute_filter_service import filter_by_attribute
from tagscan.services import attribute_value_service
from tagscan.services.content_extract_service import extract_content
from tagscan.services.tag_match_service import match_occurrences, match_tags


def extract_occurrences(markup: Optional[str], tag: str) -> List[TagOccurrence]:
    """Like `extract_tags`, but keeps the span and match mode of every occurrence."""
    return match_occurrences(MarkupDocument(markup=markup), tag)


def extract_tags(markup: Optional[str], tag: str) -> List[str]:
    """All occurrences of `tag`: paired elements, then `<tag/>` forms, then bare openers."""
    return match_tags(MarkupDocument(markup=markup), tag)


def extract_tags_with_attribute(
        markup: Optional[str],
        tag: str,
        attr_name: str,
        attr_value: Optional[str] = None,
) -> List[str]:
    """
    Occurrences of `tag` carrying a quoted `attr_name`.

    With `attr_value` the attribute must equal it exactly. Unquoted values
    (`href=x`) are never matched.
    """
    occurrences = match_occurrences(MarkupDocument(markup=markup), tag)
    return [occ.text for occ in filter_by_attribute(occurrences, attr_name, attr_value)]


def extract_tag_text(markup: Optional[str], tag: str) -> List[str]:
    """Inner text of every paired `tag`, nested markup included verbatim."""
    return extract_content(MarkupDocument(markup=markup), tag)


def extract_attribute_values(markup: Optional[str], tag: str, attr_name: str) -> List[str]:
    """Values of `attr_name` on every occurrence of `tag` that has it."""
    return attribute_value_service.extract_attribute_values(MarkupDocument(markup=markup), tag, attr_name)
