from tagscan.api import (
    extract_attribute_values,
    extract_occurrences,
    extract_tag_text,
    extract_tags,
    extract_tags_with_attribute,
)
from tagscan.model import MarkupDocument, MatchMode, TagOccurrence

__all__ = [
    "extract_attribute_values",
    "extract_occurrences",
    "extract_tag_text",
    "extract_tags",
    "extract_tags_with_attribute",
    "MarkupDocument",
    "MatchMode",
    "TagOccurrence",
]
