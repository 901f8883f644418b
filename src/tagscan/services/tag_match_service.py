from __future__ import annotations

import logging
from typing import List, Sequence

from tagscan.model import MarkupDocument, MatchMode, TagOccurrence
from tagscan.services.pattern_service import (
    closing_marker,
    opening_pattern,
    paired_pattern,
    self_closing_pattern,
)

logger = logging.getLogger(__name__)


def scan_paired(document: MarkupDocument, tag: str) -> List[TagOccurrence]:
    """
    Pass 1: lazy, non-overlapping `<tag>...</tag>` spans.

    A tag nested inside a same-named ancestor is paired with the ancestor's
    opening marker, so the ancestor match ends at the child's closing marker.
    This is a known limitation of the single-pass scan.
    """
    return [
        TagOccurrence(text=m.group(0), mode=MatchMode.PAIRED, start=m.start(), end=m.end())
        for m in paired_pattern(tag).finditer(document.markup)
    ]


def scan_self_closing(
        document: MarkupDocument,
        tag: str,
        paired: Sequence[TagOccurrence] = (),
) -> List[TagOccurrence]:
    """Pass 2: `<tag .../>` markers that do not lie inside a pass-1 span."""
    out: List[TagOccurrence] = []
    for m in self_closing_pattern(tag).finditer(document.markup):
        if any(p.start <= m.start() and m.end() <= p.end for p in paired):
            continue
        out.append(TagOccurrence(text=m.group(0), mode=MatchMode.SELF_CLOSING_SLASH, start=m.start(), end=m.end()))
    return out


def scan_bare_openings(
        document: MarkupDocument,
        tag: str,
        found: Sequence[TagOccurrence] = (),
) -> List[TagOccurrence]:
    """
    Pass 3: opening markers treated as self-closing elements (e.g. `<img ...>`).

    An opener is skipped when its text already appears inside an occurrence
    found so far. The rest are kept only if the document contains a closing
    marker for the tag somewhere; otherwise unclosed markup yields nothing.
    """
    if not document.contains(closing_marker(tag)):
        return []

    out: List[TagOccurrence] = []
    for m in opening_pattern(tag).finditer(document.markup):
        text = m.group(0)
        if any(text in occ.text for occ in found) or any(text in occ.text for occ in out):
            continue
        out.append(TagOccurrence(text=text, mode=MatchMode.BARE_OPENING_HEURISTIC, start=m.start(), end=m.end()))
    return out


def match_occurrences(document: MarkupDocument, tag: str) -> List[TagOccurrence]:
    """
    Locates every occurrence of `tag` in the document.

    Results are ordered by pass (paired, then self-closing, then bare
    openers) and, within each pass, by position.
    """
    if not tag or not document.markup:
        return []

    paired = scan_paired(document, tag)
    self_closing = scan_self_closing(document, tag, paired)
    bare = scan_bare_openings(document, tag, paired + self_closing)

    logger.debug(
        "Matched <%s>: %d paired, %d self-closing, %d bare openers.",
        tag, len(paired), len(self_closing), len(bare)
    )
    return paired + self_closing + bare


def match_tags(document: MarkupDocument, tag: str) -> List[str]:
    return [occ.text for occ in match_occurrences(document, tag)]
