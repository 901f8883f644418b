"""
Builds every regular expression used by the extraction engine.

Tag names, attribute names and attribute values are caller input and always
go through `escape_token` before they are embedded in a pattern, so a name
such as `my.tag` or `x[1]` is matched literally instead of breaking the
pattern or matching the wrong elements.
"""
from __future__ import annotations

import re
from functools import lru_cache
from re import Pattern
from typing import Optional

# Characters that may appear inside an attribute name. Used to stop `class`
# from matching the tail of `data-class`.
_ATTR_NAME_CHARS = r"[\w:.-]"


def escape_token(token: str, allow_empty: bool = False) -> str:
    """
    Escapes a tag name, attribute name or attribute value for use in a pattern.

    Names must be non-empty. Attribute values may be empty (`attr=""`), which
    callers ask for with `allow_empty=True`.
    """
    if token is None or (token == "" and not allow_empty):
        raise ValueError("Cannot build a pattern from an empty token.")
    return re.escape(token)


@lru_cache(maxsize=256)
def paired_pattern(tag: str) -> Pattern[str]:
    """
    `<tag ...>inner</tag ...>` with a lazy inner span.

    The inner span does not cross line breaks, so an element whose content
    spans several lines is not matched as a pair.
    """
    t = escape_token(tag)
    return re.compile(rf"<{t}(?=[\s>])[^>]*>(?P<inner>.*?)</{t}(?=[\s>])[^>]*>")


@lru_cache(maxsize=256)
def self_closing_pattern(tag: str) -> Pattern[str]:
    """`<tag .../>` with the trailing slash required."""
    t = escape_token(tag)
    return re.compile(rf"<{t}(?=[\s/])[^>]*/>")


@lru_cache(maxsize=256)
def opening_pattern(tag: str) -> Pattern[str]:
    """Any opening marker `<tag ...>`, with or without a trailing slash."""
    t = escape_token(tag)
    return re.compile(rf"<{t}(?=[\s/>])[^>]*>")


def closing_marker(tag: str) -> str:
    """The literal prefix of a closing marker. Used for containment checks, not as a pattern."""
    if not tag:
        raise ValueError("Cannot build a closing marker from an empty tag name.")
    return f"</{tag}"


@lru_cache(maxsize=512)
def attribute_pattern(name: str, value: Optional[str] = None) -> Pattern[str]:
    """
    `name="value"` or `name='value'`.

    Without `value` any quoted value matches; the captured value is in the
    `dq` or `sq` group depending on the quote style. Unquoted values never match.
    """
    n = escape_token(name)
    if value is None:
        dq, sq = r'[^"]*', r"[^']*"
    else:
        dq = sq = escape_token(value, allow_empty=True)
    return re.compile(
        rf"(?<!{_ATTR_NAME_CHARS}){n}\s*=\s*(?:\"(?P<dq>{dq})\"|'(?P<sq>{sq})')"
    )
