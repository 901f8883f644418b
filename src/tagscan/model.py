# src/tagscan/model.py (Engine Layer)
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class MatchMode(str, Enum):
    """How a tag occurrence was located by the matcher."""
    PAIRED = "paired"
    SELF_CLOSING_SLASH = "self_closing_slash"
    BARE_OPENING_HEURISTIC = "bare_opening_heuristic"


class ExtractMode(str, Enum):
    TAGS = "tags"
    TAGS_WITH_ATTRIBUTE = "tags_with_attribute"
    CONTENT = "content"
    ATTRIBUTE_VALUES = "attribute_values"


class MarkupDocument(BaseModel):
    """
    The immutable markup buffer scanned by every extraction operation.

    A document is created once per extraction and shared read-only between
    the matcher, the filters and the extractors.
    """
    model_config = ConfigDict(frozen=True)

    markup: str = ""
    source: Optional[str] = Field(default=None, description="File path the markup was read from, if any.")

    @field_validator("markup", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return "" if v is None else v

    def contains(self, fragment: str) -> bool:
        return fragment in self.markup

    def __len__(self) -> int:
        return len(self.markup)


class TagOccurrence(BaseModel):
    """One located element: the verbatim text plus its span in the document."""
    model_config = ConfigDict(frozen=True)

    text: str
    mode: MatchMode
    start: int
    end: int

    def __str__(self) -> str:
        return self.text


class AttributeOccurrence(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    quote: str = Field(description="The quote character used in the source, either ' or \".")


class ExtractRequest(BaseModel):
    """A single extraction as requested by the CLI or another caller."""
    tag: str
    mode: ExtractMode = ExtractMode.TAGS
    attr_name: Optional[str] = None
    attr_value: Optional[str] = None

    @model_validator(mode="after")
    def _check_attribute_args(self):
        needs_attr = self.mode in (ExtractMode.TAGS_WITH_ATTRIBUTE, ExtractMode.ATTRIBUTE_VALUES)
        if needs_attr and not self.attr_name:
            raise ValueError(f"mode '{self.mode.value}' requires an attribute name")
        if self.attr_value is not None and self.mode != ExtractMode.TAGS_WITH_ATTRIBUTE:
            raise ValueError("an attribute value can only be used to filter tags by attribute")
        return self
