# src/tagscan_cli/model.py (CLI Layer)
from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

from tagscan.model import ExtractRequest

logger = logging.getLogger(__name__)


class CliSettings(BaseModel):
    output_format: Literal["json", "lines"] = Field(default="json", description="How results are printed.")
    file_encoding: str = Field(default="utf-8", description="Encoding used to read --file markup.")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "CliSettings":
        """Builds settings from the loaded settings.json, falling back to defaults on bad values."""
        raw = {
            "output_format": (config.get("output") or {}).get("format"),
            "file_encoding": (config.get("input") or {}).get("encoding"),
        }
        raw = {k: v for k, v in raw.items() if v is not None}
        try:
            return cls(**raw)
        except ValidationError as e:
            logger.warning("Invalid CLI settings %s, using defaults: %s", raw, e)
            return cls()


class CliArgs(BaseModel):
    """The parsed command line: where the markup comes from and what to extract."""
    markup: Optional[str] = None
    file_path: Optional[str] = None
    request: ExtractRequest
    log_level: Optional[str] = None
    overrides: List[Tuple[str, str]] = Field(default_factory=list, description="--set KEY=VALUE pairs, in order.")
