from __future__ import annotations

import logging
import time
from typing import List

from tagscan.model import ExtractMode, ExtractRequest, MarkupDocument
from tagscan.services.attribute_filter_service import filter_by_attribute
from tagscan.services.attribute_value_service import extract_attribute_values
from tagscan.services.content_extract_service import extract_content
from tagscan.services.tag_match_service import match_occurrences, match_tags

logger = logging.getLogger(__name__)


class ExtractController:
    """
    Routes an ExtractRequest to the matching engine operation.

    The controller holds no state between calls; each `run` is a pure
    function of the document and the request.
    """

    def run(self, document: MarkupDocument, request: ExtractRequest) -> List[str]:
        start = time.perf_counter()

        if request.mode == ExtractMode.TAGS:
            results = match_tags(document, request.tag)
        elif request.mode == ExtractMode.TAGS_WITH_ATTRIBUTE:
            occurrences = match_occurrences(document, request.tag)
            results = [
                occ.text for occ in filter_by_attribute(occurrences, request.attr_name, request.attr_value)
            ]
        elif request.mode == ExtractMode.CONTENT:
            results = extract_content(document, request.tag)
        elif request.mode == ExtractMode.ATTRIBUTE_VALUES:
            results = extract_attribute_values(document, request.tag, request.attr_name)
        else:  # pragma: no cover
            raise ValueError(f"Unsupported extract mode: {request.mode}")

        logger.debug(
            "Extract %s <%s> on %s (%d chars): %d results in %.4fs.",
            request.mode.value, request.tag, document.source or "inline markup",
            len(document), len(results), time.perf_counter() - start
        )
        return results
