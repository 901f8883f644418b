# tests/engine/test_model_and_controller.py
import pytest
from pydantic import ValidationError

from tagscan.controllers.extract_controller import ExtractController
from tagscan.model import ExtractMode, ExtractRequest, MarkupDocument

MARKUP = "<a href='https://example.com' class='button'>Link</a><a href='#'>Home</a>"


def test_markup_document_is_immutable():
    d = MarkupDocument(markup="<p>x</p>")
    with pytest.raises(ValidationError):
        d.markup = "<p>y</p>"


def test_markup_document_none_is_empty():
    d = MarkupDocument(markup=None)
    assert d.markup == ""
    assert len(d) == 0
    assert not d.contains("</p")


def test_extract_request_requires_attribute_for_attribute_modes():
    with pytest.raises(ValidationError):
        ExtractRequest(tag="a", mode=ExtractMode.ATTRIBUTE_VALUES)
    with pytest.raises(ValidationError):
        ExtractRequest(tag="a", mode=ExtractMode.TAGS_WITH_ATTRIBUTE)


def test_extract_request_value_only_with_attribute_filter():
    with pytest.raises(ValidationError):
        ExtractRequest(tag="a", mode=ExtractMode.ATTRIBUTE_VALUES, attr_name="href", attr_value="x")
    req = ExtractRequest(tag="a", mode=ExtractMode.TAGS_WITH_ATTRIBUTE, attr_name="href", attr_value="x")
    assert req.attr_value == "x"


@pytest.mark.parametrize("request_kwargs, expected", [
    ({"tag": "a"}, ["<a href='https://example.com' class='button'>Link</a>", "<a href='#'>Home</a>"]),
    ({"tag": "a", "mode": ExtractMode.TAGS_WITH_ATTRIBUTE, "attr_name": "class"},
     ["<a href='https://example.com' class='button'>Link</a>"]),
    ({"tag": "a", "mode": ExtractMode.TAGS_WITH_ATTRIBUTE, "attr_name": "href", "attr_value": "#"},
     ["<a href='#'>Home</a>"]),
    ({"tag": "a", "mode": ExtractMode.CONTENT}, ["Link", "Home"]),
    ({"tag": "a", "mode": ExtractMode.ATTRIBUTE_VALUES, "attr_name": "href"}, ["https://example.com", "#"]),
])
def test_controller_dispatches_each_mode(request_kwargs, expected):
    controller = ExtractController()
    assert controller.run(MarkupDocument(markup=MARKUP), ExtractRequest(**request_kwargs)) == expected
