# tests/engine/test_attribute_value_service.py
from tagscan.model import MarkupDocument
from tagscan.services.attribute_value_service import extract_attribute_values

PAGE = """
        <a href='https://github.com'>GitHub</a>
        <a href='https://www.python.org' class='official'>Python</a>
        <a class='social' href='https://twitter.com'>Twitter</a>
        <div src='image1.jpg' alt='Image 1'>Content</div>
        <div src='image2.jpg'>Content</div>
"""


def values(markup: str, tag: str, attr: str):
    return extract_attribute_values(MarkupDocument(markup=markup), tag, attr)


def test_values_follow_match_order():
    assert values(PAGE, "a", "href") == ["https://github.com", "https://www.python.org", "https://twitter.com"]
    assert values(PAGE, "div", "src") == ["image1.jpg", "image2.jpg"]


def test_occurrences_without_the_attribute_are_skipped():
    assert values(PAGE, "a", "class") == ["official", "social"]
    assert values(PAGE, "div", "alt") == ["Image 1"]


def test_nonexistent_tag_or_attribute():
    assert values("<p>Paragraph</p>", "div", "class") == []
    assert values("<p>Paragraph</p>", "p", "nonexistent") == []
    assert values("", "a", "href") == []
    assert values(PAGE, "a", "") == []


def test_unquoted_values_are_ignored():
    assert values("<a href=https://example.com>No quotes</a>", "a", "href") == []


def test_values_from_self_closing_and_bare_openers():
    assert values("<input type='email'/><input type=\"text\" />", "input", "type") == ["email", "text"]
    assert values("<section id='s1'>\n<p>x</p>\n</section>", "section", "id") == ["s1"]


def test_values_are_searched_in_the_whole_occurrence_text():
    """An attribute on a nested element is found in the outer occurrence."""
    assert values("<div><a href='x'>l</a></div>", "div", "href") == ["x"]


def test_attribute_name_is_matched_literally():
    assert values("<x k.y='v'>t</x>", "x", "k.y") == ["v"]
    assert values("<x k.y='v'>t</x>", "x", "kxy") == []
    assert values("<x kxy='v'>t</x>", "x", "k.y") == []
    assert values("<x a='1'>t</x>", "x", "a[") == []
