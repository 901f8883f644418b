# tests/cli/test_markup_load_service.py
import pytest

from tagscan_cli.core.services.markup_load_service import MarkupLoadError, load_markup
from tagscan_cli.core.services.output_service import format_results


def test_load_markup_reads_file(sample_page_path):
    document = load_markup(str(sample_page_path))
    assert "<h1 id=\"main-title\">" in document.markup
    assert document.source == str(sample_page_path.resolve())


def test_load_markup_with_encoding(tmp_path):
    path = tmp_path / "latin.html"
    path.write_bytes("<p>café</p>".encode("latin-1"))
    assert load_markup(str(path), "latin-1").markup == "<p>café</p>"


def test_load_markup_missing_file(tmp_path):
    with pytest.raises(MarkupLoadError, match="File not found"):
        load_markup(str(tmp_path / "missing.html"))


def test_load_markup_directory(tmp_path):
    with pytest.raises(MarkupLoadError):
        load_markup(str(tmp_path))


def test_load_markup_undecodable(tmp_path):
    path = tmp_path / "bad.html"
    path.write_bytes(b"<p>\xff\xfe</p>")
    with pytest.raises(MarkupLoadError, match="decode"):
        load_markup(str(path), "utf-8")


def test_load_markup_unknown_encoding(sample_page_path):
    with pytest.raises(MarkupLoadError, match="Unknown encoding"):
        load_markup(str(sample_page_path), "no-such-encoding")


def test_markup_load_error_is_an_os_error():
    assert issubclass(MarkupLoadError, OSError)


def test_format_results_json():
    assert format_results([]) == "[]"
    assert format_results([""]) == '[""]'
    assert format_results(["<a href='x'>\"q\"</a>"]) == '["<a href=\'x\'>\\"q\\"</a>"]'


def test_format_results_lines():
    assert format_results(["a", "b"], "lines") == "a\nb"
    assert format_results([], "lines") == ""
