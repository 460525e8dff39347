"""Unit tests for render, read_html and html_to_markdown."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from io import BytesIO, StringIO

import pytest
from bs4 import BeautifulSoup

import html2md
from html2md import RenderOptions, html_to_markdown, read_html, render
from html2md.exceptions import InputError, InvalidNodeError, ValidationError


@pytest.mark.unit
class TestRender:
    """Tests for the render entry point."""

    def test_defaults(self):
        soup = BeautifulSoup("<h2>Title</h2>", "html.parser")
        assert render(soup) == "## Title\n\n"

    def test_keyword_override(self):
        soup = BeautifulSoup("<h2>Title</h2>", "html.parser")
        assert render(soup, header_offset=1) == "### Title\n\n"

    def test_options_object(self):
        soup = BeautifulSoup("<p>a  b</p>", "html.parser")
        assert render(soup, RenderOptions(normalize_whitespace=False)) == "a  b\n\n"

    def test_override_wins_over_options(self):
        soup = BeautifulSoup("<h1>T</h1>", "html.parser")
        assert render(soup, RenderOptions(header_offset=3), header_offset=0) == "# T\n\n"

    def test_renders_subtree(self):
        soup = BeautifulSoup("<div><p>skip</p><ul><li>x</li></ul></div>", "html.parser")
        assert render(soup.ul) == "* x\n\n"

    def test_unknown_option(self):
        soup = BeautifulSoup("<p>x</p>", "html.parser")
        with pytest.raises(ValidationError):
            render(soup, headerOffset=1)

    def test_invalid_node(self):
        with pytest.raises(InvalidNodeError):
            render(["<p>x</p>"])

    def test_package_exports(self):
        assert html2md.render is render
        assert html2md.DEFAULT_OPTIONS == RenderOptions()
        assert html2md.__version__


@pytest.mark.unit
class TestReadHtml:
    """Tests for reading HTML from the supported input shapes."""

    def test_markup_string(self):
        assert read_html("<p>x</p>") == "<p>x</p>"

    def test_bytes(self):
        assert read_html("<p>é</p>".encode("utf-8")) == "<p>é</p>"

    def test_bytes_with_encoding(self):
        assert read_html("<p>é</p>".encode("latin-1"), encoding="latin-1") == "<p>é</p>"

    def test_undecodable_bytes(self):
        with pytest.raises(InputError) as exc_info:
            read_html(b"\xff\xfe\xfa")
        assert exc_info.value.input_type == "bytes"

    def test_path_object(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_text("<p>from file</p>", encoding="utf-8")
        assert read_html(path) == "<p>from file</p>"

    def test_string_path(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_text("<p>from file</p>", encoding="utf-8")
        assert read_html(str(path)) == "<p>from file</p>"

    def test_missing_path(self, tmp_path):
        with pytest.raises(InputError) as exc_info:
            read_html(tmp_path / "missing.html")
        assert exc_info.value.input_type == "path"
        assert isinstance(exc_info.value.original_error, OSError)

    def test_missing_html_file_name(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(InputError) as exc_info:
            read_html("page.html")
        assert exc_info.value.input_type == "path"

    @pytest.mark.parametrize("name", ["index.HTM", "doc.xhtml", "sub/dir/page.html"])
    def test_missing_file_by_suffix(self, tmp_path, monkeypatch, name):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(InputError, match="Failed to read HTML file"):
            read_html(name)

    def test_plain_text_without_suffix_is_markup(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert read_html("see page.html now") == "see page.html now"

    def test_text_file_object(self):
        assert read_html(StringIO("<p>x</p>")) == "<p>x</p>"

    def test_binary_file_object(self):
        assert read_html(BytesIO(b"<p>x</p>")) == "<p>x</p>"

    def test_unsupported_type(self):
        with pytest.raises(InputError, match="Unsupported input type"):
            read_html(123)  # type: ignore[arg-type]


@pytest.mark.unit
class TestHtmlToMarkdown:
    """Tests for parsing and rendering in one call."""

    def test_fragment(self):
        assert html_to_markdown("<ul><li>one</li><li>two</li></ul>") == "* one\n\n* two\n\n"

    def test_body_only(self):
        html = "<html><head><title>Ignored</title></head><body><p>Kept</p></body></html>"
        assert html_to_markdown(html) == "Kept\n\n"

    def test_overrides(self):
        assert html_to_markdown("<h2>Title</h2>", header_offset=1) == "### Title\n\n"

    def test_options_object(self):
        assert html_to_markdown("<p>a\n b</p>", RenderOptions(normalize_whitespace=False)) == "a\n b\n\n"

    def test_file_object(self):
        assert html_to_markdown(BytesIO(b"<b>x</b>")) == "**x**"

    def test_missing_file_name_is_not_rendered_as_text(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(InputError):
            html_to_markdown("page.html")

    def test_unknown_parser(self):
        with pytest.raises(ValidationError) as exc_info:
            html_to_markdown("<p>x</p>", parser="no-such-parser")  # type: ignore[arg-type]
        assert exc_info.value.parameter_name == "parser"

    def test_invalid_option_checked_before_reading(self, tmp_path):
        with pytest.raises(ValidationError):
            html_to_markdown(tmp_path / "missing.html", header_offset=-1)
