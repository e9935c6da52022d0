"""
test_md_utils.py
----------------
Unit tests for quire.utils.md.

Tests metadata block extraction and Markdown rendering.
"""
import json
import pytest
from datetime import date

from quire.core.exceptions import MetaBlockError
from quire.utils.md import (
    META_BLOCK_END,
    META_BLOCK_START,
    get_meta_block,
    render_markdown,
)


class TestGetMetaBlock:
    """Test get_meta_block function."""

    def test_splits_header_and_body(self, header):
        body = "# Hello\n\nSome *text*.\n"
        text = META_BLOCK_START + json.dumps(header) + "\n" + META_BLOCK_END + body

        meta, start = get_meta_block(text)

        assert meta.title == "Hi"
        assert meta.date == date(2020, 1, 2)
        assert meta.authors == []
        assert text[start:] == body

    @pytest.mark.parametrize("body", ["", "plain", "```python\nprint(1)\n```\n", "\n\n# x"])
    def test_body_preserved_exactly(self, make_document, header, body):
        """Everything after the closing fence is returned untouched."""
        text = make_document(header, body)
        _, start = get_meta_block(text)
        assert text[start:] == body

    def test_non_ascii_header(self, make_document):
        """The body start is a character index into the decoded text."""
        body = "# Caf\u00e9\n"
        header = json.dumps({"Title": "Caf\u00e9 \u2615", "Date": "2020-01-02"}, ensure_ascii=False)
        text = make_document(header, body)

        meta, start = get_meta_block(text)

        assert meta.title == "Caf\u00e9 \u2615"
        assert text[start:] == body
        assert len(text[:start].encode("utf-8")) > start

    def test_header_without_trailing_newline(self):
        """The closing fence may follow the JSON directly."""
        text = '```json\n{"Date": "2020-01-02"}```\nBody'
        meta, start = get_meta_block(text)
        assert meta.date == date(2020, 1, 2)
        assert text[start:] == "Body"

    @pytest.mark.parametrize(
        "text",
        [
            "# Hello",
            "\n```json\n{}\n```\n",
            "```JSON\n{}\n```\n",
            "```json {}\n```\n",
            "```yaml\nTitle: x\n```\n",
        ],
    )
    def test_missing_start(self, text):
        with pytest.raises(MetaBlockError, match="missing meta code block start"):
            get_meta_block(text)

    @pytest.mark.parametrize(
        "text",
        ['```json\n{"Date": "2020-01-02"}\n', '```json\n{"Date": "2020-01-02"}\n```'],
    )
    def test_missing_end(self, text):
        with pytest.raises(MetaBlockError, match="missing meta code block end"):
            get_meta_block(text)

    def test_invalid_json(self, make_document):
        with pytest.raises(MetaBlockError, match="invalid JSON"):
            get_meta_block(make_document("{Title: Hi}"))

    def test_wrong_shape(self, make_document):
        with pytest.raises(MetaBlockError, match="Title must be a string"):
            get_meta_block(make_document({"Title": [], "Date": "2020-01-02"}))


class TestRenderMarkdown:
    """Test render_markdown function."""

    def test_heading(self):
        assert render_markdown("# Hello") == "<h1>Hello</h1>\n"

    def test_emphasis_and_links(self):
        html = render_markdown("*a* **b** [c](https://example.org)")
        assert "<em>a</em>" in html
        assert "<strong>b</strong>" in html
        assert '<a href="https://example.org">c</a>' in html

    def test_list(self):
        html = render_markdown("- one\n- two\n")
        assert "<ul>" in html
        assert "<li>two</li>" in html

    def test_code_fence(self):
        html = render_markdown("```python\nx = 1\n```\n")
        assert '<code class="language-python">' in html

    def test_table(self):
        html = render_markdown("| a | b |\n| - | - |\n| 1 | 2 |\n")
        assert "<table>" in html
        assert "<td>2</td>" in html

    def test_strikethrough(self):
        assert "<s>gone</s>" in render_markdown("~~gone~~")

    def test_empty(self):
        assert render_markdown("") == ""
