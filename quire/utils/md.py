#!/usr/bin/env python3
"""
md.py
-------------------
Markdown utilities for Quire documents.

A document starts with a fenced JSON header, followed by the body:

    ```json
    {"Title": "Hi", "Date": "2020-01-02T00:00:00Z", "Authors": []}
    ```
    # Hello

Provides:
- get_meta_block: decode the header and locate the body
- render_markdown: convert the body to HTML with markdown-it-py
"""
from __future__ import annotations

# --- Standard library imports ---
import json
from typing import Tuple

# --- Third-party imports ---
from markdown_it import MarkdownIt

# --- Local imports ---
from quire.core.exceptions import MetaBlockError, ValidationError
from quire.dataclasses.document import MetaBlock


META_BLOCK_START = "```json\n"
META_BLOCK_END = "```\n"


# ----- Metadata block -----
def get_meta_block(text: str) -> Tuple[MetaBlock, int]:
    """
    Decode the metadata block at the start of a document.

    The text must begin with META_BLOCK_START. The header ends at the first
    META_BLOCK_END found after the opening fence; the body starts right
    after it.

    Args:
        text: Full document text

    Returns:
        Tuple of (meta_block, content_start) where text[content_start:]
        is the document body. content_start counts characters of the
        decoded text, so it differs from the UTF-8 byte offset once the
        header holds non-ASCII characters.

    Raises:
        MetaBlockError: If either fence is missing or the header is not
            valid JSON of the expected shape

    Examples:
        >>> text = '```json\\n{"Title": "Hi", "Date": "2020-01-02"}\\n```\\nBody'
        >>> meta, start = get_meta_block(text)
        >>> text[start:]
        'Body'
    """
    if not text.startswith(META_BLOCK_START):
        raise MetaBlockError("missing meta code block start")

    end = text.find(META_BLOCK_END, len(META_BLOCK_START))
    if end == -1:
        raise MetaBlockError("missing meta code block end")

    header = text[len(META_BLOCK_START):end]
    content_start = end + len(META_BLOCK_END)

    try:
        data = json.loads(header)
    except json.JSONDecodeError as e:
        raise MetaBlockError(f"invalid JSON header: {e}") from e

    try:
        meta = MetaBlock.from_dict(data)
    except ValidationError as e:
        raise MetaBlockError(str(e)) from e

    return meta, content_start


# ----- Markup rendering -----
_markdown = MarkdownIt("commonmark").enable(["table", "strikethrough"])


def render_markdown(text: str) -> str:
    """
    Render Markdown to HTML.

    CommonMark with tables and strikethrough. Never fails; malformed
    markup degrades to literal text.

    Examples:
        >>> render_markdown("# Hello")
        '<h1>Hello</h1>\\n'
    """
    return _markdown.render(text)
