"""
Utilities package for Quire.

- md: metadata block extraction and Markdown rendering
- fs: document discovery and page naming

    from quire.utils import get_meta_block, render_markdown, list_documents
"""

from .md import META_BLOCK_END, META_BLOCK_START, get_meta_block, render_markdown
from .fs import MARKDOWN_FILE_ENDING, html_name, is_document_name, list_documents, scan_documents

__all__ = [
    "META_BLOCK_END",
    "META_BLOCK_START",
    "get_meta_block",
    "render_markdown",
    "MARKDOWN_FILE_ENDING",
    "html_name",
    "is_document_name",
    "list_documents",
    "scan_documents",
]
