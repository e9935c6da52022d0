"""
Dataclasses for documents, pages and the site index.

    from quire.dataclasses import MetaBlock, Page, Link, Index
"""
from .document import Author, Index, Link, MetaBlock, Page, format_date, parse_date

__all__ = ["Author", "Index", "Link", "MetaBlock", "Page", "format_date", "parse_date"]
