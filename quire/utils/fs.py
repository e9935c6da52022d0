#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem helpers for locating documents and naming pages.

Functions:
    is_document_name: Check a file name for the document extension
    scan_documents: Split a directory listing into documents and skipped entries
    list_documents: Eligible documents directly inside a directory
    html_name: Output page name for a document

Usage:
    from quire.utils.fs import list_documents, html_name

    for path in list_documents(Path("content")):
        print(path, html_name(path.name))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

# --- Local imports ---
from quire.core.logging_manager import QuireLogger, safe_logger


MARKDOWN_FILE_ENDING = ".md"
HTML_FILE_ENDING = ".html"


def is_document_name(name: str) -> bool:
    """True if the file name ends with the document extension."""
    return name.endswith(MARKDOWN_FILE_ENDING)


def scan_documents(
    directory: Path,
    sort: bool = False,
    logger: Optional[QuireLogger] = None,
) -> Tuple[List[Path], List[Path]]:
    """
    Split the entries directly inside a directory.

    Only regular files whose names end in ".md" are documents; everything
    else (subdirectories included) is skipped. Subdirectories are not
    descended into.

    Args:
        directory: Directory to scan
        sort: Order by file name instead of listing order
        logger: Optional logger for skipped entries

    Returns:
        Tuple of (documents, skipped), each in scan order

    Raises:
        OSError: If the directory cannot be listed
    """
    with os.scandir(directory) as it:
        entries = list(it)

    if sort:
        entries.sort(key=lambda entry: entry.name)

    documents: List[Path] = []
    skipped: List[Path] = []
    for entry in entries:
        if entry.is_file() and is_document_name(entry.name):
            documents.append(Path(entry.path))
        else:
            safe_logger(logger).log_debug(f"skipping: {entry.path}")
            skipped.append(Path(entry.path))
    return documents, skipped


def list_documents(
    directory: Path,
    sort: bool = False,
    logger: Optional[QuireLogger] = None,
) -> Iterator[Path]:
    """Yield the documents directly inside a directory, see scan_documents."""
    documents, _ = scan_documents(directory, sort=sort, logger=logger)
    yield from documents


def html_name(filename: str) -> str:
    """
    Output page name for a document file name.

    Examples:
        >>> html_name("a.md")
        'a.html'
        >>> html_name("notes.md.md")
        'notes.md.html'
    """
    if is_document_name(filename):
        filename = filename[: -len(MARKDOWN_FILE_ENDING)]
    return f"{filename}{HTML_FILE_ENDING}"
