#!/usr/bin/env python3
"""
md2html.py
-------------------
Convert a directory of Markdown documents into HTML pages plus an index.

    Input/                      Output/
    ├── a.md          ──►       ├── a.html
    ├── b.md          ──►       ├── b.html
    ├── notes.txt   (skipped)   └── index.html
    └── drafts/     (skipped)

Each document is read, its ```json header decoded, the body rendered to
HTML, and the page template executed into Output/<name>.html. A link
(title, date, /<name>.html) is collected for every page written, in
processing order, and the index template is executed once at the end.

By default the first failing document aborts the build before the index
is written. With fail_fast=False failures are collected instead and the
index lists only the pages that succeeded.

Programmatic API:
    from quire.pipeline.md2html import render_file, build_site

    page = render_file(Path("content/a.md"))
    result = build_site(input_dir, output_dir, template_page, template_index,
                        logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from quire.core.cli import BuildStats
from quire.core.config import Configuration
from quire.core.exceptions import (
    EmptyFileError,
    MetaBlockError,
    QuireError,
    RenderError,
)
from quire.core.logging_manager import QuireLogger, safe_logger
from quire.dataclasses.document import Index, Link, Page
from quire.site.renderer import SiteRenderer
from quire.utils.fs import html_name, scan_documents
from quire.utils.md import get_meta_block, render_markdown


INDEX_FILE_NAME = "index.html"


@dataclass
class FileFailure:
    """A document that failed to render."""

    path: Path
    error: Exception


@dataclass
class BuildResult:
    """
    Outcome of a build.

    Attributes:
        index: Links of every page written, in processing order
        failures: Documents that failed (only when not failing fast)
        stats: Build counters
        index_path: Where the index was written
    """

    index: Index
    failures: List[FileFailure] = field(default_factory=list)
    stats: BuildStats = field(default_factory=BuildStats)
    index_path: Optional[Path] = None

    @property
    def succeeded(self) -> bool:
        return not self.failures


def render_file(path: Path) -> Page:
    """
    Read a document and turn it into a Page.

    Args:
        path: Markdown document with a leading ```json header

    Returns:
        Page with the header's title, formatted date and authors, and the
        rendered body

    Raises:
        EmptyFileError: If the file has no content
        MetaBlockError: If the header is missing or invalid, prefixed
            with "meta block error: "
        OSError: If the file cannot be read
    """
    # Decode without newline translation so the fences are matched exactly
    text = path.read_bytes().decode("utf-8")
    if not text:
        raise EmptyFileError("file is empty")

    try:
        meta, content_start = get_meta_block(text)
    except MetaBlockError as e:
        raise MetaBlockError(f"meta block error: {e}") from e

    return Page.from_meta(meta, render_markdown(text[content_start:]))


def _process_document(
    source: Path,
    output_dir: Path,
    template_page: Path,
    renderer: SiteRenderer,
) -> Link:
    page = render_file(source)
    name = html_name(source.name)
    renderer.render_to_file(output_dir / name, template_page, page)
    return Link.for_page(page, name)


def build_site(
    input_dir: Path,
    output_dir: Path,
    template_page: Path,
    template_index: Path,
    fail_fast: bool = True,
    sort: bool = False,
    renderer: Optional[SiteRenderer] = None,
    logger: Optional[QuireLogger] = None,
) -> BuildResult:
    """
    Render every document in a directory, then the index.

    Args:
        input_dir: Directory holding the .md documents (not recursed)
        output_dir: Existing directory receiving the pages and index.html
        template_page: Template executed for each document
        template_index: Template executed once for the index
        fail_fast: Abort on the first failing document
        sort: Process documents in file name order
        renderer: Template executor (defaults to a file-based SiteRenderer)
        logger: Optional logger instance

    Returns:
        BuildResult with the index links, failures and counters

    Raises:
        RenderError: On the first failing document when fail_fast, or when
            the input directory cannot be listed or the index fails
    """
    log = safe_logger(logger)
    renderer = renderer or SiteRenderer()
    result = BuildResult(index=Index())
    stats = result.stats

    try:
        documents, skipped = scan_documents(input_dir, sort=sort, logger=logger)
    except OSError as e:
        raise RenderError(f"cannot list {input_dir}: {e}", input_dir) from e
    stats.files_skipped = len(skipped)

    for source in documents:
        log.log_info(f"processing: {source}")
        stats.files_processed += 1
        try:
            link = _process_document(source, output_dir, template_page, renderer)
        except (QuireError, OSError, UnicodeDecodeError) as e:
            stats.errors += 1
            error = RenderError(f"page render error: {source}: {e}", source)
            if fail_fast:
                raise error from e
            log.log_error(error, {"file": str(source)})
            result.failures.append(FileFailure(source, e))
            continue

        stats.pages_written += 1
        result.index.add(link)

    index_path = output_dir / INDEX_FILE_NAME
    try:
        renderer.render_to_file(index_path, template_index, result.index)
    except QuireError as e:
        raise RenderError(f"index render error: {e}", index_path) from e
    result.index_path = index_path

    log.log_info(stats.summary())
    log.log_operation("build_site", stats.to_dict())
    return result


def build_from_config(
    config: Configuration,
    renderer: Optional[SiteRenderer] = None,
    logger: Optional[QuireLogger] = None,
) -> BuildResult:
    """Run build_site with the directories, templates and flags of a Configuration."""
    return build_site(
        input_dir=config.input_dir,
        output_dir=config.output_dir,
        template_page=config.template_page,
        template_index=config.template_index,
        fail_fast=config.fail_fast,
        sort=config.sort,
        renderer=renderer,
        logger=logger,
    )
