"""
Quire
=====

A static site builder for Markdown documents with embedded JSON headers.

Each document in the input directory starts with a ```json block holding
its title, date and authors; the body is rendered to HTML and merged into
a page template. An index page listing every rendered document is
generated at the end.

Main Components:
    - pipeline: Per-document pipeline, directory driver and CLI
    - site: Jinja2 template rendering
    - dataclasses: MetaBlock, Page, Link and Index records
    - core: Configuration, logging, exceptions
    - utils: Header extraction, Markdown rendering, file discovery

Primary Interfaces:
    - quire.pipeline.cli: ``quire build`` command
    - quire.pipeline.md2html.build_site: programmatic build

Example Usage:
    >>> from quire import build_site, load_config
    >>> config = load_config("site.json")
    >>> result = build_site(config.input_dir, config.output_dir,
    ...                     config.template_page, config.template_index)
"""

__version__ = "1.0.0"

from quire.core.config import Configuration, load_config
from quire.pipeline.md2html import build_from_config, build_site, render_file

__all__ = [
    "Configuration",
    "load_config",
    "build_from_config",
    "build_site",
    "render_file",
]
