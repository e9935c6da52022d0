#!/usr/bin/env python3
"""
Quire CLI
---------

Command-line interface for building a site from Markdown documents.

Commands:
    - build: Render every document and the index

Usage:
    # Configuration path from the CONFIG environment variable
    CONFIG=site.json quire build

    # Explicit configuration, keep going past failing documents
    quire build --config site.json --keep-going

    # File logging and debug output
    quire --log-dir logs -v build
"""
from __future__ import annotations

import click
from pathlib import Path
from typing import Optional

from quire.core.cli import setup_logger


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for log files (console only when omitted)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: Optional[str], verbose: bool) -> None:
    """Quire static site builder"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir) if log_dir else None
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(ctx.obj["log_dir"], "build", verbose=verbose)


# Import and register commands from submodules
from .build import build

cli.add_command(build)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
