"""
Build Command
-------------

Commands:
    - build: Render Input/*.md into Output/*.html plus Output/index.html

Exit codes:
    1 - configuration error, or a page/index failed to render
    2 - input directory missing
    3 - output directory missing
"""
from __future__ import annotations

import click
from typing import Optional

from quire.core.config import check_directories, load_config
from quire.core.exceptions import ConfigurationError, PathError, QuireError
from quire.core.logging_manager import QuireLogger, handle_cli_error
from quire.pipeline.md2html import build_site


@click.command("build")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file (defaults to the CONFIG environment variable)",
)
@click.option(
    "--keep-going",
    is_flag=True,
    help="Render the remaining documents after a failure",
)
@click.option("--sort", is_flag=True, help="Process documents in file name order")
@click.pass_context
def build(
    ctx: click.Context,
    config_path: Optional[str],
    keep_going: bool,
    sort: bool,
) -> None:
    """
    Build HTML pages and the index from Markdown documents.

    Every .md file directly inside the input directory is rendered through
    the page template; the index template then lists the pages written.
    """
    logger: QuireLogger = ctx.obj["logger"]

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        handle_cli_error(ctx, e, "load_config", exit_code=1)
        return
    logger.log_info("configuration was loaded")

    try:
        check_directories(config)
    except PathError as e:
        handle_cli_error(
            ctx, e, "check_directories", {"path": str(e.path)}, exit_code=e.exit_code
        )
        return
    logger.log_info("input directory found")
    logger.log_info("output directory found")

    try:
        result = build_site(
            input_dir=config.input_dir,
            output_dir=config.output_dir,
            template_page=config.template_page,
            template_index=config.template_index,
            fail_fast=config.fail_fast and not keep_going,
            sort=config.sort or sort,
            logger=logger,
        )
    except QuireError as e:
        handle_cli_error(ctx, e, "build", {"input": str(config.input_dir)})
        return

    stats = result.stats
    click.echo("\n✅ Build complete:")
    click.echo(f"  Pages written: {stats.pages_written}")
    click.echo(f"  Index: {result.index_path}")
    click.echo(f"  Duration: {stats.duration():.2f}s")

    if not result.succeeded:
        click.echo(f"\n⚠️  {len(result.failures)} documents failed:", err=True)
        for failure in result.failures:
            click.echo(f"  {failure.path}: {failure.error}", err=True)
        ctx.exit(1)


__all__ = ["build"]
