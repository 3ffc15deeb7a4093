"""stylecascade CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from stylecascade import __version__
from stylecascade.config import CascadeConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group()
@click.version_option(version=__version__, prog_name="stylecascade")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to STYLECASCADE_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """stylecascade - responsive, pseudo-state aware CSS for page builder elements."""
    config = CascadeConfig.from_env()
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=None, help="Enable debug mode")
@click.pass_obj
def serve(config: CascadeConfig, host: str | None, port: int | None, debug: bool | None) -> None:
    """Start the stylecascade HTTP API."""
    from stylecascade.web.app import create_app

    host = host or config.host
    port = port or config.port
    debug = config.debug if debug is None else debug

    app = create_app(config)
    click.echo(f"Starting stylecascade on {host}:{port}")
    app.run(host=host, port=port, debug=debug)


# Import and register subcommands
from stylecascade.cli.compile import compile_cmd, page  # noqa: E402
from stylecascade.cli.inspect import resolve, source  # noqa: E402
from stylecascade.cli.mutate import set_cmd  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(page)
cli.add_command(resolve)
cli.add_command(source)
cli.add_command(set_cmd)
