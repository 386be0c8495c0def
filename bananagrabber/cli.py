"""Command-line interface for bananagrabber."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from bananagrabber.bot.handler import command_definitions
from bananagrabber.config import Config
from bananagrabber.core.fixtures import FixtureReport, check_saved_responses
from bananagrabber.core.resolver import MediaResolver
from bananagrabber.errors import ResolutionError
from bananagrabber.models.media import CrossPost
from bananagrabber.utils.logging_utils import setup_logging

app = typer.Typer(help="bananagrabber - extract the media out of a reddit link", add_completion=False)

logger = logging.getLogger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[int, typer.Option("--verbose", "-v", count=True, help="Increase log verbosity (repeatable)")] = 0,
    config_path: Annotated[Optional[str], typer.Option("--config", help="Path to YAML config file")] = None,
    env_file: Annotated[Optional[str], typer.Option("--env-file", help="Path to .env file")] = None,
) -> None:
    """Load configuration and set up logging for every command."""
    try:
        config = Config.from_files(config_path, env_file)
    except ValueError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=2)

    setup_logging(verbose, config.log_level)
    logger.debug(f"Config: {config}")

    errors = config.validate()
    if errors:
        for error in errors:
            typer.echo(f"Configuration error: {error}", err=True)
        raise typer.Exit(code=2)

    ctx.obj = config


async def resolve_with_timeout(url: str, config: Config, timeout: Optional[float] = None) -> Optional[str]:
    """Resolve ``url``, cancelling the request if it runs longer than ``timeout`` seconds."""
    async with MediaResolver(config) as resolver:
        if timeout is None:
            return await resolver.resolve(url)
        return await asyncio.wait_for(resolver.resolve(url), timeout)


def log_error_chain(error: BaseException) -> None:
    logger.error(f"{error}")
    cause = error.__cause__
    while cause is not None:
        logger.error(f"because: {cause}")
        cause = cause.__cause__


@app.command("extract-media-url")
def extract_media_url(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(help="url to the reddit post")],
    timeout: Annotated[Optional[float], typer.Option("--timeout", min=0.001, help="Give up after this many seconds")] = None,
) -> None:
    """Print the direct media URL of a reddit post."""
    config: Config = ctx.obj

    try:
        media_url = asyncio.run(resolve_with_timeout(url, config, timeout))
    except ResolutionError as e:
        log_error_chain(e)
        typer.echo("unrecoverable bananagrabber failure", err=True)
        raise typer.Exit(code=1)
    except asyncio.TimeoutError:
        logger.error(f"gave up resolving {url} after {timeout}s")
        typer.echo("unrecoverable bananagrabber failure", err=True)
        raise typer.Exit(code=1)

    if media_url is None:
        logger.warning("could not find media")
        typer.echo("no media found", err=True)
        return

    typer.echo(media_url)


def describe_report(report: FixtureReport) -> str:
    name = report.path.name
    if not report.ok:
        return f"{name}: error: {report.error}"
    if report.source is None:
        return f"{name}: no media"
    if isinstance(report.source, CrossPost):
        return f"{name}: cross-post {report.source.url}"
    return f"{name}: media {report.source.media.url}"


@app.command("test")
def check_fixtures(
    directory: Annotated[Path, typer.Argument(exists=True, file_okay=False, dir_okay=True, help="Directory of saved responses")],
) -> None:
    """Decode and classify every saved reddit response in a directory."""
    reports = check_saved_responses(directory)
    for report in reports:
        typer.echo(describe_report(report))


@app.command("commands")
def show_commands(ctx: typer.Context) -> None:
    """Print the chat bot's slash command definitions as JSON."""
    config: Config = ctx.obj
    typer.echo(json.dumps(command_definitions(config), indent=2))


if __name__ == "__main__":
    app()
