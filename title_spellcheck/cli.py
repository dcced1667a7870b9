"""Command-line interface for the pull-request title spellcheck."""

import logging

import click
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from title_spellcheck import configure_logging, install_exception_hook
from title_spellcheck.config import Settings, get_settings
from title_spellcheck.pipeline import RunStatus, run_spellcheck

console = Console()


def configure_verbose_logging() -> None:
    """Configure verbose debug logging."""
    logger.remove()
    logger.add(
        lambda msg: console.print(msg, end="", markup=False, highlight=False),
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    console.print("[dim]Debug logging enabled[/dim]")


def configure_default_logging() -> None:
    """Log INFO and above to stderr and silence noisy HTTP library loggers."""
    configure_logging(level="INFO")
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def load_settings_or_abort() -> Settings:
    """Load settings from the environment or abort with a readable error."""
    try:
        return get_settings()
    except ValidationError as e:
        console.print("[bold red]Error:[/bold red] Invalid configuration")
        console.print(f"Details: {escape(str(e))}", soft_wrap=True)
        raise click.Abort from e


@click.command()
@click.option(
    "--title",
    "-t",
    envvar="PR_TITLE",
    required=True,
    help="Pull request title to spellcheck (default: $PR_TITLE)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def main(title: str, verbose: bool) -> None:
    """Spellcheck a pull request title.

    Words are checked against the base dictionary extended with the
    downloaded (or bundled) .spelling file and the inline spelling list.
    Titles whose commit type is hidden in .versionrc can be skipped.
    """
    if verbose:
        configure_verbose_logging()
    else:
        configure_default_logging()
    install_exception_hook()

    settings = load_settings_or_abort()

    try:
        result = run_spellcheck(title, settings)
    except Exception as e:
        logger.opt(exception=True).debug("Spellcheck run failed")
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise click.Abort from e

    if result.status is RunStatus.FAILED:
        console.print(f"[bold red]Error:[/bold red] {escape(result.message)}", soft_wrap=True)
        raise click.Abort

    if result.status is RunStatus.SKIPPED:
        console.print(f"[yellow]Skipped:[/yellow] {escape(result.message)}", soft_wrap=True)
    else:
        console.print(f"[bold green]✓[/bold green] {escape(result.message)}", soft_wrap=True)


if __name__ == "__main__":
    main()
