"""Main CLI application entry point."""

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from navcheck import __version__
from navcheck.cli.output import OutputFormatter
from navcheck.core.browser import SUPPORTED_BROWSERS
from navcheck.core.runner import AssertionRunner
from navcheck.core.scenarios import get_all_scenarios
from navcheck.pages.home import HomePage
from navcheck.pages.mock import MockServer, get_mock_pages_dir
from navcheck.utils.config import ConfigLoader
from navcheck.utils.exceptions import ConfigurationError
from navcheck.utils.session import SessionLogger

console = Console()

app = typer.Typer(
    name="navcheck",
    help="Browser checks for the Playwright documentation home page.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"navcheck v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records through rich, INFO when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """navcheck - browser checks for the Playwright documentation home page."""
    pass


@app.command("list")
def list_scenarios(
    plain: bool = typer.Option(False, "--plain", help="Disable colors"),
) -> None:
    """List the available scenarios."""
    OutputFormatter(plain=plain).show_scenarios(get_all_scenarios())


@app.command()
def run(
    scenario: list[str] | None = typer.Option(
        None,
        "--scenario",
        "-s",
        help="Scenario to run (repeatable). Runs every scenario when omitted.",
    ),
    target: str = typer.Option(
        "live",
        "--target",
        "-t",
        help="Target environment: 'live' for the real site, 'mock' for local testing",
    ),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        help="Override the page root (ignored with --target mock)",
    ),
    headed: bool = typer.Option(
        False,
        "--headed",
        help="Show the browser window",
    ),
    browser_name: str | None = typer.Option(
        None,
        "--browser",
        "-b",
        help="Browser engine: chromium, firefox or webkit",
    ),
    parallel: bool = typer.Option(
        False,
        "--parallel",
        "-p",
        help="Run scenarios concurrently, each in its own browser",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the JSON report and failure screenshots",
    ),
    no_report: bool = typer.Option(
        False,
        "--no-report",
        help="Do not write a JSON report or screenshots",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Show every step and detailed progress",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Disable colors",
    ),
) -> None:
    """Run verification scenarios against the home page."""
    configure_logging(verbose)
    formatter = OutputFormatter(verbose=verbose, plain=plain)

    try:
        selected = AssertionRunner.select(scenario)
    except ValueError as e:
        formatter.show_error(str(e))
        typer.echo(
            "Available scenarios: " + ", ".join(s.id for s in get_all_scenarios())
        )
        raise typer.Exit(code=3)

    if target not in ("live", "mock"):
        formatter.show_error(f"Unknown target '{target}'. Expected 'live' or 'mock'")
        raise typer.Exit(code=3)

    try:
        config = ConfigLoader.load()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(code=4)

    if output_dir:
        config.output_dir = output_dir
    if headed:
        config.headless = False
    if browser_name:
        config.browser_name = browser_name
    if parallel:
        config.parallel = True
    if config.browser_name not in SUPPORTED_BROWSERS:
        console.print(
            f"[red]Configuration error: unsupported browser "
            f"'{config.browser_name}'. Expected one of: "
            f"{', '.join(SUPPORTED_BROWSERS)}[/red]"
        )
        raise typer.Exit(code=4)

    mock_server = None
    if target == "mock":
        pages_dir = get_mock_pages_dir()
        if not pages_dir.exists():
            console.print(f"[red]Error: Mock pages not found at {pages_dir}[/red]")
            raise typer.Exit(code=4)
        mock_server = MockServer(pages_dir, port=0)
        mock_server.start()

    try:
        page = HomePage(
            entry_url=base_url or config.base_url,
            mock_base_url=mock_server.base_url if mock_server else None,
        )
        url = page.url_for(target)
        session = None
        if not no_report:
            session = SessionLogger(
                output_dir=config.output_dir, base_url=url, target=target
            )
        runner = AssertionRunner(
            config=config,
            base_url=url,
            session=session,
            step_callback=formatter.show_step,
        )
        report = asyncio.run(runner.run(selected))
        formatter.show_summary(report)
        if session:
            formatter.show_report_path(str(session.report_path))
        raise typer.Exit(code=0 if report.passed else 1)
    finally:
        if mock_server:
            mock_server.stop()


if __name__ == "__main__":
    app()
