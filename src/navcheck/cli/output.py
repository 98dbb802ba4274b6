"""CLI output formatting utilities for navcheck.

This module provides the OutputFormatter class for displaying per-step
progress, failure details and the end-of-run summary.
"""

from rich.console import Console
from rich.table import Table

from navcheck.core.protocols import RunReport, StepResult
from navcheck.core.scenarios import ScenarioInfo


class OutputFormatter:
    """Formats and displays CLI output.

    Attributes:
        verbose: Show passing steps as well as failures.
        plain: Disable colours.
        console: The rich console everything is written to.
    """

    def __init__(
        self, verbose: bool = False, plain: bool = False, console: Console | None = None
    ):
        """Initialize the output formatter.

        Args:
            verbose: Show every step, not only failures. Defaults to False.
            plain: Disable colours and markup styling. Defaults to False.
            console: Console to write to; a new one is created if omitted.
        """
        self.verbose = verbose
        self.plain = plain
        self.console = console or Console(no_color=plain, highlight=False)
        self._step = 0

    def show_step(self, result: StepResult) -> None:
        """Show one step outcome.

        Passing steps are only shown in verbose mode; failures always are.
        """
        self._step += 1
        if result.passed:
            if self.verbose:
                self.console.print(
                    f"[{self._step}] [green]✓[/green] {result.scenario}: {result.name}"
                )
            return

        kind = result.kind.value.upper() if result.kind else "FAILED"
        self.console.print(
            f"[{self._step}] [red]✗[/red] {result.scenario}: {result.name} "
            f"[yellow]({kind})[/yellow]",
        )
        if result.expected is not None or result.observed is not None:
            self.console.print(f"      expected: {result.expected!r}", markup=False)
            self.console.print(f"      observed: {result.observed!r}", markup=False)
        elif result.message:
            self.console.print(f"      {result.message}", markup=False)

    def show_summary(self, report: RunReport) -> None:
        """Show a per-scenario summary table and the overall verdict."""
        table = Table(title=f"navcheck: {report.base_url}")
        table.add_column("Scenario")
        table.add_column("Steps", justify="right")
        table.add_column("Failed", justify="right")
        table.add_column("Result")
        for scenario in report.scenarios:
            verdict = "[green]PASS[/green]" if scenario.passed else "[red]FAIL[/red]"
            table.add_row(
                scenario.title,
                str(len(scenario.steps)),
                str(len(scenario.failures)),
                verdict,
            )
        self.console.print()
        self.console.print(table)

        if report.passed:
            self.console.print(
                f"[green]✓ All {report.total_steps} steps passed[/green]"
            )
        else:
            self.console.print(
                f"[red]✗ {report.failed_steps} of {report.total_steps} "
                "steps failed[/red]"
            )

    def show_scenarios(self, scenarios: list[ScenarioInfo]) -> None:
        """List the available scenarios."""
        table = Table(title="Scenarios")
        table.add_column("ID")
        table.add_column("Title")
        table.add_column("Description")
        for scenario in scenarios:
            table.add_row(scenario.id, scenario.title, scenario.description)
        self.console.print(table)

    def show_report_path(self, path: str) -> None:
        self.console.print(f"[dim]Report written to {path}[/dim]")

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {message}")
