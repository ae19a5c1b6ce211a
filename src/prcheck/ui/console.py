"""Rich-powered console output for PR Completeness Check."""

from __future__ import annotations

import logging
import os

from rich.console import Console as RichConsole
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from prcheck.checker import CheckResult, CheckStatus
from prcheck.messages import MESSAGES, MessageKey


def configure_logging(verbose: bool = False, console: RichConsole | None = None) -> None:
    """Route ``prcheck.*`` log records through Rich on stderr."""
    handler = RichHandler(
        console=console or RichConsole(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logger = logging.getLogger("prcheck")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def in_github_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


class Console:
    """Terminal output for prcheck using Rich."""

    def __init__(self) -> None:
        self.console = RichConsole()

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {message}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]i[/blue] {message}")

    def markdown(self, text: str) -> None:
        self.console.print(Markdown(text))

    def fail_workflow(self, reason: str) -> None:
        """Emit the workflow command Actions uses to annotate a failed step."""
        if in_github_actions():
            # Workflow commands must reach stdout verbatim, without Rich markup.
            print(f"::error::{_escape_workflow_data(reason)}", flush=True)

    def show_result(self, result: CheckResult) -> None:
        """Summarize a check result."""
        if result.status == CheckStatus.SKIPPED:
            self.info(result.reason or "No pull request to check")
            return

        if result.status == CheckStatus.PASSED:
            self.success(f"PR #{result.pull_request_number} has all required fields")
            return

        if result.missing_fields:
            missing = ", ".join(f.value for f in result.missing_fields)
            border = "yellow" if result.comment_posted else "red"
            self.console.print(
                Panel(
                    f"[bold]Pull request:[/bold] #{result.pull_request_number}\n"
                    f"[bold]Missing:[/bold] {missing}\n"
                    f"[bold]Comment posted:[/bold] {'yes' if result.comment_posted else 'no'}",
                    title="[bold]Incomplete Pull Request[/bold]",
                    border_style=border,
                )
            )
        for hint in result.hints:
            self.warning(hint)
        self.error(result.reason)

    def show_languages(self, default: str) -> None:
        table = Table(title="Comment Languages", border_style="cyan")
        table.add_column("Code", style="bold")
        table.add_column("Title", style="cyan")
        table.add_column("Default", justify="center")

        for code in sorted(MESSAGES):
            table.add_row(
                code,
                MESSAGES[code][MessageKey.TITLE],
                "✓" if code == default else "",
            )

        self.console.print(table)


def _escape_workflow_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
