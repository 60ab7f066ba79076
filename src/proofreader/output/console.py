"""Console reporter - colored terminal output."""

from collections.abc import Sequence
from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..models.results import FileResult
from ..sources.loader import Source
from .base import BaseReporter


class ConsoleReporter(BaseReporter):
    """Prints results to the terminal.

    Each unit with suggestions is shown in red, followed by its style
    reasons in blue and its misspelled words in magenta.
    """

    def __init__(self, console: Optional[Console] = None, only_suggestions: bool = True):
        super().__init__(only_suggestions=only_suggestions)
        self.console = console or Console(highlight=False)

    def report_failures(self, failed: Sequence[Source]) -> None:
        for source in failed:
            self.console.print(f"### Proofreader [bold red]failed[/bold red] to load {escape(source.path)} ###")
            self.console.print(escape(source.error or "unknown error"))
            self.console.print()

    def report(
        self,
        file_results: Sequence[FileResult],
        failed: Sequence[Source] = (),
    ) -> None:
        self.report_failures(failed)

        for file_result in self.select(file_results):
            self.console.print(f"### Results for {escape(file_result.file)} ###")
            self.console.print()

            for result in file_result.results:
                self.console.print(f"[red]{escape(result.text)}[/red]")

                for item in result.write_good:
                    self.console.print(f"[bold blue] - {escape(item.reason)}[/bold blue]")

                for item in result.spelling:
                    suggestions = ",".join(item.suggestions)
                    self.console.print(f'[bold magenta] - "{escape(item.word)}" -> {escape(suggestions)}[/bold magenta]')

                if result.error is not None:
                    self.console.print(f"[yellow] ! analysis failed: {escape(result.error)}[/yellow]")

                self.console.print()
