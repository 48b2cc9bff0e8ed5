"""Output for the command line tool."""

from rich.console import Console
from rich.markup import escape


class Reporter:
    """Writes informational, result and error text.

    Quiet mode silences informational text only. Results and errors are
    always written.
    """

    def __init__(
        self,
        quiet: bool = False,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.quiet = quiet
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)

    def info(self, text: str) -> None:
        if self.quiet:
            return
        self.console.print(text, markup=False)

    def result(self, text: str, end: str = "\n") -> None:
        """Write text verbatim to the console's output."""
        out = self.console.file
        out.write(text + end)
        out.flush()

    def error(self, text: str) -> None:
        self.error_console.print(f"[red]Error:[/red] {escape(text)}", soft_wrap=True)
