"""Rich-based diagnostic reporter for terminal output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class RichDiagnosticReporter:
    """Diagnostic reporter printing highlighted warnings with Rich.

    Warnings go to stderr so that a manifest printed on stdout stays
    machine-readable. Reported messages are kept for later summaries.

    Example:
        reporter = RichDiagnosticReporter()
        manifest = Generator(fs, "/", diagnostics=reporter).generate(config)
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the reporter.

        Args:
            console: Console to print to. Defaults to a stderr console.
        """
        self._console = console if console is not None else Console(stderr=True)
        self.messages: list[str] = []

    def warn(self, message: str) -> None:
        """Print a yellow warning line.

        Args:
            message: Warning text; Rich markup in it is not interpreted.
        """
        self.messages.append(message)
        self._console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")
