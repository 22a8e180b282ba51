"""
Logging system for sshsetup
Provides leveled console output with an optional real-time log file
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape

from sshsetup.constants import LOG_TIME_FORMAT

console = Console()

ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


class Reporter(ABC):
    """Leveled message sink used by every setup step."""

    @abstractmethod
    def step(self, step_name: str) -> None:
        """Announce the start of a step."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Report a neutral progress message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Report a completed action."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Report a non-fatal failure."""

    @abstractmethod
    def note(self, message: str) -> None:
        """Report an informational tip."""

    @abstractmethod
    def show(self, text: str) -> None:
        """Display raw text verbatim (e.g. a public key)."""

    @abstractmethod
    def log_error(self, error: str, context: Optional[str] = None) -> None:
        """Report a fatal error."""

    def log_command(self, command: str) -> None:
        """Record a command about to be executed."""

    def log_output(self, output: str, stream: str = "stdout") -> None:
        """Record command output."""

    def close(self) -> None:
        """Release any resources held by the reporter."""


class SetupLogger(Reporter):
    """
    Reporter for the setup flow
    - Prints clean, colored progress to the console
    - Optionally mirrors everything to a log file in real-time
    - Echoes executed commands and their output when verbose
    """

    def __init__(
        self,
        verbose: bool = False,
        log_path: Optional[Path] = None,
        output: Optional[Console] = None,
    ):
        """
        Initialize logger

        Args:
            verbose: If True, show executed commands and output in console
            log_path: Optional path of a log file to write
            output: Console to print to (defaults to the shared console)
        """
        self.verbose = verbose
        self.console = output or console
        self.log_file: Optional[TextIO] = None
        self.log_path: Optional[Path] = log_path
        self.current_step = ""
        self.has_errors = False

        if log_path:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            # Line buffered so the file follows the run in real-time
            self.log_file = open(log_path, "w", buffering=1, encoding="utf-8")
            self._write_log_header()

    def _write_log_header(self):
        """Write log file header"""
        header = f"""
{"=" * 80}
sshsetup Log
{"=" * 80}
Started: {datetime.now().isoformat()}
{"=" * 80}

"""
        self.log_file.write(header)
        self.log_file.flush()

    def log(self, message: str, level: str = "INFO"):
        """
        Write a message to the log file

        Args:
            message: Message to log
            level: Log level (INFO, WARNING, ERROR, DEBUG)
        """
        if not self.log_file:
            return
        timestamp = datetime.now().strftime(LOG_TIME_FORMAT)
        self.log_file.write(f"[{timestamp}] [{level}] {message}\n")
        self.log_file.flush()

    def log_command(self, command: str):
        """Log a command being executed"""
        self.log(f"Executing: {command}", "DEBUG")
        if self.verbose:
            self.console.print(f"  [dim]$ {escape(command)}[/dim]")

    def log_output(self, output: str, stream: str = "stdout"):
        """
        Log command output

        Always written to the log file, shown in console only if verbose.

        Args:
            output: Command output (single line or multiline)
            stream: Stream name (stdout, stderr)
        """
        if not output:
            return

        clean_output = ANSI_ESCAPE.sub("", output)

        if self.log_file:
            for line in clean_output.splitlines():
                self.log_file.write(f"  [{stream}] {line}\n")
            self.log_file.flush()

        if self.verbose:
            for line in clean_output.splitlines():
                self.console.print(f"    [dim]{escape(line)}[/dim]")

    def log_error(self, error: str, context: Optional[str] = None):
        """
        Log an error with context

        Args:
            error: Error message
            context: Additional context (e.g., manual install instructions)
        """
        self.has_errors = True

        if self.log_file:
            error_block = f"""
{"!" * 80}
ERROR OCCURRED
{"!" * 80}
{error}
"""
            if context:
                error_block += f"\nContext: {context}\n"
            error_block += f"{'!' * 80}\n\n"
            self.log_file.write(error_block)
            self.log_file.flush()

        self.console.print()
        self.console.print(f"[bold red]✗ {escape(error)}[/bold red]")
        if context:
            for line in context.splitlines():
                self.console.print(f"  [color(208)]{escape(line)}[/color(208)]")

    def step(self, step_name: str):
        """
        Start a new step

        Args:
            step_name: Name of the step
        """
        if self.current_step:
            self.console.print()

        self.current_step = step_name
        self.log(f"Step: {step_name}", "INFO")
        self.console.print(f"[color(214)]▶[/color(214)] [white]{escape(step_name)}[/white]")

    def info(self, message: str):
        """Log a progress message"""
        self.log(message, "INFO")
        self.console.print(f"  [cyan]{escape(message)}[/cyan]")

    def success(self, message: str):
        """Log a success message"""
        self.log(message, "INFO")
        self.console.print(f"  [green]✓[/green] {escape(message)}")

    def warning(self, message: str):
        """Log a warning message"""
        self.log(message, "WARNING")
        self.console.print(f"  [yellow]⚠[/yellow] [dim]{escape(message)}[/dim]")

    def note(self, message: str):
        """Log an informational note"""
        self.log(message, "INFO")
        self.console.print(f"  [dim]{escape(message)}[/dim]")

    def show(self, text: str):
        """Print raw text without markup processing"""
        self.log(text.rstrip(), "INFO")
        self.console.print(text.rstrip(), markup=False, highlight=False, soft_wrap=True)

    def close(self):
        """Close log file"""
        if self.log_file:
            footer = f"""
{"=" * 80}
Completed: {datetime.now().isoformat()}
Status: {"FAILED" if self.has_errors else "SUCCESS"}
{"=" * 80}
"""
            self.log_file.write(footer)
            self.log_file.close()
            self.log_file = None

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb):
        """Context manager exit"""
        if exc_type is not None and exc_type not in (SystemExit, KeyboardInterrupt):
            self.log(str(exc_val) if exc_val else "Operation failed", "ERROR")
            self.has_errors = True
        if exc_type is SystemExit and exc_val is not None and exc_val.code not in (0, None):
            self.has_errors = True
        self.close()
        return False
