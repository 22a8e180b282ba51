"""
Base Command Class

Abstract base for sshsetup commands.
Provides common functionality and structure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console

from sshsetup.exceptions import SSHSetupError
from sshsetup.logger import Reporter, SetupLogger
from sshsetup.ui_components import show_header


class BaseCommand(ABC):
    """
    Abstract base command class.

    Provides:
    - Logger initialization
    - Header display
    - Error handling and exit codes
    """

    def __init__(
        self,
        verbose: bool = False,
        logger: Optional[Reporter] = None,
        console: Optional[Console] = None,
    ):
        self.verbose = verbose
        self.console = console or Console()
        self.logger: Reporter = logger or SetupLogger(verbose=verbose, output=self.console)

    def show_header(self, title: str, subtitle: Optional[str] = None, details: Optional[dict] = None) -> None:
        """Show command header."""
        show_header(title=title, subtitle=subtitle, details=details, console=self.console)

    def print_success(self, message: str) -> None:
        """Print success message."""
        self.console.print(f"[green]✓ {message}[/green]")

    def print_dim(self, message: str) -> None:
        """Print dim message."""
        self.console.print(f"[dim]{message}[/dim]")

    def log_path_hint(self) -> None:
        log_path = getattr(self.logger, "log_path", None)
        if log_path:
            self.print_dim(f"Logs saved to: {log_path}")

    @abstractmethod
    def execute(self, **kwargs) -> None:
        """
        Execute command logic.

        Must be implemented by subclasses.
        """
        pass

    def run(self, **kwargs) -> None:
        """
        Run command with error handling.

        Fatal setup errors exit with code 1, Ctrl-C with 130.

        Args:
            **kwargs: Command arguments
        """
        try:
            self.execute(**kwargs)
        except KeyboardInterrupt:
            self.console.print("\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            self.log_path_hint()
            raise SystemExit(130)
        except SystemExit:
            raise
        except SSHSetupError as e:
            self.logger.log_error(e.message, context=e.context)
            self.log_path_hint()
            raise SystemExit(1)
        except Exception as e:
            error_type = type(e).__name__
            self.logger.log_error(f"{error_type}: {e}")
            self.log_path_hint()
            raise SystemExit(1)
        finally:
            self.logger.close()
