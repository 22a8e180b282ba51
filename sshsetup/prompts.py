"""
Interactive prompts for sshsetup

Confirmation and free-text questions behind a small interface so the setup
flow can run against scripted answers.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt


class Prompter(ABC):
    """Source of interactive answers."""

    @abstractmethod
    def confirm(self, question: str, default: bool = True) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def ask(self, question: str, default: Optional[str] = None) -> str:
        """Ask for free text. Returns an empty string when skipped."""


class RichPrompter(Prompter):
    """Prompter backed by rich.prompt."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def confirm(self, question: str, default: bool = True) -> bool:
        return Confirm.ask(f"[?] {question}", default=default, console=self.console)

    def ask(self, question: str, default: Optional[str] = None) -> str:
        # Prompt.ask returns the default unchanged when the user hits Enter
        answer = Prompt.ask(
            f"[?] {question}",
            default=default or "",
            show_default=bool(default),
            console=self.console,
        )
        return (answer or "").strip()
