"""
sshsetup - UI Components
Standardized header, next-steps panel and summary table
"""

from typing import List

from rich.console import Console
from rich.table import Table

from sshsetup.constants import GITHUB_SSH_KEYS_URL, GITLAB_SSH_KEYS_URL
from sshsetup.models.results import ResultStatus, StepResult

BRAND = "sshsetup"

# Color scheme
BRAND_COLOR = "cyan"
SUCCESS_COLOR = "green"
WARNING_COLOR = "yellow"
ERROR_COLOR = "red"

STATUS_STYLES = {
    ResultStatus.SUCCESS: f"[{SUCCESS_COLOR}]✓ done[/{SUCCESS_COLOR}]",
    ResultStatus.SKIPPED: "[dim]- skipped[/dim]",
    ResultStatus.WARNING: f"[{WARNING_COLOR}]⚠ warning[/{WARNING_COLOR}]",
}


def show_header(title: str, subtitle: str = None, details: dict = None, console: Console = None):
    """
    Display the standard command header.

    Args:
        title: Main title
        subtitle: Optional subtitle line
        details: Additional key-value pairs to display
        console: Rich Console instance (creates new if None)
    """
    if console is None:
        console = Console()

    prefix = f" [bold color(214)]{BRAND}[/bold color(214)] [dim]›[/dim]"
    console.print(f"{prefix} [bold white]{title}[/bold white]")

    if subtitle:
        console.print(f"{prefix} [dim]{subtitle}[/dim]")

    if details:
        for key, value in details.items():
            console.print(f"{prefix} {key}: [{BRAND_COLOR}]{value}[/{BRAND_COLOR}]")

    console.print()


def show_next_steps(console: Console = None):
    """Explain where to register the key and how to use SSH remotes."""
    if console is None:
        console = Console()

    console.print(f"\n[{BRAND_COLOR}]Next steps:[/{BRAND_COLOR}]")
    console.print("  1. Add this public key to your GitHub account:")
    console.print(f"     [dim]{GITHUB_SSH_KEYS_URL}[/dim]")
    console.print("  2. Or add it to your GitLab account:")
    console.print(f"     [dim]{GITLAB_SSH_KEYS_URL}[/dim]")

    console.print(f"\n[{BRAND_COLOR}]Important:[/{BRAND_COLOR}]")
    console.print("  • For new clones, use SSH URLs instead of HTTPS:")
    console.print("    [dim]git clone git@github.com:username/repo.git[/dim]")
    console.print("  • To update an existing repository to use SSH:")
    console.print("    [dim]git remote set-url origin git@github.com:username/repo.git[/dim]")


def show_summary(results: List[StepResult], console: Console = None):
    """Render the outcome of every step as a table."""
    if console is None:
        console = Console()

    table = Table(title="Setup Summary", title_justify="left", padding=(0, 1))
    table.add_column("Step", style=BRAND_COLOR, no_wrap=True)
    table.add_column("Status")
    table.add_column("Details", style="dim")

    for result in results:
        table.add_row(result.step, STATUS_STYLES[result.status], result.message)

    console.print()
    console.print(table)
