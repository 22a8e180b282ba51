"""Upload the public key to GitHub through an authenticated gh CLI."""

from datetime import date
from typing import Optional

from sshsetup.constants import GITHUB_CLI_URL
from sshsetup.exceptions import ToolError
from sshsetup.logger import Reporter
from sshsetup.models.context import SetupContext
from sshsetup.models.results import StepResult
from sshsetup.prompts import Prompter
from sshsetup.services.environment import EnvironmentProber
from sshsetup.services.tool_runner import ToolRunner

STEP_NAME = "GitHub upload"


class GitHubKeyUploader:
    """Adds the public key to the authenticated GitHub account."""

    def __init__(
        self,
        context: SetupContext,
        runner: ToolRunner,
        prober: EnvironmentProber,
        logger: Reporter,
    ):
        self.context = context
        self.runner = runner
        self.prober = prober
        self.logger = logger

    def resolve_username(self) -> Optional[str]:
        """Login of the authenticated gh user, if it can be resolved."""
        result = self.runner.run(["gh", "api", "user", "-q", ".login"])
        if result.is_failure:
            return None
        return result.stdout.strip() or None

    def key_title(self, today: Optional[date] = None) -> str:
        """Title shown for the key in GitHub settings."""
        today = today or date.today()
        return f"{self.context.hostname} (sshsetup {today.isoformat()})"

    def upload(self, title: str) -> None:
        """
        Run gh ssh-key add.

        Raises:
            ToolError: If gh reports a failure
        """
        self.runner.run(
            ["gh", "ssh-key", "add", str(self.context.public_key_path), "-t", title]
        ).raise_for_status("gh ssh-key add failed")

    def run(self, prompter: Prompter, today: Optional[date] = None) -> StepResult:
        """Offer to upload the key. Never raises for gh failures."""
        if not self.prober.detect_github_auth():
            self.logger.note(
                "Tip: install and log in to the GitHub CLI "
                f"({GITHUB_CLI_URL}) to upload your key automatically."
            )
            return StepResult.skipped(STEP_NAME, "gh not installed or not authenticated")

        username = self.resolve_username()
        account = f"GitHub account '{username}'" if username else "your GitHub account"
        if not prompter.confirm(f"Upload this SSH key to {account}?", default=True):
            return StepResult.skipped(STEP_NAME, "Declined")

        title = self.key_title(today)
        try:
            self.upload(title)
        except ToolError as e:
            self.logger.warning(f"Could not upload key to GitHub: {e.message}")
            return StepResult.warning(STEP_NAME, e.message)

        self.logger.success(f"SSH key added to {account} as '{title}'")
        return StepResult.success(STEP_NAME, title)
