"""Global Git identity (user.name / user.email) configuration."""

from pathlib import Path
from typing import Optional

from sshsetup.constants import GIT_USER_EMAIL_KEY, GIT_USER_NAME_KEY
from sshsetup.exceptions import ToolError
from sshsetup.logger import Reporter
from sshsetup.models.results import StepResult
from sshsetup.prompts import Prompter
from sshsetup.services.tool_runner import ToolRunner

STEP_NAME = "Git identity"

FIELD_LABELS = {
    GIT_USER_NAME_KEY: "Git user name",
    GIT_USER_EMAIL_KEY: "Git email",
}


class GitIdentityConfigurator:
    """Fills in missing global Git identity values."""

    def __init__(self, runner: ToolRunner, logger: Reporter, cwd: Optional[Path] = None):
        self.runner = runner
        self.logger = logger
        self.cwd = cwd

    def _get(self, args: list) -> Optional[str]:
        result = self.runner.run(["git", "config"] + args, cwd=self.cwd)
        if result.is_failure:
            return None
        return result.stdout.strip() or None

    def read_config(self, key: str) -> Optional[str]:
        """Read a key from the global scope. Missing keys yield None."""
        return self._get(["--global", "--get", key])

    def read_effective_config(self, key: str) -> Optional[str]:
        """Read a key from whichever scope git resolves it in."""
        return self._get(["--get", key])

    def write_config(self, key: str, value: str) -> None:
        """
        Set a key in the global scope.

        Raises:
            ToolError: If git config fails
        """
        self.runner.run(
            ["git", "config", "--global", key, value], cwd=self.cwd
        ).raise_for_status(f"Failed to set {key}")

    def ensure_identity(self, prompter: Prompter) -> StepResult:
        """
        Prompt for and store any missing global identity values.

        Present values are never rewritten.

        Returns:
            StepResult describing what was configured
        """
        missing = [
            key
            for key in (GIT_USER_NAME_KEY, GIT_USER_EMAIL_KEY)
            if self.read_config(key) is None
        ]
        if not missing:
            return StepResult.skipped(STEP_NAME, "Already configured")

        self.logger.info("Your global Git identity is incomplete.")
        written = []
        for key in missing:
            answer = prompter.ask(FIELD_LABELS[key], default=self.read_effective_config(key))
            if not answer:
                self.logger.note(f"Skipped {key}")
                continue
            try:
                self.write_config(key, answer)
            except ToolError as e:
                self.logger.warning(e.message)
                return StepResult.warning(STEP_NAME, e.message)
            self.logger.success(f"Set {key} = {answer}")
            written.append(key)

        if not written:
            return StepResult.skipped(STEP_NAME, "No values entered")
        return StepResult.success(STEP_NAME, f"Set {', '.join(written)}")
