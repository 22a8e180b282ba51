"""Rewriting a repository's origin remote from HTTPS to SSH form."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sshsetup.constants import GIT_REMOTE_NAME, SSH_URL_PREFIXES
from sshsetup.exceptions import ToolError
from sshsetup.logger import Reporter
from sshsetup.models.results import StepResult
from sshsetup.prompts import Prompter
from sshsetup.services.tool_runner import ToolRunner

STEP_NAME = "Remote URL"

# https://<domain>/<owner>/<repo>[.git], one path segment each
HTTPS_REMOTE_PATTERN = re.compile(
    r"^https://(?P<domain>[^/@\s]+)/(?P<owner>[^/\s]+)/(?P<repo>[^/\s]+?)(?:\.git)?$"
)


@dataclass(frozen=True)
class RemoteUrl:
    """Components of a hosted repository address."""

    domain: str
    owner: str
    repo: str


def parse_https_url(url: str) -> Optional[RemoteUrl]:
    """
    Parse an HTTPS remote URL.

    Args:
        url: Remote URL

    Returns:
        RemoteUrl, or None if the URL is not of the form
        https://<domain>/<owner>/<repo>[.git]
    """
    match = HTTPS_REMOTE_PATTERN.match(url.strip())
    if not match:
        return None
    return RemoteUrl(match.group("domain"), match.group("owner"), match.group("repo"))


def to_ssh_url(remote: RemoteUrl) -> str:
    """Format a remote as git@<domain>:<owner>/<repo>.git."""
    return f"git@{remote.domain}:{remote.owner}/{remote.repo}.git"


def convert_to_ssh_url(url: str) -> Optional[str]:
    """SSH form of an HTTPS remote URL, or None if it is not convertible."""
    remote = parse_https_url(url)
    return to_ssh_url(remote) if remote else None


def is_ssh_url(url: str) -> bool:
    return url.startswith(SSH_URL_PREFIXES)


class RemoteUrlRewriter:
    """Offers to switch the current repository's origin to SSH."""

    def __init__(self, runner: ToolRunner, logger: Reporter, cwd: Optional[Path] = None):
        self.runner = runner
        self.logger = logger
        self.cwd = cwd

    def is_inside_work_tree(self) -> bool:
        result = self.runner.run(["git", "rev-parse", "--is-inside-work-tree"], cwd=self.cwd)
        return result.is_success and result.stdout.strip() == "true"

    def get_origin_url(self) -> Optional[str]:
        result = self.runner.run(
            ["git", "config", "--get", f"remote.{GIT_REMOTE_NAME}.url"], cwd=self.cwd
        )
        if result.is_failure:
            return None
        return result.stdout.strip() or None

    def set_origin_url(self, url: str) -> None:
        """
        Point origin at a new URL.

        Raises:
            ToolError: If git remote set-url fails
        """
        self.runner.run(
            ["git", "remote", "set-url", GIT_REMOTE_NAME, url], cwd=self.cwd
        ).raise_for_status("Failed to update remote URL")

    def run(self, prompter: Prompter) -> StepResult:
        """Inspect origin and convert it after confirmation."""
        if not self.is_inside_work_tree():
            self.logger.note(
                "Tip: run sshsetup inside a Git repository to switch its remote to SSH."
            )
            return StepResult.skipped(STEP_NAME, "Not inside a Git repository")

        current_url = self.get_origin_url()
        if not current_url:
            self.logger.note(f"No '{GIT_REMOTE_NAME}' remote configured, nothing to convert.")
            return StepResult.skipped(STEP_NAME, "No origin remote")

        if is_ssh_url(current_url):
            self.logger.note(f"Remote already uses SSH: {current_url}")
            return StepResult.skipped(STEP_NAME, "Already SSH")

        ssh_url = convert_to_ssh_url(current_url)
        if not ssh_url:
            self.logger.note(f"Unrecognized remote URL format, skipping: {current_url}")
            return StepResult.skipped(STEP_NAME, "Unrecognized URL")

        self.logger.info(f"Current remote: {current_url}")
        if not prompter.confirm("Convert current repository's remote URL to SSH?", default=True):
            return StepResult.skipped(STEP_NAME, "Declined")

        try:
            self.set_origin_url(ssh_url)
        except ToolError as e:
            self.logger.warning(e.message)
            return StepResult.warning(STEP_NAME, e.message)

        self.logger.success("Repository remote URL converted to SSH successfully!")
        self.logger.info(f"New URL: {ssh_url}")
        return StepResult.success(STEP_NAME, ssh_url)
