"""
Prerequisite checks

Makes sure ssh-keygen and git are available before anything on disk is
touched. On Windows the OpenSSH client capability is installed on demand.
"""

from enum import Enum

from sshsetup.constants import (
    GIT_INSTALL_HINTS,
    OPENSSH_INSTALL_COMMAND,
    OPENSSH_INSTALL_HINTS,
    OPENSSH_INSTALLED_STATE,
    OPENSSH_QUERY_COMMAND,
)
from sshsetup.exceptions import PrerequisiteError
from sshsetup.logger import Reporter
from sshsetup.models.context import SetupContext
from sshsetup.services.environment import EnvironmentProber
from sshsetup.services.tool_runner import ToolRunner


class InstallState(Enum):
    """Progress of the Windows OpenSSH client installation."""

    NOT_CHECKED = "not_checked"
    ALREADY_INSTALLED = "already_installed"
    INSTALLING = "installing"
    SUCCESS = "success"
    FAILED = "failed"


class OpenSSHInstaller:
    """Installs the OpenSSH client capability on Windows."""

    def __init__(self, runner: ToolRunner, logger: Reporter):
        self.runner = runner
        self.logger = logger
        self.state = InstallState.NOT_CHECKED

    def is_installed(self) -> bool:
        """Query the capability store. Any failure counts as not installed."""
        result = self.runner.run(OPENSSH_QUERY_COMMAND)
        return result.is_success and result.stdout.strip() == OPENSSH_INSTALLED_STATE

    def ensure(self) -> InstallState:
        """
        Install the OpenSSH client unless it is already present.

        Returns:
            Final InstallState (ALREADY_INSTALLED or SUCCESS)

        Raises:
            PrerequisiteError: If the installation fails
        """
        if self.is_installed():
            self.state = InstallState.ALREADY_INSTALLED
            return self.state

        self.state = InstallState.INSTALLING
        self.logger.info("Installing OpenSSH...")
        result = self.runner.run(OPENSSH_INSTALL_COMMAND)

        if result.is_failure:
            self.state = InstallState.FAILED
            raise PrerequisiteError(
                f"Failed to install OpenSSH automatically: {result.error_detail}",
                context=(
                    "Please install OpenSSH manually:\n"
                    "1. Open PowerShell as Administrator\n"
                    f"2. Run: {OPENSSH_INSTALL_HINTS['windows']}"
                ),
            )

        self.state = InstallState.SUCCESS
        self.logger.success("OpenSSH installed successfully!")
        return self.state


def check_ssh_keygen(
    context: SetupContext,
    prober: EnvironmentProber,
    runner: ToolRunner,
    logger: Reporter,
) -> None:
    """
    Ensure ssh-keygen is usable.

    Raises:
        PrerequisiteError: If ssh-keygen is missing and cannot be installed
    """
    if prober.detect_tool("ssh-keygen"):
        logger.success("ssh-keygen found")
        return

    if not context.is_windows:
        raise PrerequisiteError(
            "ssh-keygen not found!",
            context=(
                "Please install OpenSSH:\n"
                f"Run: {OPENSSH_INSTALL_HINTS[context.platform.value]}"
            ),
        )

    installer = OpenSSHInstaller(runner, logger)
    if installer.ensure() is InstallState.ALREADY_INSTALLED:
        raise PrerequisiteError(
            "OpenSSH is installed but ssh-keygen is not in PATH",
            context="Try restarting your terminal or computer",
        )


def check_git(context: SetupContext, prober: EnvironmentProber, logger: Reporter) -> None:
    """
    Ensure git is installed.

    Raises:
        PrerequisiteError: If git is missing
    """
    if prober.detect_tool("git"):
        logger.success("git found")
        return

    raise PrerequisiteError(
        "git not found!",
        context=(
            "Please install Git:\n"
            f"Run: {GIT_INSTALL_HINTS[context.platform.value]}"
        ),
    )
