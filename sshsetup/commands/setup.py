"""sshsetup - Setup command"""

from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich_click import RichCommand

from sshsetup import __version__
from sshsetup.base import BaseCommand
from sshsetup.logger import Reporter, SetupLogger
from sshsetup.models.context import SetupContext
from sshsetup.models.results import StepResult
from sshsetup.prompts import Prompter, RichPrompter
from sshsetup.services import (
    EnvironmentProber,
    GitHubKeyUploader,
    GitIdentityConfigurator,
    KeyStoreManager,
    RemoteUrlRewriter,
    ToolRunner,
    check_git,
    check_ssh_keygen,
)
from sshsetup.ui_components import show_next_steps, show_summary


class SetupCommand(BaseCommand):
    """First-time SSH key setup, one step after another."""

    def __init__(
        self,
        context: SetupContext,
        runner: Optional[ToolRunner] = None,
        prompter: Optional[Prompter] = None,
        logger: Optional[Reporter] = None,
        console: Optional[Console] = None,
        verbose: bool = False,
    ):
        super().__init__(verbose=verbose, logger=logger, console=console)
        self.context = context
        self.runner = runner or ToolRunner(self.logger)
        self.prompter = prompter or RichPrompter(self.console)
        self.prober = EnvironmentProber(self.runner)
        self.results: List[StepResult] = []

    def check_prerequisites(self) -> None:
        """Fatal checks, run before anything on disk changes."""
        self.logger.step("Checking prerequisites")
        check_ssh_keygen(self.context, self.prober, self.runner, self.logger)
        check_git(self.context, self.prober, self.logger)
        self.results.append(StepResult.success("Prerequisites", self.context.platform.label))

    def prepare_key(self) -> None:
        self.logger.step("Preparing SSH key")
        key_store = KeyStoreManager(self.context, self.runner, self.logger)
        key_store.ensure_directory()
        generated = key_store.ensure_key_pair()
        self.results.append(
            StepResult.success(
                "SSH key",
                f"Generated {self.context.key_path}" if generated else f"Existing {self.context.key_path}",
            )
        )

        if key_store.copy_public_key_to_clipboard():
            self.results.append(StepResult.success("Clipboard", "Public key copied"))
        else:
            self.results.append(StepResult.warning("Clipboard", "Copy the key manually"))

    def configure_identity(self) -> None:
        self.logger.step("Checking Git identity")
        configurator = GitIdentityConfigurator(self.runner, self.logger, cwd=self.context.cwd)
        self.results.append(configurator.ensure_identity(self.prompter))

    def upload_to_github(self) -> None:
        self.logger.step("GitHub")
        uploader = GitHubKeyUploader(self.context, self.runner, self.prober, self.logger)
        self.results.append(uploader.run(self.prompter))

    def convert_remote(self) -> None:
        self.logger.step("Repository remote")
        rewriter = RemoteUrlRewriter(self.runner, self.logger, cwd=self.context.cwd)
        self.results.append(rewriter.run(self.prompter))

    def execute(self) -> None:
        """Execute the setup flow."""
        self.show_header(
            title="SSH Key Setup",
            subtitle="Generate an ED25519 key and wire it into Git",
            details={"Platform": self.context.platform.label, "Key": self.context.key_path},
        )

        self.check_prerequisites()
        self.prepare_key()
        show_next_steps(self.console)
        self.console.print()

        self.configure_identity()
        self.upload_to_github()
        self.convert_remote()

        show_summary(self.results, self.console)
        self.console.print()
        self.print_success("SSH setup complete!")


@click.command(cls=RichCommand)
@click.option("-v", "--verbose", is_flag=True, help="Show every command and its output")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write a log of this run to FILE",
)
@click.version_option(version=__version__)
def setup(verbose: bool, log_file: Optional[Path]):
    """
    Set up an SSH key for Git hosting

    \b
    Steps:
    - Check for ssh-keygen and git (installs OpenSSH on Windows)
    - Generate ~/.ssh/id_ed25519 if it does not exist
    - Copy the public key to the clipboard
    - Fill in a missing global Git user.name / user.email
    - Upload the key with the GitHub CLI (if logged in)
    - Switch the current repository's origin from HTTPS to SSH
    """
    console = Console()
    logger = SetupLogger(verbose=verbose, log_path=log_file, output=console)
    cmd = SetupCommand(
        SetupContext.detect(), logger=logger, console=console, verbose=verbose
    )
    cmd.run()
