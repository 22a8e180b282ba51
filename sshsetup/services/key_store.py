"""Key store: SSH directory, key pair and clipboard."""

import os

from sshsetup.constants import CLIPBOARD_COMMANDS, KEY_ALGORITHM, SSH_DIR_MODE
from sshsetup.exceptions import KeyStoreError, ToolError
from sshsetup.logger import Reporter
from sshsetup.models.context import SetupContext
from sshsetup.services.tool_runner import ToolRunner


class KeyStoreManager:
    """Service for the per-user SSH directory and the ED25519 key pair."""

    def __init__(self, context: SetupContext, runner: ToolRunner, logger: Reporter):
        """
        Initialize key store manager.

        Args:
            context: Setup context (paths, platform)
            runner: Runner for external tools
            logger: Reporter for progress messages
        """
        self.context = context
        self.runner = runner
        self.logger = logger

    def ensure_directory(self) -> bool:
        """
        Create the SSH directory if needed and restrict it to its owner.

        Permissions are only applied to a directory created here; an existing
        directory is left as the user configured it.

        Returns:
            True if the directory was created

        Raises:
            KeyStoreError: If the directory cannot be created
        """
        ssh_dir = self.context.ssh_dir
        created = not ssh_dir.exists()

        try:
            ssh_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise KeyStoreError(f"Failed to create .ssh directory: {e}")

        if not created:
            self.logger.note(f"SSH directory exists: {ssh_dir}")
            return False

        self.logger.success(f"Created SSH directory: {ssh_dir}")
        self._restrict_permissions()
        return True

    def _restrict_permissions(self) -> None:
        """Apply owner-only access. Failure is only a warning."""
        ssh_dir = self.context.ssh_dir

        if not self.context.is_windows:
            try:
                ssh_dir.chmod(SSH_DIR_MODE)
            except OSError as e:
                self.logger.warning(
                    f"Could not set optimal permissions on .ssh directory: {e}"
                )
            return

        username = os.environ.get("USERNAME", "")
        result = self.runner.run(
            [
                "icacls",
                str(ssh_dir),
                "/inheritance:r",
                "/grant:r",
                f"{username}:(OI)(CI)F",
            ]
        )
        if result.is_failure:
            self.logger.warning(
                "Could not set optimal permissions on .ssh directory: "
                f"{result.error_detail}"
            )

    def ensure_key_pair(self) -> bool:
        """
        Generate the key pair unless a private key already exists, then
        display the public key.

        Returns:
            True if a new key pair was generated

        Raises:
            KeyStoreError: If generation fails or the public key is unreadable
        """
        key_path = self.context.key_path
        generated = False

        if key_path.exists():
            self.logger.note(f"SSH key already exists at: {key_path}")
        else:
            self.logger.info(f"Generating new {KEY_ALGORITHM.upper()} SSH key...")
            result = self.runner.run(
                ["ssh-keygen", "-t", KEY_ALGORITHM, "-f", str(key_path), "-N", ""]
            )
            try:
                result.raise_for_status("ssh-keygen failed")
            except ToolError as e:
                raise KeyStoreError(f"Failed to generate SSH key: {e.message}")
            self.logger.success("SSH key generated successfully!")
            generated = True

        public_key = self.read_public_key()
        self.logger.info("Your public SSH key:")
        self.logger.show(public_key)
        return generated

    def read_public_key(self) -> str:
        """
        Read the public key file.

        Raises:
            KeyStoreError: If the file is missing or unreadable
        """
        try:
            return self.context.public_key_path.read_text(encoding="utf-8")
        except OSError as e:
            raise KeyStoreError(f"Failed to read public key: {e}")

    def copy_public_key_to_clipboard(self) -> bool:
        """
        Copy the public key to the system clipboard (best effort).

        Returns:
            True if the key was copied
        """
        command = CLIPBOARD_COMMANDS[self.context.platform.value]
        try:
            public_key = self.read_public_key()
        except KeyStoreError as e:
            self.logger.note(f"Note: Could not copy to clipboard automatically ({e})")
            return False

        result = self.runner.run(command, input_text=public_key)
        if result.is_failure:
            self.logger.note("Note: Could not copy to clipboard automatically")
            return False

        self.logger.success("Public key has been copied to your clipboard!")
        return True
