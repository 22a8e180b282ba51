"""
sshsetup Exception Hierarchy

Clean exception hierarchy for consistent error handling across the CLI.
"""

from typing import Optional


class SSHSetupError(Exception):
    """Base exception for all sshsetup errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class PrerequisiteError(SSHSetupError):
    """Raised when a required tool is missing and cannot be installed."""

    pass


class KeyStoreError(SSHSetupError):
    """Raised when the SSH directory or key pair cannot be prepared."""

    pass


class ToolError(SSHSetupError):
    """Raised when an external tool invocation fails."""

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: Optional[int] = None,
        context: Optional[str] = None,
    ):
        self.command = command
        self.returncode = returncode
        super().__init__(message, context)
