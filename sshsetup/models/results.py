"""
Result Models

Dataclass models for external tool invocations and step outcomes.
"""

from dataclasses import dataclass
from enum import Enum

from sshsetup.exceptions import ToolError


class ResultStatus(Enum):
    """Status of a setup step."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    WARNING = "warning"


@dataclass
class StepResult:
    """Outcome of one setup step, shown in the final summary."""

    step: str
    status: ResultStatus
    message: str = ""

    @property
    def is_success(self) -> bool:
        """Check if the step completed."""
        return self.status == ResultStatus.SUCCESS

    @classmethod
    def success(cls, step: str, message: str = "") -> "StepResult":
        return cls(step, ResultStatus.SUCCESS, message)

    @classmethod
    def skipped(cls, step: str, message: str = "") -> "StepResult":
        return cls(step, ResultStatus.SKIPPED, message)

    @classmethod
    def warning(cls, step: str, message: str = "") -> "StepResult":
        return cls(step, ResultStatus.WARNING, message)

    def __repr__(self) -> str:
        return f"StepResult(step={self.step}, status={self.status.value})"


@dataclass
class ExecutionResult:
    """Result of an external tool invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    command: str = ""

    @property
    def is_success(self) -> bool:
        """Check if execution succeeded."""
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        """Check if execution failed."""
        return self.returncode != 0

    @property
    def output(self) -> str:
        """Get combined output (stdout + stderr)."""
        return f"{self.stdout}\n{self.stderr}".strip()

    @property
    def error_detail(self) -> str:
        """Best available description of a failure."""
        detail = self.stderr.strip() or self.stdout.strip()
        if detail:
            return detail
        return f"'{self.command}' exited with code {self.returncode}"

    def raise_for_status(self, prefix: str) -> "ExecutionResult":
        """
        Raise ToolError if the invocation failed.

        Args:
            prefix: Description of the operation, prepended to the error

        Returns:
            self, for chaining on success

        Raises:
            ToolError: If returncode is non-zero
        """
        if self.is_failure:
            raise ToolError(
                f"{prefix}: {self.error_detail}",
                command=self.command,
                returncode=self.returncode,
            )
        return self

    def __repr__(self) -> str:
        return f"ExecutionResult(returncode={self.returncode}, command='{self.command[:50]}')"
