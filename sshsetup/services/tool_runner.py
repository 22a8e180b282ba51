"""Runner for external tool invocations."""

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from sshsetup.logger import Reporter
from sshsetup.models.results import ExecutionResult

# Exit code reported when the executable itself cannot be started
COMMAND_NOT_FOUND = 127


class ToolRunner:
    """Service for running external programs."""

    def __init__(self, logger: Optional[Reporter] = None):
        """
        Initialize tool runner.

        Args:
            logger: Reporter that records commands and their output
        """
        self.logger = logger

    def which(self, name: str) -> bool:
        """Check whether an executable is on PATH."""
        return shutil.which(name) is not None

    def run(
        self,
        args: List[str],
        cwd: Optional[Path] = None,
        input_text: Optional[str] = None,
    ) -> ExecutionResult:
        """
        Run an external program and capture its output.

        Non-zero exits are returned, not raised; callers decide whether a
        failure is fatal via ExecutionResult.raise_for_status.

        Args:
            args: Program and arguments
            cwd: Working directory
            input_text: Text fed to the program's stdin

        Returns:
            ExecutionResult with execution details
        """
        command = subprocess.list2cmdline(args)
        if self.logger:
            self.logger.log_command(command)

        try:
            result = subprocess.run(
                args,
                cwd=str(cwd) if cwd else None,
                input=input_text,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            return ExecutionResult(
                returncode=COMMAND_NOT_FOUND,
                stderr=f"Command not found: {args[0]} ({e})",
                command=command,
            )
        except OSError as e:
            return ExecutionResult(returncode=1, stderr=str(e), command=command)

        if self.logger:
            self.logger.log_output(result.stdout, "stdout")
            self.logger.log_output(result.stderr, "stderr")

        return ExecutionResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            command=command,
        )
