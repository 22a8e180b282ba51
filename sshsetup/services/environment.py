"""Environment probing: platform and tool availability."""

import sys

from sshsetup.models.context import Platform
from sshsetup.services.tool_runner import ToolRunner


class EnvironmentProber:
    """Detects which external tools are usable."""

    def __init__(self, runner: ToolRunner):
        self.runner = runner

    @staticmethod
    def detect_platform() -> Platform:
        """Operating system family of the running process."""
        return Platform.from_sys_platform(sys.platform)

    def detect_tool(self, name: str) -> bool:
        """Check if a tool is installed. Absence is a normal result."""
        return self.runner.which(name)

    def detect_github_auth(self) -> bool:
        """True only if the GitHub CLI is installed and authenticated."""
        if not self.detect_tool("gh"):
            return False
        return self.runner.run(["gh", "auth", "status"]).is_success
