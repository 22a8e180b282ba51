"""
Setup Context Model

Immutable facts about the running environment, computed once at startup.
"""

import socket
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from sshsetup.constants import KEY_FILE_NAME, PUBLIC_KEY_SUFFIX, SSH_DIR_NAME


class Platform(Enum):
    """Operating system family."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"

    @classmethod
    def from_sys_platform(cls, value: str) -> "Platform":
        """Map a ``sys.platform`` string to a platform family."""
        if value.startswith(("win32", "cygwin")):
            return cls.WINDOWS
        if value == "darwin":
            return cls.MACOS
        return cls.LINUX

    @property
    def label(self) -> str:
        return {"windows": "Windows", "macos": "macOS", "linux": "Linux"}[self.value]


@dataclass(frozen=True)
class SetupContext:
    """Read-only configuration shared by every setup step."""

    platform: Platform
    ssh_dir: Path
    cwd: Path
    hostname: str = "localhost"

    @property
    def key_path(self) -> Path:
        """Private key location."""
        return self.ssh_dir / KEY_FILE_NAME

    @property
    def public_key_path(self) -> Path:
        """Public key location (private key path plus .pub)."""
        return self.ssh_dir / f"{KEY_FILE_NAME}{PUBLIC_KEY_SUFFIX}"

    @property
    def is_windows(self) -> bool:
        return self.platform is Platform.WINDOWS

    @classmethod
    def detect(
        cls, home: Optional[Path] = None, cwd: Optional[Path] = None
    ) -> "SetupContext":
        """
        Build the context from the current process environment.

        Args:
            home: Home directory override (defaults to the user's home)
            cwd: Working directory override (defaults to the process cwd)

        Returns:
            SetupContext instance
        """
        home = home or Path.home()
        return cls(
            platform=Platform.from_sys_platform(sys.platform),
            ssh_dir=home / SSH_DIR_NAME,
            cwd=cwd or Path.cwd(),
            hostname=socket.gethostname() or "localhost",
        )

    def __repr__(self) -> str:
        return f"SetupContext(platform={self.platform.value}, ssh_dir={self.ssh_dir})"
