"""
sshsetup Services Layer

External tool operations used by the setup flow.
"""

from .tool_runner import ToolRunner
from .environment import EnvironmentProber
from .prerequisites import OpenSSHInstaller, InstallState, check_git, check_ssh_keygen
from .key_store import KeyStoreManager
from .git_identity import GitIdentityConfigurator
from .github_upload import GitHubKeyUploader
from .remote_url import RemoteUrlRewriter

__all__ = [
    "ToolRunner",
    "EnvironmentProber",
    "OpenSSHInstaller",
    "InstallState",
    "check_git",
    "check_ssh_keygen",
    "KeyStoreManager",
    "GitIdentityConfigurator",
    "GitHubKeyUploader",
    "RemoteUrlRewriter",
]
