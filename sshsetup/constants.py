"""
sshsetup Constants

Centralized constants for paths, external commands and install hints.
"""

# SSH key configuration
SSH_DIR_NAME = ".ssh"
KEY_ALGORITHM = "ed25519"
KEY_FILE_NAME = "id_ed25519"
PUBLIC_KEY_SUFFIX = ".pub"
SSH_DIR_MODE = 0o700

# Git configuration
GIT_USER_NAME_KEY = "user.name"
GIT_USER_EMAIL_KEY = "user.email"
GIT_REMOTE_NAME = "origin"

# Remote URL forms
SSH_URL_PREFIXES = ("git@", "ssh://")

# Clipboard commands (public key is fed on stdin)
CLIPBOARD_COMMANDS = {
    "windows": ["clip"],
    "macos": ["pbcopy"],
    "linux": ["xclip", "-selection", "clipboard"],
}

# Windows OpenSSH capability
OPENSSH_CAPABILITY = "OpenSSH.Client~~~~0.0.1.0"
OPENSSH_QUERY_COMMAND = [
    "powershell.exe",
    "-Command",
    "Get-WindowsCapability -Online | Where-Object Name -like 'OpenSSH.Client*' "
    "| Select-Object -ExpandProperty State",
]
OPENSSH_INSTALL_COMMAND = [
    "powershell.exe",
    "-Command",
    f"Add-WindowsCapability -Online -Name {OPENSSH_CAPABILITY}",
]
OPENSSH_INSTALLED_STATE = "Installed"

# Manual install hints by platform
OPENSSH_INSTALL_HINTS = {
    "windows": f"Add-WindowsCapability -Online -Name {OPENSSH_CAPABILITY}",
    "macos": "brew install openssh",
    "linux": "sudo apt-get install openssh-client",
}
GIT_INSTALL_HINTS = {
    "windows": "winget install --id Git.Git -e",
    "macos": "brew install git",
    "linux": "sudo apt-get install git",
}

# Key hosting providers
GITHUB_SSH_KEYS_URL = "https://github.com/settings/ssh/new"
GITLAB_SSH_KEYS_URL = "https://gitlab.com/-/profile/keys"
GITHUB_CLI_URL = "https://cli.github.com"

# Log configuration
LOG_DATE_FORMAT = "%Y-%m-%d"
LOG_TIME_FORMAT = "%H:%M:%S"
