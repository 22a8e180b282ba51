"""sshsetup - first-time SSH key setup for Git."""

__version__ = "1.0.0"
