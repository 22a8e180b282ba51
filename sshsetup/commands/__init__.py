"""sshsetup CLI commands."""
