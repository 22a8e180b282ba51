"""Tests for sshsetup/services/git_identity.py"""

from __future__ import annotations

from conftest import FakePrompter, FakeRunner
from sshsetup.models.results import ResultStatus
from sshsetup.services.git_identity import GitIdentityConfigurator


def _runner(name=None, email=None, local_email=None):
    runner = FakeRunner(tools={"git"})
    for key, value in (("user.name", name), ("user.email", email)):
        if value is None:
            runner.on("git", "config", "--global", "--get", key, returncode=1)
        else:
            runner.on("git", "config", "--global", "--get", key, stdout=f"{value}\n")
    if local_email:
        runner.on("git", "config", "--get", "user.email", stdout=f"{local_email}\n")
    else:
        runner.on("git", "config", "--get", returncode=1)
    return runner


def _writes(runner):
    return [c["args"][3:] for c in runner.calls if c["args"][:3] == ["git", "config", "--global"]
            and c["args"][3] != "--get"]


class TestGitIdentity:
    def test_read_config_missing_is_none(self, reporter):
        assert GitIdentityConfigurator(_runner(), reporter).read_config("user.name") is None

    def test_both_present_is_silent_noop(self, reporter):
        runner = _runner(name="Alice", email="alice@example.com")
        prompter = FakePrompter()

        result = GitIdentityConfigurator(runner, reporter).ensure_identity(prompter)

        assert result.status is ResultStatus.SKIPPED
        assert prompter.asked == []
        assert _writes(runner) == []
        assert reporter.messages == []

    def test_only_missing_email_is_prompted_and_written(self, reporter):
        runner = _runner(name="Alice")
        prompter = FakePrompter(answers={"Git email": "alice@example.com"})

        result = GitIdentityConfigurator(runner, reporter).ensure_identity(prompter)

        assert result.is_success
        assert [q for q, _ in prompter.asked] == ["Git email"]
        assert _writes(runner) == [["user.email", "alice@example.com"]]

    def test_both_missing_prompts_for_both(self, reporter):
        runner = _runner()
        prompter = FakePrompter(answers={"Git user name": "Bob", "Git email": "bob@example.com"})

        GitIdentityConfigurator(runner, reporter).ensure_identity(prompter)

        assert [q for q, _ in prompter.asked] == ["Git user name", "Git email"]
        assert _writes(runner) == [["user.name", "Bob"], ["user.email", "bob@example.com"]]

    def test_effective_value_is_offered_as_default(self, reporter):
        runner = _runner(name="Alice", local_email="alice@work.example")
        prompter = FakePrompter()

        GitIdentityConfigurator(runner, reporter).ensure_identity(prompter)

        assert prompter.asked == [("Git email", "alice@work.example")]
        assert _writes(runner) == [["user.email", "alice@work.example"]]

    def test_blank_answer_writes_nothing(self, reporter):
        runner = _runner(name="Alice")

        result = GitIdentityConfigurator(runner, reporter).ensure_identity(FakePrompter())

        assert result.status is ResultStatus.SKIPPED
        assert _writes(runner) == []

    def test_write_failure_is_a_warning(self, reporter):
        runner = _runner(name="Alice")
        runner.on("git", "config", "--global", "user.email", returncode=255,
                  stderr="error: could not lock config file")
        prompter = FakePrompter(answers={"Git email": "alice@example.com"})

        result = GitIdentityConfigurator(runner, reporter).ensure_identity(prompter)

        assert result.status is ResultStatus.WARNING
        assert reporter.contains("Failed to set user.email", "warning")
