"""Tests for sshsetup/services/remote_url.py"""

from __future__ import annotations

import pytest

from conftest import FakePrompter, FakeRunner
from sshsetup.models.results import ResultStatus
from sshsetup.services.remote_url import (
    RemoteUrl,
    RemoteUrlRewriter,
    convert_to_ssh_url,
    is_ssh_url,
    parse_https_url,
    to_ssh_url,
)


# ──────────────────────────────────────────────────────────────────────────────
# parse_https_url / to_ssh_url
# ──────────────────────────────────────────────────────────────────────────────

class TestParseHttpsUrl:
    @pytest.mark.parametrize(
        "url",
        ["https://github.com/alice/proj", "https://github.com/alice/proj.git"],
    )
    def test_with_and_without_git_suffix(self, url):
        assert parse_https_url(url) == RemoteUrl("github.com", "alice", "proj")

    def test_converts_to_ssh_form(self):
        assert to_ssh_url(parse_https_url("https://gitlab.com/team/api.git")) == (
            "git@gitlab.com:team/api.git"
        )

    def test_repo_name_with_dots(self):
        assert parse_https_url("https://github.com/alice/my.site.git") == RemoteUrl(
            "github.com", "alice", "my.site"
        )

    @pytest.mark.parametrize(
        "url",
        [
            "git@github.com:a/b.git",
            "ftp://github.com/a/b.git",
            "http://github.com/a/b.git",
            "ssh://git@github.com/a/b.git",
            "https://github.com/alice",
            "https://github.com/alice/",
            "https://github.com//proj",
            "https://github.com/group/sub/proj.git",
            "https://user@github.com/alice/proj.git",
            "",
        ],
    )
    def test_not_convertible(self, url):
        assert parse_https_url(url) is None
        assert convert_to_ssh_url(url) is None

    def test_is_ssh_url(self):
        assert is_ssh_url("git@github.com:a/b.git")
        assert is_ssh_url("ssh://git@github.com/a/b.git")
        assert not is_ssh_url("https://github.com/a/b.git")


# ──────────────────────────────────────────────────────────────────────────────
# RemoteUrlRewriter
# ──────────────────────────────────────────────────────────────────────────────

def _repo_runner(origin_url=None):
    runner = FakeRunner(tools={"git"})
    runner.on("git", "rev-parse", "--is-inside-work-tree", stdout="true\n")
    if origin_url is None:
        runner.on("git", "config", "--get", "remote.origin.url", returncode=1)
    else:
        runner.on("git", "config", "--get", "remote.origin.url", stdout=f"{origin_url}\n")
    return runner


class TestRemoteUrlRewriter:
    def test_outside_repository_skips_with_tip(self, reporter, context):
        runner = FakeRunner(tools={"git"})
        runner.on("git", "rev-parse", returncode=128, stderr="fatal: not a git repository")
        prompter = FakePrompter()

        result = RemoteUrlRewriter(runner, reporter, cwd=context.cwd).run(prompter)

        assert result.status is ResultStatus.SKIPPED
        assert reporter.contains("Tip:", "note")
        assert prompter.confirmed == []
        assert runner.called("git", "config") == []

    def test_no_origin_is_nothing_to_convert(self, reporter):
        result = RemoteUrlRewriter(_repo_runner(None), reporter).run(FakePrompter())
        assert result.status is ResultStatus.SKIPPED
        assert reporter.contains("No 'origin' remote", "note")

    def test_already_ssh_is_left_alone(self, reporter):
        runner = _repo_runner("git@github.com:alice/proj.git")
        prompter = FakePrompter()

        result = RemoteUrlRewriter(runner, reporter).run(prompter)

        assert result.status is ResultStatus.SKIPPED
        assert reporter.contains("already uses SSH", "note")
        assert prompter.confirmed == []
        assert runner.called("git", "remote", "set-url") == []

    def test_unrecognized_url_is_reported(self, reporter):
        runner = _repo_runner("https://dev.azure.com/org/project/_git/repo")
        result = RemoteUrlRewriter(runner, reporter).run(FakePrompter())
        assert result.status is ResultStatus.SKIPPED
        assert reporter.contains("Unrecognized remote URL", "note")
        assert runner.called("git", "remote", "set-url") == []

    def test_accepted_conversion_rewrites_origin(self, reporter, context):
        runner = _repo_runner("https://github.com/alice/proj.git")
        prompter = FakePrompter(confirms=[True])

        result = RemoteUrlRewriter(runner, reporter, cwd=context.cwd).run(prompter)

        assert result.is_success
        [call] = runner.called("git", "remote", "set-url")
        assert call["args"] == ["git", "remote", "set-url", "origin", "git@github.com:alice/proj.git"]
        assert call["cwd"] == context.cwd
        assert reporter.contains("New URL: git@github.com:alice/proj.git", "info")
        assert prompter.confirmed[0][1] is True

    def test_declined_conversion_changes_nothing(self, reporter):
        runner = _repo_runner("https://github.com/alice/proj.git")
        result = RemoteUrlRewriter(runner, reporter).run(FakePrompter(confirms=[False]))
        assert result.status is ResultStatus.SKIPPED
        assert runner.called("git", "remote", "set-url") == []

    def test_set_url_failure_is_a_warning(self, reporter):
        runner = _repo_runner("https://github.com/alice/proj")
        runner.on("git", "remote", "set-url", returncode=2, stderr="error: could not lock config file")

        result = RemoteUrlRewriter(runner, reporter).run(FakePrompter(confirms=[True]))

        assert result.status is ResultStatus.WARNING
        assert reporter.contains("Failed to update remote URL: error: could not lock config file", "warning")
