"""Tests for the interactive branch switcher."""

from pathlib import Path

import pytest

from conftest import FakePrompter, FakeRunner
from gitscaffold.git.adapter import CommandResult, GitAdapter, GitError
from gitscaffold.prompts import switch_interactively


def _adapter(tmp_path: Path, branches: str = "  dev\n* master\n") -> tuple[GitAdapter, FakeRunner]:
    runner = FakeRunner({("branch",): CommandResult(0, branches)})
    return GitAdapter(tmp_path, runner), runner


class TestSwitch:
    def test_switch_to_selected(self, tmp_path: Path):
        adapter, runner = _adapter(tmp_path)
        prompter = FakePrompter(choice=0)
        assert switch_interactively(adapter, prompter) == "dev"
        assert prompter.selected_from == ["dev", "master"]
        assert runner.calls[-1] == ["switch", "dev"]

    def test_declined(self, tmp_path: Path):
        adapter, runner = _adapter(tmp_path)
        assert switch_interactively(adapter, FakePrompter(choice=1, confirm=False)) is None
        assert ["switch", "master"] not in runner.calls

    def test_stash_and_pop(self, tmp_path: Path):
        adapter, runner = _adapter(tmp_path)
        switch_interactively(adapter, FakePrompter(choice=1), stash=True, apply_stash=True)
        assert runner.calls == [
            ["stash", "-u"],
            ["branch"],
            ["switch", "master"],
            ["stash", "pop"],
        ]

    def test_no_branches(self, tmp_path: Path):
        adapter, _ = _adapter(tmp_path, branches="")
        with pytest.raises(GitError):
            switch_interactively(adapter, FakePrompter())

    def test_switch_failure_propagates(self, tmp_path: Path):
        runner = FakeRunner({
            ("branch",): CommandResult(0, "* master\n  dev\n"),
            ("switch",): CommandResult(1, "", "error: local changes would be overwritten"),
        })
        with pytest.raises(GitError, match="Failed to switch branch"):
            switch_interactively(GitAdapter(tmp_path, runner), FakePrompter(choice=1))
