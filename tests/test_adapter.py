"""Tests for the git adapter and branch helpers."""

import subprocess
from pathlib import Path

import pytest

from conftest import FakeRunner
from gitscaffold.git.adapter import (
    CommandResult,
    GitAdapter,
    GitError,
    add_to_git_exclude,
    find_git_project_root,
)
from gitscaffold.git.branches import format_branch_name, parse_branch_list


class TestFakeRunner:
    def test_read_status(self, tmp_path: Path):
        runner = FakeRunner({("status",): CommandResult(0, " M a.rs\n")})
        assert GitAdapter(tmp_path, runner).read_status() == " M a.rs\n"
        assert runner.calls == [["status", "--porcelain"]]

    def test_read_status_failure(self, tmp_path: Path):
        runner = FakeRunner({("status",): CommandResult(128, "", "fatal: not a git repository")})
        with pytest.raises(GitError, match="not a git repository"):
            GitAdapter(tmp_path, runner).read_status()

    def test_commit_count(self, tmp_path: Path):
        runner = FakeRunner({("rev-list",): CommandResult(0, "57\n")})
        assert GitAdapter(tmp_path, runner).commit_count() == 57

    def test_commit_count_fresh_repo(self, tmp_path: Path):
        runner = FakeRunner({("rev-list",): CommandResult(128, "", "fatal: bad revision 'HEAD'")})
        assert GitAdapter(tmp_path, runner).commit_count() == 0

    def test_commit_failure(self, tmp_path: Path):
        runner = FakeRunner({("commit",): CommandResult(1, "nothing to commit")})
        with pytest.raises(GitError, match="Commit failed"):
            GitAdapter(tmp_path, runner).commit("msg")

    def test_push_args(self, tmp_path: Path):
        runner = FakeRunner()
        GitAdapter(tmp_path, runner).push(["origin", "HEAD"])
        assert runner.calls == [["push", "origin", "HEAD"]]

    def test_stash_and_pop(self, tmp_path: Path):
        runner = FakeRunner()
        adapter = GitAdapter(tmp_path, runner)
        adapter.stash()
        adapter.stash(pop=True)
        assert runner.calls == [["stash", "-u"], ["stash", "pop"]]

    def test_add_with_exclude_skips_missing(self, tmp_path: Path):
        (tmp_path / "README.md").write_text("x")
        runner = FakeRunner()
        unstaged = GitAdapter(tmp_path, runner).add_with_exclude(["README.md", "ghost.rs"])
        assert unstaged == ["README.md"]
        assert runner.calls == [["add", "--all"], ["restore", "--staged", "README.md"]]

    def test_branches(self, tmp_path: Path):
        runner = FakeRunner({("branch",): CommandResult(0, "  dev\n* master\n  feat/x\n")})
        assert GitAdapter(tmp_path, runner).branches() == ["dev", "master", "feat/x"]


class TestBranchHelpers:
    @pytest.mark.parametrize("branch", ["chore/branch_name", "feat/branch_name", "fix/branch_name", "test/branch_name"])
    def test_format_branch_name(self, branch):
        assert format_branch_name(["chore", "feat", "fix", "test"], branch) == "branch_name"

    def test_format_branch_name_untouched(self):
        assert format_branch_name(["feat"], "main") == "main"

    def test_parse_branch_list_skips_blank(self):
        assert parse_branch_list("* main\n\n") == ["main"]


class TestProjectRoot:
    def test_finds_root_from_subdir(self, tmp_git_repo: Path):
        sub = tmp_git_repo / "a" / "b"
        sub.mkdir(parents=True)
        assert find_git_project_root(sub) == tmp_git_repo.resolve()

    def test_not_a_repo(self, tmp_path: Path):
        with pytest.raises(GitError):
            find_git_project_root(tmp_path)


class TestGitExclude:
    def test_appends_once(self, tmp_git_repo: Path):
        assert add_to_git_exclude(tmp_git_repo, ["commit_message.md", ".commitignore"]) == [
            "commit_message.md",
            ".commitignore",
        ]
        assert add_to_git_exclude(tmp_git_repo, ["commit_message.md"]) == []
        content = (tmp_git_repo / ".git" / "info" / "exclude").read_text()
        assert content.splitlines().count("commit_message.md") == 1

    def test_no_git_dir(self, tmp_path: Path):
        assert add_to_git_exclude(tmp_path, ["x"]) == []


class TestRealGit:
    def test_status_and_commit_count(self, tmp_git_repo: Path):
        (tmp_git_repo / "new.py").write_text("x = 1\n")
        subprocess.run(["git", "add", "new.py"], cwd=tmp_git_repo, capture_output=True, check=True)
        adapter = GitAdapter(tmp_git_repo)
        assert "A  new.py" in adapter.read_status()
        assert adapter.commit_count() == 1
        assert adapter.current_branch() == "master"
