"""Shared test fixtures — status output, fake runner/prompter, temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pytest

from gitscaffold.git.adapter import CommandResult


@pytest.fixture
def status_changed_fixture() -> str:
    """Ten porcelain lines covering every status code."""
    return "\n".join([
        " M src/git_related.rs",
        "M  src/main.rs",
        "AM src/utils.rs",
        "?? src/README.md",
        "UU src/bla.rs",
        "!! src/bli.rs",
        "DD src/blo.rs",
        "R  src/blu.rs",
        "C  src/bly.rs",
        "U  src/pae.rs",
    ])


@pytest.fixture
def status_deleted_fixture() -> str:
    """The same shape with deletions in both columns."""
    return "\n".join([
        " D src/git_related.rs",
        "D  src/main.rs",
        "AD src/utils.rs",
        "?? src/README.md",
        "UU src/bla.rs",
        "!! src/bli.rs",
        "DD src/blo.rs",
        "R  src/blu.rs",
        "C  src/bly.rs",
        "U  src/pae.rs",
    ])


class FakeRunner:
    """Records git invocations and replays canned results keyed by subcommand."""

    def __init__(self, responses: Dict[Tuple[str, ...], CommandResult] | None = None) -> None:
        self.responses = responses or {}
        self.calls: List[List[str]] = []

    def __call__(self, args: Sequence[str], cwd: Path) -> CommandResult:
        args = list(args)
        self.calls.append(args)
        # Longest matching prefix wins
        for size in range(len(args), 0, -1):
            key = tuple(args[:size])
            if key in self.responses:
                return self.responses[key]
        return CommandResult(0, "")


class FakePrompter:
    def __init__(self, choice: int = 0, confirm: bool = True) -> None:
        self.choice = choice
        self.answer = confirm
        self.selected_from: List[str] = []

    def select(self, prompt: str, options: Sequence[str], default: int = 0) -> int:
        self.selected_from = list(options)
        return self.choice

    def confirm(self, prompt: str, default: bool = True) -> bool:
        return self.answer


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", "-b", "master", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
