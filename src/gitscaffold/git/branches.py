"""Branch-name helpers."""

from __future__ import annotations

from typing import Iterable, List


def parse_branch_list(output: str) -> List[str]:
    """Parse ``git branch`` output into plain branch names."""
    branches = []
    for line in output.splitlines():
        name = line.removeprefix("* ").removeprefix("  ").strip()
        if name:
            branches.append(name)
    return branches


def format_branch_name(commit_types: Iterable[str], branch: str) -> str:
    """Strip every ``<commit_type>/`` prefix from *branch*.

    >>> format_branch_name(["feat", "fix"], "feat/branch-name")
    'branch-name'
    """
    formatted = branch
    for commit_type in commit_types:
        formatted = formatted.replace(f"{commit_type}/", "")
    return formatted
