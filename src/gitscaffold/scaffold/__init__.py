"""Commit-message scaffold generation."""

from gitscaffold.scaffold.writer import (
    ScaffoldError,
    ScaffoldResult,
    build_scaffold,
    create_needed_files,
    read_commit_message,
    render_scaffold,
)

__all__ = [
    "ScaffoldError",
    "ScaffoldResult",
    "build_scaffold",
    "create_needed_files",
    "read_commit_message",
    "render_scaffold",
]
