"""Git interface layer — adapter, status parsing, models."""

from gitscaffold.git.adapter import (
    CommandResult,
    GitAdapter,
    GitError,
    add_to_git_exclude,
    find_git_project_root,
    subprocess_runner,
)
from gitscaffold.git.branches import format_branch_name, parse_branch_list
from gitscaffold.git.models import Category, StatusEntry, StatusRules
from gitscaffold.git.status_parser import (
    StatusParser,
    list_status_files,
    parse_changes,
    parse_entries,
)

__all__ = [
    "Category",
    "CommandResult",
    "GitAdapter",
    "GitError",
    "StatusEntry",
    "StatusParser",
    "StatusRules",
    "add_to_git_exclude",
    "find_git_project_root",
    "format_branch_name",
    "list_status_files",
    "parse_branch_list",
    "parse_changes",
    "parse_entries",
    "subprocess_runner",
]
