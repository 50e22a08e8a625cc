"""Data models for porcelain status parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Characters git uses in the two porcelain v1 status columns.
STATUS_CODES = frozenset("MTARCUD?! ")


class Category(str, Enum):
    MODIFIED = "modified"
    ADDED = "added"
    RENAMED = "renamed"
    COPIED = "copied"
    UPDATED = "updated"  # unmerged
    UNTRACKED = "untracked"
    DELETED = "deleted"
    IGNORED = "ignored"
    UNKNOWN = "unknown"


class StatusRules(str, Enum):
    """Named rule sets for classifying status lines."""

    CLASSIC = "classic"
    PORCELAIN = "porcelain"


_CODE_CATEGORY = {
    "M": Category.MODIFIED,
    "T": Category.MODIFIED,  # type change
    "A": Category.ADDED,
    "R": Category.RENAMED,
    "C": Category.COPIED,
}


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single decoded line of ``git status --porcelain`` output."""

    index_state: str
    worktree_state: str
    path: str  # 'old -> new' kept verbatim for renames

    @classmethod
    def from_line(cls, line: str) -> Optional["StatusEntry"]:
        """Decode *line*, or return None when it is not a status line."""
        if len(line) < 4:
            return None
        index_state, worktree_state = line[0], line[1]
        if index_state not in STATUS_CODES or worktree_state not in STATUS_CODES:
            return None
        if not line[2].isspace():
            return None
        path = line[2:].lstrip()
        if not path:
            return None
        return cls(index_state=index_state, worktree_state=worktree_state, path=path)

    @property
    def codes(self) -> str:
        return self.index_state + self.worktree_state

    @property
    def is_clean(self) -> bool:
        return self.codes == "  "

    @property
    def category(self) -> Category:
        if "D" in self.codes:
            return Category.DELETED
        if self.codes == "??":
            return Category.UNTRACKED
        if self.codes == "!!":
            return Category.IGNORED
        if "U" in self.codes:
            return Category.UPDATED
        state = self.index_state if self.index_state != " " else self.worktree_state
        return _CODE_CATEGORY.get(state, Category.UNKNOWN)
