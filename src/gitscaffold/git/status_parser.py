"""Porcelain status parser — classifies ``git status --porcelain`` lines.

Two rule sets are available:

``classic``
    Changed files are lines whose index column holds a non-deletion state
    (``M T A R C U``). Deleted files are `` D`` or ``<letter>D`` lines with a
    path made of path-safe characters. Worktree-only changes (`` M``,
    ``??``, ``!!``) and index deletions (``D ``) are not reported.

``porcelain``
    Every non-clean entry is reported: a ``D`` in either column makes it
    deleted, anything else makes it changed.

Lines that match no rule (clean entries, garbage) are skipped.
"""

from __future__ import annotations

import re
from typing import Generator, List, Set, Tuple, Union

from loguru import logger

from gitscaffold.git.models import StatusEntry, StatusRules

# --- Classic rules ---

_DELETED_RE = re.compile(r"^(?:\sD|[A-Z]D)\s+([A-Za-z0-9/_\-.]*)$")
_CHANGED_RE = re.compile(r"^[MTARCU][A-Z?! ]\s+(.*)$")

# --- Completion listing ---

_STATUS_FILE_RE = re.compile(r"^[MARCU? ][MARCU? ]\s+(.*)$")


def _split_lines(raw_status: str) -> List[str]:
    """Split on ``\\n``, dropping CRs and empty lines."""
    lines = []
    for line in raw_status.split("\n"):
        line = line.rstrip("\r")
        if line:
            lines.append(line)
    return lines


class StatusParser:
    """Parse porcelain status text into typed entries and path lists.

    Usage::

        parser = StatusParser(status_text)
        changed, deleted = parser.changes()
    """

    def __init__(
        self,
        raw_status: str,
        rules: Union[StatusRules, str] = StatusRules.CLASSIC,
    ) -> None:
        self._lines = _split_lines(raw_status)
        self.rules = StatusRules(rules)

    def entries(self) -> Generator[StatusEntry, None, None]:
        """Yield a StatusEntry for every well-formed line."""
        for line in self._lines:
            entry = StatusEntry.from_line(line)
            if entry is None:
                logger.debug(f"Skipping malformed status line: {line!r}")
                continue
            yield entry

    def changes(self) -> Tuple[List[str], List[str]]:
        """Return ``(changed, deleted)`` in first-seen order."""
        if self.rules is StatusRules.PORCELAIN:
            return self._porcelain_changes()
        return self._classic_changes()

    def status_files(self) -> Set[str]:
        """Distinct paths for shell completion; deleted entries never appear."""
        files: Set[str] = set()
        for line in self._lines:
            m = _STATUS_FILE_RE.match(line)
            if m is None:
                logger.debug(f"Unexpected line in git status: {line!r}")
                continue
            files.add(m.group(1))
        return files

    def _classic_changes(self) -> Tuple[List[str], List[str]]:
        changed: List[str] = []
        deleted: List[str] = []
        for line in self._lines:
            # Deleted rule first so a line lands in at most one list
            if (dm := _DELETED_RE.match(line)):
                deleted.append(dm.group(1))
            elif (cm := _CHANGED_RE.match(line)):
                changed.append(cm.group(1))
            else:
                logger.debug(f"Status line matched no rule: {line!r}")
        return changed, deleted

    def _porcelain_changes(self) -> Tuple[List[str], List[str]]:
        changed: List[str] = []
        deleted: List[str] = []
        for entry in self.entries():
            if entry.is_clean:
                continue
            if "D" in entry.codes:
                deleted.append(entry.path)
            else:
                changed.append(entry.path)
        return changed, deleted


def parse_changes(
    raw_status: str,
    rules: Union[StatusRules, str] = StatusRules.CLASSIC,
) -> Tuple[List[str], List[str]]:
    """Return the ``(changed, deleted)`` path lists for *raw_status*."""
    return StatusParser(raw_status, rules).changes()


def parse_entries(raw_status: str) -> List[StatusEntry]:
    """Decode every well-formed status line."""
    return list(StatusParser(raw_status).entries())


def list_status_files(raw_status: str) -> Set[str]:
    """Return distinct non-deleted paths appearing in *raw_status*."""
    return StatusParser(raw_status).status_files()
