""".gitignore / .commitignore exclusion matching.

Ignore file format:
  - One literal path or directory prefix per line.
  - Lines starting with ``#`` are comments; blank lines are skipped.
  - No glob or ``**`` support: ``data/`` excludes ``data/x/y.md`` because
    ``data`` is an ancestor directory, not because of pattern matching.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable, List, Set, Union

from loguru import logger

PathLike = Union[str, Path]


def load_ignore_entries(path: PathLike) -> Set[str]:
    """Load the entries of an ignore file; a missing file yields an empty set.

    An existing but unreadable file raises OSError.
    """
    path = Path(path)
    if not path.exists():
        return set()

    entries: Set[str] = set()
    for raw in path.read_text(encoding="utf-8").split("\n"):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        entries.add(line)
    logger.debug(f"Loaded {len(entries)} ignore entries from {path}")
    return entries


def load_exclusion_set(*paths: PathLike) -> Set[str]:
    """Union of the entries of every file in *paths*."""
    exclusions: Set[str] = set()
    for path in paths:
        exclusions |= load_ignore_entries(path)
    return exclusions


def is_under(candidate_path: str, boundary_path: str) -> bool:
    """Return True if *boundary_path* is an ancestor directory of *candidate_path*."""
    if not boundary_path.strip():
        return False
    boundary = PurePosixPath(boundary_path)
    current = PurePosixPath(candidate_path).parent
    while str(current) not in (".", "", "/"):
        if current == boundary:
            return True
        current = current.parent
    return False


def is_excluded(path: str, exclusions: Iterable[str]) -> bool:
    """True when *path* is listed itself or lives under a listed directory."""
    exclusions = exclusions if isinstance(exclusions, (set, frozenset)) else set(exclusions)
    # trailing slash only marks a directory, it does not change the match
    if path.rstrip("/") in {rule.rstrip("/") for rule in exclusions}:
        return True
    return any(is_under(path, rule) for rule in exclusions)


def filter_excluded(paths: Iterable[str], exclusions: Iterable[str]) -> List[str]:
    """Drop excluded entries from *paths*, keeping order."""
    exclusions = set(exclusions)
    return [p for p in paths if not is_excluded(p, exclusions)]


class IgnoreMatcher:
    """An exclusion set loaded from one or more ignore files."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self.entries: Set[str] = set(entries)

    @classmethod
    def from_files(cls, *paths: PathLike) -> "IgnoreMatcher":
        return cls(load_exclusion_set(*paths))

    def is_excluded(self, path: str) -> bool:
        return is_excluded(path, self.entries)

    def filter(self, paths: Iterable[str]) -> List[str]:
        kept = []
        for path in paths:
            if self.is_excluded(path):
                logger.debug(f"Excluding {path} from commit message")
                continue
            kept.append(path)
        return kept

    def __len__(self) -> int:
        return len(self.entries)
