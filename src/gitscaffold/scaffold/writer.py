"""Commit-message scaffold — render and write ``commit_message.md``."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

from loguru import logger

from gitscaffold.config.schema import GitScaffoldConfig
from gitscaffold.git.adapter import GitAdapter
from gitscaffold.git.status_parser import parse_changes
from gitscaffold.ignore.matcher import IgnoreMatcher


class ScaffoldError(Exception):
    """Raised when the commit-message file cannot be used."""


@dataclass
class ScaffoldResult:
    """What ``build_scaffold`` wrote and why."""

    path: Path
    commit_number: int
    changed: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    excluded: List[str] = field(default_factory=list)
    text: str = ""


def render_scaffold(commit_number: int, changed: Sequence[str], deleted: Sequence[str]) -> str:
    """Render the scaffold document for the given paths."""
    parts = [f"[{commit_number}]\n\n\n"]
    for path in changed:
        parts.append(f"- `{path}`:\n\n\t\n\n")
    for path in deleted:
        parts.append(f"- `{path}`: deleted\n\n")
    return "".join(parts)


def ignore_files(workdir: Path, config: GitScaffoldConfig) -> List[Path]:
    """Ignore files consulted for exclusion, in load order."""
    files = []
    if config.scaffold.use_gitignore:
        files.append(workdir / config.scaffold.gitignore_file)
    files.append(workdir / config.scaffold.commitignore_file)
    return files


def build_scaffold(adapter: GitAdapter, workdir: Path, config: GitScaffoldConfig) -> ScaffoldResult:
    """Read git status, filter ignored paths and write the message file."""
    message_path = workdir / config.scaffold.message_file

    status = adapter.read_status()
    changed, deleted = parse_changes(status, config.status.rules)

    try:
        matcher = IgnoreMatcher.from_files(*ignore_files(workdir, config))
    except (OSError, UnicodeDecodeError) as exc:
        raise ScaffoldError(f"Cannot read ignore file: {exc}") from exc
    kept = matcher.filter(changed)
    excluded = [p for p in changed if p not in kept]

    commit_number = adapter.commit_count() + 1
    text = render_scaffold(commit_number, kept, deleted)
    try:
        message_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ScaffoldError(f"Cannot write {message_path.name}: {exc}") from exc
    logger.debug(
        f"Wrote {message_path}: {len(kept)} changed, {len(deleted)} deleted, {len(excluded)} excluded"
    )

    return ScaffoldResult(
        path=message_path,
        commit_number=commit_number,
        changed=kept,
        deleted=deleted,
        excluded=excluded,
        text=text,
    )


def create_needed_files(workdir: Path, config: GitScaffoldConfig) -> List[Tuple[Path, bool]]:
    """Create the message file and commitignore file if missing.

    Returns ``(path, created)`` for each file.
    """
    results = []
    for name in (config.scaffold.message_file, config.scaffold.commitignore_file):
        path = workdir / name
        if path.exists():
            results.append((path, False))
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        results.append((path, True))
    return results


def read_commit_message(path: Path) -> str:
    """Return the commit message stored at *path*."""
    if not path.is_file():
        raise ScaffoldError(f"{path.name} not found.")
    try:
        message = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScaffoldError(f"Cannot read {path.name}: {exc}") from exc
    if not message.strip():
        raise ScaffoldError(f"{path.name} is empty.")
    return message
