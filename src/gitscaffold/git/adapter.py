"""Git subprocess wrapper — status, add, commit, push, stash, switch."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from loguru import logger

from gitscaffold.git.branches import parse_branch_list


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single git invocation."""

    returncode: int
    stdout: str
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


Runner = Callable[[Sequence[str], Path], CommandResult]


def subprocess_runner(args: Sequence[str], cwd: Path, timeout: int = 30) -> CommandResult:
    """Run ``git <args>`` in *cwd*. Raises GitError if git cannot be run."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")
    return CommandResult(result.returncode, result.stdout, result.stderr)


class GitAdapter:
    """Thin wrapper issuing one git command per operation.

    The *runner* is injectable so callers (and tests) can supply canned
    output instead of spawning processes.
    """

    def __init__(self, workdir: Path, runner: Runner = subprocess_runner) -> None:
        self.workdir = Path(workdir)
        self._runner = runner

    def _run(self, *args: str, check: bool = True, error: Optional[str] = None) -> str:
        logger.debug(f"git {' '.join(args)}")
        result = self._runner(list(args), self.workdir)
        if check and not result.ok:
            stderr = result.stderr.strip()
            message = error or f"git {args[0]} failed"
            raise GitError(f"{message}: {stderr}" if stderr else message)
        return result.stdout

    # -- queries ---------------------------------------------------------------

    def read_status(self) -> str:
        """Return raw ``git status --porcelain`` output."""
        return self._run("status", "--porcelain", error="Failed to read git status")

    def current_branch(self) -> str:
        return self._run("rev-parse", "--abbrev-ref", "HEAD").strip()

    def branches(self) -> List[str]:
        return parse_branch_list(self._run("branch"))

    def commit_count(self) -> int:
        """Number of commits reachable from HEAD; 0 for a fresh repository."""
        out = self._run("rev-list", "--count", "HEAD", check=False)
        try:
            return int(out.strip())
        except ValueError:
            return 0

    # -- mutations -------------------------------------------------------------

    def add_with_exclude(self, excludes: Iterable[str]) -> List[str]:
        """Stage everything, then unstage *excludes*. Returns unstaged paths."""
        self._run("add", "--all", error="git add failed")
        unstaged = []
        for path in excludes:
            if not (self.workdir / path).exists():
                logger.debug(f"Exclude {path} does not exist, skipping")
                continue
            self._run("restore", "--staged", path, error=f"Failed to unstage {path}")
            unstaged.append(path)
        return unstaged

    def commit(self, message: str) -> str:
        return self._run("commit", "-m", message, error="Commit failed")

    def push(self, args: Sequence[str] = ()) -> str:
        return self._run("push", *args, error="Push failed")

    def stash(self, pop: bool = False) -> str:
        if pop:
            return self._run("stash", "pop", error="Failed to pop stash")
        return self._run("stash", "-u", error="Failed to stash changes")

    def switch_branch(self, branch: str) -> str:
        return self._run("switch", branch, error="Failed to switch branch")


def find_git_project_root(start: Optional[Path] = None) -> Path:
    """Walk up from *start* to the first directory containing ``.git``."""
    path = (start or Path.cwd()).resolve()
    for candidate in (path, *path.parents):
        if (candidate / ".git").exists():
            return candidate
    raise GitError(f"Not a git repository (or any parent): {path}")


def add_to_git_exclude(project_root: Path, paths: Iterable[str]) -> List[str]:
    """Append *paths* missing from ``.git/info/exclude``. Returns those added."""
    git_dir = project_root / ".git"
    if not git_dir.is_dir():
        # worktrees and submodules keep a .git file pointing elsewhere
        logger.debug(f"{git_dir} is not a directory, skipping exclude update")
        return []

    exclude_file = git_dir / "info" / "exclude"
    exclude_file.parent.mkdir(parents=True, exist_ok=True)

    content = exclude_file.read_text(encoding="utf-8") if exclude_file.exists() else ""
    existing = {line.strip() for line in content.splitlines()}

    added = [p for p in dict.fromkeys(paths) if p not in existing]
    if added:
        with open(exclude_file, "a", encoding="utf-8") as f:
            if content and not content.endswith("\n"):
                f.write("\n")
            for p in added:
                f.write(f"{p}\n")
    return added
