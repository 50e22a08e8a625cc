"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

StatusRuleName = Literal["classic", "porcelain"]

STATUS_RULE_NAMES = ("classic", "porcelain")

DEFAULT_COMMIT_TYPES = ["chore", "feat", "fix", "test"]


@dataclass
class ScaffoldConfig:
    message_file: str = "commit_message.md"
    commitignore_file: str = ".commitignore"
    gitignore_file: str = ".gitignore"
    use_gitignore: bool = True  # merge .gitignore entries into the exclusion set
    exclude_scaffold_files: bool = True  # keep scaffold files out of git status


@dataclass
class StatusConfig:
    rules: StatusRuleName = "classic"


@dataclass
class PushConfig:
    args: List[str] = field(default_factory=list)


@dataclass
class SwitchConfig:
    stash: bool = False
    apply_stash: bool = False


@dataclass
class BranchConfig:
    commit_types: List[str] = field(default_factory=lambda: list(DEFAULT_COMMIT_TYPES))


@dataclass
class GitScaffoldConfig:
    version: str = "1.0"
    scaffold: ScaffoldConfig = field(default_factory=ScaffoldConfig)
    status: StatusConfig = field(default_factory=StatusConfig)
    push: PushConfig = field(default_factory=PushConfig)
    switch: SwitchConfig = field(default_factory=SwitchConfig)
    branch: BranchConfig = field(default_factory=BranchConfig)
