"""Interactive prompts and the branch-switch flow."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from loguru import logger
from rich.console import Console
from rich.prompt import Confirm, IntPrompt

from gitscaffold.git.adapter import GitAdapter, GitError


class Prompter(Protocol):
    """Anything that can pick from a list and answer yes/no."""

    def select(self, prompt: str, options: Sequence[str], default: int = 0) -> int: ...

    def confirm(self, prompt: str, default: bool = True) -> bool: ...


class RichPrompter:
    """Prompter backed by rich's IntPrompt / Confirm."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def select(self, prompt: str, options: Sequence[str], default: int = 0) -> int:
        for i, option in enumerate(options):
            style = "green" if i == default else "cyan"
            self.console.print(f"  [{i}] [{style}]{option}[/{style}]")
        return IntPrompt.ask(
            prompt,
            console=self.console,
            default=default,
            choices=[str(i) for i in range(len(options))],
        )

    def confirm(self, prompt: str, default: bool = True) -> bool:
        return Confirm.ask(prompt, console=self.console, default=default)


def switch_interactively(
    adapter: GitAdapter,
    prompter: Prompter,
    *,
    stash: bool = False,
    apply_stash: bool = False,
) -> Optional[str]:
    """Let the user pick a branch and switch to it.

    Returns the branch switched to, or None if the user declined.
    """
    if stash:
        logger.debug("Stashing changes before switching")
        adapter.stash()

    branches = adapter.branches()
    if not branches:
        raise GitError("No branches to switch to")

    choice = prompter.select("Choose a branch", branches, default=0)
    chosen = branches[choice]

    if not prompter.confirm(f"Switch to branch: {chosen} ?", default=True):
        return None

    adapter.switch_branch(chosen)
    if apply_stash:
        adapter.stash(pop=True)
    return chosen
