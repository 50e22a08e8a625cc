"""gitscaffold CLI — Typer application wrapping the commit workflow."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console

from gitscaffold import __version__

app = typer.Typer(
    name="gitscaffold",
    help="Scaffold commit messages from git status, then commit, push or switch branches.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


@dataclass
class _State:
    verbose: bool = False
    config_path: Optional[str] = None


def setup_logging(verbose: bool) -> None:
    """Route loguru to stderr; DEBUG when verbose, WARNING otherwise."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
        colorize=True,
    )


def _state(ctx: typer.Context) -> _State:
    return ctx.obj if isinstance(ctx.obj, _State) else _State()


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from gitscaffold.git.adapter import GitError, find_git_project_root

    try:
        return find_git_project_root(Path.cwd())
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load(ctx: typer.Context):
    """Resolve repo root and config, exit 2 on failure."""
    from gitscaffold.config.loader import ConfigError, load_config

    repo_root = _resolve_repo_root()
    try:
        cfg = load_config(repo_root, _state(ctx).config_path, workdir=Path.cwd())
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    return repo_root, cfg


def _make_adapter(workdir: Path):
    from gitscaffold.git.adapter import GitAdapter

    return GitAdapter(workdir)


def _make_prompter():
    from gitscaffold.prompts import RichPrompter

    return RichPrompter(console)


# ── generate ──────────────────────────────────────────────────────────────────


@app.command()
def generate(ctx: typer.Context) -> None:
    """Generate the commit-message file from git status."""
    from gitscaffold.git.adapter import GitError, add_to_git_exclude
    from gitscaffold.output.terminal import render_scaffold_summary
    from gitscaffold.scaffold.writer import ScaffoldError, build_scaffold, create_needed_files

    verbose = _state(ctx).verbose
    repo_root, cfg = _load(ctx)
    workdir = Path.cwd()

    if verbose:
        console.print("Creating the needed files...")
    for path, created in create_needed_files(workdir, cfg):
        if verbose:
            label = "[green]created[/green]" if created else "[green]already exists[/green]"
            console.print(f"\t`{path.name}` {label} ✅")

    if cfg.scaffold.exclude_scaffold_files:
        rel_paths = []
        for name in (cfg.scaffold.message_file, cfg.scaffold.commitignore_file):
            try:
                rel_paths.append((workdir / name).resolve().relative_to(repo_root.resolve()).as_posix())
            except ValueError:
                logger.debug(f"{name} is outside {repo_root}, not excluding")
        add_to_git_exclude(repo_root, rel_paths)

    try:
        result = build_scaffold(_make_adapter(workdir), workdir, cfg)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except ScaffoldError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    render_scaffold_summary(console, result, verbose=verbose)


# ── commit ────────────────────────────────────────────────────────────────────


@app.command()
def commit(
    ctx: typer.Context,
    push: bool = typer.Option(False, "--push", "-p", help="Push after a successful commit"),
    args: Optional[List[str]] = typer.Option(None, "--arg", "-a", help="Argument passed to git push (repeatable)"),
) -> None:
    """Commit with the text of the commit-message file."""
    from gitscaffold.git.adapter import GitError
    from gitscaffold.output.terminal import render_commit_message
    from gitscaffold.scaffold.writer import ScaffoldError, read_commit_message

    verbose = _state(ctx).verbose
    _, cfg = _load(ctx)
    workdir = Path.cwd()

    try:
        message = read_commit_message(workdir / cfg.scaffold.message_file)
    except ScaffoldError as exc:
        console.print(f"[bold red]✗[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    if verbose:
        render_commit_message(console, message)
        console.print("Committing...")

    adapter = _make_adapter(workdir)
    try:
        adapter.commit(message)
    except GitError as exc:
        console.print(f"[bold red]Commit failed.[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
    console.print("[bold green]Commit successful.[/bold green]")

    if push:
        _push(adapter, args if args else cfg.push.args, verbose)


# ── push ──────────────────────────────────────────────────────────────────────


def _push(adapter, args: List[str], verbose: bool) -> None:
    from gitscaffold.git.adapter import GitError

    if verbose:
        console.print("\nPushing...")
    try:
        adapter.push(args)
    except GitError as exc:
        console.print(f"[bold red]Push failed.[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
    console.print("[bold green]Push successful.[/bold green]")


@app.command()
def push(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Option(None, "--arg", "-a", help="Argument passed to git push (repeatable)"),
) -> None:
    """Push the current branch."""
    _, cfg = _load(ctx)
    _push(_make_adapter(Path.cwd()), args if args else cfg.push.args, _state(ctx).verbose)


# ── add ───────────────────────────────────────────────────────────────────────


@app.command()
def add(
    ctx: typer.Context,
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-e", help="Path to leave unstaged (repeatable)"),
) -> None:
    """Stage every change except the excluded paths."""
    from gitscaffold.git.adapter import GitError

    verbose = _state(ctx).verbose
    _resolve_repo_root()
    excludes = exclude or []

    if verbose:
        console.print("Adding files...")
        for path in excludes:
            console.print(f"  excluding {path}")

    try:
        _make_adapter(Path.cwd()).add_with_exclude(excludes)
    except GitError as exc:
        console.print(f"[bold red]Error adding the files:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
    console.print("[bold green]Added the files[/bold green] ✅")


# ── switch ────────────────────────────────────────────────────────────────────


@app.command()
def switch(
    ctx: typer.Context,
    stash: bool = typer.Option(False, "--stash", "-s", help="Stash changes before switching"),
    apply_stash: bool = typer.Option(False, "--apply-stash", "-a", help="Pop the stash after switching"),
) -> None:
    """Interactively switch to another branch."""
    from gitscaffold.git.adapter import GitError
    from gitscaffold.prompts import switch_interactively

    _, cfg = _load(ctx)
    do_stash = stash or cfg.switch.stash
    do_apply = apply_stash or cfg.switch.apply_stash

    if do_stash:
        console.print("Stashing changes...")

    try:
        chosen = switch_interactively(
            _make_adapter(Path.cwd()),
            _make_prompter(),
            stash=do_stash,
            apply_stash=do_apply,
        )
    except GitError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1) from exc

    if chosen is None:
        console.print("Aborted")
    else:
        console.print(f"[green]✓[/green] Switched to {chosen}")


# ── branch ────────────────────────────────────────────────────────────────────


@app.command()
def branch(
    ctx: typer.Context,
    raw: bool = typer.Option(False, "--raw", help="Keep the commit-type prefix"),
) -> None:
    """Print the current branch name without its commit-type prefix."""
    from gitscaffold.git.adapter import GitError
    from gitscaffold.git.branches import format_branch_name

    _, cfg = _load(ctx)
    try:
        name = _make_adapter(Path.cwd()).current_branch()
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    print(name if raw else format_branch_name(cfg.branch.commit_types, name))


# ── status-files ──────────────────────────────────────────────────────────────


@app.command("status-files")
def status_files(ctx: typer.Context) -> None:
    """List files from git status (excluding deleted) for shell completion."""
    from gitscaffold.git.adapter import GitError
    from gitscaffold.git.status_parser import list_status_files

    _resolve_repo_root()
    try:
        status = _make_adapter(Path.cwd()).read_status()
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    for path in sorted(list_status_files(status)):
        print(path)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Generate a starter .gitscaffold.toml in the repo root."""
    from gitscaffold.config.defaults import DEFAULT_TOML
    from gitscaffold.config.loader import CONFIG_FILE_NAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILE_NAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILE_NAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitscaffold {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print more information about each operation"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitscaffold.toml"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gitscaffold — scaffold commit messages from git status."""
    setup_logging(verbose)
    ctx.obj = _State(verbose=verbose, config_path=config)
