"""Starter .gitscaffold.toml template."""

DEFAULT_TOML = """\
# gitscaffold configuration
version = "1.0"

[scaffold]
message_file = "commit_message.md"
commitignore_file = ".commitignore"
gitignore_file = ".gitignore"
use_gitignore = true            # also hide .gitignore entries from the message
exclude_scaffold_files = true   # add the scaffold files to .git/info/exclude

[status]
rules = "classic"               # classic | porcelain

[push]
# args = ["origin", "HEAD"]

[switch]
stash = false
apply_stash = false

[branch]
commit_types = ["chore", "feat", "fix", "test"]
"""
