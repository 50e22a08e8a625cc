"""gitscaffold — scaffold commit messages from git status."""

__version__ = "0.3.0"
