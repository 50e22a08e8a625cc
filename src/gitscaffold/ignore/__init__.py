"""Ignore-file loading and exclusion filtering."""

from gitscaffold.ignore.matcher import (
    IgnoreMatcher,
    filter_excluded,
    is_excluded,
    is_under,
    load_exclusion_set,
    load_ignore_entries,
)

__all__ = [
    "IgnoreMatcher",
    "filter_excluded",
    "is_excluded",
    "is_under",
    "load_exclusion_set",
    "load_ignore_entries",
]
