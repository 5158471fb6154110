"""Visibility predicates used when listing directory children.

A predicate receives the bare entry name and returns True when the entry
should be listed. ``BoundedPath`` accepts one at construction time and hands
it to every path derived from it.
"""

from __future__ import annotations

from typing import Callable, Iterable

VisibilityPredicate = Callable[[str], bool]


def always_visible(name: str) -> bool:
    return True


def hide_dotfiles(name: str) -> bool:
    """Treat entries starting with ``.`` as hidden."""
    return not name.startswith(".")


def hide_names(names: Iterable[str]) -> VisibilityPredicate:
    """Build a predicate hiding an explicit set of entry names (case-insensitive)."""
    hidden = frozenset(n.lower() for n in names)

    def _predicate(name: str) -> bool:
        return name.lower() not in hidden

    return _predicate


__all__ = ["VisibilityPredicate", "always_visible", "hide_dotfiles", "hide_names"]
