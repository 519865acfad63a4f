"""
ListData Kernel — Shared Types

Data classes used across the index, reducer, view, and store.
These are the contracts that bind the kernel together.

  ListState     — the (items, selected_keys, filter_text) triple, one per transition
  ListOptions   — how a list is built: initial data plus the caller's key/filter functions
  ReduceResult  — what the reducer hands back for every action
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, Union

# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

ALL: Literal["all"] = "all"

Key = Hashable

# "all" selects every item, including items added while it is active.
Selection = Union[Literal["all"], frozenset]

GetKey = Callable[[Any], Key]
FilterFn = Callable[[Any, str], bool]


# ---------------------------------------------------------------------------
# Reason codes for transitions that leave the state untouched
# ---------------------------------------------------------------------------

KEY_NOT_FOUND = "KEY_NOT_FOUND"
NOTHING_TO_INSERT = "NOTHING_TO_INSERT"
NOTHING_TO_MOVE = "NOTHING_TO_MOVE"
NOTHING_TO_REMOVE = "NOTHING_TO_REMOVE"
INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
UNCHANGED = "UNCHANGED"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ListDataError(Exception):
    """Base class for errors raised by the list engine."""
    pass


class KeyIntegrityError(ListDataError):
    """Items handed to a store produce duplicate, None, or empty keys."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ListState:
    """
    The list's current state.

    A transition never edits a ListState in place. It either returns the
    same object (nothing changed) or a new one that shares every untouched
    item with the old one.
    """

    items: Sequence[Any] = field(default_factory=list)
    selected_keys: Selection = frozenset()
    filter_text: str = ""

    def to_dict(self) -> dict[str, Any]:
        selected: Any = self.selected_keys
        if selected != ALL:
            selected = list(selected)
        return {
            "items": list(self.items),
            "selected_keys": selected,
            "filter_text": self.filter_text,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ListState:
        return cls(
            items=d.get("items", []),
            selected_keys=normalize_selection(d.get("selected_keys")),
            filter_text=d.get("filter_text", ""),
        )


@dataclass
class ListOptions:
    """How a list is built. Mirrors what a caller hands to ListStore."""

    initial_items: Sequence[Any] = field(default_factory=list)
    initial_selected_keys: Literal["all"] | Iterable[Key] | None = None
    initial_filter_text: str = ""
    get_key: GetKey | None = None
    filter: FilterFn | None = None


@dataclass
class Warning:
    """A non-fatal issue found while checking keys."""

    code: str
    message: str
    details: dict[str, Any] | None = None


@dataclass
class ReduceResult:
    """
    Result of applying one action to a ListState.
    The reducer never throws — it always returns one of these.

    When applied is False, state is the exact object that was passed in.
    """

    state: ListState
    applied: bool
    reason: str | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def normalize_selection(keys: Literal["all"] | Iterable[Key] | None) -> Selection:
    """'all' stays the sentinel; anything else becomes a frozenset (None → empty)."""
    if keys == ALL:
        return ALL
    if keys is None:
        return frozenset()
    return frozenset(keys)


def default_get_key(item: Any) -> Key:
    """
    Key used when the caller supplies none: the item's id, else its key.

    Works for mappings (item["id"]) and plain objects (item.id).
    """
    if isinstance(item, Mapping):
        return item.get("id") or item.get("key")
    return getattr(item, "id", None) or getattr(item, "key", None)
