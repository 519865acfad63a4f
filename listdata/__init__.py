"""ListData — an ordered, keyed list with selection and filter text."""

from listdata.kernel import (
    ALL,
    ListOptions,
    ListState,
    ListStore,
    insert,
    move,
)

__all__ = [
    "ALL",
    "ListOptions",
    "ListState",
    "ListStore",
    "insert",
    "move",
]
