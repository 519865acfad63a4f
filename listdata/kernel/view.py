"""
ListData Kernel — Filter View

Derives the items a caller displays from the authoritative items and the
filter text. The view is read-only: selection and key lookups always work
on the unfiltered items.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from listdata.kernel.types import FilterFn, ListState


def apply_filter(items: Sequence[Any], filter_text: str, filter: FilterFn | None) -> Sequence[Any]:
    """
    Items for which filter(item, filter_text) holds.
    With no filter, returns items itself.
    """
    if filter is None:
        return items
    return [item for item in items if filter(item, filter_text)]


class FilteredView:
    """
    Memoized apply_filter over successive states.

    Recomputes only when the items object or the filter text differs from
    the previous call.
    """

    def __init__(self, filter: FilterFn | None = None) -> None:
        self.filter = filter
        self._items: Sequence[Any] | None = None
        self._filter_text: str | None = None
        self._result: Sequence[Any] | None = None

    def __call__(self, state: ListState) -> Sequence[Any]:
        if self.filter is None:
            return state.items
        if (
            self._result is None
            or state.items is not self._items
            or state.filter_text != self._filter_text
        ):
            self._result = apply_filter(state.items, state.filter_text, self.filter)
            self._items = state.items
            self._filter_text = state.filter_text
        return self._result
