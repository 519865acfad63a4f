"""
ListData Kernel — Store

Sits between the pure reducer and whoever owns the list. Holds the current
ListState, runs each action through reduce(), swaps in the result, and
tells subscribers about it.

The reducer, index, and view are pure or self-contained. This is the one
place that keeps mutable state. Dispatches are assumed to come from a
single owner, one at a time; there is no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, Literal

from listdata.config import settings
from listdata.kernel.actions import (
    Action,
    Append,
    Insert,
    InsertAfter,
    InsertBefore,
    Move,
    MoveAfter,
    MoveBefore,
    Prepend,
    Remove,
    RemoveSelected,
    SetFilterText,
    SetSelectedKeys,
    Update,
    parse_action,
)
from listdata.kernel.index import ItemsByKey, check_keys
from listdata.kernel.reducer import initial_state, reduce
from listdata.kernel.types import (
    ALL,
    Key,
    KeyIntegrityError,
    ListOptions,
    ListState,
    ReduceResult,
    Selection,
)
from listdata.kernel.view import FilteredView

logger = logging.getLogger(__name__)

Listener = Callable[[ListState], None]


class ListStore:
    """
    A keyed list with selection and filter text.

    Build it from ListOptions or keyword arguments:

        store = ListStore(initial_items=people, get_key=lambda p: p.name)
        store.remove("Sam")
        store.items          # filtered view
        store.all_items      # authoritative items
    """

    def __init__(self, options: ListOptions | None = None, **kwargs: Any) -> None:
        if options is None:
            options = ListOptions(**kwargs)
        elif kwargs:
            raise TypeError("Pass either ListOptions or keyword arguments, not both")

        self.options = options
        self._keys: ItemsByKey = ItemsByKey(options.get_key)
        self._view = FilteredView(options.filter)
        self._listeners: list[Listener] = []

        if settings.KEY_CHECKS:
            self._check_keys(options.initial_items)

        self._state = initial_state(options)

    def _check_keys(self, items: Sequence[Any]) -> None:
        warnings = check_keys(items, self._keys.get_key)
        if not warnings:
            return
        if settings.STRICT_KEYS:
            raise KeyIntegrityError([w.message for w in warnings])
        for w in warnings:
            logger.warning("ListStore: %s: %s", w.code, w.message)

    # -----------------------------------------------------------------------
    # State
    # -----------------------------------------------------------------------

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def items(self) -> Sequence[Any]:
        """Items after the filter is applied."""
        return self._view(self._state)

    @property
    def all_items(self) -> Sequence[Any]:
        """Items before the filter is applied."""
        return self._state.items

    @property
    def selected_keys(self) -> Selection:
        return self._state.selected_keys

    @property
    def filter_text(self) -> str:
        return self._state.filter_text

    def get_item(self, key: Key) -> Any | None:
        """Item with key among the unfiltered items, or None."""
        return self._keys.item(self._state.items, key)

    # -----------------------------------------------------------------------
    # Dispatch
    # -----------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call listener with the new ListState after every applied action.
        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action | Mapping[str, Any]) -> ReduceResult:
        """Apply one action (model or mapping) and notify subscribers if it changed anything."""
        if isinstance(action, Mapping):
            action = parse_action(action)

        result = reduce(self._state, action, self._keys)
        logger.debug(
            "ListStore: %s applied=%s reason=%s",
            getattr(action, "t", None),
            result.applied,
            result.reason,
        )
        if result.state is self._state:
            return result

        self._state = result.state
        for listener in list(self._listeners):
            listener(self._state)
        return result

    # -----------------------------------------------------------------------
    # Actions
    # -----------------------------------------------------------------------

    def set_selected_keys(self, selected_keys: Literal["all"] | Iterable[Key]) -> None:
        if selected_keys != ALL:
            selected_keys = frozenset(selected_keys)
        self.dispatch(SetSelectedKeys(selected_keys=selected_keys))

    def set_filter_text(self, filter_text: str) -> None:
        self.dispatch(SetFilterText(filter_text=filter_text))

    def insert(self, index: int, *values: Any) -> None:
        self.dispatch(Insert(index=index, values=values))

    def insert_before(self, key: Key, *values: Any) -> None:
        self.dispatch(InsertBefore(key=key, values=values))

    def insert_after(self, key: Key, *values: Any) -> None:
        self.dispatch(InsertAfter(key=key, values=values))

    def prepend(self, *values: Any) -> None:
        self.dispatch(Prepend(values=values))

    def append(self, *values: Any) -> None:
        self.dispatch(Append(values=values))

    def remove(self, *keys: Key) -> None:
        self.dispatch(Remove(keys=keys))

    def remove_selected_items(self) -> None:
        self.dispatch(RemoveSelected())

    def move(self, key: Key, to_index: int) -> None:
        """Swap the item at key with the item at to_index."""
        self.dispatch(Move(key=key, to_index=to_index))

    def move_before(self, key: Key, keys: Iterable[Key]) -> None:
        """Move the items at keys, in list order, to just before key."""
        self.dispatch(MoveBefore(key=key, keys=tuple(keys)))

    def move_after(self, key: Key, keys: Iterable[Key]) -> None:
        """Move the items at keys, in list order, to just after key."""
        self.dispatch(MoveAfter(key=key, keys=tuple(keys)))

    def update(self, key: Key, value: Any) -> None:
        self.dispatch(Update(key=key, value=value))
