"""
ListData Kernel — the pure engine.

Components:
  array    — insert/move primitives over ordered sequences
  index    — lazily built key → (item, index) lookup
  actions  — the 13 action types, as tagged pydantic models
  reducer  — (state, action) → state  (pure, deterministic)
  view     — filtered view of the items
  store    — holds the current state, dispatches actions, notifies subscribers
"""

from listdata.kernel.actions import parse_action, validate_action
from listdata.kernel.array import insert, move
from listdata.kernel.index import ItemsByKey, check_keys
from listdata.kernel.reducer import initial_state, reduce, replay
from listdata.kernel.store import ListStore
from listdata.kernel.types import ALL, KeyIntegrityError, ListOptions, ListState, ReduceResult
from listdata.kernel.view import FilteredView, apply_filter

__all__ = [
    "ALL",
    "FilteredView",
    "ItemsByKey",
    "KeyIntegrityError",
    "ListOptions",
    "ListState",
    "ListStore",
    "ReduceResult",
    "apply_filter",
    "check_keys",
    "initial_state",
    "insert",
    "move",
    "parse_action",
    "reduce",
    "replay",
    "validate_action",
]
