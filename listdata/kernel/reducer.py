"""
ListData Kernel — Reducer

Pure function: (state, action) → ReduceResult
No side effects. No IO. Deterministic.

Every handler either returns the input ListState untouched (applied=False,
with a reason) or builds a new one with dataclasses.replace, leaving the old
one exactly as it was. Item objects are never copied; only the containers
around them are rebuilt.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from typing import Any

from listdata.kernel import array
from listdata.kernel.actions import (
    ACTION_TYPES,
    Action,
    parse_action,
    validate_action,
)
from listdata.kernel.index import ItemsByKey
from listdata.kernel.types import (
    ALL,
    INDEX_OUT_OF_RANGE,
    KEY_NOT_FOUND,
    NOTHING_TO_INSERT,
    NOTHING_TO_MOVE,
    NOTHING_TO_REMOVE,
    UNCHANGED,
    ListOptions,
    ListState,
    ReduceResult,
    normalize_selection,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def initial_state(options: ListOptions | None = None) -> ListState:
    """
    The state a list starts from.
    initial_items is kept by reference, not copied.
    """
    options = options or ListOptions()
    return ListState(
        items=options.initial_items,
        selected_keys=normalize_selection(options.initial_selected_keys),
        filter_text=options.initial_filter_text,
    )


def reduce(
    state: ListState,
    action: Action | Mapping[str, Any],
    keys: ItemsByKey,
) -> ReduceResult:
    """
    Apply one action to the current state.

    keys resolves keys to positions (and carries get_key). It rebuilds
    itself whenever state.items is a different object from the last lookup.
    """
    if isinstance(action, Mapping):
        t = action.get("t")
        if not isinstance(t, str) or t not in ACTION_TYPES:
            return _reject(state, f"UNKNOWN_ACTION: {t}")
        errors = validate_action(action)
        if errors:
            return _reject(state, f"INVALID_ACTION: {errors[0]}")
        action = parse_action(action)

    t = getattr(action, "t", None)
    handler = _HANDLERS.get(t) if isinstance(t, str) else None
    if handler is None:
        return _reject(state, f"UNKNOWN_ACTION: {t}")

    return handler(state, action, keys)


def replay(state: ListState, actions: Iterable[Action | Mapping[str, Any]], keys: ItemsByKey) -> ListState:
    """
    Fold actions over state, left to right.
    replay(s, [a1, a2]) == reduce(reduce(s, a1).state, a2).state
    """
    for action in actions:
        state = reduce(state, action, keys).state
    return state


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _reject(state: ListState, reason: str) -> ReduceResult:
    return ReduceResult(state=state, applied=False, reason=reason)


def _ok(state: ListState) -> ReduceResult:
    return ReduceResult(state=state, applied=True)


def _insert(state: ListState, index: int, values: Sequence[Any]) -> ReduceResult:
    items = array.insert(state.items, index, *values)
    if items is state.items:
        return _reject(state, NOTHING_TO_INSERT)
    return _ok(replace(state, items=items))


def _move(state: ListState, index: int, keys_to_move: Iterable[Any], keys: ItemsByKey) -> ReduceResult:
    # Positions come from a scan of the current items, not the cached index.
    # A key that is not found yields -1, which array.move discards.
    indices = [keys.find_index(state.items, k) for k in keys_to_move]
    items = array.move(state.items, index, indices)
    if items is state.items:
        return _reject(state, NOTHING_TO_MOVE)
    return _ok(replace(state, items=items))


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_set_selected_keys(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    return _ok(replace(state, selected_keys=action.selected_keys))


def _handle_set_filter_text(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    return _ok(replace(state, filter_text=action.filter_text))


def _handle_insert(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    return _insert(state, action.index, action.values)


def _handle_insert_before(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    # An empty list has nothing to anchor on; the key is irrelevant.
    if not state.items:
        return _insert(state, 0, action.values)

    i = keys.index(state.items, action.key)
    if i is None:
        return _reject(state, KEY_NOT_FOUND)
    return _insert(state, i, action.values)


def _handle_insert_after(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    if not state.items:
        return _insert(state, 0, action.values)

    i = keys.index(state.items, action.key)
    if i is None:
        return _reject(state, KEY_NOT_FOUND)
    return _insert(state, i + 1, action.values)


def _handle_prepend(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    return _insert(state, 0, action.values)


def _handle_append(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    return _insert(state, len(state.items), action.values)


def _handle_remove(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    key_set = set(action.keys)
    get_key = keys.get_key

    # Removal always works on the unfiltered items
    items: Sequence[Any] = [item for item in state.items if get_key(item) not in key_set]
    if len(items) == len(state.items):
        items = state.items

    if state.selected_keys == ALL:
        selection = ALL
    else:
        selection = state.selected_keys - key_set

    # "all" of an empty list is normalized to an explicit empty set
    if not items:
        selection = frozenset()

    if items is state.items and selection == state.selected_keys:
        return _reject(state, NOTHING_TO_REMOVE)
    return _ok(replace(state, items=items, selected_keys=selection))


def _handle_remove_selected(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    selected = state.selected_keys

    if selected == ALL:
        return _ok(replace(state, items=[], selected_keys=frozenset()))

    get_key = keys.get_key
    items: Sequence[Any] = [item for item in state.items if get_key(item) not in selected]
    if len(items) == len(state.items):
        if not selected:
            return _reject(state, NOTHING_TO_REMOVE)
        items = state.items
    return _ok(replace(state, items=items, selected_keys=frozenset()))


def _handle_move(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    # Two-element swap, not a block relocation like move_before/move_after.
    i = keys.index(state.items, action.key)
    if i is None:
        return _reject(state, KEY_NOT_FOUND)

    to_index = action.to_index
    if not 0 <= to_index < len(state.items):
        return _reject(state, INDEX_OUT_OF_RANGE)
    if to_index == i:
        return _reject(state, UNCHANGED)

    items = list(state.items)
    items[i], items[to_index] = items[to_index], items[i]
    return _ok(replace(state, items=items))


def _handle_move_before(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    i = keys.index(state.items, action.key)
    if i is None:
        return _reject(state, KEY_NOT_FOUND)
    return _move(state, i, action.keys, keys)


def _handle_move_after(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    i = keys.index(state.items, action.key)
    if i is None:
        return _reject(state, KEY_NOT_FOUND)
    return _move(state, i + 1, action.keys, keys)


def _handle_update(state: ListState, action: Any, keys: ItemsByKey) -> ReduceResult:
    i = keys.index(state.items, action.key)
    if i is None:
        return _reject(state, KEY_NOT_FOUND)

    items = list(state.items)
    items[i] = action.value
    return _ok(replace(state, items=items))


# ---------------------------------------------------------------------------
# Handler dispatch table
# ---------------------------------------------------------------------------

_HANDLERS: dict[str, Any] = {
    "selection.set": _handle_set_selected_keys,
    "filter.set": _handle_set_filter_text,
    "item.insert": _handle_insert,
    "item.insert_before": _handle_insert_before,
    "item.insert_after": _handle_insert_after,
    "item.prepend": _handle_prepend,
    "item.append": _handle_append,
    "item.remove": _handle_remove,
    "item.remove_selected": _handle_remove_selected,
    "item.move": _handle_move,
    "item.move_before": _handle_move_before,
    "item.move_after": _handle_move_after,
    "item.update": _handle_update,
}
