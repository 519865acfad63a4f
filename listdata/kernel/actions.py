"""
ListData Kernel — Actions

Every state change goes through one of 13 action types. Each is a frozen
pydantic model tagged by its `t` field, so a plain dict (from a queue, a
log, a test) can be parsed into exactly one of them.

Validation is structural (well-formed?) not semantic (will it apply?).
Whether a key exists or an index is in range is the reducer's business.

Item values and keys are typed Any: they pass through by reference and
are never copied.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import AfterValidator, BaseModel, Field, TypeAdapter, ValidationError


def _hashable(value: Any) -> Any:
    try:
        hash(value)
    except TypeError as e:
        raise ValueError(f"key must be hashable, got {type(value).__name__}") from e
    return value


# Keys must hash: the reducer looks them up in dicts and sets.
KeyField = Annotated[Any, AfterValidator(_hashable)]


class _Action(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}


# ---------------------------------------------------------------------------
# State-wide actions
# ---------------------------------------------------------------------------


class SetSelectedKeys(_Action):
    """Replace the selection outright. Keys are not checked against items."""

    t: Literal["selection.set"] = "selection.set"
    selected_keys: Literal["all"] | frozenset[Any]


class SetFilterText(_Action):
    t: Literal["filter.set"] = "filter.set"
    filter_text: str


# ---------------------------------------------------------------------------
# Item actions
# ---------------------------------------------------------------------------


class Insert(_Action):
    t: Literal["item.insert"] = "item.insert"
    index: int
    values: tuple[Any, ...] = ()


class InsertBefore(_Action):
    t: Literal["item.insert_before"] = "item.insert_before"
    key: KeyField
    values: tuple[Any, ...] = ()


class InsertAfter(_Action):
    t: Literal["item.insert_after"] = "item.insert_after"
    key: KeyField
    values: tuple[Any, ...] = ()


class Prepend(_Action):
    t: Literal["item.prepend"] = "item.prepend"
    values: tuple[Any, ...] = ()


class Append(_Action):
    t: Literal["item.append"] = "item.append"
    values: tuple[Any, ...] = ()


class Remove(_Action):
    t: Literal["item.remove"] = "item.remove"
    keys: tuple[KeyField, ...] = ()


class RemoveSelected(_Action):
    """Remove every selected item (everything, under "all")."""

    t: Literal["item.remove_selected"] = "item.remove_selected"


class Move(_Action):
    """Swap the item at key with whatever sits at to_index."""

    t: Literal["item.move"] = "item.move"
    key: KeyField
    to_index: int


class MoveBefore(_Action):
    t: Literal["item.move_before"] = "item.move_before"
    key: KeyField
    keys: tuple[KeyField, ...] = ()


class MoveAfter(_Action):
    t: Literal["item.move_after"] = "item.move_after"
    key: KeyField
    keys: tuple[KeyField, ...] = ()


class Update(_Action):
    t: Literal["item.update"] = "item.update"
    key: KeyField
    value: Any


Action = Annotated[
    Union[
        SetSelectedKeys,
        SetFilterText,
        Insert,
        InsertBefore,
        InsertAfter,
        Prepend,
        Append,
        Remove,
        RemoveSelected,
        Move,
        MoveBefore,
        MoveAfter,
        Update,
    ],
    Field(discriminator="t"),
]

ACTION_TYPES: set[str] = {
    "selection.set",
    "filter.set",
    "item.insert",
    "item.insert_before",
    "item.insert_after",
    "item.prepend",
    "item.append",
    "item.remove",
    "item.remove_selected",
    "item.move",
    "item.move_before",
    "item.move_after",
    "item.update",
}

_adapter: TypeAdapter[Action] = TypeAdapter(Action)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_action(data: Mapping[str, Any] | _Action) -> Action:
    """
    Turn a dict like {"t": "item.remove", "keys": ["a"]} into its action model.
    Raises pydantic.ValidationError when the dict is malformed.
    """
    if isinstance(data, _Action):
        return data
    return _adapter.validate_python(dict(data))


def validate_action(data: Any) -> list[str]:
    """
    Validate an action's structure.
    Returns a list of error strings. Empty list = valid.
    """
    if isinstance(data, _Action):
        return []
    if not isinstance(data, Mapping):
        return ["Action must be a mapping"]
    if "t" not in data:
        return ["Action requires 't'"]
    if not isinstance(data["t"], str) or data["t"] not in ACTION_TYPES:
        return [f"Unknown action type: {data['t']}"]

    try:
        _adapter.validate_python(dict(data))
    except ValidationError as e:
        return [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
    return []
