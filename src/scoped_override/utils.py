"""Utility functions and the error type for scoped overrides."""

import json
from typing import Any


class InvariantError(Exception):
    """Raised when an override target is not a mapping or a list."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(f"[scoped-override] {message}")
        self.value = value


def describe_value(value: Any) -> str:
    """Serialize a value for diagnostics.

    JSON where possible, ``repr`` for anything JSON cannot encode.
    """
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


def invalid_target_error(target: Any) -> InvariantError:
    return InvariantError(
        "Invariant error: first argument for set_for_context must be a mapping "
        f"or a list, you gave {describe_value(target)}",
        value=target,
    )


def coerce_boolean(value: Any) -> bool:
    """Coerce a value to boolean.

    "true", "1", 1, True → True; everything else → False.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value.lower().strip() in ("true", "1")
    return False
