"""Shallow copy primitives used to overwrite and restore containers in place."""

from collections.abc import Iterable, Mapping, MutableMapping, MutableSequence
from typing import Any


def shallow_assign(target: MutableMapping[Any, Any], source: Mapping[Any, Any]) -> None:
    """Copy every key/value pair of source onto target.

    Keys already in target but absent from source are left alone. Values are
    assigned by reference, nested containers are not merged.
    """
    for key in source:
        target[key] = source[key]


def clear_keys(target: MutableMapping[Any, Any]) -> None:
    """Delete every key currently present in target."""
    # Materialize first, deleting while iterating a dict raises.
    for key in list(target):
        del target[key]


def replace_items(target: MutableSequence[Any], items: Iterable[Any]) -> None:
    """Truncate target to zero length, then append items in order."""
    items = list(items)
    del target[:]
    for item in items:
        target.append(item)
