"""Scoped overrides for shared mutable test state."""

from scoped_override.merge import clear_keys, replace_items, shallow_assign
from scoped_override.override import ScopedOverride, set_for_context
from scoped_override.scope import Scope
from scoped_override.settings import OverrideSettings, load_settings
from scoped_override.targets import MappingTarget, SequenceTarget, TargetKind, classify_target
from scoped_override.utils import InvariantError, coerce_boolean, describe_value

__all__ = [
    "InvariantError",
    "MappingTarget",
    "OverrideSettings",
    "Scope",
    "ScopedOverride",
    "SequenceTarget",
    "TargetKind",
    "classify_target",
    "clear_keys",
    "coerce_boolean",
    "describe_value",
    "load_settings",
    "replace_items",
    "set_for_context",
    "shallow_assign",
]
