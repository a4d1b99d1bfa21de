"""Scoped overrides: overwrite a container for a test scope, then restore it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from scoped_override.settings import OverrideSettings, load_settings
from scoped_override.targets import Target, classify_target
from scoped_override.utils import InvariantError, describe_value, invalid_target_error

logger = logging.getLogger(__name__)

HookRegistrar = Callable[[Callable[[], None]], Any]


class ScopedOverride:
    """Overwrite the contents of a mapping or list and put them back later.

    The target is mutated in place, so every holder of a reference to it sees
    the override. ``setup`` snapshots the current contents and applies the
    replacement; ``teardown`` restores the snapshot. A mapping target gets
    assign semantics on setup (unnamed keys survive) while a list target is
    replaced wholesale.

    The replacement may be a callable taking no arguments. It is called once
    per setup, never at construction, so it can depend on state that only
    exists once the scope starts.

    Also usable as a context manager::

        with ScopedOverride(settings_dict, {"DEBUG": True}):
            ...
    """

    def __init__(
        self,
        target: Any,
        replacement: Any,
        *,
        settings: OverrideSettings | None = None,
    ) -> None:
        self._target = target
        self._variant = classify_target(target)
        self._replacement = replacement
        self._settings = settings if settings is not None else load_settings()
        self._snapshot: Any = None

    @property
    def target(self) -> Any:
        """The container being overridden."""
        return self._target

    @property
    def active(self) -> bool:
        """True between a successful snapshot and the matching teardown."""
        return self._snapshot is not None

    def _require_variant(self) -> Target:
        if self._variant is None:
            raise invalid_target_error(self._target)
        return self._variant

    def _resolve_replacement(self) -> Any:
        if callable(self._replacement):
            return self._replacement()
        return self._replacement

    def _describe(self, value: Any) -> str:
        if self._settings.log_values:
            return describe_value(value)
        return "<hidden>"

    def setup(self) -> None:
        """Snapshot the target and overwrite it with the replacement."""
        variant = self._require_variant()
        replacement = self._resolve_replacement()

        if self._settings.check_kind and not variant.accepts(replacement):
            raise InvariantError(
                f"Invariant error: replacement for a {variant.kind} target must also be a "
                f"{variant.kind}, you gave {describe_value(replacement)}",
                value=replacement,
            )

        snapshot = variant.snapshot()
        self._snapshot = snapshot
        try:
            variant.overwrite(replacement)
        except BaseException:
            # A partial overwrite must not outlive a failed setup.
            variant.restore(snapshot)
            self._snapshot = None
            raise
        logger.debug(
            "Overrode %s target %s with %s",
            variant.kind,
            self._describe(self._snapshot),
            self._describe(replacement),
        )

    def teardown(self) -> None:
        """Restore the target to the snapshot taken by the last setup."""
        variant = self._require_variant()
        if self._snapshot is None:
            logger.debug("No snapshot held for %s target, nothing to restore", variant.kind)
            return

        snapshot, self._snapshot = self._snapshot, None
        variant.restore(snapshot)
        logger.debug("Restored %s target to %s", variant.kind, self._describe(snapshot))

    def __enter__(self) -> Any:
        self.setup()
        return self._target

    def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
        self.teardown()


def set_for_context(
    target: Any,
    replacement: Any,
    *,
    before: HookRegistrar,
    after: HookRegistrar,
    settings: OverrideSettings | None = None,
) -> ScopedOverride:
    """Override target's contents for the duration of a test scope.

    Args:
        target: The mapping or list whose contents should change.
        replacement: New contents, or a zero-argument callable returning them.
        before: Registers a callback to run when the scope starts.
        after: Registers a callback to run when the scope ends.
        settings: Explicit settings. If None, they are read from the environment.

    Returns:
        The registered ScopedOverride.

    Raises:
        InvariantError: From the registered callbacks, if target is not a mapping or a list.
    """
    override = ScopedOverride(target, replacement, settings=settings)
    before(override.setup)
    after(override.teardown)
    return override
