"""Explicit enter/exit hook registry for a test scope."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Callback = Callable[[], Any]


class Scope:
    """A test scope that runs registered callbacks when it is entered and exited.

    Enter callbacks run in registration order, exit callbacks in reverse.
    Every exit callback runs even if an earlier one raised; the first error
    is re-raised once they have all run.
    """

    def __init__(self, name: str = "scope") -> None:
        self.name = name
        self._enter_callbacks: list[Callback] = []
        self._exit_callbacks: list[Callback] = []
        self._entered = False

    @property
    def entered(self) -> bool:
        return self._entered

    def on_enter(self, callback: Callback) -> Callback:
        self._enter_callbacks.append(callback)
        return callback

    def on_exit(self, callback: Callback) -> Callback:
        self._exit_callbacks.append(callback)
        return callback

    def enter(self) -> None:
        """Run enter callbacks. On failure, run exit callbacks, then re-raise."""
        if self._entered:
            raise RuntimeError(f"Scope {self.name!r} is already entered")
        self._entered = True
        logger.debug("Entering scope %r (%d callbacks)", self.name, len(self._enter_callbacks))
        try:
            for callback in self._enter_callbacks:
                callback()
        except BaseException:
            self._run_exit_callbacks(swallow=True)
            self._entered = False
            raise

    def exit(self) -> None:
        """Run exit callbacks in reverse registration order."""
        if not self._entered:
            raise RuntimeError(f"Scope {self.name!r} was not entered")
        try:
            self._run_exit_callbacks(swallow=False)
        finally:
            self._entered = False

    def _run_exit_callbacks(self, *, swallow: bool) -> None:
        logger.debug("Exiting scope %r (%d callbacks)", self.name, len(self._exit_callbacks))
        first_error: BaseException | None = None
        for callback in reversed(self._exit_callbacks):
            try:
                callback()
            except Exception as exc:
                logger.warning("Exit callback failed in scope %r: %s", self.name, exc)
                if first_error is None:
                    first_error = exc
        if first_error is not None and not swallow:
            raise first_error

    def run(self, body: Callable[[], T]) -> T:
        """Enter the scope, run body, and always exit."""
        self.enter()
        try:
            return body()
        finally:
            self.exit()
