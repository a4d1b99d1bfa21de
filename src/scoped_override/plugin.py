"""pytest integration.

Enable the ``set_for_context`` fixture with::

    pytest_plugins = ["scoped_override.plugin"]

``override_fixture`` needs no plugin and can be used from any test module or
conftest.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from scoped_override.override import ScopedOverride
from scoped_override.override import set_for_context as register_override
from scoped_override.scope import Scope
from scoped_override.settings import OverrideSettings


def override_fixture(
    target: Any,
    replacement: Any,
    *,
    scope: str = "function",
    name: str | None = None,
    settings: OverrideSettings | None = None,
) -> Any:
    """Build a fixture that overrides target for every test requesting it.

    Setup runs when the fixture is first requested in its pytest scope and
    teardown when that scope finishes. The fixture value is the target itself.

    Usage::

        patched_config = override_fixture(CONFIG, lambda: {"API_URL": "http://test"}, scope="module")
    """

    def _override() -> Iterator[Any]:
        with ScopedOverride(target, replacement, settings=settings) as overridden:
            yield overridden

    return pytest.fixture(scope=scope, name=name)(_override)


def _run_now(callback: Callable[[], None]) -> None:
    callback()


@pytest.fixture
def set_for_context() -> Iterator[Callable[..., ScopedOverride]]:
    """Apply overrides for the current test; all are restored, newest first, when it ends."""
    test_scope = Scope("test")
    test_scope.enter()

    def _apply(target: Any, replacement: Any, *, settings: OverrideSettings | None = None) -> ScopedOverride:
        return register_override(target, replacement, before=_run_now, after=test_scope.on_exit, settings=settings)

    try:
        yield _apply
    finally:
        test_scope.exit()
