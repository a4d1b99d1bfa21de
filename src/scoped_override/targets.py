"""Override targets: the two container shapes an override can act on."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from scoped_override.merge import clear_keys, replace_items, shallow_assign


class TargetKind(StrEnum):
    """Container shapes supported as override targets."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"


def kind_of(value: Any) -> TargetKind | None:
    """Return the container kind of value, or None if it is neither shape."""
    if isinstance(value, MutableMapping):
        return TargetKind.MAPPING
    if isinstance(value, MutableSequence):
        return TargetKind.SEQUENCE
    return None


@dataclass(frozen=True)
class MappingTarget:
    """A keyed mapping overridden with assign semantics."""

    container: MutableMapping[Any, Any]
    kind: ClassVar[TargetKind] = TargetKind.MAPPING

    def accepts(self, replacement: Any) -> bool:
        return isinstance(replacement, Mapping)

    def snapshot(self) -> dict[Any, Any]:
        return dict(self.container)

    def overwrite(self, replacement: Any) -> None:
        # Existing keys not named by the replacement survive.
        shallow_assign(self.container, replacement)

    def restore(self, snapshot: dict[Any, Any]) -> None:
        clear_keys(self.container)
        shallow_assign(self.container, snapshot)


@dataclass(frozen=True)
class SequenceTarget:
    """An ordered sequence overridden with replace semantics."""

    container: MutableSequence[Any]
    kind: ClassVar[TargetKind] = TargetKind.SEQUENCE

    def accepts(self, replacement: Any) -> bool:
        return isinstance(replacement, Sequence) and not isinstance(replacement, (str, bytes))

    def snapshot(self) -> list[Any]:
        return list(self.container)

    def overwrite(self, replacement: Any) -> None:
        replace_items(self.container, replacement)

    def restore(self, snapshot: list[Any]) -> None:
        replace_items(self.container, snapshot)


Target = MappingTarget | SequenceTarget


def classify_target(value: Any) -> Target | None:
    """Wrap value in the matching target variant, or return None if unsupported."""
    kind = kind_of(value)
    if kind is TargetKind.MAPPING:
        return MappingTarget(value)
    if kind is TargetKind.SEQUENCE:
        return SequenceTarget(value)
    return None
