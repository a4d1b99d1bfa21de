"""Tests for shallow copy primitives."""

from collections import OrderedDict

from scoped_override.merge import clear_keys, replace_items, shallow_assign


class TestShallowAssign:
    def test_flat_assign(self) -> None:
        target = {"a": 1, "b": 2}
        shallow_assign(target, {"b": 3, "c": 4})
        assert target == {"a": 1, "b": 3, "c": 4}

    def test_empty_source_leaves_target(self) -> None:
        target = {"a": 1}
        shallow_assign(target, {})
        assert target == {"a": 1}

    def test_nested_values_are_not_merged(self) -> None:
        target = {"db": {"host": "prod", "port": 5432}}
        shallow_assign(target, {"db": {"host": "test"}})
        assert target == {"db": {"host": "test"}}

    def test_values_assigned_by_reference(self) -> None:
        nested = {"x": 1}
        target: dict[str, object] = {}
        shallow_assign(target, {"n": nested})
        assert target["n"] is nested

    def test_does_not_mutate_source(self) -> None:
        source = {"a": 1}
        shallow_assign({"b": 2}, source)
        assert source == {"a": 1}

    def test_works_on_mapping_subclasses(self) -> None:
        target = OrderedDict(a=1)
        shallow_assign(target, {"b": 2})
        assert list(target.items()) == [("a", 1), ("b", 2)]


class TestClearKeys:
    def test_removes_every_key(self) -> None:
        target = {"a": 1, "b": 2}
        clear_keys(target)
        assert target == {}

    def test_keeps_identity(self) -> None:
        target = {"a": 1}
        ref = target
        clear_keys(target)
        assert ref is target

    def test_empty_mapping(self) -> None:
        target: dict[str, int] = {}
        clear_keys(target)
        assert target == {}


class TestReplaceItems:
    def test_shrinks(self) -> None:
        target = [1, 2, 3]
        replace_items(target, [9, 8])
        assert target == [9, 8]

    def test_grows(self) -> None:
        target = [1]
        replace_items(target, [4, 5, 6])
        assert target == [4, 5, 6]

    def test_empty_replacement(self) -> None:
        target = [1, 2]
        replace_items(target, [])
        assert target == []

    def test_accepts_tuple_and_generator(self) -> None:
        target = [1]
        replace_items(target, (2, 3))
        assert target == [2, 3]
        replace_items(target, (n * 10 for n in range(2)))
        assert target == [0, 10]

    def test_replacing_with_itself_keeps_contents(self) -> None:
        target = [1, 2, 3]
        replace_items(target, target)
        assert target == [1, 2, 3]

    def test_keeps_identity(self) -> None:
        target = [1, 2]
        ref = target
        replace_items(target, [3])
        assert ref is target
