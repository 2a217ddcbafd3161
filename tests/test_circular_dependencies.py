"""Tests for the circular resolution guard."""

import sys

from keywire.keys import DependencyKey, create_key
from keywire.registry import Registry


class Logger:
    def log(self, message: str) -> str:
        return message


def test_self_reference_resolves_to_none(registry: Registry) -> None:
    key: DependencyKey[int] = create_key("self-ref")

    registry.set(key, lambda r: r.get(key))

    assert registry.get(key) is None
    assert not registry.is_resolving(key)


def test_self_reference_can_fall_back_to_default(registry: Registry) -> None:
    default = Logger()
    key: DependencyKey[Logger] = create_key("logger")

    registry.set(key, lambda _: Logger())
    registry.set(key, lambda r: r.get(key) or default)

    assert registry.get(key) is default


def test_two_node_cycle_resolves_to_none(registry: Registry) -> None:
    first: DependencyKey[str] = create_key("circular-1")
    second: DependencyKey[str] = create_key("circular-2")

    registry.set(first, lambda r: r.get(second))
    registry.set(second, lambda r: r.get(first))

    assert registry.get(first) is None
    assert registry.get(second) is None
    assert not registry.is_resolving(first)
    assert not registry.is_resolving(second)


def test_cycle_returns_none_to_the_caller_mid_resolution(registry: Registry) -> None:
    seen: list[object] = []
    first: DependencyKey[str] = create_key("first")
    second: DependencyKey[str] = create_key("second")

    def build_second(r: Registry) -> str:
        seen.append(r.get(first))
        return "second"

    registry.set(first, lambda r: f"first+{r.get(second)}")
    registry.set(second, build_second)

    assert registry.get(first) == "first+second"
    assert seen == [None]


def test_long_cycle_does_not_exhaust_the_stack(registry: Registry) -> None:
    size = min(sys.getrecursionlimit() // 10, 50)
    keys: list[DependencyKey[int]] = [create_key(f"node-{index}") for index in range(size)]

    for index, key in enumerate(keys):
        next_key = keys[(index + 1) % size]
        registry.set(key, lambda r, next_key=next_key: (r.get(next_key) or 0) + 1)

    assert registry.get(keys[0]) == size
    assert not any(registry.is_resolving(key) for key in keys)


def test_key_can_be_resolved_again_after_a_cycle(registry: Registry) -> None:
    calls: list[int] = []
    key: DependencyKey[int] = create_key("counter")

    def build(r: Registry) -> int:
        calls.append(1)
        r.get(key)
        return len(calls)

    registry.set(key, build)

    assert registry.get(key) == 1
    assert registry.get(key) == 2


def test_reregistering_own_key_mid_resolution_keeps_the_guard(registry: Registry) -> None:
    calls: list[int] = []
    key: DependencyKey[int] = create_key("rebinding")

    def factory(r: Registry) -> int:
        calls.append(1)
        r.set(key, factory)
        return r.get(key) or 1

    registry.set(key, factory)

    assert registry.get(key) == 1
    assert calls == [1]
    assert not registry.is_resolving(key)
