"""Strict resolution: ``require`` raises where ``get`` returns ``None``.

Use ``require`` when a missing or circular dependency is a bug, and ``get``
when ``None`` is an acceptable answer. Errors from ``require`` escape the
factories on the current path like any factory error.
"""

from __future__ import annotations

from keywire import (
    DependencyKey,
    KeyWireCircularDependencyError,
    KeyWireDependencyNotRegisteredError,
    Registry,
    create_key,
)

Settings: DependencyKey[dict[str, str]] = create_key("settings")
Missing: DependencyKey[str] = create_key("missing")
Loop: DependencyKey[str] = create_key("loop")


def main() -> None:
    registry = Registry()
    registry.set(Settings, lambda _: {"env": "dev"})
    registry.set(Loop, lambda r: r.require(Loop))

    print(f"env={registry.require(Settings)['env']}")  # => env=dev

    try:
        registry.require(Missing)
    except KeyWireDependencyNotRegisteredError as error:
        print(f"missing_key={error.key.name}")  # => missing_key=missing

    try:
        registry.require(Loop)
    except KeyWireCircularDependencyError as error:
        print(f"circular_key={error.key.name}")  # => circular_key=loop

    # The error escaped the Loop factory, so under the default STICKY policy
    # Loop stays marked until it is registered again.
    print(f"loop_marked={registry.is_resolving(Loop)}")  # => loop_marked=True


if __name__ == "__main__":
    main()
