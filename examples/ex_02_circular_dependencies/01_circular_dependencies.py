"""Circular dependencies resolve to ``None`` instead of recursing forever.

A factory may look up its own key, for example to fall back to a default
when no override is available.
"""

from __future__ import annotations

from keywire import DependencyKey, Registry, create_key

Greeting: DependencyKey[str] = create_key("greeting")
Ping: DependencyKey[str] = create_key("ping")
Pong: DependencyKey[str] = create_key("pong")


def main() -> None:
    registry = Registry()
    registry.set(Greeting, lambda r: r.get(Greeting) or "hello")
    registry.set(Ping, lambda r: r.get(Pong))
    registry.set(Pong, lambda r: r.get(Ping))

    print(f"greeting={registry.get(Greeting)}")  # => greeting=hello
    print(f"ping={registry.get(Ping)}")  # => ping=None
    print(f"pong={registry.get(Pong)}")  # => pong=None


if __name__ == "__main__":
    main()
