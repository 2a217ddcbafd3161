"""Failure policies decide whether a key can be retried after its factory raises.

``FailurePolicy.STICKY`` (the default) keeps the key marked as resolving, so
later lookups return ``None`` until the key is registered again.
``FailurePolicy.RELEASE`` clears the mark and lets the next lookup retry.
"""

from __future__ import annotations

from keywire import DependencyKey, FailurePolicy, Registry, create_key

Connection: DependencyKey[str] = create_key("connection")


class FlakyConnect:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, _: Registry) -> str:
        self.calls += 1
        if self.calls == 1:
            msg = "network down"
            raise ConnectionError(msg)
        return "connected"


def attempt(registry: Registry) -> str:
    try:
        return str(registry.get(Connection))
    except ConnectionError as error:
        return f"error:{error}"


def outcomes(policy: FailurePolicy) -> str:
    registry = Registry(failure_policy=policy).set(Connection, FlakyConnect())
    return ",".join(attempt(registry) for _ in range(2))


def main() -> None:
    print(f"sticky={outcomes(FailurePolicy.STICKY)}")  # => sticky=error:network down,None
    print(f"release={outcomes(FailurePolicy.RELEASE)}")  # => release=error:network down,connected

    sticky = Registry().set(Connection, FlakyConnect())
    attempt(sticky)
    print(f"stuck={sticky.is_resolving(Connection)}")  # => stuck=True
    sticky.set(Connection, lambda _: "reconnected")
    print(f"after_reregister={sticky.get(Connection)}")  # => after_reregister=reconnected


if __name__ == "__main__":
    main()
