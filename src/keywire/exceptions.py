from __future__ import annotations

from typing import Any


class KeyWireError(Exception):
    """Represent a base class for all keywire-specific failures.

    Catch this type when you want to handle any keywire error path without
    matching each concrete exception class individually. Errors raised by
    user factories are never wrapped in it.
    """


class KeyWireInvalidRegistrationError(KeyWireError):
    """Signal an invalid ``Registry.set`` call.

    Raised when the key is not a ``DependencyKey`` created by ``create_key``
    or when the factory is not callable. The factory itself is not invoked
    at registration time.
    """


class KeyWireInvalidConfigurationError(KeyWireError):
    """Signal an unknown option passed to the ``Registry`` constructor."""


class KeyWireDependencyNotRegisteredError(KeyWireError):
    """Signal that a dependency key has no factory.

    Raised by ``Registry.require`` only. ``Registry.get`` returns ``None``
    for the same situation.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Dependency {key!r} is not registered.")


class KeyWireCircularDependencyError(KeyWireError):
    """Signal that a dependency key cannot be resolved because it is marked as resolving.

    Raised by ``Registry.require`` when the key is resolving further up the
    current call chain (``stuck`` is false), or when it is still marked after
    a failed factory under ``FailurePolicy.STICKY`` (``stuck`` is true).
    """

    def __init__(self, key: Any, *, stuck: bool = False) -> None:
        self.key = key
        self.stuck = stuck
        if stuck:
            msg = (
                f"Dependency {key!r} is still marked as resolving after its factory failed; "
                "register it again to retry."
            )
        else:
            msg = f"Circular dependency detected while resolving {key!r}."
        super().__init__(msg)
