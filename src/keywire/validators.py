from __future__ import annotations

from typing import Any

from keywire.exceptions import KeyWireInvalidRegistrationError
from keywire.keys import DependencyKey


class DependencyRegistrationValidator:
    """Validates registry arguments before storing a factory."""

    def validate_key(self, key: object) -> None:
        """Validate that a key was created with ``create_key``."""
        if not isinstance(key, DependencyKey):
            msg = f"Registry keys must be created with create_key(), got {key!r}."
            raise KeyWireInvalidRegistrationError(msg)

    def validate_factory(self, key: DependencyKey[Any], factory: object) -> None:
        """Validate that a factory can be called with the registry."""
        if not callable(factory):
            msg = f"Factory for {key!r} must be callable, got {factory!r}."
            raise KeyWireInvalidRegistrationError(msg)
