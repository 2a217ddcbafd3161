from __future__ import annotations

from enum import Enum


class FailurePolicy(str, Enum):
    """Select what happens to a key's resolving mark when its factory raises.

    The factory error always propagates unchanged to the caller. The policy
    only decides whether the key can be resolved again afterwards.
    """

    STICKY = "sticky"
    """Leave the key marked as resolving; later lookups see a cycle until re-registration."""

    RELEASE = "release"
    """Clear the resolving mark on every exit path so the next lookup retries the factory."""
