from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class DependencyKey(Generic[T]):
    """Identify one registry entry by object identity.

    Keys compare and hash by identity, so two keys created with the same
    ``name`` never collide. The type parameter only types ``Registry.get``
    results for static checkers and is never checked at runtime.

    Examples:
        .. code-block:: python

            MagicNumber: DependencyKey[int] = create_key("magic-number")

    """

    name: str

    def __repr__(self) -> str:
        return f"DependencyKey({self.name!r}, id=0x{id(self):x})"


def create_key(name: str) -> DependencyKey[Any]:
    """Create a fresh dependency key labelled with ``name``.

    The label is for humans only and does not need to be unique. Annotate
    the target variable to fix the value type the key resolves to.

    Args:
        name: Human-readable label shown in ``repr`` and error messages.

    Returns:
        A new key that is equal only to itself.

    """
    return DependencyKey(name)
