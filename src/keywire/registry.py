from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from typing_extensions import Self

from keywire.defaults import DEFAULT_FAILURE_POLICY
from keywire.exceptions import (
    KeyWireCircularDependencyError,
    KeyWireDependencyNotRegisteredError,
    KeyWireInvalidConfigurationError,
)
from keywire.failure_policy import FailurePolicy
from keywire.keys import DependencyKey
from keywire.validators import DependencyRegistrationValidator

T = TypeVar("T")

Factory = Callable[["Registry"], T]
"""A callable that builds a value, given the registry for nested lookups."""

logger = logging.getLogger(__name__)
_MISSING = object()


class Registry:
    """Map dependency keys to lazily evaluated factories.

    Every lookup calls the registered factory again; values are never
    cached. Factories receive the registry and may look up other keys,
    including keys that lead back to themselves. A key that is already
    being resolved further up the call chain resolves to ``None`` instead
    of recursing forever.

    Resolution is synchronous and single-threaded. The resolving marks are
    plain per-registry state, not locks.

    Examples:
        .. code-block:: python

            answer: DependencyKey[int] = create_key("answer")
            successor: DependencyKey[int] = create_key("successor")

            registry = (
                Registry()
                .set(answer, lambda _: 42)
                .set(successor, lambda r: r.get(answer) + 1)
            )
            registry.get(successor)  # 43

    """

    def __init__(
        self,
        *,
        failure_policy: FailurePolicy | str = DEFAULT_FAILURE_POLICY,
    ) -> None:
        """Create an empty registry.

        Args:
            failure_policy: What happens to a key's resolving mark when its
                factory raises. ``FailurePolicy.STICKY`` keeps the key marked,
                so later lookups return ``None`` until the key is registered
                again. ``FailurePolicy.RELEASE`` clears the mark so the next
                lookup calls the factory again. Plain strings are accepted.

        Raises:
            KeyWireInvalidConfigurationError: If ``failure_policy`` is not a
                known policy.

        """
        try:
            self._failure_policy = FailurePolicy(failure_policy)
        except ValueError:
            msg = f"Unknown failure policy {failure_policy!r}."
            raise KeyWireInvalidConfigurationError(msg) from None

        self._factories: dict[DependencyKey[Any], Factory[Any]] = {}
        # Keys whose factory is running on the current call stack.
        self._resolving: set[DependencyKey[Any]] = set()
        # Keys whose factory raised under FailurePolicy.STICKY.
        self._stuck: set[DependencyKey[Any]] = set()
        self._validator = DependencyRegistrationValidator()

    @property
    def failure_policy(self) -> FailurePolicy:
        """Return the policy applied when a factory raises."""
        return self._failure_policy

    def set(self, key: DependencyKey[T], factory: Factory[T]) -> Self:
        """Register ``factory`` under ``key``, replacing any previous factory.

        The factory is not called here. Registering a key clears the mark
        left on it by a failed factory, but a key whose factory is still
        running keeps its guard, so a factory that re-registers its own key
        and then looks it up gets ``None``.

        Args:
            key: Key created with ``create_key``.
            factory: Callable taking the registry and returning the value.

        Returns:
            The registry itself, so registrations can be chained.

        Raises:
            KeyWireInvalidRegistrationError: If ``key`` is not a
                ``DependencyKey`` or ``factory`` is not callable.

        """
        self._validator.validate_key(key)
        self._validator.validate_factory(key, factory)

        if key in self._factories:
            logger.debug("Replacing factory for %r", key)
        else:
            logger.debug("Registering factory for %r", key)

        self._factories[key] = factory
        self._stuck.discard(key)
        return self

    def get(self, key: DependencyKey[T]) -> T | None:
        """Resolve ``key`` by calling its factory.

        Returns ``None`` when nothing is registered for ``key`` or when
        ``key`` is already being resolved (a circular dependency). Errors
        raised by the factory propagate unchanged.

        Args:
            key: Key to resolve.

        Returns:
            Whatever the factory returned, or ``None``.

        """
        value = self._resolve(key)
        if value is _MISSING:
            return None
        return value

    def require(self, key: DependencyKey[T]) -> T:
        """Resolve ``key`` like ``get``, raising instead of returning ``None``.

        A ``None`` produced by the factory itself is returned as-is. The
        raised errors propagate out of every factory on the current path
        like any factory error, so under ``FailurePolicy.STICKY`` each key
        on that path stays marked until it is registered again.

        Args:
            key: Key to resolve.

        Returns:
            Whatever the factory returned.

        Raises:
            KeyWireDependencyNotRegisteredError: If nothing is registered for
                ``key``.
            KeyWireCircularDependencyError: If ``key`` is already being
                resolved, or is still marked after its factory failed under
                ``FailurePolicy.STICKY``. ``stuck`` tells the two apart.

        """
        value = self._resolve(key)
        if value is not _MISSING:
            return value
        if key not in self._factories:
            raise KeyWireDependencyNotRegisteredError(key)
        raise KeyWireCircularDependencyError(key, stuck=key in self._stuck)

    def is_resolving(self, key: DependencyKey[Any]) -> bool:
        """Return whether ``key`` is running or still marked after a failed factory."""
        return key in self._resolving or key in self._stuck

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def _resolve(self, key: DependencyKey[Any]) -> Any:
        factory = self._factories.get(key)
        if factory is None:
            logger.debug("No factory registered for %r", key)
            return _MISSING

        if key in self._resolving:
            logger.debug("%r is already resolving, breaking the cycle", key)
            return _MISSING

        if key in self._stuck:
            logger.debug("%r is still marked after a failed factory", key)
            return _MISSING

        self._resolving.add(key)
        try:
            value = factory(self)
        except BaseException:
            self._resolving.discard(key)
            if self._failure_policy is FailurePolicy.RELEASE:
                logger.debug("Factory for %r failed, resolving mark released", key)
            else:
                self._stuck.add(key)
                logger.debug("Factory for %r failed, key stays marked as resolving", key)
            raise

        self._resolving.discard(key)
        return value
