"""Shared pytest fixtures for keywire tests."""

import pytest

from keywire.failure_policy import FailurePolicy
from keywire.registry import Registry


@pytest.fixture()
def registry() -> Registry:
    """Registry with the default sticky failure policy."""
    return Registry()


@pytest.fixture()
def release_registry() -> Registry:
    """Registry that releases the resolving mark when a factory raises."""
    return Registry(failure_policy=FailurePolicy.RELEASE)
