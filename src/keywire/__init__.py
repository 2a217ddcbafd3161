from keywire.exceptions import (
    KeyWireCircularDependencyError,
    KeyWireDependencyNotRegisteredError,
    KeyWireError,
    KeyWireInvalidConfigurationError,
    KeyWireInvalidRegistrationError,
)
from keywire.failure_policy import FailurePolicy
from keywire.keys import DependencyKey, create_key
from keywire.registry import Registry

__all__ = [
    "DependencyKey",
    "FailurePolicy",
    "KeyWireCircularDependencyError",
    "KeyWireDependencyNotRegisteredError",
    "KeyWireError",
    "KeyWireInvalidConfigurationError",
    "KeyWireInvalidRegistrationError",
    "Registry",
    "create_key",
]
