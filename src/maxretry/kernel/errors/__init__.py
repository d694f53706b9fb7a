"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError            (application.py)
    │   ├── ConfigError
    │   │   ├── MissingRequiredSettingError
    │   │   └── InvalidSettingValueError
    │   └── ProcessingError
    │       └── ProcessingTimeoutError
    └── InfrastructureError         (infrastructure.py)
        ├── BrokerConnectionError
        ├── TopologyError
        └── ErrorQueueUnavailableError
"""

from maxretry.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    ProcessingError,
    ProcessingTimeoutError,
)
from maxretry.kernel.errors.base import BaseError
from maxretry.kernel.errors.infrastructure import (
    BrokerConnectionError,
    ErrorQueueUnavailableError,
    InfrastructureError,
    TopologyError,
    redact_url,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "BrokerConnectionError",
    "ConfigError",
    "ErrorQueueUnavailableError",
    "InfrastructureError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ProcessingError",
    "ProcessingTimeoutError",
    "TopologyError",
    "redact_url",
]
