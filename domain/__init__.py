"""
Domain layer package.

This package contains the configuration store model and the ports that
are independent of any specific infrastructure or frameworks.
"""

from .models import ConfigStore  # noqa: F401
from .ports import (  # noqa: F401
    ClockPort,
    ConfigRepositoryPort,
    LoggerPort,
)

__all__ = [
    # Models
    "ConfigStore",
    # Ports
    "ConfigRepositoryPort",
    "ClockPort",
    "LoggerPort",
]
