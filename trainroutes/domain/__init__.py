"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CapacityExceededError,
    CityNotFoundError,
    ConfigurationError,
    EdgeAlreadyExistsError,
    EdgeDoesNotExistError,
    IndexOutOfRangeError,
    NoRouteFoundError,
    RouteNetworkError,
    SelfLoopError,
)
from .models import (
    City,
    Connection,
    PathResult,
    PathsResult,
    RouteChange,
    RouteStatus,
)

__all__ = [
    # Models
    "City",
    "Connection",
    "PathResult",
    "PathsResult",
    "RouteChange",
    "RouteStatus",
    # Errors
    "RouteNetworkError",
    "CityNotFoundError",
    "IndexOutOfRangeError",
    "EdgeAlreadyExistsError",
    "EdgeDoesNotExistError",
    "SelfLoopError",
    "CapacityExceededError",
    "NoRouteFoundError",
    "ConfigurationError",
]
