"""Typed domain errors for the train route network.

Route mutations and path queries do not raise these errors: they are
carried inside the returned result objects so the caller can decide
how to report them. Only operations that return a plain value (such as
``RouteGraph.add_city``) raise.

All errors inherit from RouteNetworkError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteNetworkError(Exception):
    """Base error for the route network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class CityNotFoundError(RouteNetworkError):
    """A city name does not match any city (case-insensitively).

    Attributes:
        city_name: The name that could not be resolved
    """

    city_name: str = ""


@dataclass
class IndexOutOfRangeError(RouteNetworkError):
    """A city index is outside ``[0, city_count)``.

    Attributes:
        index: The offending index
        city_count: Number of cities at the time of the call
    """

    index: int = -1
    city_count: int = 0


@dataclass
class EdgeAlreadyExistsError(RouteNetworkError):
    """A route between the two cities is already present."""

    first: int = -1
    second: int = -1


@dataclass
class EdgeDoesNotExistError(RouteNetworkError):
    """No route exists between the two cities."""

    first: int = -1
    second: int = -1


@dataclass
class SelfLoopError(RouteNetworkError):
    """A route from a city to itself was requested.

    Attributes:
        index: Index of the city
    """

    index: int = -1


@dataclass
class CapacityExceededError(RouteNetworkError):
    """The network already holds as many cities as its capacity allows.

    Attributes:
        capacity: Declared capacity of the network
    """

    capacity: int = 0


@dataclass
class NoRouteFoundError(RouteNetworkError):
    """No path exists between the requested cities.

    Attributes:
        departure: Name of the departure city
        arrival: Name of the arrival city
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class ConfigurationError(RouteNetworkError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
