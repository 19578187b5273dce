"""Immutable domain models for the train route network.

All models are frozen dataclasses with slots. Result models carry an
optional domain error instead of raising it, so every outcome of a
route mutation or path query is a value the caller can inspect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional

from .errors import RouteNetworkError


class RouteStatus(Enum):
    """Outcome of a route mutation."""

    ADDED = auto()
    DELETED = auto()
    INVALID = auto()


@dataclass(frozen=True, slots=True)
class City:
    """A city in the network.

    Attributes:
        index: Stable position assigned at creation (insertion order)
        name: Name as given by the caller, without normalization
    """

    index: int
    name: str

    def matches(self, query: str) -> bool:
        """Case-insensitive exact comparison against ``query``."""
        return self.name.lower() == query.lower()


@dataclass(frozen=True, slots=True)
class RouteChange:
    """Result of adding or deleting a route.

    Attributes:
        status: ADDED, DELETED, or INVALID when nothing was changed
        first: Index of the first city as requested
        second: Index of the second city as requested
        first_name: Name of the first city, when the index was valid
        second_name: Name of the second city, when the index was valid
        error: Why the change was rejected (only set when INVALID)
    """

    status: RouteStatus
    first: int
    second: int
    first_name: Optional[str] = None
    second_name: Optional[str] = None
    error: Optional[RouteNetworkError] = None

    @property
    def ok(self) -> bool:
        """Check if the adjacency relation was changed."""
        return self.status is not RouteStatus.INVALID

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        start: Start name as queried
        end: End name as queried
        path: City names from start to end (inclusive), empty on failure
        error: CityNotFoundError or NoRouteFoundError on failure
    """

    start: str
    end: str
    path: tuple[str, ...] = field(default_factory=tuple)
    error: Optional[RouteNetworkError] = None

    @property
    def is_found(self) -> bool:
        """Check if a path was found."""
        return self.error is None and len(self.path) > 0

    @property
    def hops(self) -> int:
        """Number of routes travelled, -1 when no path was found."""
        return len(self.path) - 1 if self.path else -1

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error


@dataclass(frozen=True, slots=True)
class PathsResult:
    """Result of an all-routes query.

    Iterating the result consumes the lazily produced paths, so it can
    be iterated once.

    Attributes:
        start: Start name as queried
        end: End name as queried
        paths: Iterator of city-name tuples from start to end
        error: CityNotFoundError when either name is unknown
    """

    start: str
    end: str
    paths: Iterator[tuple[str, ...]] = field(default_factory=lambda: iter(()))
    error: Optional[RouteNetworkError] = None

    @property
    def ok(self) -> bool:
        """Check if both cities were resolved."""
        return self.error is None

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return self.paths

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error


@dataclass(frozen=True, slots=True)
class Connection:
    """One row of the connectivity snapshot.

    Attributes:
        city: The city this row describes
        neighbors: Names of directly connected cities, in index order
    """

    city: City
    neighbors: tuple[str, ...] = field(default_factory=tuple)
