"""Route graph engine.

RouteGraph owns the cities of the network and composes an adjacency
store with the shortest-path and all-paths algorithms. Route mutations
and queries report failures through their result objects; nothing here
prints or terminates the process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..adapters.adjacency import STORE_BACKENDS, AdjacencyMatrix
from ..config import GraphConfig, get_config
from ..domain.errors import (
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
from ..domain.models import (
    City,
    Connection,
    PathResult,
    PathsResult,
    RouteChange,
    RouteStatus,
)
from ..ports.adjacency import AdjacencyStorePort
from .dijkstra import dijkstra
from .paths import iter_simple_paths


@dataclass
class RouteGraph:
    """Undirected, unweighted network of cities with a fixed capacity.

    Cities are appended only and keep their index for the lifetime of
    the graph. Routes can be added and deleted between any two existing
    cities.

    Attributes:
        capacity: Maximum number of cities
        store: Adjacency storage, an AdjacencyMatrix by default

    Example:
        graph = RouteGraph(capacity=20)
        jakarta = graph.add_city("Jakarta")
        kediri = graph.add_city("Kediri")
        graph.add_route(jakarta, kediri)
        graph.shortest_path("jakarta", "KEDIRI").path  # ("Jakarta", "Kediri")
    """

    capacity: int
    store: Optional[AdjacencyStorePort] = None

    _cities: List[City] = field(default_factory=list, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

        if not isinstance(self.capacity, int) or self.capacity < 1:
            raise ConfigurationError(
                f"Capacity must be a positive integer, got {self.capacity!r}",
                setting_name="capacity",
                expected_type="int >= 1",
            )
        if self.store is None:
            self.store = AdjacencyMatrix(self.capacity)
        elif self.store.capacity < self.capacity:
            raise ConfigurationError(
                f"Store capacity {self.store.capacity} is smaller than "
                f"graph capacity {self.capacity}",
                setting_name="store",
            )

    @classmethod
    def from_config(cls, config: Optional[GraphConfig] = None) -> RouteGraph:
        """Create an empty graph from the graph configuration.

        Args:
            config: Optional override, defaults to the application config.

        Returns:
            A RouteGraph backed by the configured store.
        """
        config = config or get_config().graph
        factory = STORE_BACKENDS.get(config.backend)
        if factory is None:
            raise ConfigurationError(
                f"Unknown adjacency backend: {config.backend!r}",
                setting_name="TRN_GRAPH_BACKEND",
                expected_type=" or ".join(sorted(STORE_BACKENDS)),
            )
        return cls(capacity=config.capacity, store=factory(config.capacity))

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def city_count(self) -> int:
        return len(self._cities)

    @property
    def cities(self) -> Tuple[City, ...]:
        return tuple(self._cities)

    @property
    def route_count(self) -> int:
        return self._store.edge_count()

    @property
    def _store(self) -> AdjacencyStorePort:
        assert self.store is not None
        return self.store

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_index(name) is not None

    def city(self, index: int) -> City:
        """Get a city by index.

        Raises:
            IndexOutOfRangeError: If no city has this index.
        """
        self._check_index(index)
        return self._cities[index]

    def find_index(self, name: str) -> Optional[int]:
        """Resolve a city name to its index.

        The comparison is case-insensitive; the first city in insertion
        order wins when several share a name.

        Returns:
            The city index, or None if no city matches.
        """
        for city in self._cities:
            if city.matches(name):
                return city.index
        return None

    def has_route(self, first: int, second: int) -> bool:
        """Check if a route connects the two cities."""
        if not (self._in_range(first) and self._in_range(second)):
            return False
        return self._store.has_edge(first, second)

    def neighbors(self, index: int) -> List[City]:
        """Return the cities directly connected to ``index``, in index order."""
        self._check_index(index)
        return [self._cities[j] for j in self._store.neighbors(index)]

    def connectivity_snapshot(self) -> List[Connection]:
        """For each city in insertion order, the names of its neighbours."""
        return [
            Connection(
                city=city,
                neighbors=tuple(
                    self._cities[j].name for j in self._store.neighbors(city.index)
                ),
            )
            for city in self._cities
        ]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_city(self, name: str) -> int:
        """Append a city and return its index.

        Raises:
            CapacityExceededError: If the network is already full.
        """
        if len(self._cities) >= self.capacity:
            self._logger.warning(
                "City rejected, network full",
                extra={"city": name, "capacity": self.capacity},
            )
            raise CapacityExceededError(
                f"Cannot add {name!r}: capacity of {self.capacity} cities reached",
                capacity=self.capacity,
            )

        index = len(self._cities)
        self._cities.append(City(index=index, name=name))
        self._logger.info("City added", extra={"city": name, "index": index})
        return index

    def add_route(self, first: int, second: int) -> RouteChange:
        """Connect two cities in both directions.

        Returns:
            RouteChange with status ADDED, or INVALID carrying an
            IndexOutOfRangeError, SelfLoopError or EdgeAlreadyExistsError.
        """
        error = self._validate_pair(first, second)
        if error is None and self._store.has_edge(first, second):
            error = EdgeAlreadyExistsError(
                "Route already exists", first=first, second=second
            )
        if error is not None:
            return self._rejected(first, second, error)

        self._store.add_edge(first, second)
        self._logger.info(
            "Route added",
            extra={"first": self._cities[first].name, "second": self._cities[second].name},
        )
        return self._changed(RouteStatus.ADDED, first, second)

    def delete_route(self, first: int, second: int) -> RouteChange:
        """Disconnect two cities in both directions.

        Returns:
            RouteChange with status DELETED, or INVALID carrying an
            IndexOutOfRangeError or EdgeDoesNotExistError.
        """
        error = self._validate_indices(first, second)
        if error is None and not self._store.has_edge(first, second):
            error = EdgeDoesNotExistError(
                "Route does not exist", first=first, second=second
            )
        if error is not None:
            return self._rejected(first, second, error)

        self._store.remove_edge(first, second)
        self._logger.info(
            "Route deleted",
            extra={"first": self._cities[first].name, "second": self._cities[second].name},
        )
        return self._changed(RouteStatus.DELETED, first, second)

    def add_route_by_name(self, first_name: str, second_name: str) -> RouteChange:
        """Like add_route, resolving both cities by name first."""
        resolved = self._resolve_pair(first_name, second_name)
        if isinstance(resolved, RouteChange):
            return resolved
        return self.add_route(*resolved)

    def delete_route_by_name(self, first_name: str, second_name: str) -> RouteChange:
        """Like delete_route, resolving both cities by name first."""
        resolved = self._resolve_pair(first_name, second_name)
        if isinstance(resolved, RouteChange):
            return resolved
        return self.delete_route(*resolved)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def shortest_path(self, start_name: str, end_name: str) -> PathResult:
        """Find the shortest route between two cities, by name.

        Returns:
            PathResult with the city names from start to end, or an
            empty path carrying CityNotFoundError / NoRouteFoundError.
            A query from a city to itself yields the one-city path.
        """
        start = self.find_index(start_name)
        end = self.find_index(end_name)

        if start is None or end is None:
            missing = start_name if start is None else end_name
            return PathResult(
                start=start_name,
                end=end_name,
                error=CityNotFoundError(
                    "Invalid start or end location", city_name=missing
                ),
            )

        self._logger.debug(
            "Solving route", extra={"departure": start_name, "arrival": end_name}
        )
        path, distance = dijkstra(self._store, len(self._cities), start, end)

        start_city = self._cities[start].name
        end_city = self._cities[end].name
        if not path:
            self._logger.warning(
                "No route found",
                extra={"departure": start_city, "arrival": end_city},
            )
            return PathResult(
                start=start_name,
                end=end_name,
                error=NoRouteFoundError(
                    f"No route from {start_city} to {end_city}",
                    departure=start_city,
                    arrival=end_city,
                ),
            )

        self._logger.info(
            "Route found",
            extra={
                "departure": start_city,
                "arrival": end_city,
                "stops": len(path),
                "distance": distance,
            },
        )
        return PathResult(
            start=start_name,
            end=end_name,
            path=tuple(self._cities[i].name for i in path),
        )

    def all_simple_paths(self, start_name: str, end_name: str) -> PathsResult:
        """Lazily enumerate every simple route between two cities, by name.

        Paths come out in depth-first order, neighbours visited by
        ascending index. The result is iterable once.

        Returns:
            PathsResult whose paths are city-name tuples, or an empty
            result carrying CityNotFoundError when a name is unknown.
        """
        start = self.find_index(start_name)
        end = self.find_index(end_name)

        if start is None or end is None:
            missing = start_name if start is None else end_name
            self._logger.warning(
                "Invalid start or end location",
                extra={"departure": start_name, "arrival": end_name},
            )
            return PathsResult(
                start=start_name,
                end=end_name,
                error=CityNotFoundError(
                    "Invalid start or end location", city_name=missing
                ),
            )

        return PathsResult(
            start=start_name,
            end=end_name,
            paths=(
                tuple(self._cities[i].name for i in path)
                for path in iter_simple_paths(self._store, start, end)
            ),
        )

    def all_simple_index_paths(
        self, start: int, end: int
    ) -> Iterator[Tuple[int, ...]]:
        """Like all_simple_paths, for callers that already hold indices.

        Raises:
            IndexOutOfRangeError: If either index has no city.
        """
        self._check_index(start)
        self._check_index(end)
        return iter_simple_paths(self._store, start, end)

    def count_simple_paths(self, start_name: str, end_name: str) -> int:
        """Count the simple routes between two cities, by name."""
        return sum(1 for _ in self.all_simple_paths(start_name, end_name))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._cities)

    def _check_index(self, index: int) -> None:
        if not self._in_range(index):
            raise IndexOutOfRangeError(
                f"No city at index {index}",
                index=index,
                city_count=len(self._cities),
            )

    def _validate_indices(self, first: int, second: int) -> Optional[RouteNetworkError]:
        for index in (first, second):
            if not self._in_range(index):
                return IndexOutOfRangeError(
                    f"No city at index {index}",
                    index=index,
                    city_count=len(self._cities),
                )
        return None

    def _validate_pair(self, first: int, second: int) -> Optional[RouteNetworkError]:
        error = self._validate_indices(first, second)
        if error is None and first == second:
            error = SelfLoopError(
                "A city cannot be connected to itself", index=first
            )
        return error

    def _resolve_pair(
        self, first_name: str, second_name: str
    ) -> RouteChange | Tuple[int, int]:
        first = self.find_index(first_name)
        second = self.find_index(second_name)
        if first is not None and second is not None:
            return first, second

        missing = first_name if first is None else second_name
        return self._rejected(
            -1 if first is None else first,
            -1 if second is None else second,
            CityNotFoundError(f"Unknown city: {missing}", city_name=missing),
        )

    def _changed(self, status: RouteStatus, first: int, second: int) -> RouteChange:
        return RouteChange(
            status=status,
            first=first,
            second=second,
            first_name=self._cities[first].name,
            second_name=self._cities[second].name,
        )

    def _rejected(
        self, first: int, second: int, error: RouteNetworkError
    ) -> RouteChange:
        self._logger.warning(
            "Route change rejected",
            extra={"first": first, "second": second, "reason": error.message},
        )
        return RouteChange(
            status=RouteStatus.INVALID,
            first=first,
            second=second,
            first_name=self._cities[first].name if self._in_range(first) else None,
            second_name=self._cities[second].name if self._in_range(second) else None,
            error=error,
        )
