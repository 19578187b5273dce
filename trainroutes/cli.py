"""Interactive menu for the train route network.

The shell reads choices and city names from the keyboard, calls the
RouteGraph operations and prints their results. All wording lives
here; the engine only returns structured outcomes.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .config import AppConfig, get_config
from .domain.errors import (
    CapacityExceededError,
    CityNotFoundError,
    EdgeAlreadyExistsError,
    EdgeDoesNotExistError,
    SelfLoopError,
)
from .domain.models import RouteChange
from .graph.network import build_demo_network
from .graph.route_graph import RouteGraph
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

MENU = (
    "\nMenu:\n"
    "1. Show Shortest Route\n"
    "2. Show All Routes\n"
    "3. Add City\n"
    "4. Add Route\n"
    "5. Delete Route\n"
    "6. Show Adjacency Matrix\n"
    "0. Exit"
)


class RouteShell:
    """Menu loop bound to one RouteGraph."""

    def __init__(
        self,
        graph: RouteGraph,
        input_fn: InputFn = input,
        separator: str = "-" * 55,
    ) -> None:
        self.graph = graph
        self.input_fn = input_fn
        self.separator = separator
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.show_shortest_route,
            "2": self.show_all_routes,
            "3": self.add_city,
            "4": self.add_route,
            "5": self.delete_route,
            "6": self.show_adjacency,
        }

    def run(self) -> None:
        while True:
            print(MENU)
            try:
                choice = self.input_fn("Enter your choice: ").strip()
            except EOFError:
                choice = "0"

            if choice == "0":
                print("Exiting...")
                return

            action = self._actions.get(choice)
            if action is None:
                print("Invalid choice. Please enter a valid option.")
                continue
            try:
                action()
            except EOFError:
                print("Exiting...")
                return

    def show_adjacency(self) -> None:
        print(self.separator)
        print("Train Route Graph (Adjacency Matrix):")
        for row in self.graph.connectivity_snapshot():
            linked = "".join(f"{name} - " for name in row.neighbors)
            print(f"{row.city.name} connected to: {linked}")
        print(self.separator)

    def show_shortest_route(self) -> None:
        start = self.input_fn("Enter start location: ")
        end = self.input_fn("Enter end location: ")

        result = self.graph.shortest_path(start, end)
        if isinstance(result.error, CityNotFoundError):
            print("Invalid start or end location.")
            return

        print(self.separator)
        if not result.is_found:
            print(str(result.error))
            return

        first, last = result.path[0], result.path[-1]
        print(f"Shortest Route from {first} to {last}: {' - '.join(result.path)}")
        print(self.separator)

    def show_all_routes(self) -> None:
        start = self.input_fn("Enter start location: ")
        end = self.input_fn("Enter end location: ")

        result = self.graph.all_simple_paths(start, end)

        print(self.separator)
        if isinstance(result.error, CityNotFoundError):
            print("Invalid start or end location.")
        else:
            print(f"All possible routes from {start} to {end}:")
            for path in result:
                print(f"Route: {' - '.join(path)}")
        print(self.separator)

    def add_city(self) -> None:
        name = self.input_fn("Enter the name of the city to add: ").strip()
        if not name:
            print("City name cannot be empty.")
            return
        try:
            self.graph.add_city(name)
        except CapacityExceededError as e:
            print(f"Cannot add city: the network is full ({e.capacity} cities).")
            return
        print("City added successfully.")

    def add_route(self) -> None:
        names = self._read_pair("Enter the names of the cities to add the route")
        if names is None:
            return
        self._report(self.graph.add_route_by_name(*names), "added")

    def delete_route(self) -> None:
        names = self._read_pair("Enter the names of the cities to delete the route")
        if names is None:
            return
        self._report(self.graph.delete_route_by_name(*names), "deleted")

    def _read_pair(self, prompt: str) -> Optional[tuple[str, str]]:
        parts = self.input_fn(f"{prompt} (space-separated): ").split()
        if len(parts) != 2:
            print("Invalid city names. Please enter valid city names.")
            return None
        return parts[0], parts[1]

    def _report(self, change: RouteChange, verb: str) -> None:
        if change.ok:
            print(self.separator)
            print(f"Route {verb}: {change.first_name} - {change.second_name}")
            print(self.separator)
            return

        error = change.error
        if isinstance(error, CityNotFoundError):
            print("Invalid city names. Please enter valid city names.")
        elif isinstance(error, EdgeAlreadyExistsError):
            print("Invalid route. Route already exists.")
        elif isinstance(error, EdgeDoesNotExistError):
            print("Invalid route. Route does not exist.")
        elif isinstance(error, SelfLoopError):
            print("Invalid route. A city cannot be connected to itself.")
        else:
            print(f"Invalid route. {error}")


def build_graph(config: Optional[AppConfig] = None) -> RouteGraph:
    """Create the graph the shell starts with."""
    config = config or get_config()
    if config.shell.seed_demo_network:
        return build_demo_network(config.graph)
    return RouteGraph.from_config(config.graph)


def main(input_fn: InputFn = input) -> None:
    config = get_config()
    configure_logging(config.observability)

    graph = build_graph(config)
    logger.debug(
        "Shell starting",
        extra={"cities": graph.city_count, "capacity": graph.capacity},
    )

    shell = RouteShell(graph, input_fn=input_fn, separator=config.shell.separator)
    shell.show_adjacency()
    shell.run()


if __name__ == "__main__":
    main()
