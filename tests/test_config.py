"""Tests for configuration loading and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from trainroutes.adapters.adjacency import AdjacencyList
from trainroutes.config import GraphConfig, ObservabilityConfig, get_config, reset_config
from trainroutes.domain.errors import ConfigurationError
from trainroutes.graph.route_graph import RouteGraph
from trainroutes.logging_setup import configure_logging


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = get_config()

    assert config.graph.capacity == 20
    assert config.graph.backend == "matrix"
    assert config.shell.seed_demo_network is True
    assert config.observability.level == "WARNING"


def test_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TRN_GRAPH_CAPACITY", "7")
    monkeypatch.setenv("TRN_GRAPH_BACKEND", "adjacency_list")
    monkeypatch.setenv("TRN_SHELL_SEED_DEMO_NETWORK", "false")
    reset_config()

    config = get_config()
    graph = RouteGraph.from_config()

    assert config.graph.capacity == 7
    assert config.shell.seed_demo_network is False
    assert graph.capacity == 7
    assert isinstance(graph.store, AdjacencyList)


@pytest.mark.parametrize("capacity", [0, 1001])
def test_capacity_bounds(capacity):
    with pytest.raises(ValidationError):
        GraphConfig(capacity=capacity)


def test_unknown_backend_is_rejected():
    with pytest.raises(ValidationError):
        GraphConfig(backend="hash")


def test_configure_logging_applies_level():
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        configure_logging(ObservabilityConfig(level="debug"))
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as excinfo:
        configure_logging(ObservabilityConfig(level="chatty"))

    assert excinfo.value.setting_name == "TRN_LOG_LEVEL"
