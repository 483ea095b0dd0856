"""Tests for service configuration."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from graph_traversal.config import ProjectPaths, ServiceConfig


def test_defaults() -> None:
    config = ServiceConfig()

    assert config.host == "0.0.0.0"
    assert config.port == 4000
    assert config.strict_start is False
    assert config.log_level == "INFO"


def test_from_env_overrides() -> None:
    config = ServiceConfig.from_env(
        {
            "GRAPH_TRAVERSAL_HOST": "127.0.0.1",
            "GRAPH_TRAVERSAL_PORT": "8080",
            "GRAPH_TRAVERSAL_STRICT_START": "yes",
            "GRAPH_TRAVERSAL_LOG_LEVEL": "debug",
        }
    )

    assert config.host == "127.0.0.1"
    assert config.port == 8080
    assert config.strict_start is True
    assert config.log_level == "DEBUG"


def test_from_env_empty_uses_defaults() -> None:
    assert ServiceConfig.from_env({}) == ServiceConfig()


@pytest.mark.parametrize(
    "environ",
    [
        {"GRAPH_TRAVERSAL_PORT": "http"},
        {"GRAPH_TRAVERSAL_PORT": "70000"},
        {"GRAPH_TRAVERSAL_STRICT_START": "maybe"},
        {"GRAPH_TRAVERSAL_LOG_LEVEL": "chatty"},
    ],
)
def test_from_env_rejects_invalid_values(environ: dict) -> None:
    with pytest.raises(ValueError):
        ServiceConfig.from_env(environ)


def test_project_paths(tmp_path) -> None:
    paths = ProjectPaths(root=tmp_path)

    assert paths.figures == tmp_path / "data" / "figures"


def test_apply_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        ServiceConfig.from_env({"GRAPH_TRAVERSAL_LOG_LEVEL": "warning"}).apply_logging()
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_replace_revalidates() -> None:
    with pytest.raises(ValueError):
        dataclasses.replace(ServiceConfig(), port=70000)
