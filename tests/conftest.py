"""Shared test fixtures."""

import pytest


@pytest.fixture
def registry():
    from business_planner.tools import build_registry

    return build_registry()


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    """Point saved plans at a temporary directory"""
    from business_planner.config import Config

    path = tmp_path / "plans"
    monkeypatch.setattr(Config, "OUTPUT_DIR", path)
    return path


@pytest.fixture
def invoke(registry):
    """Invoke a tool and return its text"""
    def _invoke(tool_name, **arguments):
        return registry.invoke(tool_name, arguments).text
    return _invoke
