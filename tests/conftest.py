"""Shared fixtures for the greeting application tests."""

import pytest

from app import create_app
from app.config import TestConfig


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_client():
    """Build a client for an app created from ``TestConfig`` with overrides."""

    def _make(**overrides):
        config_class = type("OverrideConfig", (TestConfig,), overrides)
        return create_app(config_class).test_client()

    return _make
