"""Test configuration and fixtures for the product catalog."""

pytest_plugins = ["tests.fixtures.core"]
