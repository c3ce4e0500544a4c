"""Pytest configuration and shared fixtures for the org2mdx test suite."""

from pathlib import Path

import pytest

from org2mdx.blocks import BlockContext


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - full conversion pipeline tests")


@pytest.fixture
def block_context() -> BlockContext:
    """Provide a fresh region context for one extraction."""
    return BlockContext()


@pytest.fixture
def org_dir(tmp_path: Path) -> Path:
    """Provide a directory for Org files used by include tests."""
    directory = tmp_path / "org"
    directory.mkdir()
    return directory
