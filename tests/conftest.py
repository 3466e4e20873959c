"""
Pytest configuration and shared fixtures for sparse Merkle tree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_trees = importlib.import_module("fixtures.tree_fixtures")

make_empty_tree = _trees.make_empty_tree
make_sequential_tree = _trees.make_sequential_tree
make_sparse_tree = _trees.make_sparse_tree
make_dense_tree = _trees.make_dense_tree


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def empty_tree():
    """Provide an empty depth-4 tree."""
    return make_empty_tree()


@pytest.fixture
def sequential_tree():
    """Provide the depth-2 tree with (i, i) inserted for i in 0..3."""
    return make_sequential_tree()


@pytest.fixture
def sparse_tree():
    """Provide a depth-8 tree with a handful of scattered leaves."""
    return make_sparse_tree()


@pytest.fixture
def dense_tree():
    """Provide the fully populated depth-4 tree."""
    return make_dense_tree()


@pytest.fixture
def clean_smt_env(monkeypatch):
    """Remove SMT_* variables so config tests start from defaults."""
    for name in ("SMT_DEPTH", "SMT_ZERO_LEAF", "SMT_LOG_LEVEL", "SMT_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
