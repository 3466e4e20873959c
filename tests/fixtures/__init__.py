"""
Test fixtures package for sparse Merkle tree tests.

This package provides factory functions for creating test trees
and the pinned regression vectors.

Usage:
    from fixtures import make_sequential_tree, SEQUENTIAL_DEPTH2_ROOTS

    def test_something():
        tree = make_sequential_tree()
        assert tree.root_hash == SEQUENTIAL_DEPTH2_ROOTS[-1]
"""

from .tree_fixtures import (
    DEFAULT_SPARSE_LEAVES,
    DENSE_DEPTH4_ROOT,
    SEQUENTIAL_DEPTH2_ROOTS,
    ZERO_LEAF_H0,
    make_dense_tree,
    make_empty_tree,
    make_sequential_tree,
    make_sparse_tree,
)

__all__ = [
    # Vectors
    "ZERO_LEAF_H0",
    "SEQUENTIAL_DEPTH2_ROOTS",
    "DENSE_DEPTH4_ROOT",
    "DEFAULT_SPARSE_LEAVES",
    # Factories
    "make_empty_tree",
    "make_sequential_tree",
    "make_sparse_tree",
    "make_dense_tree",
]
