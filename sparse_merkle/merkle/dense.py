"""
Module 03 - Dense Fixture Builder
Fully populated trees for reproducible test fixtures.
"""
from __future__ import annotations

import logging

from sparse_merkle.crypto.hashing import DEFAULT_ZERO_LEAF
from sparse_merkle.merkle.sparse_tree import SparseMerkleTree


logger = logging.getLogger(__name__)


def build_dense_tree(depth: int, zero_leaf: int = DEFAULT_ZERO_LEAF) -> SparseMerkleTree:
    """
    Build a tree with every slot populated, value[i] = i.

    Leaves are inserted in ascending index order. Intended for small
    depths only: the tree holds 2^depth leaves.
    """
    tree = SparseMerkleTree(depth=depth, zero_leaf=zero_leaf)
    for index in range(tree.capacity):
        tree.insert(index, index)

    logger.debug("Built dense tree of depth %d (%d leaves)", depth, len(tree))
    return tree


__all__ = ["build_dense_tree"]
