"""
Module 03 - Sparse Merkle Tree and Paths
Fixed-depth sparse Merkle tree with inclusion path generation/verification.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- SparseMerkleTree / build_tree: insert leaves, read the root, generate paths
- MerkleNode / Direction: node storage and navigation
- MerklePathItem / verify_merkle_path: tree-independent verification
- MerklePathProver / MerklePathVerifier: proof bundle wrappers
- build_dense_tree: fully populated fixture trees

Usage:
    from sparse_merkle.merkle import build_tree, verify_merkle_path

    tree = build_tree(depth=16)
    tree.insert(42, value)
    path = tree.generate_merkle_path(42)

    assert verify_merkle_path(value, path, tree.root_hash, depth=16)
"""
from .node import (
    Direction,
    MerkleNode,
    hash_children,
)

from .merkle_paths import (
    MerklePathItem,
    compute_root_from_path,
    verify_merkle_path,
)

from .sparse_tree import (
    MAX_DEPTH,
    SparseMerkleTree,
    build_tree,
    padded_binary_key,
    path_bit,
)

from .merkle_proofs import (
    MerkleInclusionProof,
    MerklePathProver,
    MerklePathVerifier,
)

from .dense import build_dense_tree


__all__ = [
    # Core types
    "Direction",
    "MerkleNode",
    "MerklePathItem",
    "MerkleInclusionProof",
    "SparseMerkleTree",
    "MAX_DEPTH",
    # Core functions
    "build_tree",
    "hash_children",
    "padded_binary_key",
    "path_bit",
    "compute_root_from_path",
    "verify_merkle_path",
    "build_dense_tree",
    # Convenience classes
    "MerklePathProver",
    "MerklePathVerifier",
]
