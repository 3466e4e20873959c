"""
Sparse Merkle Tree

Fixed-depth sparse Merkle tree over a prime field, with inclusion path
generation and tree-independent path verification.

Usage:
    from sparse_merkle import build_tree, verify_merkle_path

    tree = build_tree(depth=4)
    tree.insert(3, 99)
    path = tree.generate_merkle_path(3)
    assert verify_merkle_path(99, path, tree.root_hash, depth=4)
"""

from sparse_merkle.schemas.errors import (
    ErrorCodes,
    IndexOutOfRangeException,
    InvalidDepthException,
    InvalidFieldElementException,
    LeafNotFoundException,
    MerkleVerificationException,
    PathLengthMismatchException,
    SMTError,
    SMTException,
)
from sparse_merkle.crypto.hashing import (
    DEFAULT_ZERO_LEAF,
    FIELD_MODULUS,
    HashEngine,
    compress,
    hash_element,
)
from sparse_merkle.merkle import (
    MerkleInclusionProof,
    MerkleNode,
    MerklePathItem,
    MerklePathProver,
    MerklePathVerifier,
    SparseMerkleTree,
    build_dense_tree,
    build_tree,
    verify_merkle_path,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorCodes",
    "SMTError",
    "SMTException",
    "LeafNotFoundException",
    "IndexOutOfRangeException",
    "InvalidFieldElementException",
    "InvalidDepthException",
    "PathLengthMismatchException",
    "MerkleVerificationException",
    "DEFAULT_ZERO_LEAF",
    "FIELD_MODULUS",
    "HashEngine",
    "compress",
    "hash_element",
    "MerkleNode",
    "MerklePathItem",
    "MerkleInclusionProof",
    "MerklePathProver",
    "MerklePathVerifier",
    "SparseMerkleTree",
    "build_tree",
    "build_dense_tree",
    "verify_merkle_path",
]
