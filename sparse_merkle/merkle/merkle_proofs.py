"""
Module 03 - Merkle Proofs Convenience Wrappers
Thin wrappers around tree path generation and path verification.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- MerkleInclusionProof: leaf, index, path and root bundled together
- MerklePathProver: build proofs from a tree
- MerklePathVerifier: check proofs, as a bool or by raising
"""
from __future__ import annotations

from dataclasses import dataclass

from sparse_merkle.merkle.merkle_paths import (
    MerklePathItem,
    compute_root_from_path,
    verify_merkle_path,
)
from sparse_merkle.merkle.sparse_tree import SparseMerkleTree
from sparse_merkle.schemas.errors import (
    MerkleVerificationException,
    PathLengthMismatchException,
)


@dataclass(frozen=True)
class MerkleInclusionProof:
    """
    A Merkle inclusion proof for a single leaf.

    Attributes:
        leaf: The leaf digest being proven
        index: The leaf slot it was inserted at
        path: Sibling items ordered leaf to root
        root: The root this proof is against
    """
    leaf: int
    index: int
    path: list[MerklePathItem]
    root: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")


class MerklePathProver:
    """
    Convenience class for generating inclusion proofs.

    Example:
        >>> tree = SparseMerkleTree(depth=3)
        >>> tree.insert(1, 7)
        >>> proof = MerklePathProver.prove(tree, index=1)
        >>> proof.leaf
        7
    """

    @staticmethod
    def prove(tree: SparseMerkleTree, index: int) -> MerkleInclusionProof:
        """
        Generate an inclusion proof for the leaf at index.

        Raises:
            LeafNotFoundException: If nothing was inserted at index
        """
        path = tree.generate_merkle_path(index)
        return MerkleInclusionProof(
            leaf=tree.get_leaf(index),
            index=index,
            path=path,
            root=tree.root_hash,
        )


class MerklePathVerifier:
    """
    Convenience class for verifying inclusion proofs without a tree.

    Example:
        >>> MerklePathVerifier.verify(proof, depth=3)
        True
    """

    @staticmethod
    def verify(proof: MerkleInclusionProof, depth: int) -> bool:
        """Return True if the proof reproduces its claimed root."""
        return verify_merkle_path(proof.leaf, proof.path, proof.root, depth)

    @staticmethod
    def verify_or_raise(proof: MerkleInclusionProof, depth: int) -> None:
        """
        Verify a proof, raising on failure.

        Raises:
            PathLengthMismatchException: If the path length differs from depth
            MerkleVerificationException: If the path reproduces a different root
        """
        if len(proof.path) != depth:
            raise PathLengthMismatchException(
                f"Merkle path has {len(proof.path)} items, expected {depth}",
                expected=depth,
                actual=len(proof.path),
            )

        computed = compute_root_from_path(proof.leaf, proof.path)
        if computed != proof.root:
            raise MerkleVerificationException(
                "Merkle path does not reproduce the claimed root",
                leaf_index=proof.index,
                details={"expected_root": proof.root, "computed_root": computed},
            )


__all__ = [
    "MerkleInclusionProof",
    "MerklePathProver",
    "MerklePathVerifier",
]
