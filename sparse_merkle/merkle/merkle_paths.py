"""
Module 03 - Merkle Paths
Path items and tree-independent path verification.

Owner: Protocol/Crypto Engineer
Module ID: M03

A Merkle path is one MerklePathItem per tree level, ordered leaf to root.
Verification needs only the leaf digest, the path, the claimed root and
the tree depth; it never touches a tree instance.

Verification Rules (Hard Contracts):
1. len(path) must equal depth, otherwise verification fails closed
2. Sibling on the right: current = compress(current, sibling)
3. Sibling on the left: current = compress(sibling, current)
4. Valid iff the final digest equals the claimed root
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from sparse_merkle.crypto.hashing import compress as default_compress


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MerklePathItem:
    """
    One level of a Merkle path.

    Attributes:
        sibling_hash: Digest of the subtree not taken at this level
        is_right: True when the sibling lies to the right of the traveled branch
    """
    sibling_hash: int
    is_right: bool


def compute_root_from_path(
    leaf_digest: int,
    path: Sequence[MerklePathItem],
    compress: Callable[[int, int], int] = default_compress,
) -> int:
    """
    Fold a leaf digest up a path and return the resulting root.

    Args:
        leaf_digest: Digest stored at the leaf
        path: Path items ordered leaf to root
        compress: Two-to-one compression function

    Returns:
        Root digest implied by the path
    """
    current = leaf_digest
    for item in path:
        if item.is_right:
            current = compress(current, item.sibling_hash)
        else:
            current = compress(item.sibling_hash, current)
    return current


def verify_merkle_path(
    leaf_digest: int,
    path: Sequence[MerklePathItem],
    expected_root: int,
    depth: int,
    compress: Callable[[int, int], int] = default_compress,
) -> bool:
    """
    Verify a Merkle path against an expected root.

    Args:
        leaf_digest: Digest stored at the leaf being proven
        path: Path items ordered leaf to root
        expected_root: Root the path is claimed to reproduce
        depth: Depth of the tree the path was taken from
        compress: Two-to-one compression function

    Returns:
        True if the path reproduces expected_root, False otherwise
        (including when the path length differs from depth)
    """
    if len(path) != depth:
        logger.warning(
            "Rejecting Merkle path: expected %d items, got %d", depth, len(path)
        )
        return False

    return compute_root_from_path(leaf_digest, path, compress) == expected_root


__all__ = [
    "MerklePathItem",
    "compute_root_from_path",
    "verify_merkle_path",
]
