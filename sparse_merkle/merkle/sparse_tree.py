"""
Module 03 - Sparse Merkle Tree
Fixed-depth sparse Merkle tree: insertion, rehashing and path generation.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- Key encoding: index -> MSB-first bit string of exactly `depth` characters
- SparseMerkleTree.insert: validate, record the leaf, rewrite one root-to-leaf path
- SparseMerkleTree.generate_merkle_path: sibling digests ordered leaf to root
- build_tree: construct an empty tree

Commitment Rules (Hard Contracts):
1. Leaves store the inserted field element as-is; the tree never hashes values
2. Parent digest: compress(left, right), an absent child contributing
   empty_hash(height of that child's subtree)
3. An empty tree of depth d has root empty_hash(d)
4. The root depends only on the set of inserted (index, value) pairs,
   never on the order they were inserted in

Validation Notes:
- Indices are checked against [0, 2^depth) before any node is touched,
  so a rejected insert leaves the tree exactly as it was
- Not safe for concurrent mutation; callers serialize writes
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Sequence

from sparse_merkle.crypto.hashing import DEFAULT_ZERO_LEAF, HashEngine, to_field_element
from sparse_merkle.merkle.merkle_paths import MerklePathItem, verify_merkle_path
from sparse_merkle.merkle.node import Direction, MerkleNode, hash_children
from sparse_merkle.schemas.errors import (
    IndexOutOfRangeException,
    InvalidDepthException,
    LeafNotFoundException,
)

if TYPE_CHECKING:
    from sparse_merkle.config.runtime import SMTConfig


logger = logging.getLogger(__name__)


# Keys are at most 256 bits (e.g. a full hash digest used as an index)
MAX_DEPTH: int = 256


def padded_binary_key(index: int, depth: int) -> str:
    """
    Encode an index as a zero-padded, MSB-first bit string.

    The caller is responsible for range-checking the index first.

    Example:
        >>> padded_binary_key(3, 3)
        '011'
    """
    return format(index, f"0{depth}b")


def path_bit(key: str, level: int) -> Direction:
    """Return the branch taken at the given level (0 = root level)."""
    return Direction(int(key[level]))


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class SparseMerkleTree:
    """
    A fixed-depth binary Merkle tree over 2^depth leaf slots.

    Only nodes on paths that have been inserted into are materialized;
    every other subtree is represented by its empty digest.

    Example:
        >>> tree = SparseMerkleTree(depth=4)
        >>> tree.insert(5, 42)
        >>> path = tree.generate_merkle_path(5)
        >>> tree.verify_merkle_path(42, path)
        True
    """

    def __init__(self, depth: int, zero_leaf: int = DEFAULT_ZERO_LEAF) -> None:
        if not _is_index(depth) or not 1 <= depth <= MAX_DEPTH:
            raise InvalidDepthException(
                f"Tree depth must be an int in [1, {MAX_DEPTH}], got {depth!r}",
                depth=depth,
            )

        self._depth = depth
        self.engine = HashEngine(zero_leaf)
        self.root = MerkleNode(self.engine.empty_hash(depth))
        self.leaves: dict[str, int] = {}

    @classmethod
    def from_config(cls, config: SMTConfig) -> SparseMerkleTree:
        """Build an empty tree from an SMTConfig."""
        return cls(depth=config.depth, zero_leaf=config.zero_leaf)

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def zero_leaf(self) -> int:
        return self.engine.zero_leaf

    @property
    def root_hash(self) -> int:
        """Current root commitment."""
        return self.root.data

    @property
    def capacity(self) -> int:
        """Number of addressable leaf slots (2^depth)."""
        return 1 << self._depth

    def __len__(self) -> int:
        return len(self.leaves)

    def __repr__(self) -> str:
        return (
            f"SparseMerkleTree(depth={self._depth}, leaves={len(self.leaves)}, "
            f"root={self.root.data})"
        )

    def _key_for(self, index: Any) -> str | None:
        """Key for an in-range index, None for anything outside the keyspace."""
        if not _is_index(index) or not 0 <= index < self.capacity:
            return None
        return padded_binary_key(index, self._depth)

    def contains(self, index: int) -> bool:
        """True if a leaf was explicitly inserted at index."""
        key = self._key_for(index)
        return key is not None and key in self.leaves

    def get_leaf(self, index: int) -> int:
        """
        Return the value inserted at index.

        Raises:
            LeafNotFoundException: If nothing was inserted at index
        """
        key = self._key_for(index)
        if key is None or key not in self.leaves:
            raise LeafNotFoundException(
                f"No leaf exists at index {index!r}", key=key
            )
        return self.leaves[key]

    def insert(self, index: int, value: int) -> None:
        """
        Insert (or overwrite) the leaf at index and rehash its path.

        Args:
            index: Leaf slot, 0 <= index < 2^depth
            value: Field element stored at the leaf

        Raises:
            IndexOutOfRangeException: If index is outside the keyspace
            InvalidFieldElementException: If value is not a field element
        """
        key = self._key_for(index)
        if key is None:
            raise IndexOutOfRangeException(
                f"Leaf index {index!r} out of range for depth {self._depth} "
                f"(expected 0 <= index < {self.capacity})",
                index=index if _is_index(index) else None,
                depth=self._depth,
            )
        value = to_field_element(value)

        self.leaves[key] = value
        self.root = self._insert_into_node(self.root, key, value, 0)
        logger.debug("Inserted leaf %s; new root %d", key, self.root.data)

    def _insert_into_node(
        self,
        node: MerkleNode,
        key: str,
        value: int,
        level: int,
    ) -> MerkleNode:
        """Return a replacement for node with the leaf at key set to value."""
        if level == self._depth:
            return MerkleNode(value)

        height_below = self._depth - level - 1
        direction = path_bit(key, level)

        replacement = MerkleNode(node.data, node.left, node.right)
        child = node.get_child(direction, height_below, self.engine)
        replacement.set_child(
            direction, self._insert_into_node(child, key, value, level + 1)
        )
        replacement.data = hash_children(
            replacement.left, replacement.right, height_below, self.engine
        )
        return replacement

    def generate_merkle_path(self, index: int) -> list[MerklePathItem]:
        """
        Generate the Merkle path for an inserted leaf.

        Args:
            index: Leaf slot that was previously inserted

        Returns:
            `depth` path items ordered leaf to root

        Raises:
            LeafNotFoundException: If no leaf was inserted at index
        """
        key = self._key_for(index)
        if key is None or key not in self.leaves:
            raise LeafNotFoundException(
                f"No leaf exists at index {index!r}", key=key
            )

        path: list[MerklePathItem] = []
        current = self.root
        for level in range(self._depth):
            height_below = self._depth - level - 1
            direction = path_bit(key, level)
            if direction == Direction.LEFT:
                sibling = current.get_right_child(height_below, self.engine)
                current = current.get_left_child(height_below, self.engine)
            else:
                sibling = current.get_left_child(height_below, self.engine)
                current = current.get_right_child(height_below, self.engine)
            path.append(
                MerklePathItem(
                    sibling_hash=sibling.data,
                    is_right=direction == Direction.LEFT,
                )
            )

        # Collected root to leaf
        path.reverse()
        logger.debug("Generated Merkle path for leaf %s", key)
        return path

    def verify_merkle_path(
        self,
        leaf_digest: int,
        path: Sequence[MerklePathItem],
    ) -> bool:
        """Verify a path against this tree's current root and depth."""
        return verify_merkle_path(
            leaf_digest, path, self.root.data, self._depth, self.engine.compress
        )


def build_tree(depth: int, zero_leaf: int = DEFAULT_ZERO_LEAF) -> SparseMerkleTree:
    """
    Build an empty sparse Merkle tree.

    Args:
        depth: Number of levels below the root (keys are `depth` bits)
        zero_leaf: Digest of an empty leaf slot

    Returns:
        Tree whose root is the empty digest for `depth` levels
    """
    return SparseMerkleTree(depth=depth, zero_leaf=zero_leaf)


__all__ = [
    "MAX_DEPTH",
    "SparseMerkleTree",
    "build_tree",
    "padded_binary_key",
    "path_bit",
]
