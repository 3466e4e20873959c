"""
Module 03 - Merkle Nodes
Tree nodes and read-only child navigation.

Owner: Protocol/Crypto Engineer
Module ID: M03

A node caches its digest and exclusively owns up to two children.
Children that were never materialized are read as virtual empty
subtrees; navigation never attaches them to the parent.
"""
from __future__ import annotations

from enum import IntEnum

from sparse_merkle.crypto.hashing import HashEngine


class Direction(IntEnum):
    """Branch taken at a level; values match the key bit."""

    LEFT = 0
    RIGHT = 1


class MerkleNode:
    """
    A node in the sparse Merkle tree.

    Attributes:
        data: Subtree commitment, or the stored value for a leaf node
        left: Left child, None while that subtree is empty
        right: Right child, None while that subtree is empty
    """

    __slots__ = ("data", "left", "right")

    def __init__(
        self,
        data: int,
        left: MerkleNode | None = None,
        right: MerkleNode | None = None,
    ) -> None:
        self.data = data
        self.left = left
        self.right = right

    def get_child(
        self,
        direction: Direction,
        height_below: int,
        engine: HashEngine,
    ) -> MerkleNode:
        """
        Return the child on the given side.

        Args:
            direction: Which child to read
            height_below: Height of the child's subtree (levels under it)
            engine: Supplies the empty digest for a missing child

        Returns:
            The materialized child, or a detached virtual node holding
            engine.empty_hash(height_below) when there is none
        """
        child = self.left if direction == Direction.LEFT else self.right
        if child is None:
            return MerkleNode(engine.empty_hash(height_below))
        return child

    def get_left_child(self, height_below: int, engine: HashEngine) -> MerkleNode:
        return self.get_child(Direction.LEFT, height_below, engine)

    def get_right_child(self, height_below: int, engine: HashEngine) -> MerkleNode:
        return self.get_child(Direction.RIGHT, height_below, engine)

    def set_child(self, direction: Direction, child: MerkleNode) -> None:
        if direction == Direction.LEFT:
            self.left = child
        else:
            self.right = child

    def __repr__(self) -> str:
        return f"MerkleNode(data={self.data})"


def hash_children(
    left: MerkleNode | None,
    right: MerkleNode | None,
    height_below: int,
    engine: HashEngine,
) -> int:
    """
    Compute a parent digest from its (possibly absent) children.

    Args:
        left: Left child or None
        right: Right child or None
        height_below: Height of each child's subtree
        engine: Compression function and empty digests

    Returns:
        compress(left, right), an absent side contributing
        engine.empty_hash(height_below)
    """
    empty = engine.empty_hash(height_below)
    left_data = left.data if left is not None else empty
    right_data = right.data if right is not None else empty
    return engine.compress(left_data, right_data)


__all__ = [
    "Direction",
    "MerkleNode",
    "hash_children",
]
