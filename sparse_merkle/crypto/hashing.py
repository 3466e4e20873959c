"""
Module 02 - Field Hashing
Compression function and empty-subtree digests over the BN254 scalar field.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- Field element validation and fixed-width encoding
- A single-input field hash (used for the canonical zero leaf)
- The two-to-one compression function used for every parent node
- HashEngine: memoised empty-subtree digests for a given zero leaf
- Hex encoding/decoding of field elements with 0x prefix

Canonical Hashing Rules (Hard Contracts):
1. Encoding: every field element is 32 bytes, big-endian
2. Element hash: H(x) = int(sha256(be32(x))) mod P
3. Compression: compress(a, b) = int(sha256(be32(a) + be32(b))) mod P
4. Empty subtrees: empty(0) = zero_leaf, empty(h) = compress(empty(h-1), empty(h-1))

Determinism Notes:
- Outputs are always reduced into [0, P), so any digest can be fed back
  into compress() or stored as a leaf value
- No global caches; each HashEngine owns its own empty-digest table
"""
from __future__ import annotations

import hashlib
from typing import Any

from sparse_merkle.schemas.errors import InvalidFieldElementException


# BN254 (alt_bn128) scalar field modulus
FIELD_MODULUS: int = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)

FIELD_ELEMENT_BYTES: int = 32


def to_field_element(value: Any) -> int:
    """
    Validate a value and reduce it into the field.

    Args:
        value: Non-negative integer

    Returns:
        value mod FIELD_MODULUS

    Raises:
        InvalidFieldElementException: If value is not a non-negative int
    """
    # bool is an int subclass but never a meaningful leaf value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldElementException(
            f"Field element must be an int, got {type(value).__name__}",
            details={"type": type(value).__name__},
        )
    if value < 0:
        raise InvalidFieldElementException(
            f"Field element must be non-negative, got {value}",
            details={"value": value},
        )
    return value % FIELD_MODULUS


def field_to_bytes(value: int) -> bytes:
    """
    Encode a field element as 32 big-endian bytes.

    Example:
        >>> field_to_bytes(1).hex()
        '0000000000000000000000000000000000000000000000000000000000000001'
    """
    return to_field_element(value).to_bytes(FIELD_ELEMENT_BYTES, "big")


def field_from_digest(digest: bytes) -> int:
    """Interpret a digest as a big-endian integer reduced into the field."""
    return int.from_bytes(digest, "big") % FIELD_MODULUS


def hash_element(value: int) -> int:
    """
    Hash a single field element into the field.

    This is the H(x) used to derive the canonical zero leaf H(0).

    Args:
        value: Field element

    Returns:
        Field element digest
    """
    return field_from_digest(hashlib.sha256(field_to_bytes(value)).digest())


def compress(left: int, right: int) -> int:
    """
    Two-to-one compression of child digests into a parent digest.

    Args:
        left: Left child digest
        right: Right child digest

    Returns:
        Parent digest (field element)
    """
    data = field_to_bytes(left) + field_to_bytes(right)
    return field_from_digest(hashlib.sha256(data).digest())


# Canonical zero leaf: H(0)
DEFAULT_ZERO_LEAF: int = hash_element(0)


class HashEngine:
    """
    Compression function plus empty-subtree digests for one zero leaf.

    Empty digests are derived on demand and memoised, so a tree of depth d
    pays for at most d compressions over its whole lifetime.

    Example:
        >>> engine = HashEngine(DEFAULT_ZERO_LEAF)
        >>> engine.empty_hash(0) == DEFAULT_ZERO_LEAF
        True
    """

    def __init__(self, zero_leaf: int = DEFAULT_ZERO_LEAF) -> None:
        self.zero_leaf = to_field_element(zero_leaf)
        self._empty: list[int] = [self.zero_leaf]

    def compress(self, left: int, right: int) -> int:
        """Compress two child digests into their parent digest."""
        return compress(left, right)

    def empty_hash(self, height: int) -> int:
        """
        Digest of an all-empty subtree with the given height.

        Args:
            height: Number of levels below the subtree root (0 = a leaf)

        Returns:
            Field element digest

        Raises:
            ValueError: If height is negative
        """
        if height < 0:
            raise ValueError(f"Subtree height must be non-negative, got {height}")

        while len(self._empty) <= height:
            previous = self._empty[-1]
            self._empty.append(compress(previous, previous))

        return self._empty[height]

    def __repr__(self) -> str:
        return f"HashEngine(zero_leaf={to_hex(self.zero_leaf)})"


def to_hex(value: int) -> str:
    """
    Convert a field element to a 0x-prefixed, 64-digit hex string.

    Example:
        >>> to_hex(255)
        '0x00000000000000000000000000000000000000000000000000000000000000ff'
    """
    return "0x" + field_to_bytes(value).hex()


def from_hex(hex_string: str) -> int:
    """
    Convert a 0x-prefixed hex string to a field element.

    Raises:
        ValueError: If the string lacks the 0x prefix or holds invalid hex
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]
    if not hex_content:
        raise ValueError("Hex string has no digits after 0x prefix")

    try:
        value = int(hex_content, 16)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e

    return to_field_element(value)


__all__ = [
    "FIELD_MODULUS",
    "FIELD_ELEMENT_BYTES",
    "DEFAULT_ZERO_LEAF",
    "HashEngine",
    "to_field_element",
    "field_to_bytes",
    "field_from_digest",
    "hash_element",
    "compress",
    "to_hex",
    "from_hex",
]
