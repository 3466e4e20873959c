"""
Field hashing utilities.

Module 02 provides the compression function and empty-subtree digests.
"""
from .hashing import (
    DEFAULT_ZERO_LEAF,
    FIELD_ELEMENT_BYTES,
    FIELD_MODULUS,
    HashEngine,
    compress,
    field_from_digest,
    field_to_bytes,
    from_hex,
    hash_element,
    to_field_element,
    to_hex,
)

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
