"""
Module 01 - Schemas
File: __init__.py

Purpose: Export the error taxonomy shared by every other module.
"""

from .errors import (
    ConfigurationException,
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
    "ConfigurationException",
]
