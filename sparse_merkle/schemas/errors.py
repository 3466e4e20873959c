"""
Module 01 - Schemas
File: errors.py

Purpose: Standard error taxonomy for the sparse Merkle tree.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the tree."""

    # Tree Access Errors
    LEAF_NOT_FOUND = "LEAF_NOT_FOUND"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"

    # Input Validation Errors
    INVALID_FIELD_ELEMENT = "INVALID_FIELD_ELEMENT"
    INVALID_DEPTH = "INVALID_DEPTH"

    # Merkle Path Errors
    PATH_LENGTH_MISMATCH = "PATH_LENGTH_MISMATCH"
    MERKLE_PROOF_INVALID = "MERKLE_PROOF_INVALID"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class SMTError(BaseModel):
    """
    Base error model for structured error communication.

    Lets callers pass a failure around as a value instead of an exception,
    e.g. when collecting results for several indices.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.LEAF_NOT_FOUND],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "SMTException":
        """Convert this error model to a raisable exception."""
        return SMTException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SMTException(Exception):
    """
    Base exception for all sparse Merkle tree errors.

    Carries structured error information and can be converted
    to/from SMTError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "SMT_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> SMTError:
        """Convert this exception to an SMTError model."""
        return SMTError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class LeafNotFoundException(SMTException):
    """Raised when a path is requested for a key that was never inserted."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key is not None:
            full_details["key"] = key
        super().__init__(
            message=message,
            code=ErrorCodes.LEAF_NOT_FOUND,
            details=full_details,
            retryable=False,
        )


class IndexOutOfRangeException(SMTException):
    """Raised when an insertion index does not fit in the tree's keyspace."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        depth: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if index is not None:
            full_details["index"] = index
        if depth is not None:
            full_details["depth"] = depth
        super().__init__(
            message=message,
            code=ErrorCodes.INDEX_OUT_OF_RANGE,
            details=full_details,
            retryable=False,
        )


class InvalidFieldElementException(SMTException):
    """Raised when a value cannot be used as a field element."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_FIELD_ELEMENT,
            details=details,
            retryable=False,
        )


class InvalidDepthException(SMTException):
    """Raised when a tree is constructed with an unusable depth."""

    def __init__(
        self,
        message: str,
        depth: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if depth is not None:
            full_details["depth"] = depth
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_DEPTH,
            details=full_details,
            retryable=False,
        )


class PathLengthMismatchException(SMTException):
    """Raised when a Merkle path does not have one item per tree level."""

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if expected is not None:
            full_details["expected"] = expected
        if actual is not None:
            full_details["actual"] = actual
        super().__init__(
            message=message,
            code=ErrorCodes.PATH_LENGTH_MISMATCH,
            details=full_details,
            retryable=False,
        )


class MerkleVerificationException(SMTException):
    """Raised when a Merkle path does not reproduce the claimed root."""

    def __init__(
        self,
        message: str,
        leaf_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_index is not None:
            full_details["leaf_index"] = leaf_index
        super().__init__(
            message=message,
            code=ErrorCodes.MERKLE_PROOF_INVALID,
            details=full_details,
            retryable=False,
        )


class ConfigurationException(SMTException):
    """Raised when configuration values cannot be parsed."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
            retryable=False,
        )
