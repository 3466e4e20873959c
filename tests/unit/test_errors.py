"""
Module 01 - Error Taxonomy Unit Tests
Tests for sparse_merkle/schemas/errors.py
"""
import pytest
from pydantic import ValidationError

from sparse_merkle.schemas.errors import (
    ConfigurationException,
    ErrorCodes,
    IndexOutOfRangeException,
    InvalidDepthException,
    LeafNotFoundException,
    MerkleVerificationException,
    PathLengthMismatchException,
    SMTError,
    SMTException,
)


class TestErrorModel:
    """Tests for the pydantic SMTError model."""

    def test_defaults(self):
        error = SMTError(code=ErrorCodes.LEAF_NOT_FOUND, message="missing")

        assert error.details == {}
        assert error.retryable is False

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            SMTError(code="X", message="y", unexpected=True)

    def test_to_exception(self):
        error = SMTError(
            code=ErrorCodes.INDEX_OUT_OF_RANGE,
            message="too big",
            details={"index": 99},
        )

        exc = error.to_exception()

        assert isinstance(exc, SMTException)
        assert exc.code == ErrorCodes.INDEX_OUT_OF_RANGE
        assert exc.details == {"index": 99}
        assert str(exc) == "too big"


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_all_subclass_base(self):
        for cls in (
            LeafNotFoundException,
            IndexOutOfRangeException,
            InvalidDepthException,
            PathLengthMismatchException,
            MerkleVerificationException,
            ConfigurationException,
        ):
            assert issubclass(cls, SMTException)

    def test_leaf_not_found_details(self):
        exc = LeafNotFoundException("no leaf", key="0101")

        assert exc.code == ErrorCodes.LEAF_NOT_FOUND
        assert exc.details == {"key": "0101"}
        assert exc.retryable is False

    def test_index_out_of_range_details(self):
        exc = IndexOutOfRangeException("bad index", index=16, depth=4)

        assert exc.details == {"index": 16, "depth": 4}

    def test_round_trip_through_model(self):
        exc = PathLengthMismatchException("short", expected=4, actual=3)

        model = exc.to_error_model()

        assert model.code == ErrorCodes.PATH_LENGTH_MISMATCH
        assert model.details == {"expected": 4, "actual": 3}
        assert model.to_exception().code == exc.code

    def test_repr(self):
        exc = ConfigurationException("bad", field_path="depth")

        assert repr(exc) == "ConfigurationException(code='CONFIG_ERROR', message='bad')"
        assert exc.details == {"field_path": "depth"}
