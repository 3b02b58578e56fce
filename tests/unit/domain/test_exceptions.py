"""Tests for domain/exceptions.py."""

import pytest

from stackerr.domain.exceptions import (
    EmptyJoinError,
    InvalidDepthError,
    InvalidSkipError,
    NilCauseError,
    StackErrError,
)


class TestHierarchyOfExceptions:
    """All library errors share one base and a builtin parent."""

    @pytest.mark.parametrize(
        "error",
        [NilCauseError(), InvalidSkipError(-1), InvalidDepthError(0), EmptyJoinError()],
    )
    def test_catchable_as_base_and_value_error(self, error: StackErrError) -> None:
        assert isinstance(error, StackErrError)
        assert isinstance(error, ValueError)


class TestMessages:
    """Messages carry the offending values."""

    def test_nil_cause(self) -> None:
        assert "None" in str(NilCauseError())

    def test_invalid_skip(self) -> None:
        error = InvalidSkipError(-3)
        assert error.skip == -3
        assert "-3" in str(error)

    def test_invalid_depth(self) -> None:
        error = InvalidDepthError(0)
        assert error.depth == 0
        assert "got 0" in str(error)

    def test_empty_join(self) -> None:
        assert "at least one" in str(EmptyJoinError())
