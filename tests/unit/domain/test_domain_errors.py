"""Unit tests for domain errors and failure message classification."""

from __future__ import annotations

import pytest

from fhe_gated.domain.errors import (
    IndexDecodeError,
    NoSessionError,
    RecordDecodeError,
    StoreUnavailableError,
    UserRejectedError,
    describe_failure,
    is_user_rejection,
)
from fhe_gated.domain.exceptions import GatedCommunityError


class TestHierarchy:
    """All domain errors inherit from GatedCommunityError."""

    @pytest.mark.parametrize(
        "error",
        [
            IndexDecodeError("bad"),
            RecordDecodeError("id", "bad"),
            NoSessionError(),
            StoreUnavailableError("create"),
            UserRejectedError(),
        ],
    )
    def test_inherits_base(self, error: Exception) -> None:
        assert isinstance(error, GatedCommunityError)

    def test_store_unavailable_message(self) -> None:
        error = StoreUnavailableError("verify")
        assert str(error) == "Contract not available"
        assert error.operation == "verify"

    def test_no_session_message(self) -> None:
        assert str(NoSessionError()) == "no session"


class TestUserRejection:
    """Tests for user-rejection recognition by message content."""

    def test_recognized_from_provider_message(self) -> None:
        error = RuntimeError("ethers: user rejected transaction (action=sendTransaction)")
        assert is_user_rejection(error)

    def test_recognized_case_insensitively(self) -> None:
        assert is_user_rejection(RuntimeError("User Rejected the request"))

    def test_recognized_from_error_type(self) -> None:
        assert is_user_rejection(UserRejectedError("declined"))

    def test_other_errors_not_rejections(self) -> None:
        assert not is_user_rejection(RuntimeError("network down"))


class TestDescribeFailure:
    """Tests for describe_failure message building."""

    def test_rejection_gets_friendly_message(self) -> None:
        message = describe_failure(RuntimeError("user rejected transaction"), "Creation failed")
        assert message == "Transaction rejected by user"

    def test_generic_failure_is_prefixed(self) -> None:
        message = describe_failure(RuntimeError("boom"), "Creation failed")
        assert message == "Creation failed: boom"

    def test_empty_message_falls_back_to_unknown(self) -> None:
        assert describe_failure(RuntimeError(), "Verification failed") == (
            "Verification failed: Unknown error"
        )
