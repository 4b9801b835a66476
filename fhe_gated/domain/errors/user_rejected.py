"""User-rejected action errors and failure message classification.

Wallet providers report a declined signature through the error message
only, so rejection is recognized by inspecting message content.
"""

from __future__ import annotations

from fhe_gated.domain.exceptions import GatedCommunityError

USER_REJECTED_MARKER = "user rejected"
USER_REJECTED_MESSAGE = "Transaction rejected by user"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


class UserRejectedError(GatedCommunityError):
    """Raised when the user declines to sign a transaction."""

    def __init__(self, message: str = "user rejected transaction") -> None:
        super().__init__(message)


def is_user_rejection(error: BaseException) -> bool:
    """Check whether an error represents a user-declined action.

    Args:
        error: The exception raised by the operation.

    Returns:
        True if the message mentions a user rejection.
    """
    if isinstance(error, UserRejectedError):
        return True
    return USER_REJECTED_MARKER in str(error).lower()


def describe_failure(error: BaseException, prefix: str) -> str:
    """Build the user-visible status message for a failed operation.

    Args:
        error: The exception raised by the operation.
        prefix: Operation-specific prefix (e.g. "Creation failed").

    Returns:
        A friendly rejection message, or "<prefix>: <message>".
    """
    if is_user_rejection(error):
        return USER_REJECTED_MESSAGE
    return f"{prefix}: {str(error) or UNKNOWN_ERROR_MESSAGE}"
