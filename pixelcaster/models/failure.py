"""
Failure Envelope: Classified Responses for Every Outcome.

Every API response is one of:
- Success: the artifact or metadata was produced
- KnownFailure: the caller sent something we can name (bad identifier, missing param)
- UnknownFailure: something broke that we cannot explain

INVARIANT: No raw 500 error reaches a client unclassified.

All failure responses pass through `finalize_response()`, which checks
that the outcome and the failure details agree.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"
    MISSING_REQUIRED = "missing_required"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Response envelope for failures and wrapped results.

    Every response is classified into one of three outcome types.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: malformed wallet address, missing identifier.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InvalidIdentifierError(KnownError):
    """
    Raised when an identifier cannot be turned into a seed.

    Covers non-numeric FIDs, empty or non-hex wallet addresses, and
    malformed token IDs. Retrying with the same input cannot succeed.
    """

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"Invalid identifier: {reason}",
            detail=f"Received: {raw!r}",
            suggestion="Pass a positive numeric FID or a 0x-prefixed wallet address.",
            status_code=400,
        )


class MissingIdentifierError(KnownError):
    """Raised when a request carries no identifier and no random flag."""

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.MISSING_REQUIRED,
            message="FID, wallet address, or token ID is required",
            suggestion="Add one of ?fid=, ?address=, ?tokenId= or set ?random=true.",
            status_code=400,
        )


# =============================================================================
# FAILURE AUTHORITY BOUNDARY
# =============================================================================

STANDARD_MESSAGES: dict[OutcomeType, str] = {
    OutcomeType.KNOWN_FAILURE: "The operation failed due to a known issue.",
    OutcomeType.UNKNOWN_FAILURE: (
        "I failed and I don't know why. Try simplifying the request or retrying."
    ),
}

STANDARD_SUGGESTIONS: dict[OutcomeType, str] = {
    OutcomeType.KNOWN_FAILURE: "Check the error details and adjust your request.",
    OutcomeType.UNKNOWN_FAILURE: "If this persists, please report the issue.",
}


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Finalize a response through the authority boundary.

    Args:
        response: The ApiResponse to finalize

    Returns:
        The same response, unchanged

    Raises:
        ValueError: If response structure is invalid
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")

    return response


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse[Any]:
    """
    Create an unknown failure response from an exception.

    The message is fixed and cannot be customized.

    Args:
        exception: The exception that caused the failure
        include_type: Whether to include exception type in detail

    Returns:
        A finalized unknown failure response
    """
    detail = None
    if include_type:
        detail = f"{type(exception).__name__}"

    response: ApiResponse[Any] = ApiResponse(
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=STANDARD_MESSAGES[OutcomeType.UNKNOWN_FAILURE],
            detail=detail,
            suggestion=STANDARD_SUGGESTIONS[OutcomeType.UNKNOWN_FAILURE],
        ),
    )

    return finalize_response(response)


def create_known_failure(error: KnownError) -> ApiResponse[Any]:
    """
    Create a finalized known failure response from a KnownError.

    Args:
        error: The raised KnownError

    Returns:
        A finalized known failure response
    """
    return finalize_response(error.to_response())
