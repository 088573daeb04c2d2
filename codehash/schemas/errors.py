"""
Module 01 - Schemas
File: errors.py

Purpose: Error taxonomy for code hashing.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Digest Errors
    HASHING_ERROR = "HASHING_ERROR"
    UNKNOWN_DIGEST_ALGORITHM = "UNKNOWN_DIGEST_ALGORITHM"

    # Input & Configuration Errors
    INVALID_PAGE_SIZE = "INVALID_PAGE_SIZE"
    INVALID_BUFFER = "INVALID_BUFFER"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Verification Errors
    PAGE_COUNT_MISMATCH = "PAGE_COUNT_MISMATCH"
    PAGE_DIGEST_MISMATCH = "PAGE_DIGEST_MISMATCH"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class CodeHashError(BaseModel):
    """
    Base error model for structured error communication.

    Callers such as a signature builder render this; the hashing core
    never formats user-facing messages itself.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.HASHING_ERROR],
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

    def to_exception(self) -> "CodeHashException":
        """Convert this error model to a raised exception."""
        return CodeHashException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class CodeHashException(Exception):
    """
    Base exception for all code hashing errors.

    Carries structured error information and can be converted
    to a CodeHashError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "CODEHASH_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> CodeHashError:
        """Convert this exception to a CodeHashError model."""
        return CodeHashError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class HashingError(CodeHashException):
    """
    Raised when a digest primitive fails to process a page.

    A partial hash sequence is never usable for signing, so this error
    is never retryable and always aborts the whole call.
    """

    def __init__(
        self,
        message: str,
        algorithm: str | None = None,
        page_index: int | None = None,
        range_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        if algorithm:
            full_details["algorithm"] = algorithm
        if page_index is not None:
            full_details["page_index"] = page_index
        if range_index is not None:
            full_details["range_index"] = range_index
        super().__init__(
            message=message,
            code=ErrorCodes.HASHING_ERROR,
            details=full_details,
            retryable=False,
        )


class InvalidPageSizeError(CodeHashException):
    """Raised when a page size is not a positive integer."""

    def __init__(
        self,
        message: str,
        page_size: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        full_details["page_size"] = repr(page_size)
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_PAGE_SIZE,
            details=full_details,
            retryable=False,
        )


class InvalidBufferError(CodeHashException):
    """Raised when input is not a C-contiguous bytes-like object."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_BUFFER,
            details=dict(details or {}),
            retryable=False,
        )


class UnknownDigestAlgorithmError(CodeHashException):
    """Raised when a digest algorithm code or name is not recognized."""

    def __init__(
        self,
        message: str,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        if value is not None:
            full_details["value"] = value
        super().__init__(
            message=message,
            code=ErrorCodes.UNKNOWN_DIGEST_ALGORITHM,
            details=full_details,
            retryable=False,
        )


class ConfigurationError(CodeHashException):
    """Raised when a hashing configuration is inconsistent."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_ERROR,
            details=full_details,
            retryable=False,
        )
