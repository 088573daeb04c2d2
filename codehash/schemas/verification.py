"""
Module 01 - Schemas
File: verification.py

Purpose: Standard result format for page hash verification.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .errors import CodeHashError


# Severity levels for checks
CheckSeverity = Literal["info", "error"]

# Types of challengeable page artifacts
ChallengeKind = Literal["page_count", "page_digest"]


class CheckResult(BaseModel):
    """
    Result of a single verification check.

    Checks are atomic verification steps that can pass or fail.
    """

    model_config = ConfigDict(extra="forbid")

    check_id: str = Field(
        ...,
        description="Unique identifier for this check",
        min_length=1,
    )
    ok: bool = Field(
        ...,
        description="Whether the check passed",
    )
    severity: CheckSeverity = Field(
        ...,
        description="Severity level of this check",
    )
    message: str = Field(
        ...,
        description="Human-readable message describing the result",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional details about the check",
    )

    @property
    def is_error(self) -> bool:
        """Check if this is an error-level failure."""
        return not self.ok and self.severity == "error"

    @classmethod
    def passed(
        cls,
        check_id: str,
        message: str = "Check passed",
        details: dict[str, Any] | None = None,
    ) -> "CheckResult":
        """Create a passed check result."""
        return cls(
            check_id=check_id,
            ok=True,
            severity="info",
            message=message,
            details=details or {},
        )

    @classmethod
    def failed(
        cls,
        check_id: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> "CheckResult":
        """Create a failed check result."""
        return cls(
            check_id=check_id,
            ok=False,
            severity="error",
            message=message,
            details=details or {},
        )


class PageChallenge(BaseModel):
    """
    Reference to the page (or page table) that failed verification.

    page_index is the position in the flat digest sequence; range_index
    is set when the failing page belongs to a multi-range verification.
    """

    model_config = ConfigDict(extra="forbid")

    kind: ChallengeKind = Field(
        ...,
        description="Type of artifact being challenged",
    )
    page_index: int | None = Field(
        default=None,
        description="Index of the page in the flat digest sequence",
        ge=0,
    )
    range_index: int | None = Field(
        default=None,
        description="Index of the byte range the page belongs to",
        ge=0,
    )
    reason: str | None = Field(
        default=None,
        description="Reason for the challenge",
    )


class VerificationResult(BaseModel):
    """Complete result of a page verification."""

    model_config = ConfigDict(extra="forbid")

    ok: bool = Field(
        ...,
        description="Overall verification success",
    )
    checks: list[CheckResult] = Field(
        default_factory=list,
        description="Individual check results",
    )
    challenge: PageChallenge | None = Field(
        default=None,
        description="First failing page if verification failed",
    )
    error: CodeHashError | None = Field(
        default=None,
        description="Error details if verification failed",
    )

    @property
    def error_count(self) -> int:
        """Count of error-level failures."""
        return sum(1 for check in self.checks if check.is_error)

    @property
    def passed_count(self) -> int:
        """Count of passed checks."""
        return sum(1 for check in self.checks if check.ok)

    def get_failed_checks(self) -> list[CheckResult]:
        """Get all failed checks."""
        return [check for check in self.checks if not check.ok]

    @classmethod
    def success(cls, checks: list[CheckResult] | None = None) -> "VerificationResult":
        """Create a successful verification result."""
        return cls(ok=True, checks=checks or [])

    @classmethod
    def failure(
        cls,
        checks: list[CheckResult],
        challenge: PageChallenge | None = None,
        error: CodeHashError | None = None,
    ) -> "VerificationResult":
        """Create a failed verification result."""
        return cls(
            ok=False,
            checks=checks,
            challenge=challenge,
            error=error,
        )
