"""
Module 01 - Schemas
File: __init__.py

Purpose: Export error models, exceptions and verification results.
"""

# Error models and exceptions
from .errors import (
    CodeHashError,
    CodeHashException,
    ConfigurationError,
    ErrorCodes,
    HashingError,
    InvalidBufferError,
    InvalidPageSizeError,
    UnknownDigestAlgorithmError,
)

# Verification results
from .verification import (
    ChallengeKind,
    CheckResult,
    CheckSeverity,
    PageChallenge,
    VerificationResult,
)

__all__ = [
    # Errors
    "CodeHashError",
    "CodeHashException",
    "ConfigurationError",
    "ErrorCodes",
    "HashingError",
    "InvalidBufferError",
    "InvalidPageSizeError",
    "UnknownDigestAlgorithmError",
    # Verification
    "ChallengeKind",
    "CheckResult",
    "CheckSeverity",
    "PageChallenge",
    "VerificationResult",
]
