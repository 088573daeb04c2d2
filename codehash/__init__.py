"""
codehash

Paged code hashes for binary integrity verification: digestable content is
split into fixed-size pages, each page is digested, and the ordered digests
feed a signature's code directory.

Usage:
    from codehash import DigestAlgorithm, compute_range_hashes

    digests = compute_range_hashes(segments, DigestAlgorithm.SHA256, 4096)
"""

from codehash.schemas import (
    CodeHashError,
    CodeHashException,
    ConfigurationError,
    ErrorCodes,
    HashingError,
    InvalidBufferError,
    InvalidPageSizeError,
    UnknownDigestAlgorithmError,
    VerificationResult,
)
from codehash.crypto import DigestAlgorithm
from codehash.paging import (
    DEFAULT_PAGE_SIZE,
    compute_paged_hashes,
    compute_range_hashes,
    page_count,
    page_size_shift,
    validate_page_size,
    verify_paged_hashes,
    verify_range_hashes,
)
from codehash.config import HashingConfig, RuntimeConfig
from codehash.hasher import CodeHasher

__version__ = "0.1.0"

__all__ = [
    "CodeHashError",
    "CodeHashException",
    "ConfigurationError",
    "ErrorCodes",
    "HashingError",
    "InvalidBufferError",
    "InvalidPageSizeError",
    "UnknownDigestAlgorithmError",
    "VerificationResult",
    "DigestAlgorithm",
    "DEFAULT_PAGE_SIZE",
    "compute_paged_hashes",
    "compute_range_hashes",
    "page_count",
    "page_size_shift",
    "validate_page_size",
    "verify_paged_hashes",
    "verify_range_hashes",
    "HashingConfig",
    "RuntimeConfig",
    "CodeHasher",
]
