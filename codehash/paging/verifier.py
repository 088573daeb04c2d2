"""
Module 04 - Page Verification
Checks content against a recorded sequence of page digests.

Owner: Protocol/Crypto Engineer
Module ID: M04

Because every page is digested on its own, a single page can be checked
without re-hashing the rest of the content. The functions here:
- verify_page: check one page against its recorded digest
- find_mismatched_pages: list every page whose digest differs
- verify_paged_hashes / verify_range_hashes: produce a VerificationResult

Digest failures during verification propagate as HashingError; they are
not folded into a failed result.
"""
from __future__ import annotations

import hmac
import logging
from typing import Sequence

from codehash.crypto.digest import DigestAlgorithm
from codehash.crypto.hashing import to_hex
from codehash.paging.aggregator import compute_range_hashes, range_page_offsets
from codehash.paging.paged_hasher import compute_paged_hashes
from codehash.schemas.errors import ErrorCodes, CodeHashError
from codehash.schemas.verification import (
    CheckResult,
    PageChallenge,
    VerificationResult,
)


logger = logging.getLogger(__name__)


def verify_page(
    page: bytes | bytearray | memoryview,
    expected_digest: bytes,
    algorithm: DigestAlgorithm,
) -> bool:
    """
    Check a single page against its recorded digest.

    Uses a constant-time comparison.
    """
    return hmac.compare_digest(algorithm.digest_data(page), expected_digest)


def _mismatches(computed: Sequence[bytes], expected: Sequence[bytes]) -> list[int]:
    return [
        index
        for index, (actual, recorded) in enumerate(zip(computed, expected))
        if not hmac.compare_digest(actual, recorded)
    ]


def find_mismatched_pages(
    data: bytes | bytearray | memoryview,
    expected: Sequence[bytes],
    algorithm: DigestAlgorithm,
    page_size: int,
) -> list[int]:
    """
    Return the indices of pages whose digest differs from `expected`.

    Only pages present on both sides are compared; a count difference
    is reported by verify_paged_hashes.
    """
    computed = compute_paged_hashes(data, algorithm, page_size)
    return _mismatches(computed, expected)


def _build_result(
    computed: Sequence[bytes],
    expected: Sequence[bytes],
    range_offsets: Sequence[int] | None = None,
) -> VerificationResult:
    checks: list[CheckResult] = []

    if len(computed) != len(expected):
        message = f"Expected {len(expected)} page digest(s), content has {len(computed)} page(s)"
        checks.append(CheckResult.failed(
            "page_count",
            message,
            details={"expected": len(expected), "actual": len(computed)},
        ))
        return VerificationResult.failure(
            checks=checks,
            challenge=PageChallenge(kind="page_count", reason=message),
            error=CodeHashError(code=ErrorCodes.PAGE_COUNT_MISMATCH, message=message),
        )

    checks.append(CheckResult.passed(
        "page_count",
        f"Page count matches ({len(computed)})",
        details={"count": len(computed)},
    ))

    mismatched = _mismatches(computed, expected)
    if not mismatched:
        checks.append(CheckResult.passed("page_digests", "All page digests match"))
        return VerificationResult.success(checks)

    first = mismatched[0]
    range_index = None
    if range_offsets:
        # Last range whose first page is at or before the failing page
        range_index = max(i for i, offset in enumerate(range_offsets) if offset <= first)

    message = f"{len(mismatched)} page digest(s) do not match, first at page {first}"
    logger.info(message)
    checks.append(CheckResult.failed(
        "page_digests",
        message,
        details={
            "mismatched_pages": mismatched,
            "expected": to_hex(expected[first]),
            "actual": to_hex(computed[first]),
        },
    ))
    return VerificationResult.failure(
        checks=checks,
        challenge=PageChallenge(
            kind="page_digest",
            page_index=first,
            range_index=range_index,
            reason=message,
        ),
        error=CodeHashError(
            code=ErrorCodes.PAGE_DIGEST_MISMATCH,
            message=message,
            details={"page_index": first},
        ),
    )


def verify_paged_hashes(
    data: bytes | bytearray | memoryview,
    expected: Sequence[bytes],
    algorithm: DigestAlgorithm,
    page_size: int,
    *,
    max_workers: int | None = None,
) -> VerificationResult:
    """
    Verify one byte range against its recorded page digests.

    Returns:
        VerificationResult with a page_count check and, when the count
        matches, a page_digests check
    """
    computed = compute_paged_hashes(data, algorithm, page_size, max_workers=max_workers)
    return _build_result(computed, expected)


def verify_range_hashes(
    ranges: Sequence[bytes | bytearray | memoryview],
    expected: Sequence[bytes],
    algorithm: DigestAlgorithm,
    page_size: int,
    *,
    max_workers: int | None = None,
) -> VerificationResult:
    """
    Verify several ranges against one flat sequence of page digests.

    The challenge on failure names both the flat page index and the
    index of the range it falls in.
    """
    computed = compute_range_hashes(ranges, algorithm, page_size, max_workers=max_workers)
    offsets = range_page_offsets([memoryview(r).nbytes for r in ranges], page_size)
    return _build_result(computed, expected, offsets)


__all__ = [
    "verify_page",
    "find_mismatched_pages",
    "verify_paged_hashes",
    "verify_range_hashes",
]
