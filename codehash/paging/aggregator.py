"""
Module 03 - Multi-Segment Hash Aggregator
Applies the paged hasher to each digestable range and flattens the result.

Owner: Protocol/Crypto Engineer
Module ID: M03

Aggregation Rules (Hard Contracts):
1. Ranges are processed in input order; this module never sorts or
   de-duplicates them
2. Result = paged hashes of range 0 ++ paged hashes of range 1 ++ ...
3. The first failing range aborts the call; nothing gathered so far
   is returned
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from codehash.crypto.digest import DigestAlgorithm
from codehash.paging.paged_hasher import (
    compute_paged_hashes,
    page_count,
    validate_max_workers,
    validate_page_size,
)
from codehash.schemas.errors import HashingError


logger = logging.getLogger(__name__)


def compute_range_hashes(
    ranges: Iterable[bytes | bytearray | memoryview],
    algorithm: DigestAlgorithm,
    page_size: int,
    *,
    max_workers: int | None = None,
) -> list[bytes]:
    """
    Compute code hashes across several digestable ranges.

    Args:
        ranges: Ordered byte ranges, typically one per digestable region
        algorithm: Digest algorithm to apply to every page
        page_size: Page size in bytes (>= 1)
        max_workers: Passed through to compute_paged_hashes

    Returns:
        Flat list of page digests, range order then page order

    Raises:
        InvalidPageSizeError: If page_size is invalid (checked even when
            ranges is empty)
        ConfigurationError: If max_workers is below 1 or not an int
        InvalidBufferError: If a range is not a C-contiguous bytes-like object
        HashingError: If any page of any range fails to digest
    """
    validate_page_size(page_size)
    validate_max_workers(max_workers)

    digests: list[bytes] = []
    range_total = 0
    for range_index, data in enumerate(ranges):
        try:
            range_digests = compute_paged_hashes(
                data, algorithm, page_size, max_workers=max_workers
            )
        except HashingError as e:
            raise HashingError(
                f"Failed to hash range {range_index}: {e.message}",
                range_index=range_index,
                details=dict(e.details),
            ) from e
        digests.extend(range_digests)
        range_total += 1

    logger.debug(f"Computed {len(digests)} code hash(es) over {range_total} range(s)")
    return digests


def range_page_offsets(range_lengths: Sequence[int], page_size: int) -> list[int]:
    """
    Index in the flat digest sequence where each range's first page lands.

    Example:
        >>> range_page_offsets([4096, 100, 8192], 4096)
        [0, 1, 2]
    """
    offsets: list[int] = []
    total = 0
    for length in range_lengths:
        offsets.append(total)
        total += page_count(length, page_size)
    return offsets


__all__ = [
    "compute_range_hashes",
    "range_page_offsets",
]
