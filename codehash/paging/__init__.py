"""
Module 03/04 - Paged Code Hashes
Page splitting, per-page digests, multi-range aggregation and verification.

Paging Rules:
1. Pages are page_size bytes; the last one holds the remainder
2. Empty input yields no pages
3. Each page is digested independently
4. Multi-range output is range order, then page order

Usage:
    from codehash.paging import compute_paged_hashes, compute_range_hashes
    from codehash.crypto import DigestAlgorithm

    digests = compute_paged_hashes(text_segment, DigestAlgorithm.SHA256, 4096)
    flat = compute_range_hashes([text_segment, data_segment], DigestAlgorithm.SHA256, 4096)
"""
from .paged_hasher import (
    DEFAULT_PAGE_SIZE,
    validate_page_size,
    validate_max_workers,
    page_count,
    page_size_shift,
    iter_pages,
    compute_paged_hashes,
)

from .aggregator import (
    compute_range_hashes,
    range_page_offsets,
)

from .verifier import (
    verify_page,
    find_mismatched_pages,
    verify_paged_hashes,
    verify_range_hashes,
)


__all__ = [
    # Paging
    "DEFAULT_PAGE_SIZE",
    "validate_page_size",
    "validate_max_workers",
    "page_count",
    "page_size_shift",
    "iter_pages",
    "compute_paged_hashes",
    # Aggregation
    "compute_range_hashes",
    "range_page_offsets",
    # Verification
    "verify_page",
    "find_mismatched_pages",
    "verify_paged_hashes",
    "verify_range_hashes",
]
