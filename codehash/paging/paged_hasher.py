"""
Module 03 - Paged Hasher
Splits one contiguous byte range into fixed-size pages and digests each page.

Owner: Protocol/Crypto Engineer
Module ID: M03

Paging Rules (Hard Contracts):
1. Pages are consecutive and non-overlapping, page_size bytes each
2. The last page holds the remainder; it is never empty
3. Empty input yields zero pages (not one digest of b"")
4. Each page is digested on its own; no state carries between pages
5. Page count: ceil(len(data) / page_size)
6. page_size must be an int >= 1

Determinism Notes:
- Output order is page order, whether hashing runs sequentially or on
  a thread pool (Executor.map yields results in submission order)
- The first failing page aborts the call; no partial list is returned
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import repeat
from typing import Iterator

from codehash.crypto.digest import DigestAlgorithm
from codehash.schemas.errors import (
    ConfigurationError,
    HashingError,
    InvalidBufferError,
    InvalidPageSizeError,
)


logger = logging.getLogger(__name__)


# Conventional code signing page size
DEFAULT_PAGE_SIZE: int = 4096


def validate_page_size(page_size: int) -> int:
    """
    Validate a page size.

    Args:
        page_size: Candidate page size

    Returns:
        The page size unchanged

    Raises:
        InvalidPageSizeError: If page_size is not an int or is below 1
    """
    # bool is an int subclass
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise InvalidPageSizeError(
            f"Page size must be an integer, got {type(page_size).__name__}",
            page_size=page_size,
        )
    if page_size < 1:
        raise InvalidPageSizeError(
            f"Page size must be at least 1, got {page_size}",
            page_size=page_size,
        )
    return page_size


def validate_max_workers(max_workers: int | None, field_path: str = "max_workers") -> int | None:
    """
    Validate a thread pool size.

    None means sequential hashing; any other value must be an int >= 1.

    Raises:
        ConfigurationError: If max_workers is not None and not a positive int
    """
    if max_workers is None:
        return None
    if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
        raise ConfigurationError(
            f"max_workers must be a positive integer, got {max_workers!r}",
            field_path=field_path,
        )
    return max_workers


def page_count(length: int, page_size: int) -> int:
    """
    Number of pages a range of `length` bytes splits into.

    Example:
        >>> page_count(10000, 4096)
        3
    """
    validate_page_size(page_size)
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")
    return -(-length // page_size)


def page_size_shift(page_size: int) -> int:
    """
    Return log2 of a power-of-two page size.

    Code directories record the page size as this shift
    (4096 -> 12).

    Raises:
        InvalidPageSizeError: If page_size is invalid or not a power of two
    """
    validate_page_size(page_size)
    if page_size & (page_size - 1):
        raise InvalidPageSizeError(
            f"Page size must be a power of two, got {page_size}",
            page_size=page_size,
        )
    return page_size.bit_length() - 1


def iter_pages(data: bytes | bytearray | memoryview, page_size: int) -> Iterator[memoryview]:
    """
    Yield consecutive pages of `data` as zero-copy memoryview slices.

    The last page may be shorter than page_size. Empty data yields nothing.

    Raises:
        InvalidPageSizeError: If page_size is invalid
        InvalidBufferError: If data is not a C-contiguous bytes-like object
    """
    validate_page_size(page_size)
    try:
        view = memoryview(data).cast("B")
    except TypeError as e:
        raise InvalidBufferError(
            f"Data must be a C-contiguous bytes-like object: {e}",
            details={"type": type(data).__name__},
        ) from e
    for offset in range(0, view.nbytes, page_size):
        yield view[offset:offset + page_size]


def _digest_page(algorithm: DigestAlgorithm, page: memoryview, page_index: int) -> bytes:
    """Digest one page, tagging any failure with its index."""
    try:
        return algorithm.digest_data(page)
    except HashingError as e:
        logger.warning(f"Digest of page {page_index} failed with {algorithm}: {e.message}")
        raise HashingError(
            f"Failed to digest page {page_index}: {e.message}",
            algorithm=algorithm.label,
            page_index=page_index,
        ) from e


def compute_paged_hashes(
    data: bytes | bytearray | memoryview,
    algorithm: DigestAlgorithm,
    page_size: int,
    *,
    max_workers: int | None = None,
) -> list[bytes]:
    """
    Compute paged hashes.

    Chunks data into pages of page_size bytes and digests each page
    with the given algorithm, producing one digest per page in order.

    Algorithm:
    1. Validate page_size
    2. Slice data into pages (last one may be short)
    3. Digest each page independently
    4. Return digests in page order

    Args:
        data: C-contiguous bytes-like content of one digestable range
        algorithm: Digest algorithm to apply to every page
        page_size: Page size in bytes (>= 1)
        max_workers: None or 1 for sequential hashing; greater than 1
            digests pages on a thread pool of this size. Output is
            identical to the sequential path.

    Returns:
        List of ceil(len(data) / page_size) digests, each
        algorithm.output_length bytes long

    Raises:
        InvalidPageSizeError: If page_size is invalid
        ConfigurationError: If max_workers is below 1 or not an int
        InvalidBufferError: If data is not a C-contiguous bytes-like object
        HashingError: If any page fails to digest

    Example:
        >>> digests = compute_paged_hashes(bytes(10000), DigestAlgorithm.SHA256, 4096)
        >>> len(digests)
        3
    """
    validate_max_workers(max_workers)
    pages = list(iter_pages(data, page_size))

    logger.debug(
        f"Hashing {len(pages)} page(s) with {algorithm} (page_size={page_size})"
    )

    if max_workers is not None and max_workers > 1 and len(pages) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(_digest_page, repeat(algorithm), pages, range(len(pages))))

    return [
        _digest_page(algorithm, page, index)
        for index, page in enumerate(pages)
    ]


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "validate_page_size",
    "validate_max_workers",
    "page_count",
    "page_size_shift",
    "iter_pages",
    "compute_paged_hashes",
]
