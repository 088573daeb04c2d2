"""
Module 05 - CodeHasher
Thin wrapper binding a HashingConfig to the paging functions.

Owner: Protocol/Crypto Engineer
Module ID: M05

These are convenience wrappers around the functions in codehash.paging;
the configuration is passed in explicitly and never mutated.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from codehash.config.runtime import HashingConfig
from codehash.paging.aggregator import compute_range_hashes
from codehash.paging.paged_hasher import compute_paged_hashes
from codehash.paging.verifier import verify_paged_hashes, verify_range_hashes
from codehash.schemas.verification import VerificationResult


class CodeHasher:
    """
    Computes and verifies code hashes under one fixed configuration.

    Example:
        >>> hasher = CodeHasher(HashingConfig(page_size=4096))
        >>> digests = hasher.hash_ranges([text_segment, data_segment])
        >>> hasher.verify_ranges([text_segment, data_segment], digests).ok
        True
    """

    def __init__(self, config: HashingConfig | None = None) -> None:
        self.config = config or HashingConfig()

    @property
    def _workers(self) -> int | None:
        return self.config.max_workers if self.config.max_workers > 1 else None

    def hash_pages(self, data: bytes | bytearray | memoryview) -> list[bytes]:
        """Paged hashes of a single range."""
        return compute_paged_hashes(
            data,
            self.config.algorithm,
            self.config.page_size,
            max_workers=self._workers,
        )

    def hash_ranges(self, ranges: Iterable[bytes | bytearray | memoryview]) -> list[bytes]:
        """Flat paged hashes of several ranges, in input order."""
        return compute_range_hashes(
            ranges,
            self.config.algorithm,
            self.config.page_size,
            max_workers=self._workers,
        )

    def verify_pages(
        self,
        data: bytes | bytearray | memoryview,
        expected: Sequence[bytes],
    ) -> VerificationResult:
        return verify_paged_hashes(
            data,
            expected,
            self.config.algorithm,
            self.config.page_size,
            max_workers=self._workers,
        )

    def verify_ranges(
        self,
        ranges: Sequence[bytes | bytearray | memoryview],
        expected: Sequence[bytes],
    ) -> VerificationResult:
        return verify_range_hashes(
            ranges,
            expected,
            self.config.algorithm,
            self.config.page_size,
            max_workers=self._workers,
        )

    def __repr__(self) -> str:
        return (
            f"CodeHasher(algorithm={self.config.algorithm}, "
            f"page_size={self.config.page_size})"
        )


__all__ = [
    "CodeHasher",
]
