"""
Module 02 - Digest Algorithms
The closed set of digest algorithms used for code hashes.

Owner: Protocol/Crypto Engineer
Module ID: M02

Each member fixes:
- code: the code directory hashType value
- label: the canonical lowercase name
- hashlib_name: the hashlib constructor backing it
- output_length: digest size in bytes

Security/Determinism Notes:
- The set is closed; adding an algorithm is a code change, never a
  runtime registration
- SHA256_TRUNCATED is SHA-256 cut to its first 20 bytes
- Any failure of the underlying primitive surfaces as HashingError
"""
from __future__ import annotations

import hashlib
from enum import Enum

from codehash.schemas.errors import HashingError, UnknownDigestAlgorithmError


class DigestAlgorithm(Enum):
    """Digest algorithms supported for page hashing."""

    SHA1 = (1, "sha1", "sha1", 20)
    SHA256 = (2, "sha256", "sha256", 32)
    SHA256_TRUNCATED = (3, "sha256-truncated", "sha256", 20)
    SHA384 = (4, "sha384", "sha384", 48)
    SHA512 = (5, "sha512", "sha512", 64)

    def __init__(self, code: int, label: str, hashlib_name: str, output_length: int) -> None:
        self.code = code
        self.label = label
        self.hashlib_name = hashlib_name
        self.output_length = output_length

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_code(cls, code: int) -> "DigestAlgorithm":
        """
        Look up an algorithm by its code directory hashType value.

        Raises:
            UnknownDigestAlgorithmError: For 0 (no hash) or any unknown code
        """
        for algorithm in cls:
            if algorithm.code == code:
                return algorithm
        raise UnknownDigestAlgorithmError(
            f"Unknown digest algorithm code: {code!r}",
            value=code,
        )

    @classmethod
    def from_name(cls, name: str) -> "DigestAlgorithm":
        """
        Look up an algorithm by name.

        Matching is case-insensitive and treats '_' and '-' alike, so
        "SHA256_TRUNCATED" and "sha256-truncated" both resolve.
        """
        if not isinstance(name, str):
            raise UnknownDigestAlgorithmError(
                f"Digest algorithm name must be a string, got {type(name).__name__}",
                value=repr(name),
            )
        normalized = name.strip().lower().replace("_", "-")
        for algorithm in cls:
            if algorithm.label == normalized:
                return algorithm
        raise UnknownDigestAlgorithmError(
            f"Unknown digest algorithm: {name!r}",
            value=name,
        )

    def digest_data(self, data: bytes | bytearray | memoryview) -> bytes:
        """
        Digest data in one shot.

        Args:
            data: Bytes-like content to digest

        Returns:
            Digest of exactly output_length bytes

        Raises:
            HashingError: If the underlying primitive rejects the input
                or is unavailable
        """
        try:
            hasher = hashlib.new(self.hashlib_name)
            hasher.update(data)
            digest = hasher.digest()
        except (ValueError, TypeError, MemoryError) as e:
            raise HashingError(
                f"{self.label} digest failed: {e}",
                algorithm=self.label,
            ) from e

        return digest[: self.output_length]


__all__ = [
    "DigestAlgorithm",
]
