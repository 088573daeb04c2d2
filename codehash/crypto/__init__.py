"""
Core cryptographic utilities.

Module 02 provides the digest algorithm set and hex rendering.
"""
from .digest import DigestAlgorithm
from .hashing import to_hex

__all__ = [
    "DigestAlgorithm",
    "to_hex",
]
