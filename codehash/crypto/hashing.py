"""
Module 02 - Hashing Utilities
Hex rendering of page digests for verification reports.

Owner: Protocol/Crypto Engineer
Module ID: M02
"""
from __future__ import annotations


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


__all__ = [
    "to_hex",
]
