"""
Runtime Configuration Module

Provides configuration loading for code hash computation.
"""

from .runtime import HashingConfig, RuntimeConfig, setup_logging

__all__ = [
    "HashingConfig",
    "RuntimeConfig",
    "setup_logging",
]
