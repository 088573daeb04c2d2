"""
Runtime Configuration

Hashing parameters and logging setup for code hash computation.
"""

from __future__ import annotations

import copy
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from codehash.crypto.digest import DigestAlgorithm
from codehash.paging.paged_hasher import DEFAULT_PAGE_SIZE, validate_page_size
from codehash.schemas.errors import ConfigurationError

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "CODEHASH_"


@dataclass(frozen=True)
class HashingConfig:
    """
    Immutable hashing parameters, selected once per signing operation.

    allowed_algorithms is the explicit set of algorithms a caller accepts;
    it replaces any process-wide registry.
    """
    algorithm: DigestAlgorithm = DigestAlgorithm.SHA256
    page_size: int = DEFAULT_PAGE_SIZE
    max_workers: int = 1
    allowed_algorithms: tuple[DigestAlgorithm, ...] = tuple(DigestAlgorithm)

    def __post_init__(self) -> None:
        if not isinstance(self.algorithm, DigestAlgorithm):
            raise ConfigurationError(
                f"algorithm must be a DigestAlgorithm, got {type(self.algorithm).__name__}",
                field_path="hashing.algorithm",
            )
        if self.algorithm not in self.allowed_algorithms:
            allowed = ", ".join(str(a) for a in self.allowed_algorithms)
            raise ConfigurationError(
                f"Digest algorithm {self.algorithm} is not allowed (allowed: {allowed})",
                field_path="hashing.algorithm",
            )
        validate_page_size(self.page_size)
        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int) or self.max_workers < 1:
            raise ConfigurationError(
                f"max_workers must be a positive integer, got {self.max_workers!r}",
                field_path="hashing.max_workers",
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HashingConfig":
        """Build from a plain mapping; algorithm names are resolved."""
        kwargs: dict[str, Any] = {}
        if "algorithm" in data:
            kwargs["algorithm"] = _parse_algorithm(data["algorithm"])
        if "page_size" in data:
            kwargs["page_size"] = data["page_size"]
        if "max_workers" in data:
            kwargs["max_workers"] = data["max_workers"]
        if data.get("allowed_algorithms"):
            kwargs["allowed_algorithms"] = tuple(
                _parse_algorithm(a) for a in data["allowed_algorithms"]
            )
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm.label,
            "page_size": self.page_size,
            "max_workers": self.max_workers,
            "allowed_algorithms": [a.label for a in self.allowed_algorithms],
        }


def _parse_algorithm(value: Any) -> DigestAlgorithm:
    if isinstance(value, DigestAlgorithm):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return DigestAlgorithm.from_code(value)
    return DigestAlgorithm.from_name(value)


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            f"Environment variable {name} must be an integer, got {value!r}",
            field_path=name,
        ) from e


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    hashing: HashingConfig = field(default_factory=HashingConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - CODEHASH_ALGORITHM: Digest algorithm name (e.g. sha256)
        - CODEHASH_PAGE_SIZE: Page size in bytes
        - CODEHASH_MAX_WORKERS: Thread pool size for page hashing
        - CODEHASH_LOG_LEVEL: Log level
        - CODEHASH_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}ALGORITHM"):
            overrides.setdefault("hashing", {})["algorithm"] = os.getenv(f"{ENV_PREFIX}ALGORITHM")
        if os.getenv(f"{ENV_PREFIX}PAGE_SIZE"):
            overrides.setdefault("hashing", {})["page_size"] = _parse_int(
                f"{ENV_PREFIX}PAGE_SIZE", os.getenv(f"{ENV_PREFIX}PAGE_SIZE", "")
            )
        if os.getenv(f"{ENV_PREFIX}MAX_WORKERS"):
            overrides.setdefault("hashing", {})["max_workers"] = _parse_int(
                f"{ENV_PREFIX}MAX_WORKERS", os.getenv(f"{ENV_PREFIX}MAX_WORKERS", "")
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        hashing_data = data.get("hashing", {})
        hashing = HashingConfig.from_dict(hashing_data) if hashing_data else HashingConfig()

        return cls(
            hashing=hashing,
            log_level=data.get("log_level", "INFO"),
            log_file=data.get("log_file"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "hashing" in overrides:
            merged = self.hashing.to_dict()
            merged.update(overrides["hashing"])
            new_config.hashing = HashingConfig.from_dict(merged)

        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"]
        if "log_file" in overrides:
            new_config.log_file = overrides["log_file"]

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "hashing": self.hashing.to_dict(),
            "log_level": self.log_level,
            "log_file": self.log_file,
            "extra": self.extra,
        }

    def configure_logging(self) -> None:
        """Apply this config's logging settings."""
        setup_logging(level=self.log_level, log_file=self.log_file)


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure root logging."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
