"""
Runtime Configuration Unit Tests
Tests for codehash/config/runtime.py
"""
import logging

import pytest

from codehash.config.runtime import HashingConfig, RuntimeConfig, setup_logging
from codehash.crypto.digest import DigestAlgorithm
from codehash.schemas.errors import ConfigurationError, InvalidPageSizeError, UnknownDigestAlgorithmError


class TestHashingConfig:
    """Validation of hashing parameters."""

    def test_defaults(self):
        config = HashingConfig()

        assert config.algorithm is DigestAlgorithm.SHA256
        assert config.page_size == 4096
        assert config.max_workers == 1
        assert set(config.allowed_algorithms) == set(DigestAlgorithm)

    def test_is_immutable(self):
        config = HashingConfig()

        with pytest.raises(AttributeError):
            config.page_size = 16384

    def test_zero_page_size_rejected(self):
        with pytest.raises(InvalidPageSizeError):
            HashingConfig(page_size=0)

    @pytest.mark.parametrize("workers", [0, -2, True, "4"])
    def test_bad_max_workers_rejected(self, workers):
        with pytest.raises(ConfigurationError):
            HashingConfig(max_workers=workers)

    def test_algorithm_outside_allowed_set(self):
        with pytest.raises(ConfigurationError, match="not allowed"):
            HashingConfig(
                algorithm=DigestAlgorithm.SHA1,
                allowed_algorithms=(DigestAlgorithm.SHA256, DigestAlgorithm.SHA384),
            )

    def test_algorithm_must_be_enum(self):
        with pytest.raises(ConfigurationError):
            HashingConfig(algorithm="sha256")

    def test_from_dict_resolves_names_and_codes(self):
        config = HashingConfig.from_dict({
            "algorithm": "sha256-truncated",
            "page_size": 16384,
            "max_workers": 4,
            "allowed_algorithms": [2, "sha256_truncated"],
        })

        assert config.algorithm is DigestAlgorithm.SHA256_TRUNCATED
        assert config.page_size == 16384
        assert config.max_workers == 4
        assert config.allowed_algorithms == (DigestAlgorithm.SHA256, DigestAlgorithm.SHA256_TRUNCATED)

    def test_from_dict_unknown_algorithm(self):
        with pytest.raises(UnknownDigestAlgorithmError):
            HashingConfig.from_dict({"algorithm": "md5"})

    def test_to_dict_round_trip(self):
        config = HashingConfig(algorithm=DigestAlgorithm.SHA1, page_size=1024)

        assert HashingConfig.from_dict(config.to_dict()) == config


class TestRuntimeConfigFromDict:
    """Loading from plain mappings."""

    def test_empty_dict_gives_defaults(self):
        config = RuntimeConfig.from_dict({})

        assert config.hashing == HashingConfig()
        assert config.log_level == "INFO"
        assert config.log_file is None

    def test_partial_dict(self):
        config = RuntimeConfig.from_dict({
            "hashing": {"page_size": 16384},
            "log_level": "DEBUG",
            "extra": {"owner": "release"},
        })

        assert config.hashing.page_size == 16384
        assert config.hashing.algorithm is DigestAlgorithm.SHA256
        assert config.log_level == "DEBUG"
        assert config.extra == {"owner": "release"}

    def test_to_dict(self):
        data = RuntimeConfig().to_dict()

        assert data["hashing"]["algorithm"] == "sha256"
        assert data["hashing"]["page_size"] == 4096
        assert data["log_level"] == "INFO"


class TestRuntimeConfigFromYaml:
    """Loading from YAML files."""

    def test_load(self, tmp_path, clean_env):
        path = tmp_path / "codehash.yaml"
        path.write_text(
            "hashing:\n"
            "  algorithm: sha384\n"
            "  page_size: 16384\n"
            "log_level: WARNING\n"
        )

        config = RuntimeConfig.from_yaml(path)

        assert config.hashing.algorithm is DigestAlgorithm.SHA384
        assert config.hashing.page_size == 16384
        assert config.log_level == "WARNING"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path).hashing == HashingConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_page_size_in_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("hashing:\n  page_size: 0\n")

        with pytest.raises(InvalidPageSizeError):
            RuntimeConfig.from_yaml(path)


class TestEnvironment:
    """CODEHASH_* environment variables."""

    def test_from_env_defaults(self, clean_env):
        config = RuntimeConfig.from_env()

        assert config.hashing == HashingConfig()

    def test_from_env(self, clean_env):
        clean_env.setenv("CODEHASH_ALGORITHM", "sha1")
        clean_env.setenv("CODEHASH_PAGE_SIZE", "1024")
        clean_env.setenv("CODEHASH_MAX_WORKERS", "8")
        clean_env.setenv("CODEHASH_LOG_LEVEL", "DEBUG")

        config = RuntimeConfig.from_env()

        assert config.hashing.algorithm is DigestAlgorithm.SHA1
        assert config.hashing.page_size == 1024
        assert config.hashing.max_workers == 8
        assert config.log_level == "DEBUG"

    def test_non_integer_page_size(self, clean_env):
        clean_env.setenv("CODEHASH_PAGE_SIZE", "4k")

        with pytest.raises(ConfigurationError, match="CODEHASH_PAGE_SIZE"):
            RuntimeConfig.from_env()

    def test_env_overrides_file_values(self, tmp_path, clean_env):
        path = tmp_path / "codehash.yaml"
        path.write_text("hashing:\n  algorithm: sha384\n  page_size: 16384\n")
        clean_env.setenv("CODEHASH_PAGE_SIZE", "4096")

        config = RuntimeConfig.from_yaml(path).with_env_overrides()

        assert config.hashing.algorithm is DigestAlgorithm.SHA384
        assert config.hashing.page_size == 4096

    def test_no_overrides_returns_same_object(self, clean_env):
        config = RuntimeConfig()

        assert config.with_env_overrides() is config


class TestLogging:
    """Logging setup."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        level = root.level
        handlers = list(root.handlers)
        yield
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)

    def test_setup_logging_sets_level(self):
        setup_logging("DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_with_file(self, tmp_path):
        log_file = tmp_path / "codehash.log"
        config = RuntimeConfig(log_level="WARNING", log_file=str(log_file))

        config.configure_logging()
        logging.getLogger("codehash.test").warning("page digest mismatch")

        assert logging.getLogger().level == logging.WARNING
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "page digest mismatch" in log_file.read_text()

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("VERBOSE")

        assert logging.getLogger().level == logging.INFO


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
