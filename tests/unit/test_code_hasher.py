"""
Module 05 - CodeHasher Unit Tests
Tests for codehash/hasher.py
"""
import pytest

from codehash import CodeHasher, HashingConfig, compute_paged_hashes, compute_range_hashes
from codehash.crypto.digest import DigestAlgorithm


class TestCodeHasher:
    """Facade delegates to the paging functions with its config."""

    def test_default_config(self):
        hasher = CodeHasher()

        assert hasher.config == HashingConfig()
        assert repr(hasher) == "CodeHasher(algorithm=sha256, page_size=4096)"

    def test_hash_pages(self, patterned_data):
        hasher = CodeHasher(HashingConfig(algorithm=DigestAlgorithm.SHA1, page_size=1000))

        assert hasher.hash_pages(patterned_data) == compute_paged_hashes(
            patterned_data, DigestAlgorithm.SHA1, 1000
        )

    def test_hash_ranges(self, patterned_data):
        ranges = [patterned_data[:4000], patterned_data[4000:]]
        hasher = CodeHasher(HashingConfig(page_size=2048))

        assert hasher.hash_ranges(ranges) == compute_range_hashes(
            ranges, DigestAlgorithm.SHA256, 2048
        )

    def test_parallel_config_same_output(self, patterned_data):
        sequential = CodeHasher(HashingConfig(page_size=512))
        parallel = CodeHasher(HashingConfig(page_size=512, max_workers=4))

        assert parallel.hash_pages(patterned_data) == sequential.hash_pages(patterned_data)

    def test_verify_round_trip(self, patterned_data):
        ranges = [patterned_data[:7000], patterned_data[7000:]]
        hasher = CodeHasher(HashingConfig(algorithm=DigestAlgorithm.SHA512))

        assert hasher.verify_pages(ranges[0], hasher.hash_pages(ranges[0])).ok
        assert hasher.verify_ranges(ranges, hasher.hash_ranges(ranges)).ok

    def test_verify_detects_other_config(self, patterned_data):
        signer = CodeHasher(HashingConfig(page_size=4096))
        checker = CodeHasher(HashingConfig(page_size=1024))

        result = checker.verify_pages(patterned_data, signer.hash_pages(patterned_data))

        assert not result.ok
        assert result.challenge.kind == "page_count"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
