"""Tests for digest resolution."""

import pytest

from subnet_timing.timing import KECCAK256, SHA256, resolve_digest
from subnet_timing.types import DigestUnavailableError, TimingError

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
EMPTY_KECCAK256 = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


class TestDigests:
    """Tests for the built-in digests."""

    def test_sha256_empty(self) -> None:
        """SHA-256 of the empty string."""
        assert SHA256(b"").hex() == EMPTY_SHA256

    def test_keccak256_empty(self) -> None:
        """Keccak-256 of the empty string (not SHA3-256)."""
        assert KECCAK256(b"").hex() == EMPTY_KECCAK256

    @pytest.mark.parametrize("digest", [SHA256, KECCAK256])
    def test_output_size(self, digest) -> None:
        """Every digest produces 32 bytes."""
        assert len(digest(b"subnet")) == 32


class TestResolveDigest:
    """Tests for resolve_digest()."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("sha256", SHA256), ("keccak256", KECCAK256), ("KECCAK256", KECCAK256)],
    )
    def test_known_names(self, name: str, expected) -> None:
        """Known names resolve case-insensitively."""
        assert resolve_digest(name) is expected

    def test_unknown_name(self) -> None:
        """Unknown names raise a fatal timing error."""
        with pytest.raises(DigestUnavailableError) as exc_info:
            resolve_digest("md5")

        assert exc_info.value.name == "md5"
        assert "sha256" in exc_info.value.supported
        assert isinstance(exc_info.value, TimingError)
