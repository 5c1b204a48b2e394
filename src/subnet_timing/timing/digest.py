"""
Digest capability.

Slot ids and function selectors are derived from a 256-bit digest. On chain
this is keccak256; SHA-256 is the default stand-in. Both are available and
selected by name.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable
from dataclasses import dataclass

from Crypto.Hash import keccak

from subnet_timing.types import DigestUnavailableError

logger = logging.getLogger(__name__)

DIGEST_SIZE = 32
"""Size of every digest output in bytes."""


@dataclass(frozen=True, slots=True)
class Digest:
    """A named 256-bit hash function."""

    name: str
    """Name the digest is selected by."""

    hash_fn: Callable[[bytes], bytes]
    """Maps input bytes to a 32-byte digest."""

    def __call__(self, data: bytes) -> bytes:
        """Hash `data` and return the 32-byte digest."""
        return self.hash_fn(data)


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _keccak256(data: bytes) -> bytes:
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()


SHA256 = Digest(name="sha256", hash_fn=_sha256)
"""SHA-256, the default stand-in digest."""

KECCAK256 = Digest(name="keccak256", hash_fn=_keccak256)
"""Keccak-256, bit-exact with on-chain selectors and ids."""

_DIGESTS: dict[str, Digest] = {SHA256.name: SHA256, KECCAK256.name: KECCAK256}


def resolve_digest(name: str) -> Digest:
    """
    Look up a digest by name.

    Args:
        name: Digest name, case-insensitive.

    Returns:
        The matching digest.

    Raises:
        DigestUnavailableError: If no digest with that name exists.
    """
    digest = _DIGESTS.get(name.lower())
    if digest is None:
        raise DigestUnavailableError(name, tuple(_DIGESTS))
    logger.debug("Resolved digest %s", digest.name)
    return digest
