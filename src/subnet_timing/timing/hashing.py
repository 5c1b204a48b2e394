"""
Slot identifiers, function selectors and calldata encoding.

Slot Identifier
---------------
A slot is identified on chain by the digest of its packed coordinates::

    slot_id = digest(be32(subnet_id) || be32(epoch_index) || be32(slot_index))

Each coordinate is a 4-byte big-endian integer, so the preimage is always 12
bytes. Values outside 32 bits wrap modulo 2**32, matching two's complement
packing of a signed 32-bit integer.

Function Selector
-----------------
A selector is the first 4 bytes of the digest of a function signature, such
as ``getEpochBoundaryBlock(uint256)``. Calldata is the selector followed by
one 32-byte big-endian word per argument.
"""

from __future__ import annotations

from typing_extensions import Final

from subnet_timing.types import UINT32_MAX, UINT256_MAX

from .digest import SHA256, Digest

SLOT_ID_PREIMAGE_SIZE: Final = 12
"""Size of the packed (subnet, epoch, slot) preimage in bytes."""

SELECTOR_SIZE: Final = 4
"""Size of a function selector in bytes."""

ABI_WORD_SIZE: Final = 32
"""Size of one ABI-encoded static argument in bytes."""


def to_hex(data: bytes) -> str:
    """Encode bytes as a lowercase `0x`-prefixed hex string."""
    return "0x" + data.hex()


def pack_slot_coordinates(subnet_id: int, epoch_index: int, slot_index: int) -> bytes:
    """Pack three coordinates as 4-byte big-endian integers."""
    return b"".join(
        (value % UINT32_MAX).to_bytes(4, "big") for value in (subnet_id, epoch_index, slot_index)
    )


def slot_id_hash(
    subnet_id: int, epoch_index: int, slot_index: int, digest: Digest = SHA256
) -> str:
    """
    Compute the identifier of a slot.

    Args:
        subnet_id: Subnet the slot belongs to.
        epoch_index: Epoch the slot belongs to.
        slot_index: Position of the slot within its epoch.
        digest: Digest to hash the packed coordinates with.

    Returns:
        The full 32-byte digest as a `0x`-prefixed lowercase hex string.
    """
    return to_hex(digest(pack_slot_coordinates(subnet_id, epoch_index, slot_index)))


def function_selector(signature: str, digest: Digest = SHA256) -> str:
    """Return the 4-byte selector of `signature` as `0x` plus 8 hex characters."""
    return to_hex(digest(signature.encode("utf-8"))[:SELECTOR_SIZE])


def encode_uint256(value: int) -> bytes:
    """
    Encode a non-negative integer as one 32-byte big-endian ABI word.

    Raises:
        OverflowError: If `value` does not fit in a uint256.
    """
    if not (0 <= value < UINT256_MAX):
        raise OverflowError(f"{value} is out of range for uint256")
    return value.to_bytes(ABI_WORD_SIZE, "big")


def encode_call(selector: str, *args: int) -> str:
    """
    Build calldata for a call with static uint256 arguments.

    Args:
        selector: `0x`-prefixed 4-byte selector.
        args: Arguments in declaration order.

    Returns:
        Selector followed by one word per argument, `0x`-prefixed.
    """
    selector_bytes = bytes.fromhex(selector.removeprefix("0x"))
    if len(selector_bytes) != SELECTOR_SIZE:
        raise ValueError(f"Selector must be {SELECTOR_SIZE} bytes, got {len(selector_bytes)}")
    return to_hex(selector_bytes + b"".join(encode_uint256(arg) for arg in args))
