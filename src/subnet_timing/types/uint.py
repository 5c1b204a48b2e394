"""Fixed-width integer bounds."""

UINT32_MAX = 2**32
"""One past the largest unsigned 32-bit integer (2**32)."""

UINT256_MAX = 2**256
"""One past the largest unsigned 256-bit integer, the ABI word size."""
