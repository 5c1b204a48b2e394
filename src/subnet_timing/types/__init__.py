"""Reusable type definitions for the timing package."""

from .base import StrictBaseModel
from .exceptions import DigestUnavailableError, SubnetOutOfRangeError, TimingError
from .uint import UINT32_MAX, UINT256_MAX

__all__ = [
    # Core types
    "UINT32_MAX",
    "UINT256_MAX",
    "StrictBaseModel",
    # Exceptions
    "TimingError",
    "DigestUnavailableError",
    "SubnetOutOfRangeError",
]
