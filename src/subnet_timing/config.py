"""
Global configuration for the timing package.

Settings are read once from the environment at import time.
"""

import os

_SUPPORTED_DIGESTS: list[str] = ["sha256", "keccak256"]

_SUPPORTED_FLAGS: list[str] = ["0", "1"]

TIMING_DIGEST = os.environ.get("SUBNET_TIMING_DIGEST", "sha256").lower()
"""Digest used for slot ids and selectors ('sha256' or 'keccak256'). Defaults to 'sha256'."""

if TIMING_DIGEST not in _SUPPORTED_DIGESTS:
    raise ValueError(
        f"Invalid SUBNET_TIMING_DIGEST environment variable: '{TIMING_DIGEST}'. "
        f"Supported values: {_SUPPORTED_DIGESTS}"
    )

_ENFORCE_SUBNET_BOUND_FLAG = os.environ.get("SUBNET_TIMING_ENFORCE_SUBNET_BOUND", "0")

if _ENFORCE_SUBNET_BOUND_FLAG not in _SUPPORTED_FLAGS:
    raise ValueError(
        f"Invalid SUBNET_TIMING_ENFORCE_SUBNET_BOUND environment variable: "
        f"'{_ENFORCE_SUBNET_BOUND_FLAG}'. Supported values: {_SUPPORTED_FLAGS}"
    )

ENFORCE_SUBNET_BOUND = _ENFORCE_SUBNET_BOUND_FLAG == "1"
"""Whether new calculators reject subnet ids at or above MAX_SUBNETS. Off by default."""
