"""Epoch/slot schedule arithmetic and contract identifiers for subnet timing."""

from .cache import SlotCache, SlotKey, SlotRecord
from .calculator import EpochWindow, TimingCalculator
from .constants import (
    CONTRACT_HEX,
    DEPLOY_SALT,
    DOMAIN_TAG,
    EPOCH_DURATION_BLOCKS,
    GENESIS_OFFSET_MS,
    MAX_SUBNETS,
    SLOT_GRANULARITY,
    SLOT_WINDOW_BLOCKS,
    TIMING_CONFIG,
    TIMING_VERSION,
)
from .digest import KECCAK256, SHA256, Digest, resolve_digest
from .hashing import encode_call, function_selector, slot_id_hash

__all__ = [
    "TimingCalculator",
    "EpochWindow",
    "SlotCache",
    "SlotKey",
    "SlotRecord",
    "Digest",
    "SHA256",
    "KECCAK256",
    "resolve_digest",
    "slot_id_hash",
    "function_selector",
    "encode_call",
    # Constants
    "EPOCH_DURATION_BLOCKS",
    "SLOT_GRANULARITY",
    "SLOT_WINDOW_BLOCKS",
    "MAX_SUBNETS",
    "CONTRACT_HEX",
    "DOMAIN_TAG",
    "TIMING_VERSION",
    "DEPLOY_SALT",
    "GENESIS_OFFSET_MS",
    "TIMING_CONFIG",
]
