"""
Subnet Timing Constants

This file defines the fixed cadence of the epoch/slot schedule and the
identity of the timing contract. Every value must match the deployed
contract exactly.
"""

from typing_extensions import Final

from subnet_timing.types import StrictBaseModel

# --- Cadence Parameters ---

EPOCH_DURATION_BLOCKS: Final = 311
"""The number of consecutive blocks in one epoch."""

SLOT_GRANULARITY: Final = 17
"""The number of blocks between the deadlines of consecutive slots."""

SLOT_WINDOW_BLOCKS: Final = 89
"""Blocks added after a slot's offset before its deadline is reached."""

MAX_SUBNETS: Final = 64
"""The number of subnets the contract schedules (ids 0 through 63)."""

# --- Contract Identity ---

CONTRACT_HEX: Final = "0x7a3f9c21e4b8d05f6a1c2e9b3d4f8a7c6e5b1d20"
"""The 20-byte address of the timing contract."""

DOMAIN_TAG: Final = "AxonSubnetTiming/v1"
"""Domain separation tag of the timing contract."""

TIMING_VERSION: Final = 0x71
"""Single-byte version of the timing layout."""

DEPLOY_SALT: Final = "0x5d1e0c3b9a8f7e6d4c2b1a0918273645f0e1d2c3b4a5968778695a4b3c2d1e0f"
"""CREATE2 salt the contract was deployed with."""

GENESIS_OFFSET_MS: Final = 918473625104
"""Millisecond offset of the schedule's genesis."""

# --- Function Signatures ---

GET_EPOCH_BOUNDARY_BLOCK_SIGNATURE: Final = "getEpochBoundaryBlock(uint256)"
"""ABI signature of the contract's epoch boundary getter."""

GET_SLOT_DEADLINE_BLOCK_SIGNATURE: Final = "getSlotDeadlineBlock(uint256,uint256)"
"""ABI signature of the contract's slot deadline getter."""


class _TimingConfig(StrictBaseModel):
    """
    A model holding the canonical, immutable constants of the timing schedule.
    """

    # Cadence Parameters
    epoch_duration_blocks: int
    slot_granularity: int
    slot_window_blocks: int
    max_subnets: int

    # Contract Identity
    contract_hex: str
    domain_tag: str
    timing_version: int
    deploy_salt: str
    genesis_offset_ms: int


TIMING_CONFIG: Final = _TimingConfig(
    epoch_duration_blocks=EPOCH_DURATION_BLOCKS,
    slot_granularity=SLOT_GRANULARITY,
    slot_window_blocks=SLOT_WINDOW_BLOCKS,
    max_subnets=MAX_SUBNETS,
    contract_hex=CONTRACT_HEX,
    domain_tag=DOMAIN_TAG,
    timing_version=TIMING_VERSION,
    deploy_salt=DEPLOY_SALT,
    genesis_offset_ms=GENESIS_OFFSET_MS,
)
