"""
Timing Calculator
=================

Block-height arithmetic for the subnet epoch/slot schedule.

Epoch ``i`` begins at ``genesis + i * EPOCH_DURATION_BLOCKS``. Within an
epoch, slot ``s`` must land by::

    epoch_start + s * SLOT_GRANULARITY + SLOT_WINDOW_BLOCKS

Inputs that fall before the schedule starts are clamped to index 0 rather
than rejected.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from threading import Lock

from subnet_timing import config
from subnet_timing.types import StrictBaseModel, SubnetOutOfRangeError

from .cache import SlotCache, SlotRecord
from .constants import (
    EPOCH_DURATION_BLOCKS,
    GET_EPOCH_BOUNDARY_BLOCK_SIGNATURE,
    GET_SLOT_DEADLINE_BLOCK_SIGNATURE,
    MAX_SUBNETS,
    SLOT_GRANULARITY,
    SLOT_WINDOW_BLOCKS,
)
from .digest import Digest, resolve_digest
from .hashing import encode_call, function_selector, slot_id_hash

logger = logging.getLogger(__name__)


class EpochWindow(StrictBaseModel):
    """Where a block sits in the schedule."""

    block_number: int
    """The block that was located."""

    epoch_index: int
    """Epoch containing the block (0 before genesis)."""

    epoch_start_block: int
    """First block of that epoch."""

    next_epoch_start_block: int
    """First block of the following epoch."""

    slot_index: int
    """Slot containing the block within its epoch."""

    slot_deadline_block: int
    """Deadline block of that slot."""


def configured_digest() -> Digest:
    """Digest named by `SUBNET_TIMING_DIGEST`, read when called."""
    return resolve_digest(config.TIMING_DIGEST)


def _configured_subnet_bound() -> bool:
    return config.ENFORCE_SUBNET_BOUND


@dataclass(slots=True)
class TimingCalculator:
    """
    Computes epoch boundaries and slot deadlines from a genesis block.

    Also owns the local cache of registered slots. Pass a cache in to share
    one between calculators.
    """

    genesis_block: int
    """Block number at which epoch 0 begins."""

    cache: SlotCache = field(default_factory=SlotCache)
    """Slots registered through this calculator."""

    digest: Digest = field(default_factory=configured_digest)
    """Digest used by the instance-level identifier helpers."""

    enforce_subnet_bound: bool = field(default_factory=_configured_subnet_bound)
    """Reject subnet ids outside [0, MAX_SUBNETS) on registration."""

    created_at: float = field(default_factory=time.time)
    """Unix timestamp when the calculator was created."""

    boundaries_computed: int = field(default=0, repr=False)
    """Number of epoch boundaries computed (diagnostic only)."""

    _counter_lock: Lock = field(default_factory=Lock, repr=False)

    def epoch_boundary_block(self, epoch_index: int) -> int:
        """Return the first block of epoch `epoch_index` (negative indices clamp to 0)."""
        with self._counter_lock:
            self.boundaries_computed += 1
        return self.genesis_block + max(epoch_index, 0) * EPOCH_DURATION_BLOCKS

    def slot_deadline_block(self, epoch_start_block: int, slot_index: int) -> int:
        """Return the deadline block of a slot in the epoch starting at `epoch_start_block`."""
        return epoch_start_block + max(slot_index, 0) * SLOT_GRANULARITY + SLOT_WINDOW_BLOCKS

    def epoch_index_at_block(self, block_number: int) -> int:
        """Get the epoch containing `block_number` (0 if before genesis)."""
        if block_number < self.genesis_block:
            return 0
        return (block_number - self.genesis_block) // EPOCH_DURATION_BLOCKS

    def slot_index_in_epoch(self, block_number: int, epoch_start_block: int) -> int:
        """Get the slot containing `block_number` (0 if before the epoch starts)."""
        if block_number < epoch_start_block:
            return 0
        return (block_number - epoch_start_block) // SLOT_GRANULARITY

    def current_epoch_window(self, block_number: int) -> EpochWindow:
        """
        Locate a block in the schedule.

        Combines the epoch and slot queries into one view of the epoch
        containing `block_number` and the slot it falls in.
        """
        epoch_index = self.epoch_index_at_block(block_number)
        epoch_start = self.epoch_boundary_block(epoch_index)
        slot_index = self.slot_index_in_epoch(block_number, epoch_start)
        return EpochWindow(
            block_number=block_number,
            epoch_index=epoch_index,
            epoch_start_block=epoch_start,
            next_epoch_start_block=epoch_start + EPOCH_DURATION_BLOCKS,
            slot_index=slot_index,
            slot_deadline_block=self.slot_deadline_block(epoch_start, slot_index),
        )

    def register_slot_local(
        self, subnet_id: int, epoch_index: int, slot_index: int, tensor_hash: bytes
    ) -> None:
        """
        Record a slot in the local cache, replacing any earlier registration.

        Raises:
            SubnetOutOfRangeError: If bound enforcement is on and `subnet_id`
                is not in [0, MAX_SUBNETS).
        """
        if self.enforce_subnet_bound and not (0 <= subnet_id < MAX_SUBNETS):
            raise SubnetOutOfRangeError(subnet_id, MAX_SUBNETS)

        self.cache.put(subnet_id, epoch_index, slot_index, tensor_hash)
        logger.debug(
            "Registered slot subnet=%d epoch=%d slot=%d", subnet_id, epoch_index, slot_index
        )

    def lookup_slot(self, subnet_id: int, epoch_index: int, slot_index: int) -> SlotRecord | None:
        """Return a locally registered slot, or None."""
        return self.cache.get(subnet_id, epoch_index, slot_index)

    def slot_id(self, subnet_id: int, epoch_index: int, slot_index: int) -> str:
        """Slot identifier computed with this calculator's digest."""
        return slot_id_hash(subnet_id, epoch_index, slot_index, self.digest)

    def encode_get_epoch_boundary_block_call(self, epoch_index: int) -> str:
        """Calldata for `getEpochBoundaryBlock(epoch_index)` (negative indices clamp to 0)."""
        selector = function_selector(GET_EPOCH_BOUNDARY_BLOCK_SIGNATURE, self.digest)
        return encode_call(selector, max(epoch_index, 0))

    def encode_get_slot_deadline_block_call(self, epoch_start_block: int, slot_index: int) -> str:
        """
        Calldata for `getSlotDeadlineBlock(epoch_start_block, slot_index)`.

        Negative arguments clamp to 0, as in `slot_deadline_block`.
        """
        selector = function_selector(GET_SLOT_DEADLINE_BLOCK_SIGNATURE, self.digest)
        return encode_call(selector, max(epoch_start_block, 0), max(slot_index, 0))

    @staticmethod
    def slot_id_hash(subnet_id: int, epoch_index: int, slot_index: int) -> str:
        """Slot identifier computed with the configured digest."""
        return slot_id_hash(subnet_id, epoch_index, slot_index, configured_digest())

    @staticmethod
    def selector_get_epoch_boundary_block() -> str:
        """Selector of `getEpochBoundaryBlock(uint256)` with the configured digest."""
        return function_selector(GET_EPOCH_BOUNDARY_BLOCK_SIGNATURE, configured_digest())

    @staticmethod
    def selector_get_slot_deadline_block() -> str:
        """Selector of `getSlotDeadlineBlock(uint256,uint256)` with the configured digest."""
        return function_selector(GET_SLOT_DEADLINE_BLOCK_SIGNATURE, configured_digest())
