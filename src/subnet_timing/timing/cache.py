"""
Local slot cache.

Holds the slots this process has registered, keyed by (subnet, epoch, slot).
Records live until the cache is cleared or the process exits.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from threading import Lock

from subnet_timing.types import StrictBaseModel


class SlotRecord(StrictBaseModel):
    """A slot registered by this process."""

    subnet_id: int
    """Subnet the slot belongs to."""

    epoch_index: int
    """Epoch the slot belongs to."""

    slot_index: int
    """Position of the slot within its epoch."""

    tensor_hash: bytes
    """Hash of the tensor committed for the slot."""

    registered_at: float
    """Unix timestamp when the slot was registered."""

    @property
    def key(self) -> SlotKey:
        """The cache key of this record."""
        return (self.subnet_id, self.epoch_index, self.slot_index)


type SlotKey = tuple[int, int, int]
"""Slot cache key: (subnet_id, epoch_index, slot_index)."""


@dataclass
class SlotCache:
    """
    Thread-safe slot record storage.

    Registering the same key again replaces the earlier record.
    """

    records_by_key: dict[SlotKey, SlotRecord] = field(default_factory=dict)
    """(subnet_id, epoch_index, slot_index) -> SlotRecord mapping."""

    _lock: Lock = field(default_factory=Lock)
    """Thread safety lock."""

    def put(
        self, subnet_id: int, epoch_index: int, slot_index: int, tensor_hash: bytes
    ) -> SlotRecord:
        """
        Create and store a slot record, replacing any record with the same key.

        Returns:
            The newly stored record.
        """
        record = SlotRecord(
            subnet_id=subnet_id,
            epoch_index=epoch_index,
            slot_index=slot_index,
            tensor_hash=bytes(tensor_hash),
            registered_at=time.time(),
        )
        with self._lock:
            self.records_by_key[record.key] = record
        return record

    def get(self, subnet_id: int, epoch_index: int, slot_index: int) -> SlotRecord | None:
        """Return the record for a slot, or None if it was never registered."""
        with self._lock:
            return self.records_by_key.get((subnet_id, epoch_index, slot_index))

    def records(self) -> list[SlotRecord]:
        """Return a snapshot of all stored records."""
        with self._lock:
            return list(self.records_by_key.values())

    def clear(self) -> None:
        """Remove all records."""
        with self._lock:
            self.records_by_key.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self.records_by_key

    def __len__(self) -> int:
        with self._lock:
            return len(self.records_by_key)
