"""Tests for the local slot cache."""

import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from subnet_timing.timing import SlotCache, SlotRecord


class TestSlotRecord:
    """Tests for SlotRecord."""

    def test_is_immutable(self) -> None:
        """Records cannot be modified after creation."""
        record = SlotRecord(
            subnet_id=1,
            epoch_index=2,
            slot_index=3,
            tensor_hash=b"\x00" * 32,
            registered_at=time.time(),
        )

        with pytest.raises(ValidationError):
            record.tensor_hash = b"\x01"  # type: ignore[misc]

    def test_rejects_unknown_fields(self) -> None:
        """Extra fields are forbidden."""
        with pytest.raises(ValidationError):
            SlotRecord(  # type: ignore[call-arg]
                subnet_id=1,
                epoch_index=2,
                slot_index=3,
                tensor_hash=b"",
                registered_at=0.0,
                weight=5,
            )


class TestSlotCache:
    """Tests for SlotCache."""

    def test_put_and_get(self) -> None:
        """Stored records are returned by key."""
        cache = SlotCache()
        before = time.time()

        stored = cache.put(3, 4, 5, b"\xab" * 32)

        assert cache.get(3, 4, 5) == stored
        assert stored.registered_at >= before
        assert (3, 4, 5) in cache

    def test_get_missing(self) -> None:
        """Unknown keys return None."""
        assert SlotCache().get(0, 0, 0) is None

    def test_keys_are_distinct(self) -> None:
        """Each coordinate participates in the key."""
        cache = SlotCache()
        cache.put(1, 2, 3, b"a")
        cache.put(3, 2, 1, b"b")
        cache.put(1, 3, 2, b"c")

        assert len(cache) == 3
        record = cache.get(3, 2, 1)
        assert record is not None
        assert record.tensor_hash == b"b"

    def test_put_replaces(self) -> None:
        """Putting the same key replaces the record rather than merging."""
        cache = SlotCache()
        cache.put(1, 1, 1, b"old")
        cache.put(1, 1, 1, b"new")

        record = cache.get(1, 1, 1)
        assert record is not None
        assert record.tensor_hash == b"new"
        assert len(cache) == 1

    def test_accepts_bytearray(self) -> None:
        """Tensor hashes given as bytearray are stored as bytes."""
        cache = SlotCache()
        record = cache.put(1, 1, 1, bytearray(b"\x01\x02"))
        assert record.tensor_hash == b"\x01\x02"

    def test_records_snapshot(self) -> None:
        """records() returns a copy unaffected by later writes."""
        cache = SlotCache()
        cache.put(1, 1, 1, b"x")
        snapshot = cache.records()

        cache.put(2, 2, 2, b"y")

        assert len(snapshot) == 1
        assert len(cache.records()) == 2

    def test_clear(self) -> None:
        """clear() removes every record."""
        cache = SlotCache()
        cache.put(1, 1, 1, b"x")
        cache.clear()

        assert len(cache) == 0
        assert cache.get(1, 1, 1) is None

    def test_concurrent_puts(self) -> None:
        """Concurrent registrations from many threads are all stored."""
        cache = SlotCache()

        def register(subnet_id: int) -> None:
            for slot_index in range(50):
                cache.put(subnet_id, 0, slot_index, subnet_id.to_bytes(4, "big"))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(register, range(16)))

        assert len(cache) == 16 * 50

    def test_concurrent_overwrites_keep_one_record(self) -> None:
        """Concurrent writes to one key leave exactly one of the written values."""
        cache = SlotCache()
        values = [bytes([i]) * 4 for i in range(32)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda value: cache.put(9, 9, 9, value), values))

        record = cache.get(9, 9, 9)
        assert len(cache) == 1
        assert record is not None
        assert record.tensor_hash in values
