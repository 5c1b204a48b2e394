"""Tests for the public schedule and contract constants."""

import pytest
from pydantic import ValidationError

from subnet_timing.timing import (
    CONTRACT_HEX,
    DEPLOY_SALT,
    EPOCH_DURATION_BLOCKS,
    GENESIS_OFFSET_MS,
    MAX_SUBNETS,
    SLOT_GRANULARITY,
    SLOT_WINDOW_BLOCKS,
    TIMING_CONFIG,
    TIMING_VERSION,
)


class TestConstants:
    """The constants must match the deployed contract exactly."""

    def test_cadence(self) -> None:
        """Epoch, slot and window lengths."""
        assert EPOCH_DURATION_BLOCKS == 311
        assert SLOT_GRANULARITY == 17
        assert SLOT_WINDOW_BLOCKS == 89
        assert MAX_SUBNETS == 64

    def test_identity(self) -> None:
        """Version byte, genesis offset and hex encodings."""
        assert TIMING_VERSION == 0x71
        assert GENESIS_OFFSET_MS == 918473625104
        assert CONTRACT_HEX.startswith("0x")
        assert len(bytes.fromhex(CONTRACT_HEX[2:])) == 20
        assert CONTRACT_HEX == CONTRACT_HEX.lower()
        assert len(bytes.fromhex(DEPLOY_SALT[2:])) == 32

    def test_config_model_mirrors_constants(self) -> None:
        """The config model carries the same values."""
        assert TIMING_CONFIG.epoch_duration_blocks == EPOCH_DURATION_BLOCKS
        assert TIMING_CONFIG.slot_granularity == SLOT_GRANULARITY
        assert TIMING_CONFIG.slot_window_blocks == SLOT_WINDOW_BLOCKS
        assert TIMING_CONFIG.max_subnets == MAX_SUBNETS
        assert TIMING_CONFIG.timing_version == TIMING_VERSION

    def test_config_model_is_frozen(self) -> None:
        """The config model cannot be modified."""
        with pytest.raises(ValidationError):
            TIMING_CONFIG.epoch_duration_blocks = 1  # type: ignore[misc]
