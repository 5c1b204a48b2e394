"""
Subnet timing CLI entry point.

Query the epoch/slot schedule and contract identifiers without touching a chain.

Usage::

    python -m subnet_timing --genesis 1000 boundary 2
    python -m subnet_timing --genesis 1000 deadline 1622 3
    python -m subnet_timing --genesis 1000 locate 1933
    python -m subnet_timing slot-id 7 2 3
    python -m subnet_timing --digest keccak256 selectors

Options:
    --genesis    Genesis block number (default: 0)
    --digest     Digest for ids and selectors: sha256 or keccak256
    -v           Enable debug logging
    --no-color   Disable colored logging output
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from subnet_timing import config
from subnet_timing.timing import TimingCalculator, resolve_digest
from subnet_timing.timing.constants import (
    GET_EPOCH_BOUNDARY_BLOCK_SIGNATURE,
    GET_SLOT_DEADLINE_BLOCK_SIGNATURE,
)
from subnet_timing.timing.hashing import function_selector
from subnet_timing.types import TimingError

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging to stderr with optional colors."""
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def run_command(args: argparse.Namespace) -> dict[str, Any]:
    """
    Execute a parsed subcommand against a fresh calculator.

    Returns:
        A JSON-serializable result.

    Raises:
        DigestUnavailableError: If the requested digest does not exist.
    """
    digest = resolve_digest(args.digest)
    calculator = TimingCalculator(genesis_block=args.genesis, digest=digest)
    logger.debug("Running %s with genesis=%d digest=%s", args.command, args.genesis, digest.name)

    match args.command:
        case "boundary":
            block = calculator.epoch_boundary_block(args.epoch_index)
            return {
                "epochIndex": args.epoch_index,
                "epochStartBlock": block,
                "calldata": calculator.encode_get_epoch_boundary_block_call(args.epoch_index),
            }
        case "deadline":
            block = calculator.slot_deadline_block(args.epoch_start_block, args.slot_index)
            return {
                "epochStartBlock": args.epoch_start_block,
                "slotIndex": args.slot_index,
                "slotDeadlineBlock": block,
                "calldata": calculator.encode_get_slot_deadline_block_call(
                    args.epoch_start_block, args.slot_index
                ),
            }
        case "locate":
            return calculator.current_epoch_window(args.block_number).model_dump(by_alias=True)
        case "slot-id":
            return {
                "subnetId": args.subnet_id,
                "epochIndex": args.epoch_index,
                "slotIndex": args.slot_index,
                "slotId": calculator.slot_id(args.subnet_id, args.epoch_index, args.slot_index),
            }
        case "selectors":
            return {
                signature: function_selector(signature, digest)
                for signature in (
                    GET_EPOCH_BOUNDARY_BLOCK_SIGNATURE,
                    GET_SLOT_DEADLINE_BLOCK_SIGNATURE,
                )
            }
        case _:
            raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="subnet_timing",
        description="Subnet epoch/slot timing calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--genesis",
        type=int,
        default=0,
        help="Genesis block number (default: 0)",
    )
    parser.add_argument(
        "--digest",
        default=config.TIMING_DIGEST,
        help=f"Digest for ids and selectors (default: {config.TIMING_DIGEST})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    boundary = commands.add_parser("boundary", help="First block of an epoch")
    boundary.add_argument("epoch_index", type=int)

    deadline = commands.add_parser("deadline", help="Deadline block of a slot")
    deadline.add_argument("epoch_start_block", type=int)
    deadline.add_argument("slot_index", type=int)

    locate = commands.add_parser("locate", help="Epoch and slot containing a block")
    locate.add_argument("block_number", type=int)

    slot_id = commands.add_parser("slot-id", help="Identifier of a slot")
    slot_id.add_argument("subnet_id", type=int)
    slot_id.add_argument("epoch_index", type=int)
    slot_id.add_argument("slot_index", type=int)

    commands.add_parser("selectors", help="Selectors of the contract getters")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        result = run_command(args)
    except (TimingError, OverflowError) as e:
        logger.error("%s", e)
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
