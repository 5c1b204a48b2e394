"""Subnet timing: epoch/slot schedule arithmetic for subnet contract calls."""
