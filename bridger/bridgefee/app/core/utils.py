"""Utility helpers shared across bridgefee core modules."""

from __future__ import annotations

import logging
from typing import Optional

from web3 import Web3

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def get_logger(name: str = "bridgefee") -> logging.Logger:
    """Return a configured logger that prints to stdout."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def ensure_web3_connected(web3: Web3, *, expected_chain_id: Optional[int] = None) -> None:
    """Validate that ``web3`` is connected and optionally matches the expected chain id."""
    if not web3.is_connected():
        raise ConnectionError("Failed to connect to the configured RPC endpoint")
    if expected_chain_id is not None and web3.eth.chain_id != expected_chain_id:
        raise ValueError(f"RPC chain ID mismatch: expected {expected_chain_id}, got {web3.eth.chain_id}")


def is_zero_address(address: Optional[str]) -> bool:
    """Return True for empty results and any zero-valued address such as ``0x0``."""
    if not address:
        return True
    try:
        return int(str(address), 16) == 0
    except ValueError:
        return False


def format_units(value: int, decimals: int = 18) -> str:
    """Render an integer amount of base units as a decimal string.

    The fractional part keeps every significant digit and at least one digit,
    so ``format_units(10**18)`` is ``"1.0"`` and ``format_units(1800)`` is
    ``"0.0000000000000018"``.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    value = int(value)
    sign = "-" if value < 0 else ""
    whole, remainder = divmod(abs(value), 10**decimals)
    fraction = str(remainder).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction}"


__all__ = [
    "ZERO_ADDRESS",
    "ensure_web3_connected",
    "format_units",
    "get_logger",
    "is_zero_address",
]
