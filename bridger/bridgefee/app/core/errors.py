"""Exception types raised by the fee recommender and its collaborators."""

from __future__ import annotations


class BridgeFeeError(Exception):
    """Base class for fee estimation failures."""


class ConfigError(BridgeFeeError, ValueError):
    """Raised when configuration data is invalid or missing."""


class NetworkError(BridgeFeeError):
    """Raised when a chain provider is unreachable or returns malformed data."""


class ContractCallError(BridgeFeeError):
    """Raised when a read-only contract call reverts or cannot be delivered."""


class MissingTokenAddressError(BridgeFeeError, LookupError):
    """Raised when a token has no contract address on the requested chain."""

    def __init__(self, symbol: str, chain_id: int) -> None:
        super().__init__(f"Token {symbol} has no address on chain {chain_id}")
        self.symbol = symbol
        self.chain_id = chain_id


__all__ = [
    "BridgeFeeError",
    "ConfigError",
    "ContractCallError",
    "MissingTokenAddressError",
    "NetworkError",
]
