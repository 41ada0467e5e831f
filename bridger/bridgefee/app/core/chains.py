"""Chain descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bridgefee.core.errors import ConfigError


@dataclass(frozen=True)
class Chain:
    """A blockchain network taking part in a bridge transfer."""

    id: int
    name: str
    rpc_url: Optional[str] = None
    token_vault_address: Optional[str] = None
    native_symbol: str = "ETH"
    native_decimals: int = 18

    def ensure_rpc_url(self) -> str:
        """Return the RPC URL or raise if it is missing."""
        if not self.rpc_url:
            raise ConfigError(f"RPC URL required for chain {self.name} but not configured")
        return self.rpc_url

    def ensure_token_vault_address(self) -> str:
        """Return the token vault address or raise if it is missing."""
        if not self.token_vault_address:
            raise ConfigError(f"Token vault address required for chain {self.name} but not configured")
        return self.token_vault_address


__all__ = ["Chain"]
