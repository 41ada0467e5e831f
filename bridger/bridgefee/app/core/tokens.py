"""Token descriptors and the native-coin token."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from bridgefee.core.errors import MissingTokenAddressError


class TokenKind(str, Enum):
    """Whether a token is the chain's native coin or an ERC20 contract."""

    NATIVE = "native"
    FUNGIBLE = "fungible"


@dataclass(frozen=True)
class Token:
    """A bridgeable token and its contract address on each chain."""

    name: str
    symbol: str
    decimals: int
    kind: TokenKind = TokenKind.FUNGIBLE
    addresses: Mapping[int, str] = field(default_factory=dict)

    @property
    def is_native(self) -> bool:
        return self.kind is TokenKind.NATIVE

    def address_on(self, chain_id: int) -> str:
        """Return the token's contract address on ``chain_id``."""
        address = self.addresses.get(chain_id)
        if not address:
            raise MissingTokenAddressError(self.symbol, chain_id)
        return address


ETH_TOKEN = Token(name="Ether", symbol="ETH", decimals=18, kind=TokenKind.NATIVE)


__all__ = ["ETH_TOKEN", "Token", "TokenKind"]
