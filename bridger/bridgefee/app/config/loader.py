"""Config loader for the bridgefee project."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, MutableMapping, Optional, Union

from web3 import Web3

from bridgefee.core.chains import Chain
from bridgefee.core.errors import ConfigError
from bridgefee.core.tokens import ETH_TOKEN, Token, TokenKind


def _require_keys(data: Mapping[str, Any], keys: Iterable[str], context: str) -> None:
    missing = [key for key in keys if key not in data]
    if missing:
        raise ConfigError(f"{context} missing required keys: {', '.join(missing)}")


def _to_checksum(value: str, *, field_name: str) -> str:
    try:
        return Web3.to_checksum_address(value)
    except Exception as exc:  # web3 raises ValueError for malformed inputs
        raise ConfigError(f"Invalid address for {field_name}: {value}") from exc


def _to_int(value: Any, *, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{field_name} must be an integer, got {value!r}") from exc


@dataclass(frozen=True)
class FeeConfig:
    """Typed wrapper around the chain and token configuration."""

    chains: Dict[str, Chain]
    tokens: List[Token]

    def chain(self, key: Union[int, str]) -> Chain:
        """Resolve a chain by id or by configured name."""
        text = str(key).strip()
        if text.isdigit():
            for chain in self.chains.values():
                if chain.id == int(text):
                    return chain
        elif text.lower() in self.chains:
            return self.chains[text.lower()]
        raise ConfigError(f"Unknown chain: {key}")

    def token(self, symbol: str) -> Token:
        """Resolve a token by symbol; the native token is always known."""
        wanted = symbol.strip().upper()
        if wanted == ETH_TOKEN.symbol:
            return ETH_TOKEN
        for token in self.tokens:
            if token.symbol.upper() == wanted:
                return token
        raise ConfigError(f"Unknown token: {symbol}")


def _parse_chain(name: str, data: Any) -> Chain:
    if not isinstance(data, Mapping):
        raise ConfigError(f"chain {name} must be an object")
    _require_keys(data, ["chain_id"], f"chain {name}")

    chain_id = _to_int(data["chain_id"], field_name=f"chain {name} chain_id")
    if chain_id <= 0:
        raise ConfigError(f"chain {name} chain_id must be positive")

    vault = data.get("token_vault_address")
    native_decimals = _to_int(data.get("native_decimals", 18), field_name=f"chain {name} native_decimals")
    if native_decimals < 0:
        raise ConfigError(f"chain {name} native_decimals must not be negative")

    return Chain(
        id=chain_id,
        name=name,
        rpc_url=data.get("rpc_url") or None,
        token_vault_address=_to_checksum(vault, field_name=f"chain {name} token_vault_address") if vault else None,
        native_symbol=str(data.get("native_symbol", "ETH")),
        native_decimals=native_decimals,
    )


def _parse_token(index: int, data: Any) -> Token:
    if not isinstance(data, Mapping):
        raise ConfigError(f"token #{index} must be an object")
    _require_keys(data, ["name", "symbol", "decimals", "addresses"], f"token #{index}")

    symbol = str(data["symbol"])
    decimals = _to_int(data["decimals"], field_name=f"token {symbol} decimals")
    if decimals < 0:
        raise ConfigError(f"token {symbol} decimals must not be negative")

    raw_addresses = data["addresses"]
    if not isinstance(raw_addresses, Mapping) or not raw_addresses:
        raise ConfigError(f"token {symbol} addresses must be a non-empty mapping of chain id to address")

    addresses: Dict[int, str] = {}
    for chain_key, address in raw_addresses.items():
        chain_id = _to_int(chain_key, field_name=f"token {symbol} address chain id")
        addresses[chain_id] = _to_checksum(address, field_name=f"token {symbol} on chain {chain_id}")

    return Token(
        name=str(data["name"]),
        symbol=symbol,
        decimals=decimals,
        kind=TokenKind.FUNGIBLE,
        addresses=addresses,
    )


def _load_json(path: Path) -> MutableMapping[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file contains invalid JSON: {path}") from exc


def load_config(config_path: Optional[Path] = None) -> FeeConfig:
    """Load and validate chain and token configuration data."""
    config_path = config_path or Path("config.json")
    data = _load_json(config_path)

    _require_keys(data, ["chains", "tokens"], "config")

    chains_data = data["chains"]
    if not isinstance(chains_data, Mapping) or not chains_data:
        raise ConfigError("chains must be a non-empty mapping")
    chains = {str(name).lower(): _parse_chain(str(name).lower(), value) for name, value in chains_data.items()}

    seen_ids: Dict[int, str] = {}
    for chain in chains.values():
        if chain.id in seen_ids:
            raise ConfigError(f"chains {seen_ids[chain.id]} and {chain.name} share chain_id {chain.id}")
        seen_ids[chain.id] = chain.name

    tokens_data = data["tokens"]
    if not isinstance(tokens_data, list):
        raise ConfigError("tokens must be a list")
    tokens = [_parse_token(index, value) for index, value in enumerate(tokens_data, start=1)]
    if not tokens:
        raise ConfigError("tokens cannot be empty")

    return FeeConfig(chains=chains, tokens=tokens)


__all__ = ["ConfigError", "FeeConfig", "load_config"]
