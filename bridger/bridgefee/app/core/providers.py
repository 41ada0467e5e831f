"""Chain read collaborators: gas price oracle and bridged-token registry."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Protocol

import requests
from web3 import Web3
from web3.contract import Contract
from web3.exceptions import ContractLogicError, Web3Exception

from bridgefee.contracts import load_contract_abi
from bridgefee.core.chains import Chain
from bridgefee.core.errors import ContractCallError, NetworkError
from bridgefee.core.utils import ZERO_ADDRESS, get_logger

LOGGER = get_logger("bridgefee.providers")

# web3 v6 surfaces JSON-RPC errors as plain ValueError.
_TRANSPORT_ERRORS = (Web3Exception, requests.RequestException, OSError, ValueError)


class GasPriceOracle(Protocol):
    def get_gas_price(self, chain_id: int) -> int:
        """Return the current gas price on ``chain_id`` in wei."""


class TokenBridgeRegistry(Protocol):
    def canonical_to_bridged(self, chain_id: int, token_address: str) -> str:
        """Return the bridged address of ``token_address`` or the zero address."""


RegistryFactory = Callable[[int, str, Any], TokenBridgeRegistry]


def _signer_address(signer: Any) -> str:
    return Web3.to_checksum_address(getattr(signer, "address", signer))


class Web3GasPriceOracle:
    """Reads ``eth_gasPrice`` from one web3 provider per chain."""

    def __init__(self, providers: Mapping[int, Web3]) -> None:
        self._providers = dict(providers)

    def get_gas_price(self, chain_id: int) -> int:
        web3 = self._providers.get(chain_id)
        if web3 is None:
            raise NetworkError(f"No provider configured for chain {chain_id}")
        try:
            gas_price = web3.eth.gas_price
        except _TRANSPORT_ERRORS as exc:
            raise NetworkError(f"Failed to fetch gas price on chain {chain_id}: {exc}") from exc
        if isinstance(gas_price, bool) or not isinstance(gas_price, int) or gas_price < 0:
            raise NetworkError(f"Malformed gas price from chain {chain_id}: {gas_price!r}")
        return gas_price


class TokenVaultRegistry:
    """Read-only view of a token vault's canonical-to-bridged mapping."""

    def __init__(self, web3: Web3, vault_address: str, signer: Any) -> None:
        self._signer = signer
        self.contract: Contract = web3.eth.contract(
            address=Web3.to_checksum_address(vault_address),
            abi=load_contract_abi("token_vault.json"),
        )

    def canonical_to_bridged(self, chain_id: int, token_address: str) -> str:
        sender = _signer_address(self._signer)
        try:
            call = self.contract.functions.canonicalToBridged(
                int(chain_id),
                Web3.to_checksum_address(token_address),
            )
            bridged = call.call({"from": sender})
        except ContractLogicError as exc:
            raise ContractCallError(f"canonicalToBridged reverted: {exc}") from exc
        except _TRANSPORT_ERRORS as exc:
            raise ContractCallError(f"canonicalToBridged call failed: {exc}") from exc
        LOGGER.debug("canonicalToBridged(%s, %s) -> %s", chain_id, token_address, bridged)
        return str(bridged) if bridged else ZERO_ADDRESS


def build_providers(
    chains: Iterable[Chain],
    web3_factory: Callable[[str], Web3] = lambda url: Web3(Web3.HTTPProvider(url)),
) -> Dict[int, Web3]:
    """Create a web3 provider for every chain that has an RPC URL."""
    return {chain.id: web3_factory(chain.rpc_url) for chain in chains if chain.rpc_url}


def token_vault_registry_factory(providers: Mapping[int, Web3]) -> RegistryFactory:
    """Return a factory binding token vault registries to ``providers``."""

    def factory(chain_id: int, vault_address: str, signer: Any) -> TokenBridgeRegistry:
        web3 = providers.get(chain_id)
        if web3 is None:
            raise NetworkError(f"No provider configured for chain {chain_id}")
        return TokenVaultRegistry(web3, vault_address, signer)

    return factory


__all__ = [
    "GasPriceOracle",
    "RegistryFactory",
    "TokenBridgeRegistry",
    "TokenVaultRegistry",
    "Web3GasPriceOracle",
    "build_providers",
    "token_vault_registry_factory",
]
