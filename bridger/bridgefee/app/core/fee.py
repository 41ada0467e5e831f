"""Processing fee recommendation for bridge transfers.

The relayer that processes a bridge message on the destination chain pays
for gas there, so the recommended fee is the destination gas price times a
fixed gas ceiling. The ceiling depends on what the relayer has to do:

* release native ETH,
* release an ERC20 whose bridged contract already exists, or
* deploy the bridged ERC20 contract first, which costs considerably more.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from bridgefee.core.chains import Chain
from bridgefee.core.providers import GasPriceOracle, RegistryFactory
from bridgefee.core.tokens import Token
from bridgefee.core.utils import format_units, get_logger, is_zero_address

LOGGER = get_logger("bridgefee.fee")

ETH_GAS_LIMIT = 900_000
ERC20_NOT_DEPLOYED_GAS_LIMIT = 3_100_000
ERC20_DEPLOYED_GAS_LIMIT = 1_100_000

ZERO_FEE = "0"


class ProcessingFeeMethod(str, Enum):
    """How the user chose to pay the relayer's processing fee."""

    RECOMMENDED = "recommended"
    CUSTOM = "custom"
    NONE = "none"


class FeeRecommender:
    """Recommends a processing fee in the destination chain's native coin."""

    def __init__(self, *, gas_price_oracle: GasPriceOracle, registry_factory: RegistryFactory) -> None:
        self.gas_price_oracle = gas_price_oracle
        self.registry_factory = registry_factory

    def estimate(
        self,
        src_chain: Optional[Chain],
        dest_chain: Optional[Chain],
        method: Optional[ProcessingFeeMethod],
        token: Optional[Token],
        signer: Any,
    ) -> str:
        """Return the recommended fee as a decimal string, or ``"0"`` when an input is missing.

        Failures of the gas price oracle or the token registry propagate to
        the caller; they are never reported as a zero fee.
        """
        if src_chain is None or dest_chain is None or method is None or token is None or signer is None:
            return ZERO_FEE

        method = ProcessingFeeMethod(method)
        if method is not ProcessingFeeMethod.RECOMMENDED:
            LOGGER.warning("No estimation strategy for fee method %s, using the recommended fee", method.value)

        # Resolved before any read so a missing address never reaches the network.
        src_address = None if token.is_native else token.address_on(src_chain.id)

        gas_price = self.gas_price_oracle.get_gas_price(dest_chain.id)
        gas_limit = self.gas_limit(dest_chain, src_address, signer)
        fee = format_units(gas_price * gas_limit, dest_chain.native_decimals)

        LOGGER.debug(
            "Recommended fee %s %s to bridge %s from %s to %s (gasPrice=%s gasLimit=%s)",
            fee,
            dest_chain.native_symbol,
            token.symbol,
            src_chain.name,
            dest_chain.name,
            gas_price,
            gas_limit,
        )
        return fee

    def gas_limit(self, dest_chain: Chain, src_address: Optional[str], signer: Any) -> int:
        """Pick the gas ceiling for bridging to ``dest_chain``.

        ``src_address`` is the ERC20's address on the source chain, or None
        for the native coin.
        """
        if src_address is None:
            return ETH_GAS_LIMIT

        registry = self.registry_factory(dest_chain.id, dest_chain.ensure_token_vault_address(), signer)
        bridged_address = registry.canonical_to_bridged(dest_chain.id, src_address)
        if is_zero_address(bridged_address):
            return ERC20_NOT_DEPLOYED_GAS_LIMIT
        return ERC20_DEPLOYED_GAS_LIMIT


def recommend_processing_fee(
    src_chain: Optional[Chain],
    dest_chain: Optional[Chain],
    method: Optional[ProcessingFeeMethod],
    token: Optional[Token],
    signer: Any,
    *,
    gas_price_oracle: GasPriceOracle,
    registry_factory: RegistryFactory,
) -> str:
    """Shorthand for ``FeeRecommender(...).estimate(...)``."""
    recommender = FeeRecommender(gas_price_oracle=gas_price_oracle, registry_factory=registry_factory)
    return recommender.estimate(src_chain, dest_chain, method, token, signer)


__all__ = [
    "ERC20_DEPLOYED_GAS_LIMIT",
    "ERC20_NOT_DEPLOYED_GAS_LIMIT",
    "ETH_GAS_LIMIT",
    "FeeRecommender",
    "ProcessingFeeMethod",
    "ZERO_FEE",
    "recommend_processing_fee",
]
