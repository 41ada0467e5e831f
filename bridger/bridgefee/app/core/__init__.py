"""Core domain logic for bridgefee."""

from .chains import Chain
from .errors import (
    BridgeFeeError,
    ConfigError,
    ContractCallError,
    MissingTokenAddressError,
    NetworkError,
)
from .fee import (
    ERC20_DEPLOYED_GAS_LIMIT,
    ERC20_NOT_DEPLOYED_GAS_LIMIT,
    ETH_GAS_LIMIT,
    FeeRecommender,
    ProcessingFeeMethod,
    recommend_processing_fee,
)
from .providers import (
    GasPriceOracle,
    TokenBridgeRegistry,
    TokenVaultRegistry,
    Web3GasPriceOracle,
    build_providers,
    token_vault_registry_factory,
)
from .tokens import ETH_TOKEN, Token, TokenKind

__all__ = [
    "BridgeFeeError",
    "Chain",
    "ConfigError",
    "ContractCallError",
    "ERC20_DEPLOYED_GAS_LIMIT",
    "ERC20_NOT_DEPLOYED_GAS_LIMIT",
    "ETH_GAS_LIMIT",
    "ETH_TOKEN",
    "FeeRecommender",
    "GasPriceOracle",
    "MissingTokenAddressError",
    "NetworkError",
    "ProcessingFeeMethod",
    "Token",
    "TokenBridgeRegistry",
    "TokenKind",
    "TokenVaultRegistry",
    "Web3GasPriceOracle",
    "build_providers",
    "recommend_processing_fee",
    "token_vault_registry_factory",
]
