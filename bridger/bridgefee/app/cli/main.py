"""CLI entrypoint for recommending bridge processing fees."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

from dotenv import load_dotenv
from eth_account import Account
from web3 import Web3

from bridgefee.config import FeeConfig, load_config
from bridgefee.core.chains import Chain
from bridgefee.core.fee import FeeRecommender, ProcessingFeeMethod
from bridgefee.core.providers import Web3GasPriceOracle, build_providers, token_vault_registry_factory
from bridgefee.core.utils import ensure_web3_connected, get_logger

LOGGER = get_logger("bridgefee.cli")


def build_recommender(
    config: FeeConfig,
    *,
    web3_factory: Callable[[str], Web3] = lambda url: Web3(Web3.HTTPProvider(url)),
    check_chains: Optional[List[Chain]] = None,
) -> FeeRecommender:
    """Wire a recommender to web3 providers for every configured chain."""
    providers = build_providers(config.chains.values(), web3_factory)
    for chain in check_chains or []:
        chain.ensure_rpc_url()
        ensure_web3_connected(providers[chain.id], expected_chain_id=chain.id)
    return FeeRecommender(
        gas_price_oracle=Web3GasPriceOracle(providers),
        registry_factory=token_vault_registry_factory(providers),
    )


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recommend a processing fee for a bridge transfer")
    parser.add_argument("--config", type=Path, default=Path("config.json"), help="Path to the chain/token config")
    parser.add_argument("--src", required=True, help="Source chain id or name")
    parser.add_argument("--dest", required=True, help="Destination chain id or name")
    parser.add_argument("--token", required=True, help="Token symbol, e.g. ETH")
    parser.add_argument(
        "--method",
        choices=[method.value for method in ProcessingFeeMethod],
        default=ProcessingFeeMethod.RECOMMENDED.value,
        help="Processing fee method",
    )
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    *,
    web3_factory: Callable[[str], Web3] = lambda url: Web3(Web3.HTTPProvider(url)),
) -> None:
    load_dotenv()
    args = _parse_args(argv)

    private_key_env = os.getenv("PRIVATE_KEY") or ""
    private_key = private_key_env.strip()

    if not private_key:
        print("❌ Error: PRIVATE_KEY environment variable not set")
        sys.exit(1)

    try:
        config = load_config(args.config)
        src_chain = config.chain(args.src)
        dest_chain = config.chain(args.dest)
        token = config.token(args.token)
        account = Account.from_key(private_key)

        recommender = build_recommender(config, web3_factory=web3_factory, check_chains=[dest_chain])
        fee = recommender.estimate(src_chain, dest_chain, ProcessingFeeMethod(args.method), token, account)
    except Exception as exc:
        print(f"\n❌ Error: {exc}")
        sys.exit(1)

    LOGGER.info("Bridging %s from %s to %s as %s", token.symbol, src_chain.name, dest_chain.name, account.address)
    print(f"{fee} {dest_chain.native_symbol}")


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
