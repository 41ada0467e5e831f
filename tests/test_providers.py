from types import SimpleNamespace

import pytest
import requests
from web3 import Web3
from web3.exceptions import ContractLogicError

from bridgefee.core.chains import Chain
from bridgefee.core.errors import ContractCallError, NetworkError
from bridgefee.core.providers import (
    TokenVaultRegistry,
    Web3GasPriceOracle,
    build_providers,
    token_vault_registry_factory,
)
from bridgefee.core.utils import ZERO_ADDRESS

VAULT = "0x1000777700000000000000000000000000000002"
TOKEN = "0x3e8ae3f42b8aa0c0c5fd2e6adeb03f0c4b2a9ff1"
SIGNER = SimpleNamespace(address="0x" + "ab" * 20)


class FakeCall:
    def __init__(self, contract, args):
        self._contract = contract
        self._args = args

    def call(self, tx):
        self._contract.calls.append((self._args, tx))
        if self._contract.error is not None:
            raise self._contract.error
        return self._contract.result


class FakeContract:
    def __init__(self, result=ZERO_ADDRESS, error=None):
        self.result = result
        self.error = error
        self.calls = []
        self.functions = SimpleNamespace(canonicalToBridged=lambda *args: FakeCall(self, args))


class FakeEth:
    def __init__(self, gas_price=2, error=None, contract=None):
        self._gas_price = gas_price
        self._error = error
        self._contract = contract or FakeContract()
        self.contract_args = []

    @property
    def gas_price(self):
        if self._error is not None:
            raise self._error
        return self._gas_price

    def contract(self, address, abi):
        self.contract_args.append((address, abi))
        return self._contract


class FakeWeb3:
    def __init__(self, eth):
        self.eth = eth


def test_gas_price_from_destination_provider() -> None:
    oracle = Web3GasPriceOracle({1: FakeWeb3(FakeEth(gas_price=7)), 2: FakeWeb3(FakeEth(gas_price=9))})
    assert oracle.get_gas_price(2) == 9


def test_gas_price_unknown_chain() -> None:
    oracle = Web3GasPriceOracle({})
    with pytest.raises(NetworkError):
        oracle.get_gas_price(1)


def test_gas_price_transport_error() -> None:
    oracle = Web3GasPriceOracle({1: FakeWeb3(FakeEth(error=requests.ConnectionError("refused")))})
    with pytest.raises(NetworkError, match="refused"):
        oracle.get_gas_price(1)


def test_gas_price_malformed() -> None:
    oracle = Web3GasPriceOracle({1: FakeWeb3(FakeEth(gas_price="0x10"))})
    with pytest.raises(NetworkError, match="Malformed"):
        oracle.get_gas_price(1)


def test_registry_calls_vault_with_checksummed_args() -> None:
    contract = FakeContract(result="0x0000000000000000000000000000000000000123")
    eth = FakeEth(contract=contract)
    registry = TokenVaultRegistry(FakeWeb3(eth), VAULT.lower(), SIGNER)

    bridged = registry.canonical_to_bridged(167001, TOKEN)

    assert bridged == "0x0000000000000000000000000000000000000123"
    address, abi = eth.contract_args[0]
    assert address == Web3.to_checksum_address(VAULT)
    assert any(entry.get("name") == "canonicalToBridged" for entry in abi)
    assert contract.calls == [
        ((167001, Web3.to_checksum_address(TOKEN)), {"from": Web3.to_checksum_address(SIGNER.address)})
    ]


def test_registry_empty_result_is_zero_address() -> None:
    registry = TokenVaultRegistry(FakeWeb3(FakeEth(contract=FakeContract(result=None))), VAULT, SIGNER)
    assert registry.canonical_to_bridged(1, TOKEN) == ZERO_ADDRESS


def test_registry_malformed_token_is_contract_call_error() -> None:
    contract = FakeContract()
    registry = TokenVaultRegistry(FakeWeb3(FakeEth(contract=contract)), VAULT, SIGNER)
    with pytest.raises(ContractCallError):
        registry.canonical_to_bridged(1, "0x1234")
    assert contract.calls == []


def test_vault_abi_only_exposes_canonical_to_bridged() -> None:
    eth = FakeEth()
    TokenVaultRegistry(FakeWeb3(eth), VAULT, SIGNER)
    assert [entry["name"] for entry in eth.contract_args[0][1]] == ["canonicalToBridged"]


def test_registry_revert_is_contract_call_error() -> None:
    contract = FakeContract(error=ContractLogicError("execution reverted"))
    registry = TokenVaultRegistry(FakeWeb3(FakeEth(contract=contract)), VAULT, SIGNER)
    with pytest.raises(ContractCallError, match="reverted"):
        registry.canonical_to_bridged(1, TOKEN)


def test_registry_transport_error_is_contract_call_error() -> None:
    contract = FakeContract(error=requests.Timeout("timed out"))
    registry = TokenVaultRegistry(FakeWeb3(FakeEth(contract=contract)), VAULT, SIGNER)
    with pytest.raises(ContractCallError, match="timed out"):
        registry.canonical_to_bridged(1, TOKEN)


def test_build_providers_skips_chains_without_rpc() -> None:
    chains = [Chain(id=1, name="a", rpc_url="http://a"), Chain(id=2, name="b")]
    providers = build_providers(chains, lambda url: f"web3:{url}")
    assert providers == {1: "web3:http://a"}


def test_registry_factory_requires_provider() -> None:
    factory = token_vault_registry_factory({})
    with pytest.raises(NetworkError):
        factory(1, VAULT, SIGNER)


def test_registry_factory_binds_provider() -> None:
    eth = FakeEth()
    factory = token_vault_registry_factory({1: FakeWeb3(eth)})
    registry = factory(1, VAULT, SIGNER)
    assert isinstance(registry, TokenVaultRegistry)
    assert eth.contract_args[0][0] == Web3.to_checksum_address(VAULT)
