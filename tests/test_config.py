import pytest

from mirage_sdk.config import (
    DEFAULT_CONFIRMATION_TIMEOUT,
    Network,
    SdkConfig,
    get_config,
    get_network_addresses,
)
from mirage_sdk.exceptions import InvalidNetworkError, NetworkConfigurationError
from tests.helpers.config import MARKET_ADDRESS, VAULT_ADDRESS, VIEWS_ADDRESS

ENV_VARS = (
    "MIRAGE_NETWORK",
    "MIRAGE_RPC_URL",
    "MIRAGE_MARKET_ADDRESS",
    "MIRAGE_VAULT_ADDRESS",
    "MIRAGE_VIEWS_ADDRESS",
    "MIRAGE_CONFIRMATION_TIMEOUT",
    "MIRAGE_MAX_GAS_AMOUNT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture
    monkeypatch.setattr("mirage_sdk.config.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


@pytest.fixture
def contract_env(clean_env):
    clean_env.setenv("MIRAGE_MARKET_ADDRESS", MARKET_ADDRESS)
    clean_env.setenv("MIRAGE_VAULT_ADDRESS", VAULT_ADDRESS)
    clean_env.setenv("MIRAGE_VIEWS_ADDRESS", VIEWS_ADDRESS)
    return clean_env


def test_network_addresses():
    mainnet = get_network_addresses(Network.MAINNET)
    testnet = get_network_addresses("testnet")

    assert mainnet["chain_id"] != testnet["chain_id"]
    assert set(mainnet) == {"rpc_url", "chain_id", "explorer_url"}


def test_unknown_network():
    with pytest.raises(InvalidNetworkError):
        get_network_addresses("devnet")


def test_from_env_defaults_to_testnet(contract_env):
    config = get_config()

    assert config.network == Network.TESTNET
    assert not config.is_mainnet
    assert config.rpc_url == get_network_addresses(Network.TESTNET)["rpc_url"]
    assert config.market_address == MARKET_ADDRESS
    assert config.confirmation_timeout == DEFAULT_CONFIRMATION_TIMEOUT


def test_from_env_overrides(contract_env):
    contract_env.setenv("MIRAGE_NETWORK", "mainnet")
    contract_env.setenv("MIRAGE_RPC_URL", "http://localhost:8545")
    contract_env.setenv("MIRAGE_CONFIRMATION_TIMEOUT", "12.5")
    contract_env.setenv("MIRAGE_MAX_GAS_AMOUNT", "500000")

    config = SdkConfig.from_env()

    assert config.is_mainnet
    assert config.rpc_url == "http://localhost:8545"
    assert config.chain_id == get_network_addresses(Network.MAINNET)["chain_id"]
    assert config.confirmation_timeout == 12.5
    assert config.max_gas_amount == 500000


def test_from_env_requires_contract_addresses(clean_env):
    clean_env.setenv("MIRAGE_MARKET_ADDRESS", MARKET_ADDRESS)

    with pytest.raises(NetworkConfigurationError, match="MIRAGE_VAULT_ADDRESS, MIRAGE_VIEWS_ADDRESS"):
        SdkConfig.from_env()


def test_from_env_never_reads_private_key(contract_env):
    contract_env.setenv("PRIVATE_KEY", "0x" + "11" * 32)

    config = SdkConfig.from_env()

    assert "11" * 32 not in repr(config)


def test_invalid_contract_address():
    with pytest.raises(NetworkConfigurationError, match="Invalid contract address"):
        SdkConfig.for_network(Network.TESTNET, "0x1234", VAULT_ADDRESS, VIEWS_ADDRESS)


def test_contract_address_lookup(sdk_config):
    assert sdk_config.contract_address("vault") == VAULT_ADDRESS
    with pytest.raises(NetworkConfigurationError, match="Unknown contract"):
        sdk_config.contract_address("oracle")


@pytest.mark.parametrize(
    "name, value",
    [
        ("MIRAGE_CONFIRMATION_TIMEOUT", "soon"),
        ("MIRAGE_CONFIRMATION_TIMEOUT", "-1"),
        ("MIRAGE_MAX_GAS_AMOUNT", "2e6"),
        ("MIRAGE_MAX_GAS_AMOUNT", "0"),
    ],
)
def test_from_env_rejects_malformed_numbers(contract_env, name, value):
    contract_env.setenv(name, value)

    with pytest.raises(NetworkConfigurationError, match=name):
        get_config()
