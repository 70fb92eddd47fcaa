"""Gathering configuration from environment variables"""

from typing import Optional, Union

import os
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv
from web3 import Web3

from mirage_sdk.exceptions import InvalidNetworkError, NetworkConfigurationError

DEFAULT_MAX_GAS_AMOUNT = 2_000_000
DEFAULT_CONFIRMATION_TIMEOUT = 60.0
DEFAULT_POLL_INTERVAL = 1.0


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


def get_network_addresses(network: Union[Network, str]) -> dict:
    """Get network-specific RPC endpoint, chain id and explorer."""
    try:
        network = Network(network)
    except ValueError:
        raise InvalidNetworkError(f"Invalid network '{network}'! It's neither mainnet nor testnet.")

    if network == Network.MAINNET:
        return {
            "rpc_url": "https://rpc.mirage.money",
            "chain_id": 126,
            "explorer_url": "https://explorer.mirage.money",
        }
    return {
        "rpc_url": "https://testnet.rpc.mirage.money",
        "chain_id": 250,
        "explorer_url": "https://testnet.explorer.mirage.money",
    }


@dataclass(frozen=True)
class SdkConfig:
    """Configuration for the Mirage RPC client"""

    network: Network
    rpc_url: str
    chain_id: int
    explorer_url: str
    market_address: str
    vault_address: str
    views_address: str
    max_gas_amount: int = DEFAULT_MAX_GAS_AMOUNT
    confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL

    @property
    def is_mainnet(self) -> bool:
        return self.network == Network.MAINNET

    def contract_address(self, contract: str) -> str:
        """Resolve a contract key ("market", "vault", "views") to its checksum address."""
        addresses = {
            "market": self.market_address,
            "vault": self.vault_address,
            "views": self.views_address,
        }
        if contract not in addresses:
            raise NetworkConfigurationError(f"Unknown contract '{contract}'")
        return addresses[contract]

    @classmethod
    def for_network(
        cls,
        network: Union[Network, str],
        market_address: str,
        vault_address: str,
        views_address: str,
        rpc_url: Optional[str] = None,
        **overrides,
    ) -> "SdkConfig":
        network_config = get_network_addresses(network)

        try:
            addresses = [Web3.to_checksum_address(a) for a in (market_address, vault_address, views_address)]
        except ValueError as e:
            raise NetworkConfigurationError(f"Invalid contract address: {e}") from e

        return cls(
            network=Network(network),
            rpc_url=rpc_url or network_config["rpc_url"],
            chain_id=network_config["chain_id"],
            explorer_url=network_config["explorer_url"],
            market_address=addresses[0],
            vault_address=addresses[1],
            views_address=addresses[2],
            **overrides,
        )

    @classmethod
    def from_env(cls) -> "SdkConfig":
        """Create a config instance from environment variables.

        Private keys are deliberately not read here; pass them to
        ``derive_identity`` at the call site.
        """
        load_dotenv()

        network = os.environ.get("MIRAGE_NETWORK", Network.TESTNET.value)

        missing = [
            name
            for name in ("MIRAGE_MARKET_ADDRESS", "MIRAGE_VAULT_ADDRESS", "MIRAGE_VIEWS_ADDRESS")
            if not os.environ.get(name)
        ]
        if missing:
            raise NetworkConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

        overrides = {}
        for name, field_name, parse in (
            ("MIRAGE_CONFIRMATION_TIMEOUT", "confirmation_timeout", float),
            ("MIRAGE_MAX_GAS_AMOUNT", "max_gas_amount", int),
        ):
            if name not in os.environ:
                continue
            try:
                value = parse(os.environ[name])
            except ValueError:
                raise NetworkConfigurationError(f"Invalid {name}: {os.environ[name]!r}") from None
            if not value > 0:
                raise NetworkConfigurationError(f"{name} must be positive, got {value}")
            overrides[field_name] = value

        return cls.for_network(
            network,
            market_address=os.environ["MIRAGE_MARKET_ADDRESS"],
            vault_address=os.environ["MIRAGE_VAULT_ADDRESS"],
            views_address=os.environ["MIRAGE_VIEWS_ADDRESS"],
            rpc_url=os.environ.get("MIRAGE_RPC_URL"),
            **overrides,
        )


def get_config() -> SdkConfig:
    """Get configuration from environment."""
    return SdkConfig.from_env()
