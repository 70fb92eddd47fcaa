"""
Chain RPC client.

Thin async wrapper over web3 that turns every library failure into one of the
SDK's error kinds, so callers never have to know which web3 exception a node
raised.
"""

from typing import Any, Optional

import asyncio
import logging

import aiohttp
from eth_abi import decode
from eth_abi.exceptions import DecodingError
from hexbytes import HexBytes
from web3 import AsyncWeb3
from web3.exceptions import ContractLogicError, ProviderConnectionError, TimeExhausted, Web3RPCError
from web3.types import TxReceipt

from mirage_sdk.chain.models import AccountState, RawTransaction, SignedTransaction
from mirage_sdk.config import SdkConfig
from mirage_sdk.exceptions import (
    ChainUnavailableError,
    ConfirmationTimeoutError,
    ConfirmationUnknownError,
    NetworkConfigurationError,
    NotFoundError,
    SigningError,
    SubmissionRejectedError,
)
from mirage_sdk.identity import SigningIdentity
from mirage_sdk.payloads.descriptor import PayloadDescriptor, encode_call
from mirage_sdk.utils.transaction_utils import to_0x_hex

TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError, ProviderConnectionError)


def rpc_error_reason(error: Exception) -> str:
    """Extract the node's message from a web3 RPC error."""
    message = getattr(error, "message", None)
    if message:
        return str(message)
    if error.args and isinstance(error.args[0], dict):
        return str(error.args[0].get("message", error.args[0]))
    return str(error)


class ChainClient:
    """Async JSON-RPC access to the chain the protocol is deployed on."""

    def __init__(self, config: SdkConfig, w3: Optional[AsyncWeb3] = None):
        self.config = config
        if w3 is None:
            # No provider-level retries; every failed request surfaces to the caller
            w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(config.rpc_url, exception_retry_configuration=None))
        self.w3 = w3
        self.logger = logging.getLogger("mirage.chain")

    def explorer_url(self, tx_hash: str) -> str:
        return f"{self.config.explorer_url}/tx/{tx_hash}"

    async def fetch_account_state(self, address: str) -> AccountState:
        """Read the sender's next nonce, balance and the current gas price."""
        try:
            sequence_number, chain_id, gas_price, balance = await asyncio.gather(
                self.w3.eth.get_transaction_count(address, "pending"),
                self.w3.eth.chain_id,
                self.w3.eth.gas_price,
                self.w3.eth.get_balance(address),
            )
        except (*TRANSPORT_ERRORS, Web3RPCError) as e:
            raise ChainUnavailableError(f"Failed to fetch account state for {address}: {e}") from e

        if chain_id != self.config.chain_id:
            raise NetworkConfigurationError(
                f"RPC endpoint reports chain id {chain_id}, expected {self.config.chain_id} ({self.config.network.value})"
            )

        self.logger.debug(f"Account {address}: nonce={sequence_number} balance={balance} gas_price={gas_price}")
        return AccountState(
            address=address,
            sequence_number=int(sequence_number),
            chain_id=int(chain_id),
            gas_price=int(gas_price),
            balance=int(balance),
        )

    def build_transaction(self, descriptor: PayloadDescriptor, state: AccountState) -> RawTransaction:
        """Deterministically combine a payload with the sender's current state."""
        return RawTransaction(
            sender=state.address,
            to=self.config.contract_address(descriptor.contract),
            data=to_0x_hex(descriptor.data),
            value=descriptor.value,
            sequence_number=state.sequence_number,
            chain_id=state.chain_id,
            gas=self.config.max_gas_amount,
            gas_price=state.gas_price,
        )

    async def sign_transaction(self, raw: RawTransaction, identity: SigningIdentity) -> SignedTransaction:
        if raw.sender.lower() != identity.address.lower():
            raise SigningError(f"Transaction sender {raw.sender} does not match signing identity {identity.address}")
        if identity.account.address.lower() != identity.address.lower():
            raise SigningError(f"Key material does not belong to {identity.address}")

        try:
            signed = identity.account.sign_transaction(raw.to_dict())
        except Exception as e:
            raise SigningError(f"Failed to sign transaction: {type(e).__name__}") from None

        return SignedTransaction(raw=raw, tx_hash=to_0x_hex(signed.hash), payload=HexBytes(signed.raw_transaction))

    async def submit_transaction(self, signed: SignedTransaction) -> str:
        """Simulate then broadcast a signed transaction. Returns the transaction hash."""
        call_tx = {**signed.raw.to_dict(), "from": signed.raw.sender}

        try:
            await self.w3.eth.call(call_tx, "pending")
        except ContractLogicError as e:
            raise SubmissionRejectedError(f"simulation failed: {rpc_error_reason(e)}", signed.tx_hash) from e
        except TRANSPORT_ERRORS as e:
            raise ChainUnavailableError(f"Failed to simulate transaction: {e}") from e
        except (Web3RPCError, ValueError) as e:
            raise SubmissionRejectedError(rpc_error_reason(e), signed.tx_hash) from e

        try:
            tx_hash = await self.w3.eth.send_raw_transaction(signed.payload)
        except TRANSPORT_ERRORS as e:
            raise ConfirmationUnknownError(
                signed.tx_hash, f"connection lost while broadcasting, it may have been sent: {e}"
            ) from e
        except (Web3RPCError, ValueError) as e:
            raise SubmissionRejectedError(rpc_error_reason(e), signed.tx_hash) from e

        return to_0x_hex(tx_hash)

    async def wait_for_transaction(self, tx_hash: str, timeout: float) -> TxReceipt:
        try:
            receipt = await self.w3.eth.wait_for_transaction_receipt(
                HexBytes(tx_hash), timeout=timeout, poll_latency=self.config.poll_interval
            )
        except TimeExhausted:
            raise ConfirmationTimeoutError(tx_hash, timeout) from None
        except (*TRANSPORT_ERRORS, Web3RPCError) as e:
            raise ConfirmationUnknownError(tx_hash, f"failed to poll receipt: {e}") from e

        return receipt

    async def query_view(self, function: str, args: tuple, return_types: list[str]) -> tuple[Any, ...]:
        """Call a read-only function on the views contract and decode its result."""
        call = {"to": self.config.views_address, "data": to_0x_hex(encode_call(function, args))}

        try:
            result = await self.w3.eth.call(call)
        except ContractLogicError as e:
            raise NotFoundError(f"{function} reverted: {rpc_error_reason(e)}") from e
        except (*TRANSPORT_ERRORS, Web3RPCError) as e:
            raise ChainUnavailableError(f"Failed to call {function}: {e}") from e

        if not result:
            raise NetworkConfigurationError(
                f"Empty result from {function}; is {self.config.views_address} the views contract?"
            )

        try:
            return tuple(decode(return_types, HexBytes(result)))
        except DecodingError as e:
            raise NetworkConfigurationError(f"Unexpected result layout from {function}: {e}") from e
