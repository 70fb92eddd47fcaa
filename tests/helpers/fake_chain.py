"""In-memory chain used to exercise the orchestrator and queries without a node."""

from typing import Any, Optional

import asyncio

from mirage_sdk.chain.client import ChainClient
from mirage_sdk.chain.models import AccountState, SignedTransaction
from mirage_sdk.config import SdkConfig
from mirage_sdk.exceptions import ChainUnavailableError, ConfirmationTimeoutError, SubmissionRejectedError
from mirage_sdk.payloads.descriptor import function_selector
from mirage_sdk.utils.transaction_utils import to_0x_hex

GWEI = 10**9
ONE_ETHER = 10**18


def empty_view_result(return_types: list[str]) -> tuple:
    """What the views contract returns for an id it does not know: all zero, exists=False."""
    defaults = {"bool": False, "address": "0x" + "00" * 20}
    return tuple(defaults.get(t, 0) for t in return_types)


class FakeChainClient(ChainClient):
    """
    ChainClient whose network calls hit in-memory state.

    Building and signing are inherited, so transactions are really signed.
    Submission enforces the same rules a node does: exact nonce, enough
    balance for gas, and a simulation that can revert.
    """

    def __init__(
        self,
        config: SdkConfig,
        balances: Optional[dict[str, int]] = None,
        confirmation_delay: float = 0.0,
    ):
        super().__init__(config)
        self.balances = {a.lower(): b for a, b in (balances or {}).items()}
        self.nonces: dict[str, int] = {}
        self.gas_price = GWEI
        self.confirmation_delay = confirmation_delay
        self.unavailable = False
        self.reverting_functions: list[str] = []
        self.failing_on_chain = False

        self.fetch_count = 0
        self.sent: list[SignedTransaction] = []
        self.receipts: dict[str, dict[str, Any]] = {}
        self.views: dict[tuple, tuple] = {}
        self.view_calls: list[tuple] = []

    async def fetch_account_state(self, address: str) -> AccountState:
        self.fetch_count += 1
        # Yield so concurrent callers interleave here unless something serializes them
        await asyncio.sleep(0)
        if self.unavailable:
            raise ChainUnavailableError(f"Failed to fetch account state for {address}: connection refused")

        key = address.lower()
        return AccountState(
            address=address,
            sequence_number=self.nonces.get(key, 0),
            chain_id=self.config.chain_id,
            gas_price=self.gas_price,
            balance=self.balances.get(key, 0),
        )

    async def submit_transaction(self, signed: SignedTransaction) -> str:
        await asyncio.sleep(0)
        raw = signed.raw
        key = raw.sender.lower()

        expected_nonce = self.nonces.get(key, 0)
        if raw.sequence_number < expected_nonce:
            raise SubmissionRejectedError(
                f"nonce too low: next nonce {expected_nonce}, tx nonce {raw.sequence_number}", signed.tx_hash
            )
        if raw.sequence_number > expected_nonce:
            raise SubmissionRejectedError(
                f"nonce too high: next nonce {expected_nonce}, tx nonce {raw.sequence_number}", signed.tx_hash
            )

        cost = raw.gas * raw.gas_price + raw.value
        balance = self.balances.get(key, 0)
        if balance < cost:
            raise SubmissionRejectedError(
                f"insufficient funds for gas * price + value: balance {balance}, tx cost {cost}", signed.tx_hash
            )

        for function in self.reverting_functions:
            if raw.data.startswith(to_0x_hex(function_selector(function))):
                raise SubmissionRejectedError("simulation failed: execution reverted", signed.tx_hash)

        self.nonces[key] = expected_nonce + 1
        self.balances[key] = balance - cost
        self.sent.append(signed)
        self.receipts[signed.tx_hash] = {
            "transactionHash": signed.tx_hash,
            "blockNumber": len(self.sent),
            "status": 0 if self.failing_on_chain else 1,
        }
        return signed.tx_hash

    async def wait_for_transaction(self, tx_hash: str, timeout: float) -> dict[str, Any]:
        if tx_hash not in self.receipts or self.confirmation_delay > timeout:
            await asyncio.sleep(timeout)
            raise ConfirmationTimeoutError(tx_hash, timeout)

        await asyncio.sleep(self.confirmation_delay)
        return self.receipts[tx_hash]

    async def query_view(self, function: str, args: tuple, return_types: list[str]) -> tuple[Any, ...]:
        self.view_calls.append((function, args))
        await asyncio.sleep(0)
        if self.unavailable:
            raise ChainUnavailableError(f"Failed to call {function}: connection refused")
        return self.views.get((function, args), empty_view_result(return_types))
