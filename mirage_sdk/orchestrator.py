"""
Transaction orchestration: build -> sign -> submit -> confirm.

Nothing here retries. A rejected or timed-out submission is reported to the
caller, who decides whether to re-query the chain and start over with a fresh
payload and sequence number.
"""

from typing import Any, Optional

import asyncio
import logging
import weakref
from dataclasses import dataclass, replace

from mirage_sdk.chain.client import ChainClient
from mirage_sdk.exceptions import InvalidIntentError
from mirage_sdk.identity import SigningIdentity
from mirage_sdk.payloads.builder import TradingIntent, build
from mirage_sdk.payloads.descriptor import PayloadDescriptor
from mirage_sdk.types import TransactionStatus


@dataclass(frozen=True)
class SubmissionResult:
    tx_hash: str
    status: TransactionStatus
    sequence_number: int
    explorer_url: str
    receipt: Optional[Any] = None

    @property
    def is_confirmed(self) -> bool:
        return self.status == TransactionStatus.CONFIRMED


class TransactionOrchestrator:
    """
    Drives a payload through the transaction lifecycle.

    Submissions from the same address are serialized from the account state
    fetch up to the broadcast, so two concurrent calls can never be handed the
    same sequence number. Different addresses proceed in parallel.
    """

    def __init__(self, client: ChainClient):
        self.client = client
        self.logger = logging.getLogger("mirage.orchestrator")
        # Entries disappear once no submission holds or awaits the lock
        self._locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()
        self._consumed: dict[int, weakref.ref] = {}

    def _lock_for(self, address: str) -> asyncio.Lock:
        key = address.lower()
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    def _consume(self, descriptor: PayloadDescriptor) -> None:
        """Bind a descriptor to the transaction about to be built; each descriptor is used once."""
        ref = self._consumed.get(id(descriptor))
        if ref is not None and ref() is descriptor:
            raise InvalidIntentError(
                f"Payload for {descriptor.function_name} was already submitted; build a new one to resubmit"
            )
        key = id(descriptor)
        self._consumed[key] = weakref.ref(descriptor, lambda _, key=key: self._consumed.pop(key, None))

    async def submit(
        self,
        descriptor: PayloadDescriptor,
        identity: SigningIdentity,
        wait: bool = True,
        deadline: Optional[float] = None,
    ) -> SubmissionResult:
        """
        Build, sign and broadcast a payload, then optionally wait for it to be confirmed.

        Args:
            descriptor (PayloadDescriptor): Payload produced by ``build``. Consumed by this call.
            identity (SigningIdentity): Signer; its address is the transaction sender.
            wait (bool): Poll for confirmation before returning. If False the result is PENDING.
            deadline (float, optional): Seconds to wait for confirmation. Defaults to the config value.

        Returns:
            SubmissionResult: Transaction hash, sequence number and status.

        Raises:
            ChainUnavailableError: Account state could not be fetched. Nothing was sent.
            SigningError: The identity cannot sign for this transaction.
            SubmissionRejectedError: The node refused the transaction.
            ConfirmationTimeoutError: Sent, but not confirmed before the deadline. Status unknown.
            ConfirmationUnknownError: Connection lost after the transaction may have been sent. Status unknown.
        """
        async with self._lock_for(identity.address):
            state = await self.client.fetch_account_state(identity.address)

            self._consume(descriptor)
            raw = self.client.build_transaction(descriptor, state)

            signed = await self.client.sign_transaction(raw, identity)

            tx_hash = await self.client.submit_transaction(signed)

        result = SubmissionResult(
            tx_hash=tx_hash,
            status=TransactionStatus.PENDING,
            sequence_number=raw.sequence_number,
            explorer_url=self.client.explorer_url(tx_hash),
        )
        self.logger.info(f"Submitted {descriptor.function_name} (nonce {raw.sequence_number}): {result.explorer_url}")

        if not wait:
            return result
        return await self.confirm(result, deadline=deadline)

    async def confirm(self, result: SubmissionResult, deadline: Optional[float] = None) -> SubmissionResult:
        """Poll until the transaction is included, or raise ConfirmationTimeoutError."""
        if result.status != TransactionStatus.PENDING:
            return result

        timeout = self.client.config.confirmation_timeout if deadline is None else deadline
        receipt = await self.client.wait_for_transaction(result.tx_hash, timeout)

        status = TransactionStatus.CONFIRMED if receipt["status"] == 1 else TransactionStatus.FAILED
        if status == TransactionStatus.CONFIRMED:
            self.logger.info(f"Confirmed {result.tx_hash} in block {receipt.get('blockNumber')}")
        else:
            self.logger.warning(f"Transaction {result.tx_hash} was included but reverted: {result.explorer_url}")

        return replace(result, status=status, receipt=receipt)

    async def execute(
        self,
        intent: TradingIntent,
        identity: SigningIdentity,
        wait: bool = True,
        deadline: Optional[float] = None,
    ) -> SubmissionResult:
        """Build a fresh payload from the intent and submit it. Invalid intents fail before any network call."""
        descriptor = build(intent)
        return await self.submit(descriptor, identity, wait=wait, deadline=deadline)
