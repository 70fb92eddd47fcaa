from typing import Any

from dataclasses import dataclass

from hexbytes import HexBytes


@dataclass(frozen=True)
class AccountState:
    """Sender state read from the chain right before building a transaction."""

    address: str
    sequence_number: int  # Next usable nonce, pending transactions included
    chain_id: int
    gas_price: int  # wei
    balance: int  # wei


@dataclass(frozen=True)
class RawTransaction:
    """Unsigned transaction. Valid for a single submission: its sequence number cannot be reused."""

    sender: str
    to: str
    data: str  # 0x-prefixed calldata
    value: int
    sequence_number: int
    chain_id: int
    gas: int
    gas_price: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "to": self.to,
            "data": self.data,
            "value": self.value,
            "nonce": self.sequence_number,
            "chainId": self.chain_id,
            "gas": self.gas,
            "gasPrice": self.gas_price,
        }


@dataclass(frozen=True)
class SignedTransaction:
    raw: RawTransaction
    tx_hash: str
    payload: HexBytes  # RLP-encoded signed transaction
