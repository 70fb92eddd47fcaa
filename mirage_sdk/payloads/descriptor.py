from typing import Any

from dataclasses import dataclass

from eth_abi import encode
from hexbytes import HexBytes
from web3 import Web3


def parse_arg_types(signature: str) -> list[str]:
    """Split a flat function signature such as ``f(uint256,bool)`` into its argument types."""
    start, end = signature.find("("), signature.rfind(")")
    if start <= 0 or end != len(signature) - 1:
        raise ValueError(f"Malformed function signature: {signature}")
    inner = signature[start + 1 : end]
    return inner.split(",") if inner else []


def function_selector(signature: str) -> HexBytes:
    return HexBytes(Web3.keccak(text=signature)[:4])


def encode_call(signature: str, args: tuple) -> HexBytes:
    """ABI-encode a call: 4-byte selector followed by the encoded arguments."""
    encoded_args = encode(parse_arg_types(signature), list(args))
    return HexBytes(function_selector(signature) + encoded_args)


@dataclass(frozen=True)
class PayloadDescriptor:
    """Protocol-encoded instruction ready to be turned into a transaction.

    contract is the config key of the target contract ("market" or "vault"),
    function the Solidity signature and args the already-scaled arguments.
    """

    contract: str
    function: str
    args: tuple[Any, ...]
    value: int = 0

    @property
    def function_name(self) -> str:
        return self.function.split("(", 1)[0]

    @property
    def data(self) -> HexBytes:
        return encode_call(self.function, self.args)
