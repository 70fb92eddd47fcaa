"""Transaction utility functions for RPC actions."""

from typing import Union

from hexbytes import HexBytes


def to_0x_hex(value: Union[bytes, HexBytes, str]) -> str:
    """Render bytes as a 0x-prefixed hex string regardless of the hexbytes version installed."""
    hex_value = value if isinstance(value, str) else HexBytes(value).hex()
    return hex_value if hex_value.startswith("0x") else f"0x{hex_value}"
