"""Test helpers for the Mirage SDK test suite."""

from .builders import PositionBuilder
from .fake_chain import GWEI, ONE_ETHER, FakeChainClient, empty_view_result
from .stub_web3 import StubEth, StubWeb3

__all__ = [
    "FakeChainClient",
    "GWEI",
    "ONE_ETHER",
    "PositionBuilder",
    "StubEth",
    "StubWeb3",
    "empty_view_result",
]
