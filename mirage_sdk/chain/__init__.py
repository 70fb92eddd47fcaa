from mirage_sdk.chain.client import ChainClient
from mirage_sdk.chain.models import AccountState, RawTransaction, SignedTransaction

__all__ = ["AccountState", "ChainClient", "RawTransaction", "SignedTransaction"]
