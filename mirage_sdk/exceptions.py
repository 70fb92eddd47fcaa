"""Custom exceptions for the Mirage SDK."""

from typing import Optional


class MirageSdkError(Exception):
    """Base exception for Mirage SDK operations."""


class InvalidIntentError(MirageSdkError):
    """Raised when a trading intent is malformed. Fix the input, do not retry."""


class InvalidNetworkError(MirageSdkError):
    """Raised when an unknown network is selected."""


class NetworkConfigurationError(MirageSdkError):
    """Raised when network configuration is missing or invalid."""


class ChainUnavailableError(MirageSdkError):
    """Raised when the chain RPC cannot be reached or times out.

    Safe to retry after a backoff; nothing was broadcast.
    """


class SigningError(MirageSdkError):
    """Raised when key material is malformed or does not match the transaction sender."""


class SubmissionRejectedError(MirageSdkError):
    """Raised when the chain refuses a transaction.

    Retry only after rebuilding the transaction from fresh account state.
    """

    def __init__(self, reason: str, tx_hash: Optional[str] = None):
        super().__init__(f"Transaction rejected: {reason}")
        self.reason = reason
        self.tx_hash = tx_hash


class ConfirmationTimeoutError(MirageSdkError):
    """Raised when a submitted transaction is not confirmed before the deadline.

    The final status is unknown: re-query chain state before resubmitting.
    """

    def __init__(self, tx_hash: str, timeout: Optional[float], message: Optional[str] = None):
        super().__init__(message or f"Transaction {tx_hash} not confirmed within {timeout} seconds; status unknown")
        self.tx_hash = tx_hash
        self.timeout = timeout


class ConfirmationUnknownError(ConfirmationTimeoutError):
    """Raised when the connection drops after a transaction may have been broadcast.

    Treat like a timeout: the transaction may still be included, so re-query
    chain state before resubmitting.
    """

    def __init__(self, tx_hash: str, reason: str):
        super().__init__(tx_hash, None, f"Status of transaction {tx_hash} unknown: {reason}")
        self.reason = reason


class NotFoundError(MirageSdkError):
    """Raised when a queried position or vault does not exist."""
