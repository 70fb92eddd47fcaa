"""Signing identities derived from private key material."""

from dataclasses import dataclass, field

from eth_account import Account
from eth_account.signers.local import LocalAccount

from mirage_sdk.exceptions import SigningError


@dataclass(frozen=True)
class SigningIdentity:
    """An address plus a reference to the key able to sign for it.

    Owned by the caller for the lifetime of the process and never persisted.
    """

    address: str
    account: LocalAccount = field(repr=False, compare=False)


def derive_identity(secret_key_material: str) -> SigningIdentity:
    """Derive a signing identity from a hex-encoded private key."""
    try:
        account = Account.from_key(secret_key_material)
    except Exception as e:
        # Do not echo the key material back in the message
        raise SigningError(f"Malformed private key: {type(e).__name__}") from None

    return SigningIdentity(address=account.address, account=account)
