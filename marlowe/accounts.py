"""Signer account derivation for Marlowe."""

from typing import Dict, List

from eth_account import Account
from eth_keys import keys
from eth_keys.exceptions import ValidationError

from marlowe.exceptions import InvalidPrivateKeyError
from marlowe.models import ProjectConfig


def derive_account(private_key: str) -> Dict[str, str]:
    """
    Derive the public key and checksummed address of an EVM private key.

    Args:
        private_key: 64 hex characters, with or without a 0x prefix

    Returns:
        Dictionary with "address" and "public_key"

    Raises:
        InvalidPrivateKeyError: If the key is not 32 bytes of hex
    """
    # Remove 0x prefix if present
    privkey_str = private_key[2:] if private_key.startswith("0x") else private_key

    try:
        private_key_bytes = bytes.fromhex(privkey_str)
    except ValueError:
        raise InvalidPrivateKeyError("Private key must be hex encoded.") from None

    if len(private_key_bytes) != 32:
        raise InvalidPrivateKeyError("Private key must be 32 bytes (64 hex characters).")

    try:
        public_key_obj = keys.PrivateKey(private_key_bytes).public_key
    except ValidationError as e:
        # Scalars at or above the curve order
        raise InvalidPrivateKeyError(f"Private key is not a valid secp256k1 key: {e}") from e
    account = Account.from_key(private_key_bytes)

    return {
        "address": account.address,
        "public_key": public_key_obj.to_hex(),
    }


def list_accounts(project: ProjectConfig, unique: bool = False) -> Dict[str, List[str]]:
    """
    List signer addresses for every network that has credentials.

    Args:
        project: Resolved project configuration
        unique: Report each address only under the first network using it

    Returns:
        Mapping from network name to derived addresses. Networks without
        credentials are omitted.
    """
    seen = set()
    addresses: Dict[str, List[str]] = {}
    for name, profile in project.networks.items():
        derived = []
        for key in profile.accounts:
            address = derive_account(key)["address"]
            if unique and address in seen:
                continue
            seen.add(address)
            derived.append(address)
        if derived:
            addresses[name] = derived
    return addresses
