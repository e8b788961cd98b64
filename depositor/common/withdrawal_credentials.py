import hashlib
import re

from eth_typing import BLSPubkey

from depositor.common.encoding import from_hex
from depositor.common.exceptions import (
    InvalidAddressError,
    InvalidLengthError,
    MissingAddressError,
)
from depositor.common.typings import Bytes32, WithdrawalCredentialsType

PUBLIC_KEY_LENGTH = 48
WITHDRAWAL_CREDENTIALS_LENGTH = 32
ADDRESS_LENGTH = 20

ADDRESS_PATTERN = re.compile(r'0x[0-9a-fA-F]{40}')


def is_withdrawal_address(address: str) -> bool:
    return isinstance(address, str) and ADDRESS_PATTERN.fullmatch(address) is not None


def parse_withdrawal_address(address: str) -> bytes:
    if not is_withdrawal_address(address):
        raise InvalidAddressError(address)
    return from_hex(address)


def get_withdrawal_credentials(
    credentials_type: WithdrawalCredentialsType | int,
    public_key: BLSPubkey | bytes,
    address: str | None = None,
) -> Bytes32:
    """
    Builds 32 bytes withdrawal credentials.
    BLS: 0x00 + sha256(public_key)[1:]
    ETH1_ADDRESS, COMPOUNDING: type byte + 11 zero bytes + 20 address bytes
    """
    credentials_type = WithdrawalCredentialsType(credentials_type)
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise InvalidLengthError('public key', PUBLIC_KEY_LENGTH, len(public_key))

    if credentials_type == WithdrawalCredentialsType.BLS:
        public_key_hash = hashlib.sha256(public_key).digest()
        return Bytes32(bytes([credentials_type]) + public_key_hash[1:])

    if not address:
        raise MissingAddressError()
    address_bytes = parse_withdrawal_address(address)
    padding = bytes(WITHDRAWAL_CREDENTIALS_LENGTH - ADDRESS_LENGTH - 1)
    return Bytes32(bytes([credentials_type]) + padding + address_bytes)
