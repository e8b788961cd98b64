"""
Hash tree roots of DepositMessage and DepositData computed directly from field bytes.

The roots are expected to match the SSZ containers byte for byte.
They are only used to cross-check the roots computed by the SSZ library.
"""
import hashlib
from typing import Sequence

from eth_typing import BLSPubkey, BLSSignature

from depositor.common.exceptions import InvalidLengthError
from depositor.common.typings import Bytes32, Gwei

BYTES_PER_CHUNK = 32
ZERO_CHUNK = bytes(BYTES_PER_CHUNK)

PUBLIC_KEY_LENGTH = 48
WITHDRAWAL_CREDENTIALS_LENGTH = 32
SIGNATURE_LENGTH = 96
AMOUNT_LENGTH = 8
MAX_AMOUNT = 2 ** (AMOUNT_LENGTH * 8) - 1


def sha256(*chunks: bytes) -> bytes:
    digest = hashlib.sha256()
    for chunk in chunks:
        digest.update(chunk)
    return digest.digest()


def _zero_hashes(depth: int) -> list[bytes]:
    hashes = [ZERO_CHUNK]
    for _ in range(depth):
        hashes.append(sha256(hashes[-1], hashes[-1]))
    return hashes


# enough for any tree built here
ZERO_HASHES = _zero_hashes(8)


def pack(value: bytes) -> list[bytes]:
    """Right pads value with zeros to a multiple of 32 bytes and splits it into chunks."""
    remainder = len(value) % BYTES_PER_CHUNK
    if remainder:
        value += bytes(BYTES_PER_CHUNK - remainder)
    return [value[i : i + BYTES_PER_CHUNK] for i in range(0, len(value), BYTES_PER_CHUNK)]


def merkleize(chunks: Sequence[bytes]) -> bytes:
    """
    Folds chunks pairwise until a single root is left.
    Odd layers are padded with the zero subtree root of the same depth.
    """
    if not chunks:
        return ZERO_CHUNK

    layer = list(chunks)
    depth = 0
    while len(layer) > 1:
        if len(layer) % 2:
            layer.append(ZERO_HASHES[depth])
        layer = [sha256(layer[i], layer[i + 1]) for i in range(0, len(layer), 2)]
        depth += 1
    return layer[0]


def get_public_key_leaf(public_key: BLSPubkey | bytes) -> bytes:
    _check_length('public key', public_key, PUBLIC_KEY_LENGTH)
    # sha256(public_key + 16 zero bytes)
    return merkleize(pack(public_key))


def get_withdrawal_credentials_leaf(withdrawal_credentials: Bytes32 | bytes) -> bytes:
    _check_length('withdrawal credentials', withdrawal_credentials, WITHDRAWAL_CREDENTIALS_LENGTH)
    return bytes(withdrawal_credentials)


def get_amount_leaf(amount: Gwei | int) -> bytes:
    if not 0 <= amount <= MAX_AMOUNT:
        raise InvalidLengthError('amount', f'uint{AMOUNT_LENGTH * 8}', amount)
    return pack(amount.to_bytes(AMOUNT_LENGTH, 'little'))[0]


def get_signature_root(signature: BLSSignature | bytes) -> bytes:
    _check_length('signature', signature, SIGNATURE_LENGTH)
    # sha256(sha256(signature[0:64]) + sha256(signature[64:96] + 32 zero bytes))
    return merkleize(pack(signature))


def get_deposit_message_root(
    public_key: BLSPubkey | bytes,
    withdrawal_credentials: Bytes32 | bytes,
    amount: Gwei | int,
) -> Bytes32:
    """DepositMessage has 3 fields, the tree is padded with a zero leaf."""
    return Bytes32(
        merkleize(
            [
                get_public_key_leaf(public_key),
                get_withdrawal_credentials_leaf(withdrawal_credentials),
                get_amount_leaf(amount),
            ]
        )
    )


def get_deposit_data_root(
    public_key: BLSPubkey | bytes,
    withdrawal_credentials: Bytes32 | bytes,
    amount: Gwei | int,
    signature: BLSSignature | bytes,
) -> Bytes32:
    return Bytes32(
        merkleize(
            [
                get_public_key_leaf(public_key),
                get_withdrawal_credentials_leaf(withdrawal_credentials),
                get_amount_leaf(amount),
                get_signature_root(signature),
            ]
        )
    )


def check_deposit_fields(
    public_key: bytes,
    withdrawal_credentials: bytes,
    amount: int,
    signature: bytes | None = None,
) -> None:
    _check_length('public key', public_key, PUBLIC_KEY_LENGTH)
    _check_length('withdrawal credentials', withdrawal_credentials, WITHDRAWAL_CREDENTIALS_LENGTH)
    get_amount_leaf(amount)
    if signature is not None:
        _check_length('signature', signature, SIGNATURE_LENGTH)


def _check_length(field: str, value: bytes, length: int) -> None:
    if len(value) != length:
        raise InvalidLengthError(field, length, len(value))
