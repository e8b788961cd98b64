from eth_typing import BLSPrivateKey, BLSPubkey, BLSSignature
from eth_utils import ValidationError
from py_ecc.bls import G2ProofOfPossession

from depositor.common.exceptions import CollaboratorError


def get_public_key(private_key: BLSPrivateKey) -> BLSPubkey:
    try:
        return G2ProofOfPossession.SkToPk(private_key)
    except (ValidationError, ValueError, TypeError) as e:
        raise CollaboratorError('public key derivation', e) from e


def sign(private_key: BLSPrivateKey, message: bytes) -> BLSSignature:
    try:
        return G2ProofOfPossession.Sign(private_key, message)
    except (ValidationError, ValueError, TypeError) as e:
        raise CollaboratorError('BLS signing', e) from e


def verify(public_key: BLSPubkey | bytes, message: bytes, signature: BLSSignature | bytes) -> bool:
    """Invalid points are reported as a failed verification."""
    return G2ProofOfPossession.Verify(BLSPubkey(public_key), message, BLSSignature(signature))
