"""SSZ reference hashing for deposit containers."""
from eth_typing import BLSSignature
from ssz.exceptions import SSZException
from staking_deposit.utils import ssz
from staking_deposit.utils.constants import DOMAIN_DEPOSIT, ZERO_BYTES32

from depositor.common.exceptions import CollaboratorError, InvalidLengthError
from depositor.common.typings import Bytes4, Bytes32
from depositor.deposit_data.typings import DepositMessage

FORK_VERSION_LENGTH = 4
DOMAIN_LENGTH = 32


def compute_domain(
    domain_type: bytes,
    fork_version: Bytes4 | bytes,
    genesis_validators_root: Bytes32 | bytes = ZERO_BYTES32,
) -> Bytes32:
    if len(fork_version) != FORK_VERSION_LENGTH:
        raise InvalidLengthError('fork version', FORK_VERSION_LENGTH, len(fork_version))
    try:
        fork_data_root = ssz.ForkData(
            current_version=fork_version,
            genesis_validators_root=genesis_validators_root,
        ).hash_tree_root
    except (SSZException, ValueError, TypeError) as e:
        raise CollaboratorError('fork data root', e) from e
    return Bytes32(domain_type + fork_data_root[:28])


def compute_deposit_domain(fork_version: Bytes4 | bytes) -> Bytes32:
    """Deposits are signed with zero genesis validators root."""
    return compute_domain(DOMAIN_DEPOSIT, fork_version, ZERO_BYTES32)


def get_signing_root(message: DepositMessage, domain: Bytes32 | bytes) -> Bytes32:
    if len(domain) != DOMAIN_LENGTH:
        raise InvalidLengthError('domain', DOMAIN_LENGTH, len(domain))
    try:
        return Bytes32(ssz.compute_signing_root(_to_ssz_message(message), domain))
    except (SSZException, ValueError, TypeError) as e:
        raise CollaboratorError('signing root', e) from e


def get_deposit_message_root(message: DepositMessage) -> Bytes32:
    try:
        return Bytes32(_to_ssz_message(message).hash_tree_root)
    except (SSZException, ValueError, TypeError) as e:
        raise CollaboratorError('deposit message root', e) from e


def get_deposit_data_root(message: DepositMessage, signature: BLSSignature | bytes) -> Bytes32:
    try:
        deposit_data = ssz.DepositData(
            pubkey=message.public_key,
            withdrawal_credentials=message.withdrawal_credentials,
            amount=message.amount,
            signature=signature,
        )
        return Bytes32(deposit_data.hash_tree_root)
    except (SSZException, ValueError, TypeError) as e:
        raise CollaboratorError('deposit data root', e) from e


def _to_ssz_message(message: DepositMessage) -> ssz.DepositMessage:
    return ssz.DepositMessage(
        pubkey=message.public_key,
        withdrawal_credentials=message.withdrawal_credentials,
        amount=message.amount,
    )
