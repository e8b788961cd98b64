import logging
import re
from typing import Sequence

from eth_utils import remove_0x_prefix

from depositor.common.encoding import from_hex, to_hex
from depositor.common.exceptions import InvalidLengthError, MalformedHexError
from depositor.common.typings import Bytes32, Gwei
from depositor.config.networks import get_network_config
from depositor.deposit_data import containers, merkle
from depositor.deposit_data.signing import verify
from depositor.deposit_data.typings import (
    DepositDatum,
    DepositMessage,
    VerificationReport,
)

logger = logging.getLogger(__name__)

# decimal Gwei string, no sign, separators or whitespace
AMOUNT_PATTERN = re.compile(r'[0-9]+')


def verify_deposit_datum(
    deposit_datum: DepositDatum, domain: Bytes32 | bytes, diagnostics: bool = False
) -> bool:
    """
    Deposit data is valid when message and data roots recomputed with SSZ containers,
    data root recomputed manually and BLS signature all agree with the stored values.
    """
    report = get_verification_report(deposit_datum, domain)
    if diagnostics:
        log_verification_report(report)
    return report.is_valid


def get_invalid_deposit_data(
    deposit_data: Sequence[DepositDatum], network: str | None = None, diagnostics: bool = False
) -> list[int]:
    """
    Verifies every item with the deposit domain of its network.
    When `network` is given it overrides the network name stored in deposit data.
    Returns indexes of invalid items.
    """
    invalid_indexes = []
    for index, deposit_datum in enumerate(deposit_data):
        network_config = get_network_config(network or deposit_datum.network_name)
        domain = containers.compute_deposit_domain(network_config.GENESIS_FORK_VERSION)
        if verify_deposit_datum(deposit_datum, domain, diagnostics=diagnostics):
            logger.debug('Validator #%d deposit data verified', index)
            continue
        logger.error('Validator #%d: deposit data verification failed', index)
        invalid_indexes.append(index)
    return invalid_indexes


def get_verification_report(
    deposit_datum: DepositDatum, domain: Bytes32 | bytes
) -> VerificationReport:
    try:
        public_key = from_hex(deposit_datum.pubkey)
        withdrawal_credentials = from_hex(deposit_datum.withdrawal_credentials)
        signature = from_hex(deposit_datum.signature)
        amount = _parse_amount(deposit_datum.amount)
        merkle.check_deposit_fields(public_key, withdrawal_credentials, amount, signature)
    except (MalformedHexError, InvalidLengthError, ValueError) as e:
        return VerificationReport(
            message_root=_normalize_root(deposit_datum.deposit_message_root),
            expected_message_root=None,
            data_root=_normalize_root(deposit_datum.deposit_data_root),
            expected_data_root=None,
            manual_data_root=None,
            manual_message_root=None,
            signing_root=None,
            is_signature_valid=False,
            error=str(e),
        )

    message = DepositMessage(
        public_key=public_key,  # type: ignore[arg-type]
        withdrawal_credentials=Bytes32(withdrawal_credentials),
        amount=amount,
    )
    expected_message_root = containers.get_deposit_message_root(message)
    expected_data_root = containers.get_deposit_data_root(message, signature)
    manual_message_root = merkle.get_deposit_message_root(
        public_key, withdrawal_credentials, amount
    )
    manual_data_root = merkle.get_deposit_data_root(
        public_key, withdrawal_credentials, amount, signature
    )

    signing_root = containers.get_signing_root(message, domain)
    is_signature_valid = verify(public_key, signing_root, signature)

    return VerificationReport(
        message_root=_normalize_root(deposit_datum.deposit_message_root),
        expected_message_root=to_hex(expected_message_root),
        data_root=_normalize_root(deposit_datum.deposit_data_root),
        expected_data_root=to_hex(expected_data_root),
        manual_data_root=to_hex(manual_data_root),
        manual_message_root=to_hex(manual_message_root),
        signing_root=to_hex(signing_root),
        is_signature_valid=is_signature_valid,
    )


def log_verification_report(report: VerificationReport) -> None:
    if report.error:
        logger.info('Failed to decode deposit data: %s', report.error)
        return

    logger.info('Expected message root: %s', report.expected_message_root)
    logger.info('Actual message root:   %s', report.message_root)
    logger.info('Manual message root:   %s', report.manual_message_root)
    logger.info('Expected data root:    %s', report.expected_data_root)
    logger.info('Actual data root:      %s', report.data_root)
    logger.info('Manual data root:      %s', report.manual_data_root)
    logger.info('Signing root:          %s', report.signing_root)
    logger.info('Signature valid:       %s', report.is_signature_valid)

    if not report.is_message_root_valid:
        logger.info('Message root mismatch')
    if not report.is_data_root_valid:
        logger.info('Data root mismatch')
    if not report.is_manual_data_root_valid:
        logger.info('Manual data root mismatch')
    if report.manual_message_root != report.expected_message_root:
        logger.warning(
            'Manual message root differs from SSZ message root: %s != %s',
            report.manual_message_root,
            report.expected_message_root,
        )


def _normalize_root(value: str) -> str:
    return remove_0x_prefix(value).lower()  # type: ignore[arg-type]


def _parse_amount(value: str) -> Gwei:
    if not AMOUNT_PATTERN.fullmatch(value):
        raise ValueError(f'Invalid amount: {value!r}')
    return Gwei(int(value))
