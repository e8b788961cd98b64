import logging

from eth_typing import BLSPrivateKey, BLSPubkey

from depositor.common.encoding import to_hex
from depositor.common.typings import Bytes32, Gwei
from depositor.config.networks import get_network_config
from depositor.config.settings import DEPOSIT_CLI_VERSION
from depositor.deposit_data import containers, merkle
from depositor.deposit_data.signing import sign
from depositor.deposit_data.typings import DepositDatum, DepositMessage

logger = logging.getLogger(__name__)


# pylint: disable-next=too-many-arguments
def generate_deposit_datum(
    public_key: BLSPubkey,
    private_key: BLSPrivateKey,
    withdrawal_credentials: Bytes32,
    amount: Gwei,
    network: str,
    deposit_cli_version: str = DEPOSIT_CLI_VERSION,
    diagnostics: bool = False,
) -> DepositDatum:
    """
    Signs deposit message and assembles deposit data.
    Roots are taken from the SSZ containers, the manual merkleization is used for verification only.
    """
    network_config = get_network_config(network)
    merkle.check_deposit_fields(public_key, withdrawal_credentials, amount)

    message = DepositMessage(
        public_key=public_key,
        withdrawal_credentials=withdrawal_credentials,
        amount=amount,
    )
    domain = containers.compute_deposit_domain(network_config.GENESIS_FORK_VERSION)
    signing_root = containers.get_signing_root(message, domain)
    signature = sign(private_key, signing_root)

    deposit_message_root = containers.get_deposit_message_root(message)
    deposit_data_root = containers.get_deposit_data_root(message, signature)

    if diagnostics:
        logger.info(
            'Deposit data for %s: network=%s, fork version=%s, amount=%d, domain=%s, '
            'signing root=%s, message root=%s, data root=%s',
            to_hex(public_key),
            network_config.NAME,
            network_config.genesis_fork_version_hex,
            amount,
            to_hex(domain),
            to_hex(signing_root),
            to_hex(deposit_message_root),
            to_hex(deposit_data_root),
        )

    return DepositDatum(
        pubkey=to_hex(public_key),
        withdrawal_credentials=to_hex(withdrawal_credentials),
        amount=str(amount),
        signature=to_hex(signature),
        deposit_message_root=to_hex(deposit_message_root),
        deposit_data_root=to_hex(deposit_data_root),
        network_name=network_config.NAME,
        deposit_cli_version=deposit_cli_version,
    )
