import shutil
from pathlib import Path

import click
from eth_typing import HexAddress

from depositor.common.credentials import Credential, CredentialManager
from depositor.common.exceptions import DepositDataError
from depositor.common.language import create_new_mnemonic
from depositor.common.logging import setup_logging
from depositor.common.password import (
    PasswordError,
    create_password_file,
    read_password_file,
)
from depositor.common.typings import Gwei, WithdrawalCredentialsType
from depositor.common.utils import format_error, greenify
from depositor.common.validators import (
    validate_amount,
    validate_mnemonic,
    validate_withdrawal_address,
    validate_withdrawal_type,
)
from depositor.config.networks import AVAILABLE_NETWORKS
from depositor.config.settings import (
    DEFAULT_NETWORK,
    DEFAULT_OUTPUT_DIR,
    LOG_FORMATS,
    LOG_LEVELS,
    LOG_PLAIN,
    settings,
)
from depositor.deposit_data.files import load_deposit_data, save_deposit_data
from depositor.deposit_data.typings import DepositDatum
from depositor.deposit_data.verification import get_invalid_deposit_data


@click.option(
    '--log-format',
    type=click.Choice(LOG_FORMATS, case_sensitive=False),
    default=LOG_PLAIN,
    envvar='LOG_FORMAT',
    help='The log record format. Can be "plain" or "json".',
)
@click.option(
    '--log-level',
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default='INFO',
    envvar='LOG_LEVEL',
    help='The log level.',
)
@click.option(
    '--diagnostics',
    is_flag=True,
    default=False,
    help='Log roots and signatures of every generated and verified deposit data.',
)
@click.option(
    '--verify/--no-verify',
    default=True,
    help='Re-read the deposit data file and verify roots and signatures.',
)
@click.option(
    '--keystore-password-file',
    help='Path to the file with the keystores password. '
    'If not set, the password is generated and saved to <output-dir>/password.txt.',
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
)
@click.option(
    '--output-dir',
    default=str(DEFAULT_OUTPUT_DIR),
    envvar='OUTPUT_DIR',
    help='Path where the keystores and deposit data will be placed. Default is ./validator_keys.',
    type=click.Path(exists=False, file_okay=False, dir_okay=True),
)
@click.option(
    '--amount',
    default='32',
    help='The deposit amount in ETH for every validator.',
    callback=validate_amount,
)
@click.option(
    '--withdrawal-address',
    help='The withdrawal address for the withdrawal credentials type 1 or 2.',
    callback=validate_withdrawal_address,
)
@click.option(
    '--withdrawal-type',
    default='0',
    help='The withdrawal credentials type: 0 - BLS, 1 - execution address, '
    '2 - compounding execution address.',
    type=click.Choice(['0', '1', '2']),
    callback=validate_withdrawal_type,
)
@click.option(
    '--network',
    default=DEFAULT_NETWORK,
    help='The network of the validators.',
    type=click.Choice(
        AVAILABLE_NETWORKS,
        case_sensitive=False,
    ),
)
@click.option(
    '--start-index',
    default=0,
    help='The index of the first validator key to derive from the mnemonic.',
    type=click.IntRange(min=0),
)
@click.option(
    '--count',
    default=1,
    help='The number of the validator keys to generate.',
    type=click.IntRange(min=1),
)
@click.option(
    '--mnemonic',
    help='The mnemonic for generating the validator keys. A new one is generated if not set.',
    type=str,
    callback=validate_mnemonic,
)
@click.command(help='Creates the validator keystores and deposit data from the mnemonic.')
# pylint: disable-next=too-many-arguments,too-many-locals
def create_deposit_data(
    mnemonic: str | None,
    count: int,
    start_index: int,
    network: str,
    withdrawal_type: WithdrawalCredentialsType,
    withdrawal_address: HexAddress | None,
    amount: Gwei,
    output_dir: str,
    keystore_password_file: str | None,
    verify: bool,
    diagnostics: bool,
    log_level: str,
    log_format: str,
) -> None:
    if withdrawal_type != WithdrawalCredentialsType.BLS and not withdrawal_address:
        raise click.BadParameter(
            'Withdrawal address is required when --withdrawal-type is 1 or 2.',
            param_hint='--withdrawal-address',
        )
    settings.set(
        network=network,
        output_dir=Path(output_dir),
        verbose=diagnostics,
        log_level=log_level.upper(),
        log_format=log_format.lower(),
    )
    setup_logging()

    try:
        if not mnemonic:
            mnemonic = create_new_mnemonic()

        credentials = CredentialManager.generate_credentials(
            network=settings.network,
            mnemonic=mnemonic,
            count=count,
            start_index=start_index,
            withdrawal_type=withdrawal_type,
            withdrawal_address=withdrawal_address,
            amount=amount,
        )
        deposit_data = _generate_deposit_data(credentials, diagnostics)

        deposit_data_file = _export_files(
            credentials=credentials,
            deposit_data=deposit_data,
            output_dir=settings.output_dir,
            keystore_password_file=(
                Path(keystore_password_file) if keystore_password_file else None
            ),
        )
    except (DepositDataError, PasswordError) as e:
        raise click.ClickException(format_error(e))

    click.echo(
        f'Done. Generated {greenify(count)} validator keys.\n'
        f'Keystores saved to {greenify(settings.output_dir)} directory\n'
        f'Deposit data saved to {greenify(deposit_data_file)} file'
    )

    if not verify:
        return

    try:
        invalid_indexes = get_invalid_deposit_data(
            load_deposit_data(deposit_data_file),
            network=settings.network,
            diagnostics=diagnostics,
        )
    except DepositDataError as e:
        raise click.ClickException(format_error(e))
    if invalid_indexes:
        raise click.ClickException(
            f'Deposit data verification failed for validators: '
            f'{", ".join(str(i) for i in invalid_indexes)}'
        )
    click.echo('All signatures and roots verified correctly')


def _generate_deposit_data(
    credentials: list[Credential], diagnostics: bool
) -> list[DepositDatum]:
    deposit_data: list[DepositDatum] = []
    with click.progressbar(
        credentials,
        label='Generating deposit data\t\t',
        show_percent=False,
        show_pos=True,
    ) as progress_bar:
        for credential in progress_bar:
            deposit_data.append(credential.deposit_datum(diagnostics=diagnostics))
    return deposit_data


def _export_files(
    credentials: list[Credential],
    deposit_data: list[DepositDatum],
    output_dir: Path,
    keystore_password_file: Path | None,
) -> Path:
    """Files are written to a temporary directory first so that failures leave no partial output."""
    tmp_dir = output_dir / '.tmp'
    tmp_dir.mkdir(parents=True, exist_ok=True)
    try:
        password_file = settings.keystores_password_file
        if keystore_password_file:
            password = read_password_file(keystore_password_file)
        elif password_file.exists():
            password = read_password_file(password_file)
        else:
            password = create_password_file(tmp_dir / password_file.name)

        with click.progressbar(
            credentials,
            label='Exporting validator keystores\t\t',
            show_percent=False,
            show_pos=True,
        ) as progress_bar:
            for credential in progress_bar:
                credential.save_signing_keystore(password=password, folder=str(tmp_dir))

        tmp_deposit_data_file = save_deposit_data(deposit_data, tmp_dir)

        # move files from tmp dir
        for src_file in tmp_dir.glob('keystore-*.json'):
            src_file.rename(output_dir / src_file.name)
        tmp_password_file = tmp_dir / password_file.name
        if tmp_password_file.exists():
            tmp_password_file.rename(password_file)
        deposit_data_file = output_dir / tmp_deposit_data_file.name
        tmp_deposit_data_file.rename(deposit_data_file)
    finally:
        shutil.rmtree(tmp_dir)

    return deposit_data_file
