import sys
from pathlib import Path

import click

from depositor.common.exceptions import DepositDataError
from depositor.common.logging import setup_logging
from depositor.common.utils import format_error, greenify, redify
from depositor.config.networks import AVAILABLE_NETWORKS
from depositor.config.settings import (
    DEFAULT_NETWORK,
    LOG_FORMATS,
    LOG_LEVELS,
    LOG_PLAIN,
    settings,
)
from depositor.deposit_data.files import load_deposit_data
from depositor.deposit_data.verification import get_invalid_deposit_data


# Standard python exit codes:
# 0 - success
# 1 - error
DEPOSIT_DATA_VERIFICATION_ERROR = 2


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
    help='Log expected, stored and manually computed roots of every deposit data.',
)
@click.option(
    '--network',
    help='The network to verify signatures for. Defaults to network_name of every deposit data.',
    type=click.Choice(
        AVAILABLE_NETWORKS,
        case_sensitive=False,
    ),
)
@click.option(
    '--deposit-data-file',
    '-d',
    required=True,
    help='Path to the deposit data file.',
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
)
@click.command(help='Verifies roots and signatures of the deposit data file.')
def verify_deposit_data(
    deposit_data_file: str,
    network: str | None,
    diagnostics: bool,
    log_level: str,
    log_format: str,
) -> None:
    settings.set(
        network=network or DEFAULT_NETWORK,
        output_dir=Path(deposit_data_file).parent,
        verbose=diagnostics,
        log_level=log_level.upper(),
        log_format=log_format.lower(),
    )
    setup_logging()

    try:
        deposit_data = load_deposit_data(Path(deposit_data_file))
        invalid_indexes = get_invalid_deposit_data(
            deposit_data, network=network, diagnostics=diagnostics
        )
    except DepositDataError as e:
        raise click.ClickException(format_error(e))

    if invalid_indexes:
        click.echo(
            f'{redify(len(invalid_indexes))} of {len(deposit_data)} deposit data failed '
            f'verification: {", ".join(str(i) for i in invalid_indexes)}'
        )
        sys.exit(DEPOSIT_DATA_VERIFICATION_ERROR)

    click.echo(
        f'Verified {greenify(len(deposit_data))} deposit data. All signatures and roots match.'
    )
