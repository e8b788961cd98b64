# pylint: disable=unused-argument
from decimal import Decimal, InvalidOperation

import click
from eth_typing import HexAddress
from eth_utils import from_wei, to_wei

from depositor.common.language import normalize_mnemonic
from depositor.common.typings import Gwei, WithdrawalCredentialsType
from depositor.common.withdrawal_credentials import is_withdrawal_address
from depositor.config.settings import (
    MAX_DEPOSIT_AMOUNT,
    MAX_DEPOSIT_AMOUNT_GWEI,
    MIN_DEPOSIT_AMOUNT,
    MIN_DEPOSIT_AMOUNT_GWEI,
)


def validate_mnemonic(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    mnemonic = normalize_mnemonic(value)
    if not mnemonic:
        raise click.BadParameter('Mnemonic must not be empty')
    return mnemonic


def validate_withdrawal_type(
    ctx: click.Context, param: click.Parameter, value: str
) -> WithdrawalCredentialsType:
    return WithdrawalCredentialsType(int(value))


def validate_withdrawal_address(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> HexAddress | None:
    if not value:
        return None
    if not is_withdrawal_address(value):
        raise click.BadParameter('Invalid withdrawal address, expected 0x + 40 hex chars')

    return HexAddress(value)  # type: ignore[arg-type]


def validate_amount(ctx: click.Context, param: click.Parameter, value: str) -> Gwei:
    """Converts amount in ETH to Gwei."""
    try:
        amount_wei = to_wei(Decimal(value), 'ether')
    except (InvalidOperation, ValueError, TypeError) as e:
        raise click.BadParameter('Amount must be a number') from e

    if amount_wei % to_wei(1, 'gwei'):
        raise click.BadParameter('Amount must be a whole number of Gwei')
    amount = Gwei(int(from_wei(amount_wei, 'gwei')))
    if amount < MIN_DEPOSIT_AMOUNT_GWEI:
        raise click.BadParameter(
            f'amount must be greater than or equal to {MIN_DEPOSIT_AMOUNT_GWEI} Gwei '
            f'({from_wei(MIN_DEPOSIT_AMOUNT, "ether")} ETH)'
        )
    if amount > MAX_DEPOSIT_AMOUNT_GWEI:
        raise click.BadParameter(
            f'amount must be less than or equal to {MAX_DEPOSIT_AMOUNT_GWEI} Gwei '
            f'({from_wei(MAX_DEPOSIT_AMOUNT, "ether")} ETH)'
        )
    return amount
