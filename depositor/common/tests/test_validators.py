import pytest
from click import BadParameter

from depositor.common.tests.factories import faker
from depositor.common.typings import WithdrawalCredentialsType
from depositor.common.validators import (
    validate_amount,
    validate_mnemonic,
    validate_withdrawal_address,
    validate_withdrawal_type,
)
from depositor.config.settings import DEPOSIT_AMOUNT_GWEI, MAX_DEPOSIT_AMOUNT_GWEI


def test_validate_mnemonic(test_mnemonic: str):
    # returns_none_for_missing_value
    assert validate_mnemonic(None, None, None) is None

    # strips_quotes_and_extra_whitespace
    assert validate_mnemonic(None, None, f'"{test_mnemonic}"') == test_mnemonic
    assert validate_mnemonic(None, None, test_mnemonic.replace(' ', '   ')) == test_mnemonic

    # raises_error_for_empty_mnemonic
    with pytest.raises(BadParameter, match='Mnemonic must not be empty'):
        validate_mnemonic(None, None, '  ')


def test_validate_withdrawal_type():
    assert validate_withdrawal_type(None, None, '0') == WithdrawalCredentialsType.BLS
    assert validate_withdrawal_type(None, None, '1') == WithdrawalCredentialsType.ETH1_ADDRESS
    assert validate_withdrawal_type(None, None, '2') == WithdrawalCredentialsType.COMPOUNDING


def test_validate_withdrawal_address():
    address = faker.eth_address()

    # returns_value_for_valid_address
    assert validate_withdrawal_address(None, None, address) == address

    # returns_none_for_empty_value
    assert validate_withdrawal_address(None, None, None) is None
    assert validate_withdrawal_address(None, None, '') is None

    # raises_error_for_invalid_address
    with pytest.raises(BadParameter, match='Invalid withdrawal address'):
        validate_withdrawal_address(None, None, 'invalid_address')
    with pytest.raises(BadParameter, match='Invalid withdrawal address'):
        validate_withdrawal_address(None, None, address[:-2])


def test_validate_amount():
    # converts_eth_to_gwei
    assert validate_amount(None, None, '32') == DEPOSIT_AMOUNT_GWEI
    assert validate_amount(None, None, '1') == 1_000_000_000
    assert validate_amount(None, None, '1.5') == 1_500_000_000
    assert validate_amount(None, None, '2048') == MAX_DEPOSIT_AMOUNT_GWEI

    # raises_error_for_not_a_number
    with pytest.raises(BadParameter, match='Amount must be a number'):
        validate_amount(None, None, 'abc')

    # raises_error_for_fractional_gwei
    with pytest.raises(BadParameter, match='whole number of Gwei'):
        validate_amount(None, None, '1.0000000001')

    # raises_error_for_amount_out_of_range
    with pytest.raises(BadParameter, match='greater than or equal to'):
        validate_amount(None, None, '0.5')
    with pytest.raises(BadParameter, match='less than or equal to'):
        validate_amount(None, None, '2048.000000001')
