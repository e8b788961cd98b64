import dataclasses
from pathlib import Path

import click
from click.testing import CliRunner

from depositor.commands.verify_deposit_data import (
    DEPOSIT_DATA_VERIFICATION_ERROR,
    verify_deposit_data,
)
from depositor.common.tests.factories import create_deposit_datum
from depositor.deposit_data.files import save_deposit_data
from depositor.deposit_data.typings import DepositDatum


class TestVerifyDepositData:
    def test_valid(self, deposit_datum: DepositDatum, temp_dir: Path, runner: CliRunner):
        deposit_data_file = save_deposit_data([deposit_datum, deposit_datum], temp_dir)

        result = runner.invoke(verify_deposit_data, ['-d', str(deposit_data_file)])
        assert result.exit_code == 0, result.output
        assert click.unstyle(result.output).strip() == (
            'Verified 2 deposit data. All signatures and roots match.'
        )

    def test_invalid(self, deposit_datum: DepositDatum, temp_dir: Path, runner: CliRunner):
        tampered = dataclasses.replace(deposit_datum, amount='1000000000')
        deposit_data_file = save_deposit_data(
            [deposit_datum, tampered, create_deposit_datum()], temp_dir
        )

        result = runner.invoke(verify_deposit_data, ['--deposit-data-file', str(deposit_data_file)])
        assert result.exit_code == DEPOSIT_DATA_VERIFICATION_ERROR
        assert '2 of 3 deposit data failed verification: 1, 2' in click.unstyle(result.output)

    def test_network_override(
        self, deposit_datum: DepositDatum, temp_dir: Path, runner: CliRunner
    ):
        deposit_data_file = save_deposit_data([deposit_datum], temp_dir)

        result = runner.invoke(
            verify_deposit_data, ['-d', str(deposit_data_file), '--network', 'hoodi']
        )
        assert result.exit_code == DEPOSIT_DATA_VERIFICATION_ERROR

        result = runner.invoke(
            verify_deposit_data, ['-d', str(deposit_data_file), '--network', 'MAINNET']
        )
        assert result.exit_code == 0, result.output

    def test_diagnostics(self, deposit_datum: DepositDatum, temp_dir: Path, runner: CliRunner):
        deposit_data_file = save_deposit_data([deposit_datum], temp_dir)

        result = runner.invoke(
            verify_deposit_data, ['-d', str(deposit_data_file), '--diagnostics']
        )
        assert result.exit_code == 0, result.output

    def test_malformed_file(self, temp_dir: Path, runner: CliRunner):
        deposit_data_file = temp_dir / 'deposit_data.json'
        deposit_data_file.write_text('{"deposits": []}', encoding='utf-8')

        result = runner.invoke(verify_deposit_data, ['-d', str(deposit_data_file)])
        assert result.exit_code == 1
        assert 'must contain a list of deposit data' in result.output

    def test_unsupported_network_name(self, temp_dir: Path, runner: CliRunner):
        deposit_data_file = save_deposit_data(
            [create_deposit_datum(network_name='holesky')], temp_dir
        )

        result = runner.invoke(verify_deposit_data, ['-d', str(deposit_data_file)])
        assert result.exit_code == 1
        assert 'Unsupported network: holesky' in result.output

    def test_missing_file(self, temp_dir: Path, runner: CliRunner):
        result = runner.invoke(verify_deposit_data, ['-d', str(temp_dir / 'missing.json')])
        assert result.exit_code == 2
