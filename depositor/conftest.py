from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Generator

import pytest
from click.testing import CliRunner

from depositor.common.credentials import Credential, CredentialManager
from depositor.common.typings import Bytes32
from depositor.config.networks import MAINNET, NETWORKS
from depositor.config.settings import settings
from depositor.deposit_data.containers import compute_deposit_domain
from depositor.deposit_data.typings import DepositDatum


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def output_dir(temp_dir: Path) -> Path:
    output_dir = temp_dir / 'validator_keys'
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def test_mnemonic() -> str:
    return 'test test test test test test test test test test test junk'


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fake_settings(output_dir: Path) -> None:
    settings.set(
        network=MAINNET,
        output_dir=output_dir,
        verbose=False,
        log_level='DEBUG',
    )


# key derivation and signing are slow, share them between tests
@pytest.fixture(scope='session')
def credential() -> Credential:
    return CredentialManager.generate_credential(
        network=MAINNET,
        mnemonic='test test test test test test test test test test test junk',
        index=0,
    )


@pytest.fixture(scope='session')
def deposit_datum(credential: Credential) -> DepositDatum:
    return credential.deposit_datum()


@pytest.fixture(scope='session')
def mainnet_domain() -> Bytes32:
    return compute_deposit_domain(NETWORKS[MAINNET].GENESIS_FORK_VERSION)
