import pytest
from staking_deposit.utils.ssz import compute_deposit_domain as reference_deposit_domain

from depositor.common.exceptions import InvalidLengthError
from depositor.common.tests.factories import faker
from depositor.config.networks import HOODI, MAINNET, NETWORKS, SEPOLIA
from depositor.deposit_data.containers import (
    compute_deposit_domain,
    compute_domain,
    get_signing_root,
)
from depositor.deposit_data.typings import DepositMessage

DEPOSIT_DOMAINS = {
    MAINNET: '03000000f5a5fd42d16a20302798ef6ed309979b43003d2320d9f0e8ea9831a9',
    SEPOLIA: '03000000d3010778cd08ee514b08fe67b6c503b510987a4ce43f42306d97c67c',
    HOODI: '03000000719103511efa4f1362ff2a50996cccf329cc84cb410c5e5c7d351d03',
}


class TestDomain:
    @pytest.mark.parametrize('network', [MAINNET, SEPOLIA, HOODI])
    def test_deposit_domain(self, network: str):
        fork_version = NETWORKS[network].GENESIS_FORK_VERSION
        domain = compute_deposit_domain(fork_version)

        assert domain.hex() == DEPOSIT_DOMAINS[network]
        assert domain == reference_deposit_domain(fork_version)

    def test_domain_type_prefix(self):
        domain = compute_domain(b'\x07\x00\x00\x00', bytes(4))
        assert len(domain) == 32
        assert domain[:4] == b'\x07\x00\x00\x00'
        assert domain[4:] == compute_deposit_domain(bytes(4))[4:]

    def test_invalid_fork_version(self):
        with pytest.raises(InvalidLengthError, match='fork version'):
            compute_deposit_domain(bytes(3))
        with pytest.raises(InvalidLengthError):
            compute_deposit_domain(bytes(5))


def test_get_signing_root():
    message = DepositMessage(
        public_key=faker.public_key_bytes(),  # type: ignore[arg-type]
        withdrawal_credentials=faker.bytes32(),
        amount=32_000_000_000,
    )
    mainnet_domain = compute_deposit_domain(bytes(4))
    hoodi_domain = compute_deposit_domain(NETWORKS[HOODI].GENESIS_FORK_VERSION)

    signing_root = get_signing_root(message, mainnet_domain)
    assert len(signing_root) == 32
    assert signing_root == get_signing_root(message, mainnet_domain)
    assert signing_root != get_signing_root(message, hoodi_domain)

    with pytest.raises(InvalidLengthError, match='domain'):
        get_signing_root(message, mainnet_domain[:31])
