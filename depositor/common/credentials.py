import time
from dataclasses import dataclass
from functools import cached_property
from os import path
from secrets import randbits

import click
from eth_typing import BLSPrivateKey, BLSPubkey, HexAddress
from staking_deposit.key_handling.key_derivation.mnemonic import get_seed
from staking_deposit.key_handling.key_derivation.path import path_to_nodes
from staking_deposit.key_handling.key_derivation.tree import (
    derive_child_SK,
    derive_master_SK,
)
from staking_deposit.key_handling.keystore import Keystore, ScryptKeystore

from depositor.common.exceptions import CollaboratorError
from depositor.common.typings import Bytes32, Gwei, WithdrawalCredentialsType
from depositor.common.withdrawal_credentials import get_withdrawal_credentials
from depositor.config.settings import DEPOSIT_AMOUNT_GWEI, SIGNING_KEY_PATH
from depositor.deposit_data.generator import generate_deposit_datum
from depositor.deposit_data.signing import get_public_key
from depositor.deposit_data.typings import DepositDatum


@dataclass
# pylint: disable-next=too-many-instance-attributes
class Credential:
    private_key: BLSPrivateKey
    network: str

    path: str | None = None
    withdrawal_type: WithdrawalCredentialsType = WithdrawalCredentialsType.BLS
    withdrawal_address: HexAddress | None = None
    amount: Gwei = DEPOSIT_AMOUNT_GWEI

    @cached_property
    def public_key(self) -> BLSPubkey:
        return get_public_key(self.private_key)

    @cached_property
    def private_key_bytes(self) -> bytes:
        return self.private_key.to_bytes(32, 'big')

    @cached_property
    def withdrawal_credentials(self) -> Bytes32:
        return get_withdrawal_credentials(
            self.withdrawal_type, self.public_key, self.withdrawal_address
        )

    def save_signing_keystore(self, password: str, folder: str) -> str:
        keystore = self.encrypt_signing_keystore(password)
        file_name = f'keystore-{keystore.path.replace("/", "_")}-{int(time.time())}'
        file_path = path.join(folder, f'{file_name}.json')
        keystore.save(file_path)
        return file_path

    def encrypt_signing_keystore(self, password: str) -> Keystore:
        try:
            return ScryptKeystore.encrypt(
                secret=self.private_key_bytes,
                password=password,
                path=self.path or '',
                kdf_salt=randbits(256).to_bytes(32, 'big'),
                aes_iv=randbits(128).to_bytes(16, 'big'),
            )
        except (ValueError, TypeError) as e:
            raise CollaboratorError('keystore encryption', e) from e

    def deposit_datum(self, diagnostics: bool = False) -> DepositDatum:
        return generate_deposit_datum(
            public_key=self.public_key,
            private_key=self.private_key,
            withdrawal_credentials=self.withdrawal_credentials,
            amount=self.amount,
            network=self.network,
            diagnostics=diagnostics,
        )


class CredentialManager:
    @staticmethod
    # pylint: disable-next=too-many-arguments
    def generate_credentials(
        network: str,
        mnemonic: str,
        count: int,
        start_index: int,
        withdrawal_type: WithdrawalCredentialsType = WithdrawalCredentialsType.BLS,
        withdrawal_address: HexAddress | None = None,
        amount: Gwei = DEPOSIT_AMOUNT_GWEI,
    ) -> list[Credential]:
        """Derives credentials one by one, the first failure aborts the whole batch."""
        credentials: list[Credential] = []
        with click.progressbar(  # type: ignore
            range(start_index, start_index + count),
            label='Creating validator keys:\t\t',
            show_percent=False,
            show_pos=True,
        ) as indexes:
            for index in indexes:
                credential = CredentialManager.generate_credential(
                    network=network,
                    mnemonic=mnemonic,
                    index=index,
                    withdrawal_type=withdrawal_type,
                    withdrawal_address=withdrawal_address,
                    amount=amount,
                )
                credentials.append(credential)

        return credentials

    @staticmethod
    # pylint: disable-next=too-many-arguments
    def generate_credential(
        network: str,
        mnemonic: str,
        index: int,
        withdrawal_type: WithdrawalCredentialsType = WithdrawalCredentialsType.BLS,
        withdrawal_address: HexAddress | None = None,
        amount: Gwei = DEPOSIT_AMOUNT_GWEI,
    ) -> Credential:
        """Returns the signing key of the mnemonic at a specific index."""
        signing_key_path = SIGNING_KEY_PATH.format(index=index)
        try:
            seed = get_seed(mnemonic=mnemonic, password='')  # nosec
            private_key = BLSPrivateKey(derive_master_SK(seed))
            for node in path_to_nodes(signing_key_path):
                private_key = BLSPrivateKey(derive_child_SK(parent_SK=private_key, index=node))
        except (ValueError, TypeError) as e:
            raise CollaboratorError('key derivation', e) from e

        return Credential(
            private_key=private_key,
            path=signing_key_path,
            network=network,
            withdrawal_type=withdrawal_type,
            withdrawal_address=withdrawal_address,
            amount=amount,
        )
