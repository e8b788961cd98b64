from dataclasses import asdict, dataclass, fields

from eth_typing import BLSPubkey

from depositor.common.typings import Bytes32, Gwei


@dataclass(frozen=True)
class DepositMessage:
    public_key: BLSPubkey
    withdrawal_credentials: Bytes32
    amount: Gwei


@dataclass(frozen=True)
# pylint: disable-next=too-many-instance-attributes
class DepositDatum:
    """
    Signed deposit data in the format consumed by the deposit launchpad.
    Byte fields are lowercase hex without 0x prefix, amount is a decimal string in Gwei.
    """

    pubkey: str
    withdrawal_credentials: str
    amount: str
    signature: str
    deposit_message_root: str
    deposit_data_root: str
    network_name: str
    deposit_cli_version: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'DepositDatum':
        """Extra keys, e.g. `fork_version`, are ignored."""
        return cls(**{field.name: str(data[field.name]) for field in fields(cls)})


@dataclass
# pylint: disable-next=too-many-instance-attributes
class VerificationReport:
    message_root: str
    expected_message_root: str | None
    data_root: str
    expected_data_root: str | None
    manual_data_root: str | None
    manual_message_root: str | None
    signing_root: str | None
    is_signature_valid: bool
    error: str | None = None

    @property
    def is_message_root_valid(self) -> bool:
        return self.expected_message_root == self.message_root

    @property
    def is_data_root_valid(self) -> bool:
        return self.expected_data_root == self.data_root

    @property
    def is_manual_data_root_valid(self) -> bool:
        return self.manual_data_root == self.data_root

    @property
    def is_valid(self) -> bool:
        return (
            self.error is None
            and self.is_message_root_valid
            and self.is_data_root_valid
            and self.is_manual_data_root_valid
            and self.is_signature_valid
        )
