from enum import IntEnum
from typing import NewType

Gwei = NewType('Gwei', int)
Bytes32 = NewType('Bytes32', bytes)
Bytes4 = NewType('Bytes4', bytes)


class WithdrawalCredentialsType(IntEnum):
    """
    BLS: withdrawals are controlled by a BLS key, credentials commit to its hash.
    ETH1_ADDRESS: withdrawals go to an execution layer address.
    COMPOUNDING: same as ETH1_ADDRESS with compounding validator balance.
    """

    BLS = 0
    ETH1_ADDRESS = 1
    COMPOUNDING = 2


class Singleton(type):
    _instances: dict = {}

    def __call__(cls, *args, **kwargs):  # type: ignore
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]
