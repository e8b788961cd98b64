from dataclasses import dataclass

from depositor.common.exceptions import UnsupportedNetworkError

MAINNET = 'mainnet'
SEPOLIA = 'sepolia'
HOODI = 'hoodi'

AVAILABLE_NETWORKS = [MAINNET, SEPOLIA, HOODI]


@dataclass
class NetworkConfig:
    NAME: str
    GENESIS_FORK_VERSION: bytes

    @property
    def genesis_fork_version_hex(self) -> str:
        return self.GENESIS_FORK_VERSION.hex()


NETWORKS: dict[str, NetworkConfig] = {
    MAINNET: NetworkConfig(
        NAME=MAINNET,
        GENESIS_FORK_VERSION=bytes.fromhex('00000000'),
    ),
    SEPOLIA: NetworkConfig(
        NAME=SEPOLIA,
        GENESIS_FORK_VERSION=bytes.fromhex('90000069'),
    ),
    HOODI: NetworkConfig(
        NAME=HOODI,
        GENESIS_FORK_VERSION=bytes.fromhex('10000910'),
    ),
}


def get_network_config(network: str) -> NetworkConfig:
    """Looks up the network by name, ignoring case."""
    try:
        return NETWORKS[network.lower()]
    except KeyError as e:
        raise UnsupportedNetworkError(network) from e
