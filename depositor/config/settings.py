import os
from pathlib import Path

from decouple import config as decouple_config
from eth_utils import from_wei, to_wei
from staking_deposit.key_handling.key_derivation import mnemonic as mnemonic_module
from staking_deposit.settings import DEPOSIT_CLI_VERSION as STAKING_DEPOSIT_CLI_VERSION

from depositor.common.typings import Gwei, Singleton
from depositor.config.networks import MAINNET

DEFAULT_NETWORK = MAINNET
DEFAULT_OUTPUT_DIR = Path('validator_keys')
KEYSTORE_PASSWORD_FILENAME = 'password.txt'

# Set path as EIP-2334 format
# https://eips.ethereum.org/EIPS/eip-2334
PURPOSE = '12381'
COIN_TYPE = '3600'
SIGNING_KEY_PATH = f'm/{PURPOSE}/{COIN_TYPE}/{{index}}/0/0'

# deposits
DEPOSIT_AMOUNT = to_wei(32, 'ether')
DEPOSIT_AMOUNT_GWEI = Gwei(int(from_wei(DEPOSIT_AMOUNT, 'gwei')))

MIN_DEPOSIT_AMOUNT = to_wei(1, 'ether')
MIN_DEPOSIT_AMOUNT_GWEI = Gwei(int(from_wei(MIN_DEPOSIT_AMOUNT, 'gwei')))

MAX_DEPOSIT_AMOUNT = to_wei(2048, 'ether')
MAX_DEPOSIT_AMOUNT_GWEI = Gwei(int(from_wei(MAX_DEPOSIT_AMOUNT, 'gwei')))

DEPOSIT_CLI_VERSION: str = decouple_config(
    'DEPOSIT_CLI_VERSION', default=STAKING_DEPOSIT_CLI_VERSION
)

# mnemonic
MNEMONIC_LANGUAGE = 'english'
MNEMONIC_WORD_LISTS_DIR: str = decouple_config(
    'MNEMONIC_WORD_LISTS_DIR',
    default=os.path.join(os.path.dirname(mnemonic_module.__file__), 'word_lists'),
)

# logging
LOG_PLAIN = 'plain'
LOG_JSON = 'json'
LOG_FORMATS = [LOG_PLAIN, LOG_JSON]
LOG_LEVELS = [
    'FATAL',
    'ERROR',
    'WARNING',
    'INFO',
    'DEBUG',
]
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class Settings(metaclass=Singleton):
    network: str
    output_dir: Path
    verbose: bool

    log_level: str
    log_format: str

    def set(
        self,
        network: str = DEFAULT_NETWORK,
        output_dir: Path = DEFAULT_OUTPUT_DIR,
        verbose: bool = False,
        log_level: str | None = None,
        log_format: str | None = None,
    ) -> None:
        self.network = network.lower()
        self.output_dir = output_dir
        self.verbose = verbose

        self.log_level = log_level or decouple_config('LOG_LEVEL', default='INFO')
        self.log_format = log_format or decouple_config('LOG_FORMAT', default=LOG_PLAIN)

    @property
    def keystores_password_file(self) -> Path:
        return self.output_dir / KEYSTORE_PASSWORD_FILENAME


settings = Settings()
