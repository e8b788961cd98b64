import json
import logging
import time
from pathlib import Path

from depositor.common.exceptions import DepositDataError
from depositor.deposit_data.typings import DepositDatum

logger = logging.getLogger(__name__)


class DepositDataFileError(DepositDataError, ValueError):
    pass


def save_deposit_data(deposit_data: list[DepositDatum], folder: Path) -> Path:
    filename = folder / f'deposit_data-{int(time.time())}.json'
    with open(filename, 'w', encoding='utf-8') as file:
        json.dump([datum.as_dict() for datum in deposit_data], file)
    logger.debug('Saved %d deposit data items to %s', len(deposit_data), filename)
    return filename


def load_deposit_data(filename: Path) -> list[DepositDatum]:
    with open(filename, 'r', encoding='utf-8') as file:
        try:
            items = json.load(file)
        except json.JSONDecodeError as e:
            raise DepositDataFileError(f'Failed to parse {filename}: {e}') from e

    if not isinstance(items, list):
        raise DepositDataFileError(f'{filename} must contain a list of deposit data')

    deposit_data = []
    for index, item in enumerate(items):
        try:
            deposit_data.append(DepositDatum.from_dict(item))
        except (KeyError, TypeError) as e:
            raise DepositDataFileError(f'Invalid deposit data #{index} in {filename}: {e!r}') from e
    return deposit_data
