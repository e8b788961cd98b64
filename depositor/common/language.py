import click
from staking_deposit.key_handling.key_derivation.mnemonic import get_mnemonic

from depositor.common.exceptions import CollaboratorError
from depositor.config.settings import MNEMONIC_LANGUAGE, MNEMONIC_WORD_LISTS_DIR


def create_new_mnemonic(language: str = MNEMONIC_LANGUAGE) -> str:
    try:
        mnemonic = get_mnemonic(language=language, words_path=MNEMONIC_WORD_LISTS_DIR)
    except (OSError, ValueError, KeyError) as e:
        raise CollaboratorError('mnemonic generation', e) from e

    click.echo(
        'This is your seed phrase. Write it down and store it safely, '
        'it is the ONLY way to recover your validator keys.'
    )
    click.echo(f'\n\n{mnemonic}\n\n')
    return mnemonic


def normalize_mnemonic(mnemonic: str) -> str:
    return ' '.join(mnemonic.replace('"', '').split())
