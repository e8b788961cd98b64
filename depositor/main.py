import warnings

import click

import depositor
from depositor.commands.create_deposit_data import create_deposit_data
from depositor.commands.verify_deposit_data import verify_deposit_data
from depositor.common.utils import get_build_version

build = get_build_version()
version = depositor.__version__
if build:
    version += f'-{build}'


@click.version_option(version=version, prog_name='Validator deposit data generator')
@click.group()
def cli() -> None:
    pass


cli.add_command(create_deposit_data)
cli.add_command(verify_deposit_data)


if __name__ == '__main__':
    warnings.filterwarnings('ignore', category=DeprecationWarning)
    cli()
