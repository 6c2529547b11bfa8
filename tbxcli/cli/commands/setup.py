"""tbxcli setup subcommand.

Set all default options:
    tbxcli setup

Show stored default options:
    tbxcli setup show

Delete stored default options:
    tbxcli setup delete
"""

from tbxcli.cli.context import CliContext
from tbxcli.logging import get_logger
from tbxcli.models import DEFAULT_FIELDS, DefaultsRecord
from tbxcli.options import SECRET_OPTIONS, label_for
from tbxcli.parsing import expand_choice

logger = get_logger(__name__)

NAME = 'setup'
SUBCOMMANDS = ('show', 'delete')

MASK = '********'


def run_setup(context: CliContext) -> DefaultsRecord:
    """Ask for every default value and store them all."""
    context.echo('Set default options (leave a field empty for no default value)')
    values = {
        name: context.prompt(label_for(name), secret=name in SECRET_OPTIONS)
        for name in DEFAULT_FIELDS
    }
    record = DefaultsRecord(**values)
    context.store.set_all(record)
    logger.info('defaults_saved', fields=[name for name, value in values.items() if value])
    return record


def show_defaults(context: CliContext) -> None:
    """Print the stored default values."""
    for name, value in context.store.show_all().items():
        shown = MASK if name in SECRET_OPTIONS and value else value
        context.echo(f'{label_for(name)}: {shown}')


def _handle(context: CliContext) -> int:
    token = context.subcommand()
    if token is None:
        run_setup(context)
        return 0

    subcommand = expand_choice(token, SUBCOMMANDS)
    if subcommand == 'show':
        show_defaults(context)
    else:
        context.store.delete_all()
        logger.info('defaults_deleted')
    return 0


def register(registry: dict) -> None:
    """Register the setup command."""
    registry[NAME] = _handle
