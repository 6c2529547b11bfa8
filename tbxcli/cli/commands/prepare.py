"""tbxcli prepare subcommand.

Create a new archive from a given directory:
    tbxcli --package=mpt --version=1.0 --dir=mydir --format=zip --platform=all prepare

By default, --format=zip
"""

from tbxcli.archive import prepare_archive
from tbxcli.cli.context import CliContext
from tbxcli.options import resolve_options

NAME = 'prepare'

REQUIRED_OPTIONS = ['package', 'version', 'platform', 'dir']
OPTIONAL = [('format', 'zip')]


def _handle(context: CliContext) -> int:
    options = resolve_options(
        REQUIRED_OPTIONS,
        context.options,
        context.store,
        context.prompt,
        optional=OPTIONAL,
        echo=context.echo,
    )
    archive = prepare_archive(options, context.prompt, workdir=context.workdir)
    if archive is not None:
        context.echo(f'\nCreated archive: {archive.name}')
    return 0


def register(registry: dict) -> None:
    """Register the prepare command."""
    registry[NAME] = _handle
