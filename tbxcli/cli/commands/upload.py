"""tbxcli upload subcommand.

Upload a prepared archive:
    tbxcli --package=mpt --version=1.0 --platform=all --dest=user@server:path upload METHOD

Supported methods:
    * scp
"""

from tbxcli.cli.context import CliContext
from tbxcli.errors import BadCommandError
from tbxcli.options import resolve_options
from tbxcli.upload import upload_archive

NAME = 'upload'

REQUIRED_OPTIONS = ['package', 'version', 'platform', 'dest']
OPTIONAL = [('format', 'zip')]


def _handle(context: CliContext) -> int:
    method = context.subcommand()
    if method is None:
        msg = 'At least two commands please.'
        raise BadCommandError(msg)

    options = resolve_options(
        REQUIRED_OPTIONS,
        context.options,
        context.store,
        context.prompt,
        optional=OPTIONAL,
        echo=context.echo,
    )
    archive = upload_archive(
        options,
        method,
        workdir=context.workdir,
        announce=context.echo,
    )
    context.echo(f'\nFile "{archive.name}" uploaded to "{options["dest"]}".')
    return 0


def register(registry: dict) -> None:
    """Register the upload command."""
    registry[NAME] = _handle
