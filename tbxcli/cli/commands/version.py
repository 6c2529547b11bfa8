"""tbxcli version subcommand.

Create version "1.0" in the "stable" repository of package "mpt":
    tbxcli --package=mpt --repository=stable --version=1.0 version create

Delete version "1.0" of package "mpt":
    tbxcli --package=mpt --version=1.0 version delete
"""

from tbxcli.cli.context import CliContext
from tbxcli.models import RestEndpoint

from . import _shared

NAME = 'version'

ENDPOINTS = {
    'create': RestEndpoint(
        path='versions/create',
        required=['package', 'repository', 'version'],
    ),
    'delete': RestEndpoint(
        path='versions/delete',
        required=['package', 'version'],
    ),
}


def _handle(context: CliContext) -> int:
    subcommand = _shared.require_subcommand(context, _shared.CRUD_SUBCOMMANDS)
    return _shared.run_rest_command(context, ENDPOINTS[subcommand])


def register(registry: dict) -> None:
    """Register the version command."""
    registry[NAME] = _handle
