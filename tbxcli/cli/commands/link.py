"""tbxcli link subcommand.

Create a download link for all platforms of version "1.0" of package "mpt":
    tbxcli --package=mpt --version=1.0 --platform=all --url=URL link create

Delete the download link for platform "maci":
    tbxcli --package=mpt --version=1.0 --platform=maci link delete
"""

from tbxcli.cli.context import CliContext
from tbxcli.models import RestEndpoint

from . import _shared

NAME = 'link'

ENDPOINTS = {
    'create': RestEndpoint(
        path='links/create',
        required=['package', 'version', 'platform', 'url'],
    ),
    'delete': RestEndpoint(
        path='links/delete',
        required=['package', 'version', 'platform'],
    ),
}


def _handle(context: CliContext) -> int:
    subcommand = _shared.require_subcommand(context, _shared.CRUD_SUBCOMMANDS)
    return _shared.run_rest_command(context, ENDPOINTS[subcommand])


def register(registry: dict) -> None:
    """Register the link command."""
    registry[NAME] = _handle
