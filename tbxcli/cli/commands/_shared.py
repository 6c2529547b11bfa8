"""Helpers shared by the tbxcli commands."""

from tbxcli.cli.context import CliContext
from tbxcli.errors import BadCommandError
from tbxcli.logging import get_logger
from tbxcli.models import RestEndpoint
from tbxcli.options import resolve_options
from tbxcli.parsing import expand_choice
from tbxcli.rest import build_url, call_endpoint, with_credentials

logger = get_logger(__name__)

CRUD_SUBCOMMANDS = ('create', 'delete')


def require_subcommand(context: CliContext, choices: tuple[str, ...]) -> str:
    """Expand the mandatory second command token."""
    token = context.subcommand()
    if token is None:
        msg = 'At least two commands please.'
        raise BadCommandError(msg)
    return expand_choice(token, choices)


def run_rest_command(context: CliContext, endpoint: RestEndpoint) -> int:
    """Resolve the options of an endpoint and call it."""
    options = resolve_options(
        with_credentials(endpoint.required),
        context.options,
        context.store,
        context.prompt,
        echo=context.echo,
    )

    url = build_url(context.config.api_base, endpoint.path, options)
    context.echo(f'\nContacting {url}')
    logger.debug('contacting_server', url=url, endpoint=endpoint.path)

    result = call_endpoint(
        url,
        options['login'],
        options['password'],
        timeout=context.config.timeout,
    )
    context.echo(result.report())
    return 0
