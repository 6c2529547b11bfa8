"""Main CLI entry point for tbxcli."""

import sys
from collections.abc import Sequence

from tbxcli.cli.commands import register_all
from tbxcli.cli.context import CliContext
from tbxcli.config import load_config
from tbxcli.defaults import DefaultsStore, YamlDefaultsStore
from tbxcli.errors import BadCommandError, TbxcliError
from tbxcli.logging import configure_logging, get_logger
from tbxcli.options import PromptFn, terminal_prompt, write_line
from tbxcli.parsing import expand_choice, split_arguments

logger = get_logger(__name__)

INTERRUPTED_EXIT_CODE = 130


def report_error(exc: TbxcliError) -> None:
    """Write a recognized error to stderr."""
    sys.stderr.write(f'\n{exc}\n\n')
    sys.stderr.write('Error: Cannot continue, see message above.\n')


def dispatch(context: CliContext) -> int:
    """Route the first command to its handler."""
    if not context.commands:
        msg = 'At least one command please.'
        raise BadCommandError(msg)

    registry = register_all()
    command = expand_choice(context.commands[0], list(registry))
    logger.debug('dispatching_command', command=command, commands=context.commands)
    return registry[command](context)


def main(
    argv: Sequence[str] | None = None,
    store: DefaultsStore | None = None,
    prompt: PromptFn = terminal_prompt,
) -> int:
    """Main entry point for the tbxcli CLI."""
    args = sys.argv[1:] if argv is None else list(argv)

    configure_logging()
    try:
        config = load_config()
    except TbxcliError as exc:
        report_error(exc)
        return 1

    if config.verbose:
        configure_logging(verbose=True)
    logger.debug('starting_tbxcli', server=config.server, args=len(args))

    options, commands, invalid = split_arguments(args)
    for token in invalid:
        write_line(f'Ignoring invalid option "{token}"')

    context = CliContext(
        options=options,
        commands=commands,
        store=store if store is not None else YamlDefaultsStore(config.defaults_path),
        prompt=prompt,
        config=config,
    )

    try:
        return dispatch(context)
    except TbxcliError as exc:
        report_error(exc)
        return 1
    except (KeyboardInterrupt, EOFError):
        sys.stderr.write('\nAborted.\n')
        return INTERRUPTED_EXIT_CODE


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    run()
