from collections.abc import Sequence

from tbxcli.errors import AmbiguousChoiceError, BadCommandError
from tbxcli.logging import get_logger
from tbxcli.models import ParsedOption

logger = get_logger(__name__)

OPTION_PREFIX = '--'


def parse_option(token: str) -> ParsedOption:
    """Parse a single ``--name=value`` token.

    A valid option starts with ``--``, contains exactly one ``=``, and has
    a non-empty name and a non-empty value.
    """
    if not token.startswith(OPTION_PREFIX) or token.count('=') != 1:
        return ParsedOption()

    name, value = token[len(OPTION_PREFIX):].split('=')
    if not name or not value:
        return ParsedOption()
    return ParsedOption(option=name, value=value, valid=True)


def split_arguments(
    argv: Sequence[str],
) -> tuple[dict[str, str], list[str], list[str]]:
    """Split raw arguments into options, commands and rejected option tokens.

    Commands keep their order. Later options overwrite earlier ones.
    """
    options: dict[str, str] = {}
    commands: list[str] = []
    invalid: list[str] = []

    for token in argv:
        if not token.startswith('-'):
            commands.append(token)
            continue
        parsed = parse_option(token)
        if parsed.valid:
            options[parsed.option] = parsed.value
        else:
            logger.debug('ignoring_invalid_option', token=token)
            invalid.append(token)

    return options, commands, invalid


def expand_choice(text: str, choices: Sequence[str]) -> str:
    """Expand an abbreviated command to the unique choice it prefixes.

    Matching is case-insensitive. ``expand_choice('ve', ['version', 'setup'])``
    returns ``'version'``.
    """
    needle = text.lower()
    candidates = [choice for choice in choices if choice.lower().startswith(needle)]

    if not candidates:
        msg = f'Unrecognized command/option "{text}".'
        raise BadCommandError(msg)
    if len(candidates) > 1:
        raise AmbiguousChoiceError(text, candidates)

    logger.debug('expanded_choice', text=text, choice=candidates[0])
    return candidates[0]
