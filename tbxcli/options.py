"""Resolution of the option values a command needs."""

import sys
from collections.abc import Callable, Mapping, Sequence
from typing import Protocol

from rich.markup import escape
from rich.prompt import Prompt

from tbxcli.defaults import DefaultsStore
from tbxcli.errors import MissingOptionError
from tbxcli.logging import get_logger

logger = get_logger(__name__)

# Values of these options are never echoed back
HIDDEN_OPTIONS = ('login', 'password')
SECRET_OPTIONS = ('password',)

LABEL_WIDTH = 10


class PromptFn(Protocol):
    """Asks the user for a single value."""

    def __call__(self, label: str, *, secret: bool = False) -> str: ...


def label_for(name: str) -> str:
    """Capitalize an option name and right-align it for display."""
    return f'{name[:1].upper()}{name[1:]}'.rjust(LABEL_WIDTH)


def terminal_prompt(label: str, *, secret: bool = False) -> str:
    """Prompt on the terminal, hiding the input of secret values."""
    return Prompt.ask(escape(label), password=secret, default='', show_default=False)


def write_line(text: str = '') -> None:
    """Write a line of user-facing output."""
    sys.stdout.write(f'{text}\n')


def resolve_options(
    required: Sequence[str],
    provided: Mapping[str, str],
    store: DefaultsStore,
    prompt: PromptFn,
    optional: Sequence[tuple[str, str]] = (),
    echo: Callable[[str], None] | None = None,
) -> dict[str, str]:
    """Fill in the options a command needs.

    Missing required options are taken from the defaults store first and
    asked for interactively after that. Optional ``(name, default)`` pairs
    apply last.

    Raises:
        MissingOptionError: if an interactively requested value is empty.
    """
    options = dict(provided)

    for name in required:
        if name in options:
            continue
        value = store.get(name)
        if value:
            logger.debug('using_stored_default', option=name)
            options[name] = value

    if echo is not None:
        for name in required:
            if name in options and name not in HIDDEN_OPTIONS:
                echo(f'{label_for(name)}: {options[name]}')

    for name in required:
        if name in options:
            continue
        value = prompt(label_for(name), secret=name in SECRET_OPTIONS)
        if not value:
            raise MissingOptionError(name)
        options[name] = value

    for name, default in optional:
        options.setdefault(name, default)

    return options
