import logging

import structlog
import yaml
from rich.console import Console
from rich.syntax import Syntax
from structlog.types import FilteringBoundLogger
from structlog.typing import EventDict

console = Console(stderr=True)

# Type alias for our logger
Logger = FilteringBoundLogger

# Context keys that are never rendered, even in verbose mode
SECRET_KEYS = frozenset({'password', 'auth'})


def format_context_yaml(event_dict: EventDict, indent: int = 2) -> str:
    """Format the context dictionary as YAML.

    Args:
        event_dict: The context dictionary to format.
        indent: The number of spaces to use for indentation.

    Returns:
        The formatted YAML string.
    """
    if not event_dict:
        return ''
    context_yaml = yaml.safe_dump(
        event_dict,
        sort_keys=True,
        default_flow_style=False,
    )
    pad = ' ' * indent
    return '\n'.join(f'{pad}{line}' for line in context_yaml.splitlines())


def strip_bookkeeping(event_dict: EventDict) -> EventDict:
    """Drop structlog bookkeeping keys and secrets from the context."""
    for key in ('timestamp', 'level', 'log_level', 'event'):
        event_dict.pop(key, None)
    return {k: v for k, v in event_dict.items() if k not in SECRET_KEYS}


def cli_renderer(
    _logger: Logger,
    method_name: str,
    event_dict: EventDict,
) -> str:
    """Render log messages for CLI output using rich formatting.

    Args:
        logger: The logger instance.
        method_name: The logging method name (e.g., 'info', 'error').
        event_dict: The event dictionary containing log data.

    Returns:
        str: An empty string, as structlog expects a string return but output is printed.
    """
    level = method_name.upper()
    event_msg = event_dict.pop('event', '')
    event_dict = strip_bookkeeping(event_dict)

    verbose_mode = logging.getLogger().level <= logging.DEBUG

    if not verbose_mode:
        event_dict = filter_context_for_non_verbose(event_msg, event_dict)

    context_yaml = format_context_yaml(event_dict)

    level_styles = {
        'INFO': 'blue',
        'WARNING': 'yellow',
        'ERROR': 'red',
        'DEBUG': 'magenta',
        'CRITICAL': 'white on red',
    }
    style = level_styles.get(level, 'bold cyan')
    log_msg = f'[bold {style}][{level}][/bold {style}] [{style}]{event_msg}[/{style}]'
    console.print(log_msg)

    if context_yaml:
        syntax = Syntax(
            context_yaml,
            'yaml',
            theme='github-dark',
            background_color='default',
            line_numbers=False,
        )
        console.print(syntax)
    return ''


def filter_context_for_non_verbose(event_msg: str, event_dict: EventDict) -> EventDict:
    """Filter context dictionary for non-verbose mode to show only essential info."""
    essential_context = {
        'archive_overwrite_declined': ['archive'],
        'upload_failed': ['command', 'returncode'],
        'rest_call_failed': ['url', 'error'],
        'rest_call_rejected': ['url', 'status'],
    }

    keys_to_keep = essential_context.get(event_msg, [])
    if keys_to_keep:
        return {k: v for k, v in event_dict.items() if k in keys_to_keep}
    return {}


def configure_logging(*, verbose: bool = False) -> None:
    """Configure structlog for tbxcli.

    Args:
        verbose: Enable verbose/debug output
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt='ISO', utc=False),
            structlog.stdlib.add_log_level,
            cli_renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_logger(name: str) -> Logger:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
