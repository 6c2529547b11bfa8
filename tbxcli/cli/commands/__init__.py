"""Command registrations for the tbxcli CLI."""

from collections.abc import Callable

from tbxcli.cli.context import CliContext

from . import link, prepare, setup, upload, usage, version

Handler = Callable[[CliContext], int]


def register_all() -> dict[str, Handler]:
    """Register all top-level commands, keeping their documented order."""
    registry: dict[str, Handler] = {}
    version.register(registry)
    link.register(registry)
    setup.register(registry)
    prepare.register(registry)
    upload.register(registry)
    usage.register(registry)
    return registry
