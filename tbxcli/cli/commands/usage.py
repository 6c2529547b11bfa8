"""tbxcli help subcommand."""

from tbxcli.cli.context import CliContext

NAME = 'help'

USAGE = """\
tbxcli: command-line interface for tbxmanager.com

Basic syntax:
  tbxcli version create
  tbxcli version delete
  tbxcli link create
  tbxcli link delete
  tbxcli prepare
  tbxcli upload scp

You will be prompted to enter additional required information, such as
the package name, version ID, etc. You can store default values for
missing data via "tbxcli setup" (see below).

Advanced syntax:
  tbxcli --package=mpt --version=1.0 --repository=stable version create
  tbxcli --package=mpt --version=1.0 --platform=all --url=URL link create
  tbxcli --package=mpt --version=1.0 version delete
  tbxcli --package=mpt --version=1.0 --platform=maci link delete
  tbxcli --package=mpt --version=1.0 --platform=all --dir=mydir prepare
  tbxcli --package=mpt --version=1.0 --platform=all --dest=host:path upload scp

Ordering of options is arbitrary. Commands may be abbreviated as long as
the abbreviation is unambiguous, e.g. "tbxcli ve cr".

Set and store default options:
  tbxcli setup

Show stored default options:
  tbxcli setup show

Delete stored defaults:
  tbxcli setup delete

Global options (can be saved via "tbxcli setup"):
  --login=LOGIN       your tbxmanager.com login (=email)
  --password=PASSWORD your tbxmanager.com password
  --package=PKG       default package name
  --platform=PLT      default platform (use 'all' for all platforms)
  --repository=REPO   default repository ('stable' or 'unstable')

Other options:
  --version=VER       version ID
  --url=URL           download URL of a link
  --dir=DIR           directory to archive
  --format=FMT        archive format (default: zip)
  --dest=DEST         upload destination

Environment:
  TBXCLI_CONFIG       path of the configuration file
  TBXCLI_SERVER       tbxmanager server URL
  TBXCLI_VERBOSE      set to 1 for debug output
"""


def _handle(context: CliContext) -> int:
    context.echo(USAGE.rstrip('\n'))
    return 0


def register(registry: dict) -> None:
    """Register the help command."""
    registry[NAME] = _handle
