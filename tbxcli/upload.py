"""Upload of prepared archives."""

import subprocess
from collections.abc import Callable, Mapping
from pathlib import Path

from tbxcli.archive import archive_spec_from_options
from tbxcli.errors import ArchiveNotFoundError, UnknownInputError, UploadError
from tbxcli.logging import get_logger

logger = get_logger(__name__)

SUPPORTED_METHODS = ('scp',)

Runner = Callable[..., subprocess.CompletedProcess]


def build_upload_command(method: str, archive: Path, dest: str) -> list[str]:
    """Build the command line that uploads ``archive`` to ``dest``."""
    if method.lower() == 'scp':
        return ['scp', '--', archive.name, dest]
    msg = f'Upload method "{method}" is not supported.'
    raise UnknownInputError(msg)


def upload_archive(
    options: Mapping[str, str],
    method: str,
    workdir: Path | None = None,
    runner: Runner | None = None,
    announce: Callable[[str], None] | None = None,
) -> Path:
    """Upload the archive described by ``options`` to ``options['dest']``.

    Raises:
        ArchiveNotFoundError: if the archive is not in the working directory.
        UnknownInputError: for unsupported upload methods.
        UploadError: if the upload command cannot be run or fails.
    """
    cwd = workdir or Path.cwd()
    archive = cwd / archive_spec_from_options(options).archive_name
    if not archive.is_file():
        msg = f'File "{archive.name}" not found in the current directory.'
        raise ArchiveNotFoundError(msg)

    cmd = build_upload_command(method, archive, options['dest'])
    run = runner or subprocess.run
    command_line = ' '.join(cmd)
    if announce is not None:
        announce(f'\nExecuting "{command_line}"')
    logger.debug('running_upload', command=command_line, cwd=str(cwd))

    try:
        run(cmd, cwd=cwd, check=True)
    except FileNotFoundError as exc:
        msg = f'Cannot run "{cmd[0]}": {exc}'
        raise UploadError(msg) from exc
    except subprocess.CalledProcessError as exc:
        logger.warning('upload_failed', command=command_line, returncode=exc.returncode)
        msg = f'Upload command "{command_line}" failed with exit status {exc.returncode}.'
        raise UploadError(msg) from exc

    logger.debug('upload_finished', archive=archive.name, dest=options['dest'])
    return archive
