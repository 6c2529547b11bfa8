"""Creation of package archives."""

import zipfile
from collections.abc import Mapping
from pathlib import Path

from tbxcli.errors import ArchiveError, SourceNotFoundError, UnknownInputError
from tbxcli.logging import get_logger
from tbxcli.models import ArchiveSpec
from tbxcli.options import PromptFn

logger = get_logger(__name__)

SUPPORTED_FORMATS = ('zip',)


def archive_spec_from_options(options: Mapping[str, str]) -> ArchiveSpec:
    """Build an archive spec from resolved options."""
    return ArchiveSpec(
        package=options['package'],
        version=options['version'],
        platform=options['platform'],
        format=options.get('format', 'zip'),
    )


def write_zip(archive: Path, source_dir: Path) -> int:
    """Zip a directory; entries start with the directory's own name.

    The zip is built next to ``archive`` and moved onto it only once it is
    complete, so a failed write leaves any existing archive untouched.

    Returns the number of files written.

    Raises:
        ArchiveError: if a source file cannot be read or the archive cannot
            be written.
    """
    root = source_dir.resolve()
    partial = archive.with_name(f'{archive.name}.tmp')
    skipped = {archive.resolve(), partial.resolve()}
    count = 0
    try:
        with zipfile.ZipFile(partial, 'w', compression=zipfile.ZIP_DEFLATED) as zf:
            for item in sorted(root.rglob('*')):
                if item.resolve() in skipped:
                    continue
                arcname = item.relative_to(root.parent)
                try:
                    zf.write(item, arcname)
                except OSError as exc:
                    msg = f'Cannot add "{item}" to the archive: {exc.strerror or exc}'
                    raise ArchiveError(msg) from exc
                if item.is_file():
                    count += 1
        partial.replace(archive)
    except OSError as exc:
        msg = f'Cannot write archive "{archive}": {exc.strerror or exc}'
        raise ArchiveError(msg) from exc
    finally:
        partial.unlink(missing_ok=True)
    return count


def confirm_overwrite(archive: Path, prompt: PromptFn) -> bool:
    """Ask whether an existing archive may be replaced."""
    answer = prompt(f'\nWARNING: file "{archive.name}" already exists!\n\nOverwrite? [y/n]')
    return answer.strip() == 'y'


def prepare_archive(
    options: Mapping[str, str],
    prompt: PromptFn,
    workdir: Path | None = None,
) -> Path | None:
    """Create the archive described by ``options`` in ``workdir``.

    Returns the archive path, or None if the user declined to overwrite an
    existing archive.
    """
    spec = archive_spec_from_options(options)
    if spec.format not in SUPPORTED_FORMATS:
        msg = f'Format "{spec.format}" is not supported.'
        raise UnknownInputError(msg)

    source_dir = Path(options['dir']).expanduser()
    if not source_dir.is_dir():
        msg = f'Directory "{source_dir}" not found.'
        raise SourceNotFoundError(msg)

    archive = (workdir or Path.cwd()) / spec.archive_name
    if archive.exists() and not confirm_overwrite(archive, prompt):
        logger.warning('archive_overwrite_declined', archive=str(archive))
        return None

    logger.debug('creating_archive', archive=str(archive), source=str(source_dir))
    count = write_zip(archive, source_dir)
    logger.debug('archive_created', archive=str(archive), files=count)
    return archive
