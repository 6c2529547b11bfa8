"""Tests for archive creation."""

import zipfile
from pathlib import Path

import pytest

from tbxcli.archive import prepare_archive
from tbxcli.errors import ArchiveError, SourceNotFoundError, UnknownInputError
from tbxcli.models import ArchiveSpec

from .conftest import ScriptedPrompt


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    directory = tmp_path / 'mpt'
    (directory / 'sub').mkdir(parents=True)
    (directory / 'startup.m').write_text('disp(1)')
    (directory / 'sub' / 'helper.m').write_text('disp(2)')
    return directory


def make_options(source_dir: Path, **overrides: str) -> dict[str, str]:
    options = {
        'package': 'mpt',
        'version': '1.0',
        'platform': 'all',
        'dir': str(source_dir),
        'format': 'zip',
    }
    options.update(overrides)
    return options


class TestArchiveName:
    """Tests for the derived archive name."""

    def test_unsafe_characters_are_replaced(self) -> None:
        """Test that spaces become underscores while dots stay."""
        spec = ArchiveSpec(package='mpt v2', version='1.0', platform='all', format='zip')

        assert spec.archive_name == 'mpt_v2_1.0_all.zip'

    def test_punctuation_is_replaced(self) -> None:
        """Test replacement of other unsafe characters."""
        spec = ArchiveSpec(package='a/b', version='1.0-rc(1)', platform='win:64')

        assert spec.archive_name == 'a_b_1.0_rc_1__win_64.zip'


class TestPrepareArchive:
    """Tests for prepare_archive function."""

    def test_creates_zip(self, tmp_path: Path, source_dir: Path) -> None:
        """Test that the directory is zipped under the derived name."""
        workdir = tmp_path / 'out'
        workdir.mkdir()

        archive = prepare_archive(make_options(source_dir), ScriptedPrompt(), workdir=workdir)

        assert archive == workdir / 'mpt_1.0_all.zip'
        with zipfile.ZipFile(archive) as zf:
            names = set(zf.namelist())
        assert 'mpt/startup.m' in names
        assert 'mpt/sub/helper.m' in names

    def test_unsupported_format(self, tmp_path: Path, source_dir: Path) -> None:
        """Test that formats other than zip are rejected."""
        with pytest.raises(UnknownInputError, match='Format "tar" is not supported'):
            prepare_archive(make_options(source_dir, format='tar'), ScriptedPrompt(), workdir=tmp_path)

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Test that a missing source directory is reported."""
        with pytest.raises(SourceNotFoundError):
            prepare_archive(make_options(tmp_path / 'nope'), ScriptedPrompt(), workdir=tmp_path)

    def test_declined_overwrite(self, tmp_path: Path, source_dir: Path) -> None:
        """Test that an existing archive is kept unless the user answers y."""
        existing = tmp_path / 'mpt_1.0_all.zip'
        existing.write_text('old')
        prompt = ScriptedPrompt(answers=['Y'])

        archive = prepare_archive(make_options(source_dir), prompt, workdir=tmp_path)

        assert archive is None
        assert existing.read_text() == 'old'
        assert len(prompt.asked) == 1

    def test_accepted_overwrite(self, tmp_path: Path, source_dir: Path) -> None:
        """Test that answering y replaces the existing archive."""
        existing = tmp_path / 'mpt_1.0_all.zip'
        existing.write_text('old')

        archive = prepare_archive(make_options(source_dir), ScriptedPrompt(answers=['y']), workdir=tmp_path)

        assert archive == existing
        assert zipfile.is_zipfile(existing)

    def test_unreadable_source_keeps_existing_archive(self, tmp_path: Path, source_dir: Path) -> None:
        """Test that a failed write reports the file and leaves the old archive alone."""
        existing = tmp_path / 'mpt_1.0_all.zip'
        with zipfile.ZipFile(existing, 'w') as zf:
            zf.writestr('old.txt', 'old')
        (source_dir / 'dangling').symlink_to(tmp_path / 'missing')

        with pytest.raises(ArchiveError, match='dangling'):
            prepare_archive(make_options(source_dir), ScriptedPrompt(answers=['y']), workdir=tmp_path)

        with zipfile.ZipFile(existing) as zf:
            assert zf.namelist() == ['old.txt']
        assert not (tmp_path / 'mpt_1.0_all.zip.tmp').exists()
