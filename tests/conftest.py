import os
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

import pytest
import requests
from pydantic import BaseModel
from pytest_mock import MockerFixture

import tbxcli.cli.main as main_module
from tbxcli.config import TbxcliConfig
from tbxcli.errors import BadCommandError
from tbxcli.logging import configure_logging
from tbxcli.models import DefaultsRecord


def strip_ansi(text: str) -> str:
    """Remove ANSI color codes from text."""
    return re.sub(r'\x1b\[[0-9;]*m', '', text)


class MemoryDefaultsStore:
    """In-memory stand-in for the YAML defaults store."""

    def __init__(self, record: DefaultsRecord | None = None) -> None:
        self.record = record

    def get(self, name: str) -> str:
        if self.record is None:
            return ''
        return getattr(self.record, name, '')

    def set_all(self, record: DefaultsRecord) -> None:
        self.record = record

    def show_all(self) -> dict[str, str]:
        if self.record is None:
            msg = 'No saved options found.'
            raise BadCommandError(msg)
        return self.record.model_dump()

    def delete_all(self) -> None:
        self.record = None


@dataclass
class ScriptedPrompt:
    """Prompt double that answers from a fixed list and records the questions."""

    answers: list[str] = field(default_factory=list)
    asked: list[tuple[str, bool]] = field(default_factory=list)

    def __call__(self, label: str, *, secret: bool = False) -> str:
        self.asked.append((label.strip(), secret))
        if not self.answers:
            pytest.fail(f'Unexpected prompt: {label!r}')
        return self.answers.pop(0)


class Result(BaseModel):
    returncode: int
    stdout: str
    stderr: str


CliCommand = Callable[..., Result]


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    configure_logging(verbose=False)


@pytest.fixture
def store() -> MemoryDefaultsStore:
    return MemoryDefaultsStore()


@pytest.fixture
def run_tbxcli(
    tmp_path: Path,
    store: MemoryDefaultsStore,
    capsys: pytest.CaptureFixture,
    mocker: MockerFixture,
) -> Callable[..., Result]:
    """Run the tbxcli main function in a directory with test doubles."""
    config = TbxcliConfig(
        server='http://tbx.test',
        defaults_path=tmp_path / 'defaults.yaml',
    )
    mocker.patch.object(main_module, 'load_config', return_value=config)

    def _run(
        args: list[str],
        cwd: Path,
        answers: Iterable[str] = (),
    ) -> Result:
        old_cwd = Path.cwd()
        try:
            os.chdir(cwd)
            exit_code = main_module.main(
                args,
                store=store,
                prompt=ScriptedPrompt(answers=list(answers)),
            )
            captured = capsys.readouterr()
            return Result(
                returncode=exit_code,
                stdout=strip_ansi(captured.out),
                stderr=strip_ansi(captured.err),
            )
        finally:
            os.chdir(old_cwd)

    return _run


def make_response(status: int, reason: str, body: bytes) -> requests.Response:
    """Build a canned HTTP response."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response._content = body  # noqa: SLF001 - building a canned response
    response.encoding = 'utf-8'
    return response
