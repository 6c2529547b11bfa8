from pathlib import Path
from textwrap import dedent

import pytest
from pytest_mock import MockerFixture

from tbxcli.config import (
    DEFAULT_DEFAULTS_PATH,
    DEFAULT_SERVER,
    TbxcliConfig,
    load_config,
)
from tbxcli.errors import TbxcliConfigError


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / 'config.yaml'


def write_config(path: Path, content: str) -> None:
    path.write_text(dedent(content).lstrip())


def test_explicit_config_file(config_path: Path) -> None:
    write_config(
        config_path,
        """
        server: https://tbx.example.org/
        defaults_path: prefs.yaml
        timeout: 30
        verbose: true
        """,
    )

    config = load_config(config_path, environ={})

    assert config.server == 'https://tbx.example.org/'
    assert config.api_base == 'https://tbx.example.org/api/v1'
    assert config.defaults_path == config_path.parent / 'prefs.yaml'
    assert config.timeout == 30
    assert config.verbose is True


def test_config_from_environment(config_path: Path) -> None:
    write_config(config_path, 'server: http://from-file.test')

    config = load_config(
        environ={
            'TBXCLI_CONFIG': str(config_path),
            'TBXCLI_SERVER': 'http://from-env.test',
            'TBXCLI_VERBOSE': 'yes',
        },
    )

    assert config.server == 'http://from-env.test'
    assert config.verbose is True


def test_defaults_without_file(tmp_path: Path, mocker: MockerFixture) -> None:
    mocker.patch('tbxcli.config.DEFAULT_CONFIG_PATH', tmp_path / 'missing.yaml')

    config = load_config(environ={})

    assert config == TbxcliConfig()
    assert config.server == DEFAULT_SERVER
    assert config.defaults_path == DEFAULT_DEFAULTS_PATH
    assert config.api_base == 'http://www.tbxmanager.com/api/v1'


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(TbxcliConfigError, match='configuration file not found'):
        load_config(tmp_path / 'missing.yaml', environ={})


@pytest.mark.parametrize(
    'content',
    [
        'server: [invalid',
        '- just\n- a list',
        'unknown_key: 1',
        'timeout: soon',
    ],
)
def test_invalid_config(config_path: Path, content: str) -> None:
    config_path.write_text(content)

    with pytest.raises(TbxcliConfigError):
        load_config(config_path, environ={})


def test_empty_config_file(config_path: Path) -> None:
    config_path.write_text('')

    config = load_config(config_path, environ={})

    assert config.server == DEFAULT_SERVER
