"""Utilities for reading tbxcli configuration from YAML."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tbxcli.errors import TbxcliConfigError
from tbxcli.logging import get_logger

logger = get_logger(__name__)

CONFIG_DIR = Path.home() / '.config' / 'tbxcli'
DEFAULT_CONFIG_PATH = CONFIG_DIR / 'config.yaml'
DEFAULT_DEFAULTS_PATH = CONFIG_DIR / 'defaults.yaml'
DEFAULT_SERVER = 'http://www.tbxmanager.com'

CONFIG_ENV = 'TBXCLI_CONFIG'
SERVER_ENV = 'TBXCLI_SERVER'
VERBOSE_ENV = 'TBXCLI_VERBOSE'


class TbxcliConfig(BaseModel):
    """Settings of the tbxcli client."""

    model_config = ConfigDict(extra='forbid')

    server: str = DEFAULT_SERVER
    defaults_path: Path = Field(default=DEFAULT_DEFAULTS_PATH)
    timeout: float | None = None
    verbose: bool = False

    @property
    def api_base(self) -> str:
        """Get the base URL of the REST API."""
        return f'{self.server.rstrip("/")}/api/v1'


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    logger.debug('loading_config', config=str(config_path))
    try:
        with config_path.open() as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        msg = f'failed to parse YAML: {exc}'
        raise TbxcliConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f'configuration root must be a mapping in {config_path}'
        raise TbxcliConfigError(msg)

    return data


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in {'1', 'true', 'yes', 'on'}


def load_config(
    config_path: Path | None = None,
    environ: dict[str, str] | None = None,
) -> TbxcliConfig:
    """Load tbxcli configuration from YAML and environment overrides.

    The file named by ``TBXCLI_CONFIG`` (or ``config_path``) must exist;
    the default location is optional.
    """
    env = os.environ if environ is None else environ

    explicit = config_path or (Path(env[CONFIG_ENV]) if env.get(CONFIG_ENV) else None)
    path = explicit or DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if path.exists():
        data = _load_yaml_config(path)
    elif explicit is not None:
        msg = f'configuration file not found: {path}'
        raise TbxcliConfigError(msg)

    if env.get(SERVER_ENV):
        data['server'] = env[SERVER_ENV]
    if env.get(VERBOSE_ENV):
        data['verbose'] = _is_truthy(env[VERBOSE_ENV])

    try:
        config = TbxcliConfig.model_validate(data)
    except ValidationError as exc:
        logger.debug('config_validation_failed', errors=str(exc))
        msg = f'invalid tbxcli configuration in {path}'
        raise TbxcliConfigError(msg) from exc

    if config.defaults_path.is_absolute():
        return config
    # relative paths are taken relative to the configuration file
    return config.model_copy(
        update={'defaults_path': path.parent / config.defaults_path},
    )


__all__ = [
    'DEFAULT_CONFIG_PATH',
    'DEFAULT_DEFAULTS_PATH',
    'DEFAULT_SERVER',
    'TbxcliConfig',
    'load_config',
]
