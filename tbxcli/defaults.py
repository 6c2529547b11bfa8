"""Persisted default option values."""

import os
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import ValidationError

from tbxcli.errors import BadCommandError, TbxcliConfigError
from tbxcli.logging import get_logger
from tbxcli.models import DEFAULT_FIELDS, DefaultsRecord

logger = get_logger(__name__)

DEFAULTS_KEY = 'defaults'


class DefaultsStore(Protocol):
    """Key/value store for default option values."""

    def get(self, name: str) -> str: ...

    def set_all(self, record: DefaultsRecord) -> None: ...

    def show_all(self) -> dict[str, str]: ...

    def delete_all(self) -> None: ...


class YamlDefaultsStore:
    """Defaults store backed by a single YAML file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> DefaultsRecord | None:
        """Load the stored record, or None when nothing is saved."""
        if not self.path.exists():
            return None

        try:
            with self.path.open() as fh:
                data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            msg = f'failed to parse stored defaults {self.path}: {exc}'
            raise TbxcliConfigError(msg) from exc

        section = data.get(DEFAULTS_KEY) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            msg = f'stored defaults in {self.path} must be a mapping'
            raise TbxcliConfigError(msg)

        try:
            return DefaultsRecord.model_validate(section)
        except ValidationError as exc:
            msg = f'invalid stored defaults in {self.path}'
            raise TbxcliConfigError(msg) from exc

    def get(self, name: str) -> str:
        """Return the default value of an option, or '' if there is none."""
        record = self.load()
        if record is None:
            return ''
        return getattr(record, name, '') if name in DEFAULT_FIELDS else ''

    def set_all(self, record: DefaultsRecord) -> None:
        """Replace all stored defaults."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # the record holds a password
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, 'w') as fh:
            yaml.safe_dump({DEFAULTS_KEY: record.model_dump()}, fh, sort_keys=False)
        logger.debug('defaults_saved', path=str(self.path))

    def show_all(self) -> dict[str, str]:
        """Return all stored defaults."""
        record = self.load()
        if record is None:
            msg = 'No saved options found.'
            raise BadCommandError(msg)
        return record.model_dump()

    def delete_all(self) -> None:
        """Remove every stored default."""
        if self.path.exists():
            self.path.unlink()
        logger.debug('defaults_deleted', path=str(self.path))
