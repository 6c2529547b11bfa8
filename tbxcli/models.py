"""Pydantic models for tbxcli."""

import re

from pydantic import BaseModel, field_validator

UNSAFE_CHARACTERS = re.compile(r"""[ !@#$%^&*()\-+={}\[\]\\;':"<>,?/]""")

DEFAULT_FIELDS = ('login', 'password', 'package', 'repository', 'platform')


def safe_name(value: str) -> str:
    """Replace characters that do not belong in a file name with underscores."""
    return UNSAFE_CHARACTERS.sub('_', value)


class ParsedOption(BaseModel):
    """Result of parsing a single ``--name=value`` token."""

    option: str = ''
    value: str = ''
    valid: bool = False


class DefaultsRecord(BaseModel):
    """Default option values stored between invocations."""

    login: str = ''
    password: str = ''
    package: str = ''
    repository: str = ''
    platform: str = ''


class ArchiveSpec(BaseModel):
    """Identifies one package/version/platform archive."""

    package: str
    version: str
    platform: str
    format: str = 'zip'

    @field_validator('format')
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Normalize the archive format."""
        return v.strip().lower()

    @property
    def archive_name(self) -> str:
        """Get the file name of the archive."""
        return (
            f'{safe_name(self.package)}_{safe_name(self.version)}_'
            f'{safe_name(self.platform)}.{self.format}'
        )


class RestEndpoint(BaseModel):
    """A REST API endpoint and the options it requires."""

    path: str
    required: list[str]


class RestResult(BaseModel):
    """Outcome of a REST API call."""

    status: int
    message: str
    body: str = ''
    ok: bool = False

    def report(self) -> str:
        """Render the result the way it is shown to the user."""
        return f'{self.message} ({self.status}): {self.body}'
