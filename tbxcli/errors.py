"""Errors recognized by the tbxcli command line.

Anything raised from here is reported as a short message followed by a
generic "cannot continue" failure. Other exceptions propagate unchanged.
"""


class TbxcliError(RuntimeError):
    """Base class for errors reported to the user without a traceback."""


class BadCommandError(TbxcliError):
    """Raised for missing, unrecognized or ambiguous commands."""


class AmbiguousChoiceError(BadCommandError):
    """Raised when an abbreviated command matches several candidates."""

    def __init__(self, text: str, candidates: list[str]) -> None:
        self.text = text
        self.candidates = candidates
        listing = ', '.join(candidates)
        super().__init__(
            f'The choice "{text}" is ambiguous. Possible matches are: {listing}. '
            'Please refine your input.',
        )


class MissingOptionError(BadCommandError):
    """Raised when a required option is left empty."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f'Option "{option}" cannot be empty.')


class UnknownInputError(TbxcliError):
    """Raised for unsupported archive formats or upload methods."""


class ArchiveNotFoundError(TbxcliError):
    """Raised when the archive to upload does not exist."""


class SourceNotFoundError(TbxcliError):
    """Raised when the directory to archive does not exist."""


class ArchiveError(TbxcliError):
    """Raised when the archive cannot be written."""


class UploadError(TbxcliError):
    """Raised when the upload command cannot be run or fails."""


class TbxcliConfigError(TbxcliError):
    """Raised when the tbxcli configuration is invalid."""


__all__ = [
    'AmbiguousChoiceError',
    'ArchiveError',
    'ArchiveNotFoundError',
    'BadCommandError',
    'MissingOptionError',
    'SourceNotFoundError',
    'TbxcliConfigError',
    'TbxcliError',
    'UnknownInputError',
    'UploadError',
]
