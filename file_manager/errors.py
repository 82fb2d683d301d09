from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_PATH = 'invalid_path'
    NOT_FOUND = 'not_found'
    PERMISSION_DENIED = 'permission_denied'
    NOT_A_DIRECTORY = 'not_a_directory'
    IS_A_DIRECTORY = 'is_a_directory'
    TOO_LARGE = 'too_large'
    OTHER = 'other'


_DEFAULT_MESSAGES = {
    ErrorKind.INVALID_PATH: 'Invalid path provided',
    ErrorKind.NOT_FOUND: 'File or directory not found',
    ErrorKind.PERMISSION_DENIED: 'Access denied',
    ErrorKind.NOT_A_DIRECTORY: 'Path is not a directory',
    ErrorKind.IS_A_DIRECTORY: 'Path is a directory',
    ErrorKind.TOO_LARGE: 'File is too large to open',
    ErrorKind.OTHER: 'Internal server error',
}


class FileManagerError(Exception):
    """Failure raised where it happens, tagged with a closed error kind."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @classmethod
    def from_os_error(cls, exc: OSError, action: str) -> 'FileManagerError':
        if isinstance(exc, FileNotFoundError):
            kind = ErrorKind.NOT_FOUND
        elif isinstance(exc, PermissionError):
            kind = ErrorKind.PERMISSION_DENIED
        elif isinstance(exc, IsADirectoryError):
            kind = ErrorKind.IS_A_DIRECTORY
        elif isinstance(exc, NotADirectoryError):
            kind = ErrorKind.NOT_A_DIRECTORY
        else:
            return cls(ErrorKind.OTHER, f'Failed to {action}')
        return cls(kind)
