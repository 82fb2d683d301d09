from __future__ import annotations

import os
import posixpath

from ..errors import ErrorKind, FileManagerError

_FORBIDDEN_FRAGMENTS = ('../', '..', '~', '\x00')
_ROOT_ALIASES = {'', '/', '.'}


def validate_input(raw: str) -> str:
    """Reject raw paths carrying traversal, home-directory or NUL markers."""
    if raw in _ROOT_ALIASES:
        return raw
    for fragment in _FORBIDDEN_FRAGMENTS:
        if fragment in raw:
            raise FileManagerError(ErrorKind.INVALID_PATH)
    return raw


def clean_path(raw: str) -> str:
    if raw in _ROOT_ALIASES:
        return '/'
    if raw.startswith('/'):
        raw = '/' + raw.lstrip('/')
    return posixpath.normpath(raw)


def _is_within(base: str, candidate: str) -> bool:
    return candidate == base or candidate.startswith(base.rstrip(os.sep) + os.sep)


class PathResolver:
    def __init__(self, base_dir: str, resolve_symlinks: bool = True):
        self.base_dir = os.path.normpath(os.path.abspath(base_dir))
        self.resolve_symlinks = resolve_symlinks

    def resolve(self, rel: str) -> str:
        validate_input(rel)
        if rel in _ROOT_ALIASES:
            return self.base_dir

        relative = posixpath.normpath(rel.lstrip('/'))
        if relative == '.':
            return self.base_dir

        candidate = os.path.normpath(os.path.join(self.base_dir, relative))
        if not _is_within(self.base_dir, candidate):
            raise FileManagerError(ErrorKind.INVALID_PATH, 'Invalid path: path escapes base directory')

        # symlinks inside the tree may point anywhere; compare canonical forms too
        if self.resolve_symlinks and not self.is_contained(candidate):
            raise FileManagerError(ErrorKind.INVALID_PATH, 'Invalid path: path escapes base directory')
        return candidate

    def is_contained(self, path: str) -> bool:
        return _is_within(os.path.realpath(self.base_dir), os.path.realpath(path))
