from __future__ import annotations

import os
import shutil
from typing import Iterator

from ..errors import ErrorKind, FileManagerError


class LocalFileSystem:
    """Typed wrapper over the OS primitives used by the file service.

    Every ``OSError`` leaves this class as a ``FileManagerError`` carrying the
    matching ``ErrorKind``.
    """

    def read_all(self, path: str) -> bytes:
        try:
            with open(path, 'rb') as f:
                return f.read()
        except OSError as exc:
            raise FileManagerError.from_os_error(exc, 'read file') from exc

    def iter_chunks(self, path: str, chunk_size: int) -> Iterator[bytes]:
        self.stat(path)
        if not os.access(path, os.R_OK):
            raise FileManagerError(ErrorKind.PERMISSION_DENIED)

        def _chunks() -> Iterator[bytes]:
            with open(path, 'rb') as f:
                while chunk := f.read(chunk_size):
                    yield chunk

        return _chunks()

    def list_dir(self, path: str) -> list[os.DirEntry]:
        try:
            with os.scandir(path) as it:
                return list(it)
        except OSError as exc:
            raise FileManagerError.from_os_error(exc, 'read directory') from exc

    def stat(self, path: str) -> os.stat_result:
        try:
            return os.stat(path)
        except OSError as exc:
            raise FileManagerError.from_os_error(exc, 'get file info') from exc

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def remove(self, path: str) -> None:
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except OSError as exc:
            raise FileManagerError.from_os_error(exc, 'delete') from exc
