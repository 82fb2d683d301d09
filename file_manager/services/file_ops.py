from __future__ import annotations

import base64
import logging
import os
import posixpath
import stat
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import formatdate
from typing import Iterator
from urllib.parse import quote

from ..config import settings
from ..errors import ErrorKind, FileManagerError
from ..schemas import FileContentResponse, FileDetailsResponse, FileItem, FileListResponse
from .fs import LocalFileSystem
from .mime import DIRECTORY_MIME, MimeClassifier
from .paths import PathResolver, clean_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawFile:
    name: str
    mime_type: str
    size: int
    headers: dict[str, str]
    body: Iterator[bytes] = field(repr=False)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _attachment_header(name: str) -> str:
    quoted = quote(name)
    if quoted != name:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{name}"'


class FileOps:
    def __init__(
        self,
        root: str,
        classifier: MimeClassifier | None = None,
        fs: LocalFileSystem | None = None,
        resolve_symlinks: bool | None = None,
        max_open_bytes: int | None = None,
    ):
        if resolve_symlinks is None:
            resolve_symlinks = settings.resolve_symlinks
        self.resolver = PathResolver(root, resolve_symlinks=resolve_symlinks)
        self.root = self.resolver.base_dir
        self.classifier = classifier or MimeClassifier()
        self.fs = fs or LocalFileSystem()
        self.max_open_bytes = max_open_bytes if max_open_bytes is not None else settings.max_open_bytes

    def safe_path(self, rel: str) -> str:
        return self.resolver.resolve(rel)

    def _describe(self, name: str, rel: str, full: str, st: os.stat_result) -> dict:
        is_dir = stat.S_ISDIR(st.st_mode)
        return {
            'name': name,
            'path': rel,
            'is_dir': is_dir,
            'file_type': 'directory' if is_dir else 'file',
            'size': st.st_size,
            'mod_time': datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            'permissions': stat.filemode(st.st_mode),
            'extension': '' if is_dir else os.path.splitext(name)[1],
            'mime_type': DIRECTORY_MIME if is_dir else self.classifier.classify(full),
        }

    def list_dir(self, rel: str) -> FileListResponse:
        target = self.safe_path(rel)
        if not self.fs.exists(target):
            raise FileManagerError(ErrorKind.NOT_FOUND, 'Directory not found')
        if not self.fs.is_dir(target):
            raise FileManagerError(ErrorKind.NOT_A_DIRECTORY)

        display = clean_path(rel)
        items: list[FileItem] = []
        total_size = 0
        for entry in self.fs.list_dir(target):
            if self.resolver.resolve_symlinks and entry.is_symlink() and not self.resolver.is_contained(entry.path):
                logger.debug('Skipping %s: link escapes base directory', entry.path)
                continue
            try:
                st = self.fs.stat(entry.path)
            except FileManagerError as exc:
                logger.debug('Skipping %s: %s', entry.path, exc.message)
                continue

            item = FileItem(**self._describe(entry.name, posixpath.join(display, entry.name), entry.path, st))
            if not item.is_dir:
                total_size += item.size
            items.append(item)

        return FileListResponse(
            path=display,
            items=items,
            total_items=len(items),
            total_size=total_size,
            request_time=_utcnow(),
        )

    def details(self, rel: str) -> FileDetailsResponse:
        target = self.safe_path(rel)
        st = self.fs.stat(target)
        display = clean_path(rel)
        name = os.path.basename(target)
        return FileDetailsResponse(
            full_path=target,
            request_time=_utcnow(),
            **self._describe(name, display, target, st),
        )

    def open_file(self, rel: str) -> FileContentResponse:
        target = self.safe_path(rel)
        st = self.fs.stat(target)
        if stat.S_ISDIR(st.st_mode):
            raise FileManagerError(ErrorKind.IS_A_DIRECTORY, 'Cannot open a directory')
        if st.st_size > self.max_open_bytes:
            raise FileManagerError(
                ErrorKind.TOO_LARGE,
                f'File too large to open ({st.st_size} bytes, limit {self.max_open_bytes})',
            )

        data = self.fs.read_all(target)
        mime_type = self.classifier.classify(target)
        if self.classifier.is_binary(mime_type):
            # raw bytes cannot travel inside a JSON string
            content, encoding = base64.b64encode(data).decode('ascii'), 'binary'
        else:
            content, encoding = data.decode('utf-8', errors='replace'), 'utf-8'

        return FileContentResponse(
            name=os.path.basename(target),
            path=clean_path(rel),
            content=content,
            size=len(data),
            mime_type=mime_type,
            encoding=encoding,
            request_time=_utcnow(),
        )

    def delete(self, rel: str) -> str:
        target = self.safe_path(rel)
        if target == self.root:
            raise FileManagerError(ErrorKind.INVALID_PATH, 'Refusing to delete the base directory')
        if not self.fs.exists(target):
            raise FileManagerError(ErrorKind.NOT_FOUND)
        self.fs.remove(target)
        logger.info('Deleted %s', target)
        return clean_path(rel)

    def raw(self, rel: str, chunk_size: int | None = None) -> RawFile:
        target = self.safe_path(rel)
        st = self.fs.stat(target)
        if stat.S_ISDIR(st.st_mode):
            raise FileManagerError(ErrorKind.IS_A_DIRECTORY, 'Cannot serve a directory')

        name = os.path.basename(target)
        mime_type = self.classifier.classify(target)
        headers = {
            'Content-Type': mime_type,
            'Content-Length': str(st.st_size),
            'Cache-Control': f'public, max-age={settings.raw_cache_max_age}',
            'Last-Modified': formatdate(st.st_mtime, usegmt=True),
        }
        if not self.classifier.is_inline(mime_type):
            headers['Content-Disposition'] = _attachment_header(name)

        body = self.fs.iter_chunks(target, chunk_size or settings.raw_chunk_size)
        return RawFile(name=name, mime_type=mime_type, size=st.st_size, headers=headers, body=body)
