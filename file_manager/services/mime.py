from __future__ import annotations

import os
from types import MappingProxyType
from typing import Mapping

DEFAULT_MIME = 'application/octet-stream'
DIRECTORY_MIME = 'inode/directory'

DEFAULT_MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        # text
        '.txt': 'text/plain',
        '.md': 'text/markdown',
        '.csv': 'text/csv',
        '.log': 'text/plain',
        '.conf': 'text/plain',
        '.cfg': 'text/plain',
        '.ini': 'text/plain',
        # code
        '.go': 'text/x-go',
        '.js': 'application/javascript',
        '.ts': 'application/typescript',
        '.py': 'text/x-python',
        '.java': 'text/x-java-source',
        '.c': 'text/x-c',
        '.cpp': 'text/x-c++',
        '.h': 'text/x-c',
        '.php': 'application/x-httpd-php',
        '.rb': 'text/x-ruby',
        '.sh': 'application/x-sh',
        '.bat': 'application/x-bat',
        '.ps1': 'application/x-powershell',
        # web
        '.html': 'text/html',
        '.htm': 'text/html',
        '.css': 'text/css',
        '.scss': 'text/x-scss',
        '.sass': 'text/x-sass',
        '.less': 'text/x-less',
        # data
        '.json': 'application/json',
        '.xml': 'application/xml',
        '.yaml': 'application/x-yaml',
        '.yml': 'application/x-yaml',
        '.toml': 'application/toml',
        # images
        '.png': 'image/png',
        '.jpg': 'image/jpeg',
        '.jpeg': 'image/jpeg',
        '.gif': 'image/gif',
        '.bmp': 'image/bmp',
        '.svg': 'image/svg+xml',
        '.webp': 'image/webp',
        '.ico': 'image/x-icon',
        # documents
        '.pdf': 'application/pdf',
        '.doc': 'application/msword',
        '.docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
        '.xls': 'application/vnd.ms-excel',
        '.xlsx': 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
        '.ppt': 'application/vnd.ms-powerpoint',
        '.pptx': 'application/vnd.openxmlformats-officedocument.presentationml.presentation',
        # archives
        '.zip': 'application/zip',
        '.tar': 'application/x-tar',
        '.gz': 'application/gzip',
        '.rar': 'application/x-rar-compressed',
        '.7z': 'application/x-7z-compressed',
        # audio / video
        '.mp3': 'audio/mpeg',
        '.wav': 'audio/wav',
        '.mp4': 'video/mp4',
        '.avi': 'video/x-msvideo',
        '.mov': 'video/quicktime',
        # executables
        '.exe': 'application/x-msdownload',
        '.msi': 'application/x-msi',
        '.deb': 'application/x-debian-package',
        '.rpm': 'application/x-rpm',
        '.dmg': 'application/x-apple-diskimage',
    }
)

_TEXT_PREFIXES = (
    'text/',
    'application/json',
    'application/xml',
    'application/javascript',
    'application/typescript',
    'application/x-yaml',
    'application/toml',
)

_INLINE_PREFIXES = (
    'image/',
    'video/',
    'audio/',
    'application/pdf',
    'text/',
    'application/json',
    'application/xml',
    'application/javascript',
)


class MimeClassifier:
    def __init__(self, table: Mapping[str, str] = DEFAULT_MIME_TYPES):
        self.table = table

    def classify(self, path: str) -> str:
        ext = os.path.splitext(path)[1].lower()
        return self.table.get(ext, DEFAULT_MIME)

    @staticmethod
    def is_binary(mime: str) -> bool:
        return not mime.startswith(_TEXT_PREFIXES)

    @staticmethod
    def is_inline(mime: str) -> bool:
        return mime.startswith(_INLINE_PREFIXES)
