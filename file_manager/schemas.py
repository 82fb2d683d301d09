from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileItem(_CamelModel):
    name: str
    path: str
    is_dir: bool
    file_type: str
    size: int
    mod_time: datetime
    permissions: str
    extension: str = ''
    mime_type: str


class FileListResponse(_CamelModel):
    success: bool = True
    path: str
    items: list[FileItem]
    total_items: int
    total_size: int
    request_time: datetime


class FileDetailsResponse(_CamelModel):
    success: bool = True
    name: str
    path: str
    full_path: str
    is_dir: bool
    file_type: str
    size: int
    mod_time: datetime
    mime_type: str
    permissions: str
    extension: str = ''
    request_time: datetime


class FileContentResponse(_CamelModel):
    success: bool = True
    name: str
    path: str
    content: str
    size: int
    mime_type: str
    encoding: str
    request_time: datetime


class DeleteResponse(_CamelModel):
    success: bool = True
    message: str
    path: str


class ErrorResponse(_CamelModel):
    success: bool = False
    error: str
    code: int
