from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import StreamingResponse

from ..config import settings
from ..errors import ErrorKind, FileManagerError
from ..schemas import DeleteResponse, ErrorResponse, FileContentResponse, FileDetailsResponse, FileListResponse
from ..services.file_ops import FileOps
from ..services.paths import validate_input

logger = logging.getLogger(__name__)

router = APIRouter(tags=['files'], responses={400: {'model': ErrorResponse}, 404: {'model': ErrorResponse}})
ops = FileOps(settings.base_path)

STATUS_BY_KIND = {
    ErrorKind.INVALID_PATH: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PERMISSION_DENIED: 403,
    ErrorKind.NOT_A_DIRECTORY: 400,
    ErrorKind.IS_A_DIRECTORY: 400,
    ErrorKind.TOO_LARGE: 413,
    ErrorKind.OTHER: 500,
}


def _http_error(exc: FileManagerError) -> HTTPException:
    return HTTPException(status_code=STATUS_BY_KIND[exc.kind], detail=exc.message)


def _checked(path: str, required: bool = True) -> str:
    if not path:
        if required:
            raise HTTPException(status_code=400, detail='File path is required')
        return '/'
    try:
        validate_input(path)
    except FileManagerError:
        raise HTTPException(status_code=400, detail='Invalid path provided')
    return path


@router.get('/list', response_model=FileListResponse)
def list_files(path: str = Query(default='/')):
    path = _checked(path, required=False)
    try:
        return ops.list_dir(path)
    except FileManagerError as exc:
        logger.warning('Error listing files for path %s: %s', path, exc.message)
        raise _http_error(exc)


@router.get('/details', response_model=FileDetailsResponse)
def file_details(path: str = Query(default='')):
    path = _checked(path)
    try:
        return ops.details(path)
    except FileManagerError as exc:
        logger.warning('Error getting file details for %s: %s', path, exc.message)
        raise _http_error(exc)


@router.get('/open', response_model=FileContentResponse)
def open_file(path: str = Query(default='')):
    path = _checked(path)
    try:
        return ops.open_file(path)
    except FileManagerError as exc:
        logger.warning('Error opening file %s: %s', path, exc.message)
        raise _http_error(exc)


@router.delete('/delete', response_model=DeleteResponse)
def delete_file(path: str = Query(default='')):
    path = _checked(path)
    try:
        deleted = ops.delete(path)
    except FileManagerError as exc:
        logger.warning('Error deleting file %s: %s', path, exc.message)
        raise _http_error(exc)
    return DeleteResponse(message='File deleted successfully', path=deleted)


@router.get('/raw', response_class=StreamingResponse)
def raw_file(path: str = Query(default='')):
    path = _checked(path)
    try:
        raw = ops.raw(path)
    except FileManagerError as exc:
        logger.warning('Error serving raw file %s: %s', path, exc.message)
        raise _http_error(exc)
    return StreamingResponse(raw.body, media_type=raw.mime_type, headers=raw.headers)
