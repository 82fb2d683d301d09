from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import settings
from .routers import files
from .schemas import ErrorResponse
from .services.health import base_path_usage

logger = logging.getLogger(__name__)

_INDEX_HTML = '''<!DOCTYPE html>
<html>
<head>
    <title>File Manager API</title>
    <style>
        body { font-family: Arial, sans-serif; max-width: 800px; margin: 50px auto; padding: 20px; }
        .endpoint { background: #f5f5f5; padding: 10px; margin: 10px 0; border-radius: 5px; }
        .method { color: #007acc; font-weight: bold; }
    </style>
</head>
<body>
    <h1>File Manager API</h1>
    <h2>Available API Endpoints:</h2>
    <div class="endpoint"><span class="method">GET</span> /file/list?path=/ - List files and directories</div>
    <div class="endpoint"><span class="method">GET</span> /file/details?path=/file.txt - Get file details</div>
    <div class="endpoint"><span class="method">GET</span> /file/open?path=/file.txt - Read file content</div>
    <div class="endpoint"><span class="method">GET</span> /file/raw?path=/file.txt - Download raw file bytes</div>
    <div class="endpoint"><span class="method">DELETE</span> /file/delete?path=/file.txt - Delete file or directory</div>
    <p><a href="/file/list?path=/">List root directory</a></p>
</body>
</html>
'''


def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    _setup_logging()
    Path(settings.base_path).mkdir(parents=True, exist_ok=True)
    logger.info('File Manager v%s started on %s:%s', __version__, settings.host, settings.port)
    logger.info('Base path: %s', files.ops.root)
    try:
        yield
    finally:
        logger.info('File Manager shutting down')


app = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_methods=['GET', 'DELETE', 'OPTIONS'],
    allow_headers=['*'],
)


_PREFLIGHT_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, DELETE, OPTIONS',
    'Access-Control-Allow-Headers': '*',
}


def _error_response(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    body = ErrorResponse(error=message, code=status_code)
    return JSONResponse(body.model_dump(), status_code=status_code, headers=headers)


@app.middleware('http')
async def request_logging_middleware(request: Request, call_next):
    start = time.monotonic()
    logger.info('Started %s %s', request.method, request.url.path)
    if request.method == 'OPTIONS' and 'access-control-request-method' not in request.headers:
        response = Response(status_code=200, headers=_PREFLIGHT_HEADERS)
        logger.info('Completed %s %s %s', request.method, request.url.path, response.status_code)
        return response
    response = await call_next(request)
    elapsed_ms = (time.monotonic() - start) * 1000
    logger.info('Completed %s %s %s in %.1fms', request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else 'Request failed'
    return _error_response(message, exc.status_code, headers=getattr(exc, 'headers', None))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception('Unhandled error on %s %s', request.method, request.url.path, exc_info=exc)
    return _error_response('Internal server error', 500)


@app.get('/', response_class=HTMLResponse, include_in_schema=False)
def index():
    return HTMLResponse(_INDEX_HTML)


@app.get('/healthz')
def healthz():
    return {'ok': True, 'basePath': files.ops.root, 'disk': base_path_usage(files.ops.root)}


app.include_router(files.router, prefix='/file')
app.include_router(files.router, include_in_schema=False)


def run() -> None:
    import uvicorn

    uvicorn.run(
        'file_manager.main:app',
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout_sec,
    )


if __name__ == '__main__':
    run()
