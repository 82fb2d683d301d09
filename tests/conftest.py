from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from file_manager import main
from file_manager.routers import files
from file_manager.services.file_ops import FileOps


@pytest.fixture
def base_dir(tmp_path):
    root = tmp_path / 'data'
    root.mkdir()
    (root / 'notes.txt').write_text('hello world')
    (root / 'photo.png').write_bytes(b'\x89PNG\r\n\x1a\n' + b'\x00' * 12)
    (root / 'bundle.zip').write_bytes(b'PK\x03\x04' + b'\x00' * 6)
    (root / 'docs').mkdir()
    (root / 'docs' / 'readme.md').write_text('# readme')
    return root


@pytest.fixture
def ops(base_dir, monkeypatch):
    instance = FileOps(str(base_dir), resolve_symlinks=True, max_open_bytes=1024)
    monkeypatch.setattr(files, 'ops', instance)
    return instance


@pytest_asyncio.fixture
async def client(ops):
    transport = ASGITransport(app=main.app)
    async with AsyncClient(transport=transport, base_url='http://test') as c:
        yield c
