from __future__ import annotations

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_returns_camel_case_listing(client: AsyncClient):
    resp = await client.get('/file/list', params={'path': '/'})

    assert resp.status_code == 200
    data = resp.json()
    assert data['success'] is True
    assert data['totalItems'] == 4
    assert 'requestTime' in data
    names = {item['name'] for item in data['items']}
    assert names == {'notes.txt', 'photo.png', 'bundle.zip', 'docs'}
    item = next(i for i in data['items'] if i['name'] == 'notes.txt')
    assert item['isDir'] is False
    assert item['mimeType'] == 'text/plain'
    assert item['path'] == '/notes.txt'


@pytest.mark.asyncio
async def test_bare_routes_are_served_too(client: AsyncClient):
    resp = await client.get('/list', params={'path': 'docs'})

    assert resp.status_code == 200
    assert resp.json()['items'][0]['path'] == 'docs/readme.md'


@pytest.mark.asyncio
async def test_details_without_path_is_400(client: AsyncClient):
    resp = await client.get('/file/details')

    assert resp.status_code == 400
    assert resp.json() == {'success': False, 'error': 'File path is required', 'code': 400}


@pytest.mark.asyncio
async def test_missing_entry_is_404(client: AsyncClient):
    resp = await client.get('/file/details', params={'path': '/missing.txt'})

    assert resp.status_code == 404
    assert resp.json() == {'success': False, 'error': 'File or directory not found', 'code': 404}


@pytest.mark.asyncio
async def test_traversal_is_400(client: AsyncClient):
    resp = await client.get('/file/list', params={'path': '../etc'})

    assert resp.status_code == 400
    assert resp.json()['success'] is False


@pytest.mark.asyncio
async def test_open_returns_content(client: AsyncClient):
    resp = await client.get('/file/open', params={'path': '/docs/readme.md'})

    assert resp.status_code == 200
    data = resp.json()
    assert data['content'] == '# readme'
    assert data['encoding'] == 'utf-8'
    assert data['mimeType'] == 'text/markdown'


@pytest.mark.asyncio
async def test_open_too_large_is_413(client: AsyncClient, base_dir):
    (base_dir / 'large.log').write_bytes(b'x' * 4096)

    resp = await client.get('/file/open', params={'path': '/large.log'})

    assert resp.status_code == 413
    assert resp.json()['code'] == 413


@pytest.mark.asyncio
async def test_raw_image_is_inline(client: AsyncClient, base_dir):
    resp = await client.get('/file/raw', params={'path': '/photo.png'})

    assert resp.status_code == 200
    assert resp.content == (base_dir / 'photo.png').read_bytes()
    assert resp.headers['content-type'] == 'image/png'
    assert resp.headers['cache-control'] == 'public, max-age=3600'
    assert resp.headers['content-length'] == str(len(resp.content))
    assert 'last-modified' in resp.headers
    assert 'content-disposition' not in resp.headers


@pytest.mark.asyncio
async def test_raw_zip_is_attachment(client: AsyncClient):
    resp = await client.get('/file/raw', params={'path': '/bundle.zip'})

    assert resp.status_code == 200
    assert resp.headers['content-disposition'] == 'attachment; filename="bundle.zip"'


@pytest.mark.asyncio
async def test_raw_directory_is_400(client: AsyncClient):
    resp = await client.get('/file/raw', params={'path': '/docs'})

    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_delete_then_missing(client: AsyncClient, base_dir):
    resp = await client.delete('/file/delete', params={'path': '/docs'})

    assert resp.status_code == 200
    assert resp.json() == {'success': True, 'message': 'File deleted successfully', 'path': '/docs'}
    assert not (base_dir / 'docs').exists()

    again = await client.delete('/file/delete', params={'path': '/docs'})
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_wrong_method_is_405_with_error_body(client: AsyncClient):
    resp = await client.get('/file/delete', params={'path': '/notes.txt'})

    assert resp.status_code == 405
    assert resp.json()['code'] == 405


@pytest.mark.asyncio
async def test_cors_preflight_is_answered(client: AsyncClient):
    resp = await client.options(
        '/file/delete',
        headers={'Origin': 'http://localhost:3000', 'Access-Control-Request-Method': 'DELETE'},
    )

    assert resp.status_code == 200
    assert resp.headers['access-control-allow-origin'] == '*'


@pytest.mark.asyncio
async def test_cors_preflight_allows_any_requested_header(client: AsyncClient):
    resp = await client.options(
        '/file/list',
        headers={
            'Origin': 'http://localhost:3000',
            'Access-Control-Request-Method': 'GET',
            'Access-Control-Request-Headers': 'x-requested-with',
        },
    )

    assert resp.status_code == 200
    assert resp.headers['access-control-allow-origin'] == '*'


@pytest.mark.asyncio
async def test_bare_options_request_is_answered(client: AsyncClient):
    resp = await client.options('/file/list')

    assert resp.status_code == 200
    assert resp.headers['access-control-allow-origin'] == '*'


@pytest.mark.asyncio
async def test_nul_byte_in_path_is_400(client: AsyncClient):
    resp = await client.get('/file/details', params={'path': 'a\x00b'})

    assert resp.status_code == 400
    assert resp.json() == {'success': False, 'error': 'Invalid path provided', 'code': 400}


@pytest.mark.asyncio
async def test_cors_header_on_simple_request(client: AsyncClient):
    resp = await client.get('/file/list', headers={'Origin': 'http://localhost:3000'})

    assert resp.headers['access-control-allow-origin'] == '*'


@pytest.mark.asyncio
async def test_healthz_reports_base_path(client: AsyncClient, ops):
    resp = await client.get('/healthz')

    assert resp.status_code == 200
    data = resp.json()
    assert data['ok'] is True
    assert data['basePath'] == ops.root
    assert data['disk']['total_gb'] >= 0


@pytest.mark.asyncio
async def test_index_page_lists_endpoints(client: AsyncClient):
    resp = await client.get('/')

    assert resp.status_code == 200
    assert '/file/list' in resp.text
