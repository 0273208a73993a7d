import pytest
from aiohttp import web
from aiohttp.test_utils import make_mocked_request

from server import announce, log_requests
from config import AppConfig


@pytest.mark.parametrize('headers, expected', [
    ({}, []),
    ({'x-user': 'alice'}, ['  Authenticated User: alice']),
    ({'x-email': 'alice@example.com'}, ['  Email: alice@example.com']),
    ({'x-user': 'alice', 'x-email': 'alice@example.com'},
     ['  Authenticated User: alice', '  Email: alice@example.com']),
])
async def test_log_requests_always_calls_next(capsys, headers, expected):
    calls = []
    sentinel = web.Response(text='ok')

    async def handler(request):
        calls.append(request)
        return sentinel

    request = make_mocked_request('GET', '/somewhere', headers=headers)
    resp = await log_requests(request, handler)

    assert resp is sentinel
    assert calls == [request]

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(' - GET /somewhere')
    assert lines[1:] == expected


async def test_log_requests_passes_errors_through(capsys):
    async def handler(request):
        raise web.HTTPNotFound()

    request = make_mocked_request('POST', '/missing')
    with pytest.raises(web.HTTPNotFound):
        await log_requests(request, handler)

    assert capsys.readouterr().out.rstrip().endswith(' - POST /missing')


def test_announce(capsys):
    announce(AppConfig(port=8123))('======== Running on http://0.0.0.0:8123 ========')

    assert capsys.readouterr().out.splitlines() == [
        'Demo app running on port 8123',
        'This app has NO built-in authentication!',
        'Authentication is handled by nginx + OAuth2 Proxy'
    ]


async def test_log_requests_undecodable_header(capsys):
    async def handler(request):
        return web.Response(text='ok')

    request = make_mocked_request('GET', '/', headers={'x-user': 'Jos\udce9'})
    resp = await log_requests(request, handler)

    assert resp.status == 200
    assert capsys.readouterr().out.splitlines()[1] == '  Authenticated User: José'
