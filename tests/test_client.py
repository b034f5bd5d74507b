"""aiohttp 클라이언트 테스트 (로컬 테스트 서버)"""

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer as LocalServer

from query import Command, RequestTarget
from wallhaven import DecodeError, TransportError, WallhavenClient, decode_response

IMAGE = b"\x89PNG" + b"0" * 200_000


def make_app() -> web.Application:
    async def search(request):
        return web.json_response({"echo": dict(request.query)})

    async def unauthorized(request):
        return web.json_response({"error": "Unauthorized"}, status=401)

    async def image(request):
        return web.Response(body=IMAGE, content_type="image/png")

    async def broken_encoding(request):
        return web.Response(body=b'{"error": "\xff\xfe"}', content_type="application/json")

    app = web.Application()
    app.router.add_get("/api/v1/search", search)
    app.router.add_get("/api/v1/settings", unauthorized)
    app.router.add_get("/api/v1/tag/1", broken_encoding)
    app.router.add_get("/full/image.png", image)
    return app


@pytest.mark.asyncio
async def test_fetch_body_sends_params():
    async with LocalServer(make_app()) as server:
        async with WallhavenClient(base_url=str(server.make_url("/api/v1"))) as client:
            body = await client.fetch_body(RequestTarget("search", (("q", "+city -night"),)))

    assert b'"q": "+city -night"' in body


@pytest.mark.asyncio
async def test_fetch_body_returns_error_body():
    async with LocalServer(make_app()) as server:
        async with WallhavenClient(base_url=str(server.make_url("/api/v1"))) as client:
            body = await client.fetch_body(RequestTarget("settings"))

    assert b"Unauthorized" in body


@pytest.mark.asyncio
async def test_stream_image():
    async with LocalServer(make_app()) as server:
        async with WallhavenClient() as client:
            async with client.stream(str(server.make_url("/full/image.png"))) as (total, chunks):
                data = b"".join([chunk async for chunk in chunks])

    assert total == len(IMAGE)
    assert data == IMAGE


@pytest.mark.asyncio
async def test_stream_missing_file_raises():
    async with LocalServer(make_app()) as server:
        async with WallhavenClient() as client:
            with pytest.raises(TransportError) as exc:
                async with client.stream(str(server.make_url("/full/missing.png"))):
                    pass

    assert "404" in str(exc.value)


@pytest.mark.asyncio
async def test_connection_error_is_transport_error():
    async with WallhavenClient(base_url="http://127.0.0.1:1/api/v1", timeout=5) as client:
        with pytest.raises(TransportError):
            await client.fetch_body(RequestTarget("search"))


@pytest.mark.asyncio
async def test_requires_context_manager():
    with pytest.raises(TransportError):
        await WallhavenClient().fetch_body(RequestTarget("search"))


@pytest.mark.asyncio
async def test_non_utf8_body_becomes_decode_error():
    async with LocalServer(make_app()) as server:
        async with WallhavenClient(base_url=str(server.make_url("/api/v1"))) as client:
            body = await client.fetch_body(RequestTarget("tag/1"))

    assert body == b'{"error": "\xff\xfe"}'
    with pytest.raises(DecodeError):
        decode_response(Command.TAG_INFO, body)
