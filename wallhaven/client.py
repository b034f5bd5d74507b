import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import aiohttp

from query import BASE_URL, RequestTarget


class TransportError(Exception):
    """네트워크/DNS/TLS 오류 (재시도 안함)"""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Request Error - {url}: {reason}")


class WallhavenClient:
    CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: int = 30,
    ):
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self._session = aiohttp.ClientSession(
            timeout=self.timeout,
            headers={"Accept": "application/json"},
        )
        return self

    async def __aexit__(self, *args):
        if self._session:
            await self._session.close()

    def _require_session(self, url: str) -> aiohttp.ClientSession:
        if self._session is None:
            raise TransportError(url, "session not initialized, use async with")
        return self._session

    async def fetch_body(self, target: RequestTarget) -> bytes:
        """GET 요청 후 본문(bytes) 반환

        오류 상태 코드(401, 404 등)도 본문은 그대로 반환 (디코더가 error 형식 판별)
        텍스트 변환은 디코더에서 (잘못된 인코딩 = DecodeError)
        """
        url = target.to_url(self.base_url)
        session = self._require_session(url)
        try:
            async with session.get(url) as resp:
                return await resp.read()
        except asyncio.TimeoutError:
            raise TransportError(url, "timed out") from None
        except aiohttp.ClientError as e:
            raise TransportError(url, str(e) or type(e).__name__) from e

    @asynccontextmanager
    async def stream(self, url: str) -> AsyncIterator[tuple[Optional[int], AsyncIterator[bytes]]]:
        """이미지 스트리밍 다운로드

        (전체 크기 또는 None, 청크 iterator) 를 넘겨줌
        """
        session = self._require_session(url)

        async def chunks(resp: aiohttp.ClientResponse) -> AsyncIterator[bytes]:
            try:
                async for chunk in resp.content.iter_chunked(self.CHUNK_SIZE):
                    yield chunk
            except asyncio.TimeoutError:
                raise TransportError(url, "timed out while downloading") from None
            except aiohttp.ClientError as e:
                raise TransportError(url, f"error while downloading: {e}") from e

        try:
            async with session.get(url) as resp:
                if resp.status != 200:
                    raise TransportError(url, f"HTTP {resp.status}")
                yield resp.content_length, chunks(resp)
        except asyncio.TimeoutError:
            raise TransportError(url, "timed out") from None
        except aiohttp.ClientError as e:
            raise TransportError(url, str(e) or type(e).__name__) from e
