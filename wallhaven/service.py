"""명령 실행 (요청 → 디코딩 → 선택적 다운로드)"""

from pathlib import Path
from typing import Optional

from query import Command, RequestTarget

from .client import WallhavenClient
from .decoder import decode_response
from .models import ApiResponse, SearchResponse, Wallpaper
from .progress import DownloadProgress


class WallhavenService:
    def __init__(
        self,
        client: WallhavenClient,
        progress: Optional[DownloadProgress] = None,
    ):
        self.client = client
        self.progress = progress or DownloadProgress()

    async def execute(
        self,
        command: Command,
        target: RequestTarget,
        dest_dir: Optional[Path] = None,
    ) -> ApiResponse:
        """요청 1회 + 디코딩

        검색 결과이고 dest_dir가 있으면 결과 이미지를 순서대로 다운로드
        """
        raw = await self.client.fetch_body(target)
        response = decode_response(command, raw)

        if dest_dir is not None and isinstance(response, SearchResponse):
            await self.download_all(response.data, dest_dir)

        return response

    async def download_all(self, wallpapers: list[Wallpaper], dest_dir: Path) -> list[Path]:
        """하나씩 순차 다운로드, 실패하면 나머지는 중단"""
        saved = []
        for wallpaper in wallpapers:
            saved.append(await self.download(wallpaper, dest_dir))
        return saved

    async def download(self, wallpaper: Wallpaper, dest_dir: Path) -> Path:
        file_path = dest_dir / wallpaper.file_name
        label = wallpaper.path

        try:
            async with self.client.stream(wallpaper.path) as (total, chunks):
                downloaded = 0
                with open(file_path, "wb") as f:
                    async for chunk in chunks:
                        f.write(chunk)
                        downloaded += len(chunk)
                        self.progress.update(label, total, downloaded)
        except BaseException:
            self.progress.close()
            raise

        self.progress.done(label)
        return file_path
