"""다운로드 진행률 표시"""

from typing import Optional

from tqdm import tqdm


class DownloadProgress:
    """파일 하나당 tqdm 막대 하나"""

    def __init__(self, leave: bool = True):
        self.leave = leave
        self._bar: Optional[tqdm] = None

    def update(self, label: str, total: Optional[int], downloaded: int):
        if self._bar is None:
            self._bar = tqdm(
                total=total,
                desc=label,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                leave=self.leave,
            )
        self._bar.update(downloaded - self._bar.n)

    def done(self, label: str):
        if self._bar is not None:
            self._bar.set_description(f"Downloaded {label}")
            self._bar.close()
            self._bar = None

    def close(self):
        """실패한 다운로드의 막대 정리 (완료 표시 없이)"""
        if self._bar is not None:
            self._bar.close()
            self._bar = None
