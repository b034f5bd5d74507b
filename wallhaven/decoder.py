"""API 응답 디코딩

1. {"error": "..."} 형식이면 ErrorResponse 반환 (실패가 아닌 정상 결과)
2. 아니면 명령별 응답 형식으로 파싱, 실패하면 DecodeError
"""

import json
from typing import Any, Optional, Union

from pydantic import BaseModel, ValidationError

from query import Command

from .models import (
    ApiResponse,
    CollectionsResponse,
    ErrorResponse,
    SearchResponse,
    TagResponse,
    UserSettingsResponse,
    WallpaperResponse,
)

RESPONSE_MODELS: dict[Command, type[BaseModel]] = {
    Command.SEARCH: SearchResponse,
    Command.WALLPAPER_INFO: WallpaperResponse,
    Command.TAG_INFO: TagResponse,
    Command.USER_SETTINGS: UserSettingsResponse,
    Command.USER_COLLECTIONS: CollectionsResponse,
}


class DecodeError(Exception):
    """응답이 오류 형식도, 기대한 형식도 아님 (API 변경 등)"""

    def __init__(self, command: Command, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Decode Error ({command.value}) - {reason}")


def _try_validate(model: type[BaseModel], payload: Any) -> tuple[Optional[BaseModel], Optional[str]]:
    """(결과, 오류 메시지) 반환"""
    try:
        return model.model_validate(payload), None
    except ValidationError as e:
        return None, str(e)


def decode_response(command: Command, raw: Union[str, bytes]) -> ApiResponse:
    """응답 본문을 명령에 맞는 모델로 변환

    bytes 본문은 json.loads가 UTF-8로 해석, 깨진 인코딩도 DecodeError
    """
    try:
        payload = json.loads(raw)
    except UnicodeDecodeError as e:
        raise DecodeError(command, f"invalid encoding: {e}") from e
    except json.JSONDecodeError as e:
        raise DecodeError(command, f"invalid JSON: {e}") from e

    error, _ = _try_validate(ErrorResponse, payload)
    if error is not None:
        return error

    result, reason = _try_validate(RESPONSE_MODELS[command], payload)
    if result is None:
        raise DecodeError(command, reason)
    return result
