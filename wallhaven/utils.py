import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from query import ArgumentValidationError
from query.preferences import is_valid_api_key

ENV_API_KEY = "WALLHAVEN_API_KEY"
ENV_KEY_FILE = "WALLHAVEN_KEY_FILE"
DEFAULT_KEY_FILE = Path.home() / ".wallhaven"


class InvalidCredentialError(ArgumentValidationError):
    """저장하려는 API 키 형식 오류"""


def key_file_path() -> Path:
    """API 키 파일 경로 (WALLHAVEN_KEY_FILE 환경변수로 변경 가능)"""
    custom = os.getenv(ENV_KEY_FILE)
    return Path(custom).expanduser() if custom else DEFAULT_KEY_FILE


def read_api_key(path: Path) -> Optional[str]:
    """API 키 파일 읽기

    파일이 없거나 읽을 수 없거나 형식이 잘못되면 None (키 없음으로 처리)
    """
    try:
        value = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None
    return value if is_valid_api_key(value) else None


def write_api_key(path: Path, value: str):
    """API 키 파일 저장 (비어 있지 않은 영숫자만 허용)"""
    value = value.strip()
    if not is_valid_api_key(value):
        raise InvalidCredentialError("API key must be a non-empty alphanumeric string")
    path.write_text(value + "\n", encoding="utf-8")


def load_api_key(path: Optional[Path] = None) -> Optional[str]:
    """환경변수 우선, 없으면 키 파일"""
    env_value = os.getenv(ENV_API_KEY)
    if env_value is not None and env_value.strip():
        value = env_value.strip()
        return value if is_valid_api_key(value) else None
    return read_api_key(path or key_file_path())


def to_json(response: BaseModel) -> str:
    """API 응답 모델을 JSON 문자열로 (원래 필드명 유지)"""
    return response.model_dump_json(by_alias=True)
