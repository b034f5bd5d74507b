from .client import WallhavenClient, TransportError
from .decoder import DecodeError, decode_response
from .models import (
    ApiResponse,
    ErrorResponse,
    SearchResponse,
    WallpaperResponse,
    TagResponse,
    UserSettingsResponse,
    CollectionsResponse,
    Wallpaper,
    WallpaperDetail,
    Tag,
    PageMeta,
)
from .progress import DownloadProgress
from .service import WallhavenService
from .utils import InvalidCredentialError, load_api_key, write_api_key, key_file_path, to_json

__all__ = [
    "WallhavenClient",
    "TransportError",
    "DecodeError",
    "decode_response",
    "ApiResponse",
    "ErrorResponse",
    "SearchResponse",
    "WallpaperResponse",
    "TagResponse",
    "UserSettingsResponse",
    "CollectionsResponse",
    "Wallpaper",
    "WallpaperDetail",
    "Tag",
    "PageMeta",
    "DownloadProgress",
    "WallhavenService",
    "InvalidCredentialError",
    "load_api_key",
    "write_api_key",
    "key_file_path",
    "to_json",
]
