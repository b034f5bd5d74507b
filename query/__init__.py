"""검색 쿼리 생성 모듈"""

from .models import (
    ArgumentValidationError,
    CategoryMask,
    FileType,
    Order,
    PurityMask,
    SearchPreferences,
    SearchQuery,
    Sorting,
    TopRange,
)
from .parser import QueryParseError, InvalidFileTypeError, UnknownDirectiveError, parse_query
from .preferences import OverrideFlags, ResolvedPreferences, resolve_preferences
from .builder import (
    BASE_URL,
    Command,
    RequestTarget,
    build_search_request,
    build_wallpaper_request,
    build_tag_request,
    build_settings_request,
    build_collections_request,
)

__all__ = [
    "ArgumentValidationError",
    "CategoryMask",
    "FileType",
    "Order",
    "PurityMask",
    "SearchPreferences",
    "SearchQuery",
    "Sorting",
    "TopRange",
    "QueryParseError",
    "InvalidFileTypeError",
    "UnknownDirectiveError",
    "parse_query",
    "OverrideFlags",
    "ResolvedPreferences",
    "resolve_preferences",
    "BASE_URL",
    "Command",
    "RequestTarget",
    "build_search_request",
    "build_wallpaper_request",
    "build_tag_request",
    "build_settings_request",
    "build_collections_request",
]
