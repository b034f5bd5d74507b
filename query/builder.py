"""API 요청 URL 생성"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote, urlencode

from .models import ArgumentValidationError, SearchQuery
from .preferences import ResolvedPreferences

BASE_URL = "https://wallhaven.cc/api/v1"


class Command(str, Enum):
    SEARCH = "search"
    WALLPAPER_INFO = "wallpaper-info"
    TAG_INFO = "tag-info"
    USER_SETTINGS = "user-settings"
    USER_COLLECTIONS = "user-collections"


@dataclass(frozen=True)
class RequestTarget:
    """요청 경로 + 쿼리 파라미터 (순서 고정)"""

    path: str
    params: tuple[tuple[str, str], ...] = ()

    @property
    def query_string(self) -> str:
        return urlencode(self.params)

    def to_url(self, base_url: str = BASE_URL) -> str:
        url = f"{base_url.rstrip('/')}/{self.path}"
        if self.params:
            url += "?" + self.query_string
        return url


def _api_key_params(api_key: Optional[str]) -> list[tuple[str, str]]:
    return [("apikey", api_key)] if api_key else []


def build_search_request(
    resolved: ResolvedPreferences,
    query: Optional[SearchQuery] = None,
    colors: Optional[str] = None,
) -> RequestTarget:
    """검색 요청 생성

    colors가 있으면 query는 무시된다. 둘 다 없으면 오류.
    """
    if colors is None and query is None:
        raise ArgumentValidationError("either a query or colors is required")

    params = _api_key_params(resolved.api_key)

    if resolved.categories is not None:
        params.append(("categories", resolved.categories))
    if resolved.purity is not None:
        params.append(("purity", resolved.purity))

    params.append(("page", str(resolved.page)))
    if resolved.seed:
        params.append(("seed", resolved.seed))
    params.append(("order", resolved.order.value))
    params.append(("sorting", resolved.sorting.value))

    if resolved.top_range:
        params.append(("topRange", resolved.top_range.lower()))
    if resolved.at_least:
        params.append(("atleast", resolved.at_least.lower()))
    if resolved.resolutions:
        params.append(("resolutions", ",".join(resolved.resolutions).lower()))
    if resolved.ratios:
        params.append(("ratios", ",".join(resolved.ratios).lower()))

    # 검색 방법 (colors 우선)
    if colors is not None:
        params.append(("colors", colors.lower()))
    else:
        q = query.to_query_string()
        if q:
            params.append(("q", q))

    return RequestTarget(path="search", params=tuple(params))


def build_wallpaper_request(wallpaper_id: str, api_key: Optional[str] = None) -> RequestTarget:
    """배경화면 상세 (NSFW는 API 키 필요)"""
    return RequestTarget(
        path=f"w/{quote(wallpaper_id, safe='')}",
        params=tuple(_api_key_params(api_key)),
    )


def build_tag_request(tag_id: int) -> RequestTarget:
    return RequestTarget(path=f"tag/{tag_id}")


def build_settings_request(api_key: Optional[str]) -> RequestTarget:
    """계정 설정 (API 키 필수)"""
    if not api_key:
        raise ArgumentValidationError("user settings require an API key")
    return RequestTarget(path="settings", params=(("apikey", api_key),))


def build_collections_request(
    username: Optional[str] = None,
    api_key: Optional[str] = None,
) -> RequestTarget:
    """컬렉션 목록

    username이 없으면 API 키 소유자의 컬렉션 (비공개 포함)
    """
    params = tuple(_api_key_params(api_key))
    if username:
        return RequestTarget(path=f"collections/{quote(username, safe='')}", params=params)
    if not api_key:
        raise ArgumentValidationError("own collections require an API key (or give a username)")
    return RequestTarget(path="collections", params=params)
