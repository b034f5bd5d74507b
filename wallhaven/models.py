"""Wallhaven API 응답 모델"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ErrorResponse(_Frozen):
    """API 오류 응답 ({"error": "..."})"""

    error: str


class Thumbs(_Frozen):
    large: str
    original: str
    small: str


class Wallpaper(_Frozen):
    """검색 결과 항목"""

    id: str
    url: str
    short_url: str
    views: NonNegativeInt
    favorites: NonNegativeInt
    source: str = ""  # 원본 출처 URL (없으면 빈 문자열)
    purity: str  # sfw, sketchy, nsfw
    category: str  # general, anime, people
    dimension_x: int
    dimension_y: int
    resolution: str  # "1920x1080"
    ratio: str  # "1.78"
    file_size: NonNegativeInt  # bytes
    file_type: str  # "image/png"
    created_at: str  # "2018-10-31 01:23:10" (변환하지 않음)
    colors: list[str] = []
    path: str  # 이미지 직접 다운로드 URL
    thumbs: Thumbs

    @property
    def file_name(self) -> str:
        """다운로드 URL의 마지막 경로 (wallhaven-xxxxxx.jpg)

        경로가 비어 있으면 id + file_type 확장자로 대체
        """
        name = self.path.split("?")[0].split("/")[-1]
        if name:
            return name
        extension = self.file_type.split("/")[-1] or "jpg"
        return f"{self.id}.{extension}"


class Avatar(_Frozen):
    px200: str = Field(alias="200px")
    px128: str = Field(alias="128px")
    px32: str = Field(alias="32px")
    px20: str = Field(alias="20px")


class Uploader(_Frozen):
    username: str
    group: str
    avatar: Avatar


class Tag(_Frozen):
    """태그 상세"""

    id: int
    name: str
    alias: str = ""
    category_id: int
    category: str
    purity: str
    created_at: str


class WallpaperDetail(Wallpaper):
    """배경화면 상세 (업로더, 태그 포함)"""

    uploader: Uploader
    tags: list[Tag] = []


class QueryTag(_Frozen):
    """id: 검색일 때 meta.query 형식"""

    id: int
    tag: Optional[str] = None


class PageMeta(_Frozen):
    current_page: int
    last_page: int
    per_page: int
    total: int
    # 일반 검색은 문자열(또는 null), id: 검색은 {id, tag}
    query: Union[QueryTag, str, None] = None
    seed: Optional[str] = None

    @field_validator("per_page", mode="before")
    @classmethod
    def _per_page_from_string(cls, v):
        # API 문서상 정수지만 실제로는 "24" 처럼 문자열로 오는 경우가 있음
        if isinstance(v, str):
            return int(v.strip())
        return v


class SearchResponse(_Frozen):
    data: list[Wallpaper]
    meta: PageMeta


class WallpaperResponse(_Frozen):
    data: WallpaperDetail


class TagResponse(_Frozen):
    data: Tag


class UserSettings(_Frozen):
    """계정 검색 설정"""

    thumb_size: str
    per_page: str
    purity: list[str]
    categories: list[str]
    resolutions: list[str]
    aspect_ratios: list[str]
    toplist_range: str
    tag_blacklist: list[str]
    user_blacklist: list[str]


class UserSettingsResponse(_Frozen):
    data: UserSettings


class Collection(_Frozen):
    id: int
    label: str
    views: NonNegativeInt
    public: int  # 0/1
    count: NonNegativeInt


class CollectionsResponse(_Frozen):
    data: list[Collection]


ApiResponse = Union[
    ErrorResponse,
    SearchResponse,
    WallpaperResponse,
    TagResponse,
    UserSettingsResponse,
    CollectionsResponse,
]
