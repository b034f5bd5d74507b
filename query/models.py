"""검색 쿼리/설정 데이터 모델"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ArgumentValidationError(ValueError):
    """입력값 형식 오류 (네트워크 요청 전에 발생)"""


class FileType(str, Enum):
    PNG = "png"
    JPG = "jpg"


class Sorting(str, Enum):
    DATE_ADDED = "date_added"
    RELEVANCE = "relevance"
    RANDOM = "random"
    VIEWS = "views"
    FAVORITES = "favorites"
    TOPLIST = "toplist"


class Order(str, Enum):
    ASC = "asc"
    DESC = "desc"


class TopRange(str, Enum):
    ONE_DAY = "1d"
    THREE_DAYS = "3d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1m"
    THREE_MONTHS = "3m"
    SIX_MONTHS = "6m"
    ONE_YEAR = "1y"


def parse_enum(enum_cls: type[Enum], value: str) -> Enum:
    """대소문자 구분 없이 enum 변환

    "TOPLIST" -> Sorting.TOPLIST
    """
    normalized = value.strip().lower()
    for member in enum_cls:
        if member.value == normalized:
            return member
    choices = ", ".join(m.value for m in enum_cls)
    raise ArgumentValidationError(f"invalid value '{value}' (choose from {choices})")


_MASK_RE = re.compile(r"[01]{3}")
_DIMENSION_RE = re.compile(r"[0-9]+x[0-9]+")
_COLOR_RE = re.compile(r"[0-9a-f]{6}")
_SEED_RE = re.compile(r"[a-zA-Z0-9]{6}")
_ALNUM_RE = re.compile(r"[a-zA-Z0-9]+")


class _Mask(BaseModel):
    """3비트 on/off 마스크 ("100" 형식으로 전송)"""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_string(cls, value: str):
        if not _MASK_RE.fullmatch(value or ""):
            raise ArgumentValidationError(
                f"invalid mask '{value}' (expected 3 characters of 0/1)"
            )
        bits = [c == "1" for c in value]
        return cls(**dict(zip(cls.model_fields, bits)))

    def __str__(self) -> str:
        return "".join("1" if getattr(self, name) else "0" for name in type(self).model_fields)


class CategoryMask(_Mask):
    """카테고리 (general/anime/people 순서)"""

    general: bool = True
    anime: bool = True
    people: bool = True


class PurityMask(_Mask):
    """등급 (sfw/sketchy/nsfw 순서, nsfw는 API 키 필요)"""

    sfw: bool = True
    sketchy: bool = False
    nsfw: bool = False


def parse_dimension(value: str) -> str:
    """'1920X1080' -> '1920x1080'"""
    normalized = value.strip().lower()
    if not _DIMENSION_RE.fullmatch(normalized):
        raise ArgumentValidationError(f"invalid dimension '{value}' (expected WxH)")
    return normalized


def parse_dimension_list(value: str) -> list[str]:
    """쉼표로 구분된 해상도/비율 목록 (빈 문자열 = 빈 목록)"""
    if not value or not value.strip():
        return []
    result = []
    for part in value.split(","):
        dim = parse_dimension(part)
        if dim not in result:
            result.append(dim)
    return result


def parse_color(value: str) -> str:
    normalized = value.strip().lower().lstrip("#")
    if not _COLOR_RE.fullmatch(normalized):
        raise ArgumentValidationError(f"invalid color '{value}' (expected 6 hex digits)")
    return normalized


def parse_seed(value: str) -> str:
    if not _SEED_RE.fullmatch(value):
        raise ArgumentValidationError(f"invalid seed '{value}' (expected 6 alphanumerics)")
    return value


def parse_wallpaper_id(value: str) -> str:
    if not _ALNUM_RE.fullmatch(value):
        raise ArgumentValidationError(f"invalid wallpaper id '{value}'")
    return value


def parse_tag_id(value: str) -> int:
    try:
        tag_id = int(value)
    except ValueError:
        raise ArgumentValidationError(f"invalid tag id '{value}'") from None
    if tag_id < 1:
        raise ArgumentValidationError(f"invalid tag id '{value}'")
    return tag_id


def parse_page(value: str) -> int:
    try:
        page = int(value)
    except ValueError:
        raise ArgumentValidationError(f"invalid page '{value}'") from None
    if page < 1:
        raise ArgumentValidationError(f"page must be >= 1 (got {page})")
    return page


class SearchQuery(BaseModel):
    """파싱된 검색어

    id가 있으면 다른 필드는 모두 비어 있음
    """

    model_config = ConfigDict(frozen=True)

    tags: Optional[tuple[str, ...]] = None  # +/- 접두사 그대로 유지
    username: Optional[str] = None
    id: Optional[str] = None
    filetype: Optional[FileType] = None
    like: Optional[str] = None

    def is_empty(self) -> bool:
        return not (self.tags or self.username or self.id or self.filetype or self.like)

    def to_query_string(self) -> str:
        """API q 파라미터 문자열로 변환"""
        if self.id is not None:
            return f"id:{self.id}"

        parts = list(self.tags or [])
        if self.username:
            parts.append(f"@{self.username}")
        if self.filetype:
            parts.append(f"type:{self.filetype.value}")
        if self.like:
            parts.append(f"like:{self.like}")
        return " ".join(parts)


class SearchPreferences(BaseModel):
    """검색/정렬/배경화면 설정 (CLI 입력값)"""

    model_config = ConfigDict(frozen=True)

    categories: CategoryMask = CategoryMask()
    purity: PurityMask = PurityMask()
    sorting: Sorting = Sorting.DATE_ADDED
    order: Order = Order.DESC
    top_range: TopRange = TopRange.ONE_MONTH
    at_least: Optional[str] = None
    resolutions: tuple[str, ...] = ()
    ratios: tuple[str, ...] = ()
    page: int = 1
    seed: Optional[str] = None

    @field_validator("page")
    @classmethod
    def _check_page(cls, v: int) -> int:
        if v < 1:
            raise ValueError("page must be >= 1")
        return v

    @field_validator("at_least")
    @classmethod
    def _check_at_least(cls, v: Optional[str]) -> Optional[str]:
        return parse_dimension(v) if v else None

    @field_validator("resolutions", "ratios")
    @classmethod
    def _check_dimensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(parse_dimension(d) for d in v)

    @field_validator("seed")
    @classmethod
    def _check_seed(cls, v: Optional[str]) -> Optional[str]:
        return parse_seed(v) if v else None
