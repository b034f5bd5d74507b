"""API 키 유무/옵션에 따른 검색 설정 결정"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from .models import Order, SearchPreferences, Sorting

_API_KEY_RE = re.compile(r"[a-zA-Z0-9]+")

NOTICE_INVALID_KEY = "⚠️  API 키가 없거나 유효하지 않음. 비회원 권한과 입력한 설정으로 검색합니다."
NOTICE_IGNORE_KEY = "API 키 무시. 비회원 권한과 입력한 설정으로 검색합니다."
NOTICE_OVERRIDE = "계정 설정 대신 입력한 설정으로 검색합니다."


def is_valid_api_key(value: Optional[str]) -> bool:
    """비어 있지 않은 영숫자 문자열만 유효"""
    return bool(value) and _API_KEY_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class OverrideFlags:
    ignore_api_key: bool = False  # 키 없이 요청
    no_account_preferences: bool = False  # 키는 보내되 계정 설정 대신 입력값 사용


@dataclass(frozen=True)
class ResolvedPreferences:
    """실제로 전송할 설정 (None/빈 목록 = 전송 안 함)"""

    page: int
    order: Order
    sorting: Sorting
    api_key: Optional[str] = None
    categories: Optional[str] = None
    purity: Optional[str] = None
    top_range: Optional[str] = None
    seed: Optional[str] = None
    at_least: Optional[str] = None
    resolutions: tuple[str, ...] = ()
    ratios: tuple[str, ...] = ()


def resolve_preferences(
    prefs: SearchPreferences,
    api_key: Optional[str],
    flags: OverrideFlags = OverrideFlags(),
    on_notice: Optional[Callable[[str], None]] = None,
) -> ResolvedPreferences:
    """전송할 설정 결정

    키가 있고 override 옵션이 없으면 categories/purity/resolutions/ratios/topRange는
    계정 기본값에 맡기고 보내지 않는다.
    """
    has_key = is_valid_api_key(api_key)

    if on_notice:
        if not has_key:
            on_notice(NOTICE_INVALID_KEY)
        if flags.ignore_api_key:
            on_notice(NOTICE_IGNORE_KEY)
        elif flags.no_account_preferences:
            on_notice(NOTICE_OVERRIDE)

    use_given = not has_key or flags.ignore_api_key or flags.no_account_preferences

    top_range = None
    if use_given and prefs.sorting == Sorting.TOPLIST:
        top_range = prefs.top_range.value

    return ResolvedPreferences(
        page=prefs.page,
        order=prefs.order,
        sorting=prefs.sorting,
        api_key=api_key if has_key and not flags.ignore_api_key else None,
        categories=str(prefs.categories) if use_given else None,
        purity=str(prefs.purity) if use_given else None,
        top_range=top_range,
        seed=prefs.seed,
        at_least=prefs.at_least.lower() if prefs.at_least else None,
        resolutions=tuple(r.lower() for r in prefs.resolutions) if use_given else (),
        ratios=tuple(r.lower() for r in prefs.ratios) if use_given else (),
    )
