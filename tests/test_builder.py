"""요청 URL 생성 테스트"""

from urllib.parse import parse_qsl

import pytest

from query import (
    ArgumentValidationError,
    CategoryMask,
    OverrideFlags,
    PurityMask,
    SearchPreferences,
    Sorting,
    TopRange,
    build_collections_request,
    build_search_request,
    build_settings_request,
    build_tag_request,
    build_wallpaper_request,
    parse_query,
    resolve_preferences,
)


def resolved_for(api_key=None, flags=OverrideFlags(), **kwargs):
    prefs = SearchPreferences(
        categories=CategoryMask.from_string(kwargs.pop("categories", "111")),
        purity=PurityMask.from_string(kwargs.pop("purity", "100")),
        **kwargs,
    )
    return resolve_preferences(prefs, api_key, flags)


def test_end_to_end_search_without_key():
    target = build_search_request(resolved_for(), query=parse_query("+landscape -city"))
    assert target.path == "search"
    assert target.query_string == "categories=111&purity=100&page=1&order=desc&sorting=date_added&q=%2Blandscape+-city"
    assert target.to_url() == "https://wallhaven.cc/api/v1/search?" + target.query_string


def test_full_parameter_order():
    resolved = resolved_for(
        api_key="key123",
        flags=OverrideFlags(no_account_preferences=True),
        sorting=Sorting.TOPLIST,
        top_range=TopRange.ONE_WEEK,
        at_least="1920x1080",
        resolutions=["2560x1440", "3840x2160"],
        ratios=["16x9"],
        page=2,
        seed="AbC123",
    )
    target = build_search_request(resolved, query=parse_query("anime"))
    keys = [k for k, _ in target.params]
    assert keys == [
        "apikey", "categories", "purity", "page", "seed", "order", "sorting",
        "topRange", "atleast", "resolutions", "ratios", "q",
    ]
    params = dict(target.params)
    assert params["topRange"] == "1w"
    assert params["resolutions"] == "2560x1440,3840x2160"


def test_top_range_omitted_unless_toplist():
    resolved = resolved_for(sorting=Sorting.RELEVANCE, top_range=TopRange.ONE_MONTH)
    target = build_search_request(resolved, query=parse_query("city"))
    assert "topRange" not in dict(target.params)


def test_key_attached_and_account_preferences_left_out():
    target = build_search_request(resolved_for(api_key="key123"), query=parse_query("city"))
    params = dict(target.params)
    assert params["apikey"] == "key123"
    assert "categories" not in params
    assert "purity" not in params


def test_ignore_key_omits_apikey():
    resolved = resolved_for(api_key="key123", flags=OverrideFlags(ignore_api_key=True))
    params = dict(build_search_request(resolved, query=parse_query("city")).params)
    assert "apikey" not in params
    assert params["categories"] == "111"


def test_colors_win_over_query():
    target = build_search_request(resolved_for(), query=parse_query("city"), colors="0066CC")
    params = dict(target.params)
    assert params["colors"] == "0066cc"
    assert "q" not in params


def test_empty_query_omits_q():
    target = build_search_request(resolved_for(), query=parse_query(""))
    assert "q" not in dict(target.params)


def test_search_requires_method():
    with pytest.raises(ArgumentValidationError):
        build_search_request(resolved_for())


def test_query_round_trips_through_url():
    target = build_search_request(resolved_for(), query=parse_query("anime type:png @bob"))
    assert dict(parse_qsl(target.query_string))["q"] == "anime @bob type:png"


def test_wallpaper_request():
    assert build_wallpaper_request("94x38z").to_url() == "https://wallhaven.cc/api/v1/w/94x38z"
    assert build_wallpaper_request("94x38z", "key1").to_url() == "https://wallhaven.cc/api/v1/w/94x38z?apikey=key1"


def test_tag_request():
    assert build_tag_request(1).to_url("http://localhost/api/v1/") == "http://localhost/api/v1/tag/1"


def test_settings_request_requires_key():
    assert build_settings_request("key1").to_url() == "https://wallhaven.cc/api/v1/settings?apikey=key1"
    with pytest.raises(ArgumentValidationError):
        build_settings_request(None)


def test_collections_request():
    assert build_collections_request("bob").to_url() == "https://wallhaven.cc/api/v1/collections/bob"
    assert build_collections_request(api_key="key1").to_url() == "https://wallhaven.cc/api/v1/collections?apikey=key1"
    with pytest.raises(ArgumentValidationError):
        build_collections_request()
