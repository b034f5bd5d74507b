import asyncio
import argparse
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

QUERY_HELP = """검색어
    tagname       태그/키워드 퍼지 검색
    -tagname      태그 제외
    +tag1 +tag2   tag1, tag2 모두 포함
    +tag1 -tag2   tag1 포함, tag2 제외
    @username     유저 업로드
    id:123        정확한 태그 검색 (다른 조건과 결합 불가)
    type:png|jpg  파일 형식
    like:ID       비슷한 태그의 배경화면
예: "anime +city -mountain type:png"
"""

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def eprint(*args):
    print(*args, file=sys.stderr)


def _execute(command, target, dest_dir: Optional[Path] = None) -> int:
    """요청 실행 후 결과 JSON 출력"""
    from wallhaven import WallhavenClient, WallhavenService, to_json

    async def run():
        async with WallhavenClient() as client:
            service = WallhavenService(client)
            return await service.execute(command, target, dest_dir)

    response = asyncio.run(run())
    print(to_json(response))
    return EXIT_OK


def _api_key(ignore: bool = False) -> Optional[str]:
    from wallhaven import load_api_key

    return None if ignore else load_api_key()


def cmd_search(args) -> int:
    """배경화면 검색 (+ 다운로드)"""
    from query import (
        ArgumentValidationError,
        CategoryMask,
        Command,
        Order,
        OverrideFlags,
        PurityMask,
        SearchPreferences,
        Sorting,
        TopRange,
        build_search_request,
        parse_query,
        resolve_preferences,
    )
    from query.models import parse_color, parse_dimension, parse_dimension_list, parse_enum, parse_seed
    from wallhaven import load_api_key

    query = parse_query(args.query) if args.query is not None else None
    colors = parse_color(args.colors) if args.colors else None
    if query is None and colors is None:
        raise ArgumentValidationError("one of --query or --colors is required")
    if query is not None and colors is not None:
        eprint("색상 검색이 우선, 검색어는 무시됩니다.")

    prefs = SearchPreferences(
        categories=CategoryMask.from_string(args.categories),
        purity=PurityMask.from_string(args.purity),
        sorting=parse_enum(Sorting, args.sorting),
        order=parse_enum(Order, args.order),
        top_range=parse_enum(TopRange, args.toprange),
        at_least=parse_dimension(args.atleast) if args.atleast else None,
        resolutions=parse_dimension_list(args.resolutions),
        ratios=parse_dimension_list(args.ratios),
        page=args.page,
        seed=parse_seed(args.seed) if args.seed else None,
    )

    resolved = resolve_preferences(
        prefs,
        load_api_key(),
        OverrideFlags(
            ignore_api_key=args.ignore_api_key,
            no_account_preferences=args.no_account_preferences,
        ),
        on_notice=eprint,
    )
    target = build_search_request(resolved, query=query, colors=colors)

    dest_dir = None
    if args.path is not None:
        dest_dir = args.path
        dest_dir.mkdir(parents=True, exist_ok=True)

    return _execute(Command.SEARCH, target, dest_dir)


def cmd_wallpaper_info(args) -> int:
    """배경화면 상세 정보"""
    from query import Command, build_wallpaper_request
    from query.models import parse_wallpaper_id

    target = build_wallpaper_request(
        parse_wallpaper_id(args.id),
        api_key=_api_key(args.ignore_api_key),
    )
    return _execute(Command.WALLPAPER_INFO, target)


def cmd_tag_info(args) -> int:
    """태그 정보"""
    from query import Command, build_tag_request
    from query.models import parse_tag_id

    return _execute(Command.TAG_INFO, build_tag_request(parse_tag_id(args.id)))


def cmd_user_settings(args) -> int:
    """API 키 계정 설정"""
    from query import Command, build_settings_request

    return _execute(Command.USER_SETTINGS, build_settings_request(_api_key()))


def cmd_user_collections(args) -> int:
    """유저 컬렉션 목록"""
    from query import Command, build_collections_request

    target = build_collections_request(
        username=args.username,
        api_key=_api_key(args.ignore_api_key),
    )
    return _execute(Command.USER_COLLECTIONS, target)


def cmd_set_key(args) -> int:
    """API 키 저장 (검색하지 않고 종료)"""
    from wallhaven import key_file_path, write_api_key

    path = key_file_path()
    write_api_key(path, args.key)
    eprint(f"API 키 저장 완료: {path}")
    return EXIT_OK


def _page(value: str) -> int:
    from query.models import ArgumentValidationError, parse_page

    try:
        return parse_page(value)
    except ArgumentValidationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Wallhaven.cc API CLI (검색 설정에 따라 배경화면 검색/다운로드)",
    )
    subparsers = parser.add_subparsers(dest="command", help="실행할 명령")

    # search 명령
    search_parser = subparsers.add_parser(
        "search",
        help="배경화면 검색",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    search_parser.add_argument("-q", "--query", type=str, default=None, help=QUERY_HELP)
    search_parser.add_argument(
        "-C", "--colors",
        type=str,
        default=None,
        help="16진수 색상 검색 (예: 0066cc), 검색어보다 우선",
    )
    search_parser.add_argument(
        "-c", "--categories",
        type=str,
        default="111",
        help="카테고리 on(1)/off(0) (general/anime/people)",
    )
    search_parser.add_argument(
        "-x", "--purity",
        type=str,
        default="100",
        help="등급 on(1)/off(0) (sfw/sketchy/nsfw), NSFW는 API 키 필요",
    )
    search_parser.add_argument(
        "-s", "--sorting",
        type=str,
        default="date_added",
        help="정렬 (date_added, relevance, random, views, favorites, toplist)",
    )
    search_parser.add_argument(
        "-o", "--order",
        type=str,
        default="desc",
        help="정렬 순서 (asc, desc)",
    )
    search_parser.add_argument(
        "-t", "--toprange",
        type=str,
        default="1m",
        help="toplist 기간 (1d, 3d, 1w, 1m, 3m, 6m, 1y), sorting=toplist 일 때만 적용",
    )
    search_parser.add_argument(
        "-a", "--atleast",
        type=str,
        default="",
        help="최소 해상도 (예: 1920x1080)",
    )
    search_parser.add_argument(
        "-r", "--resolutions",
        type=str,
        default="",
        help="정확한 해상도 목록 (예: 1920x1080,1920x1200)",
    )
    search_parser.add_argument(
        "-R", "--ratios",
        type=str,
        default="",
        help="화면 비율 목록 (예: 16x9,16x10)",
    )
    search_parser.add_argument(
        "-P", "--page",
        type=_page,
        default=1,
        help="결과 페이지 (1..)",
    )
    search_parser.add_argument(
        "--seed",
        type=str,
        default=None,
        help="random 정렬 페이지 고정용 시드 (영숫자 6자)",
    )
    search_parser.add_argument(
        "-p", "--path",
        type=Path,
        default=None,
        help="배경화면 저장 디렉토리 (지정 시 결과 다운로드)",
    )
    search_parser.add_argument(
        "-n", "--no-account-preferences",
        action="store_true",
        help="API 키는 사용하되 계정 설정 대신 입력한 설정으로 검색",
    )
    search_parser.add_argument(
        "-i", "--ignore-api-key",
        action="store_true",
        help="API 키 없이 비회원으로 검색",
    )

    # wallpaper-info 명령
    wallpaper_parser = subparsers.add_parser("wallpaper-info", help="배경화면 상세 정보")
    wallpaper_parser.add_argument("id", type=str, help="배경화면 ID")
    wallpaper_parser.add_argument(
        "-i", "--ignore-api-key",
        action="store_true",
        help="API 키 없이 요청",
    )

    # tag-info 명령
    tag_parser = subparsers.add_parser("tag-info", help="태그 정보")
    tag_parser.add_argument("id", type=str, help="태그 ID")

    # user-settings 명령
    subparsers.add_parser("user-settings", help="API 키 계정 설정 조회")

    # user-collections 명령
    collections_parser = subparsers.add_parser("user-collections", help="유저 컬렉션 목록")
    collections_parser.add_argument(
        "username",
        type=str,
        nargs="?",
        default=None,
        help="유저명 (생략 시 API 키 소유자)",
    )
    collections_parser.add_argument(
        "-i", "--ignore-api-key",
        action="store_true",
        help="API 키 없이 요청 (공개 컬렉션만)",
    )

    # set-key 명령
    key_parser = subparsers.add_parser(
        "set-key",
        help="API 키 저장 (기본 ~/.wallhaven, WALLHAVEN_KEY_FILE 로 변경)",
    )
    key_parser.add_argument("key", type=str, help="API 키")

    return parser


COMMANDS = {
    "search": cmd_search,
    "wallpaper-info": cmd_wallpaper_info,
    "tag-info": cmd_tag_info,
    "user-settings": cmd_user_settings,
    "user-collections": cmd_user_collections,
    "set-key": cmd_set_key,
}


def main(argv: Optional[list[str]] = None) -> int:
    from query import ArgumentValidationError, QueryParseError
    from wallhaven import DecodeError, TransportError

    parser = build_parser()
    args = parser.parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return EXIT_USAGE

    try:
        return handler(args)
    except (QueryParseError, ArgumentValidationError) as e:
        eprint(f"입력 오류: {e}")
        return EXIT_USAGE
    except (TransportError, DecodeError) as e:
        eprint(e)
        return EXIT_FAILURE
    except OSError as e:
        eprint(f"Write Error - {e}")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
