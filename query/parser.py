"""검색어 문법 파서

    tagname         태그/키워드 퍼지 검색
    -tagname        태그 제외
    +tag1 +tag2     tag1, tag2 모두 포함
    @username       해당 유저 업로드
    id:123          정확한 태그 검색 (다른 조건과 결합 불가)
    type:png|jpg    파일 형식
    like:ID         비슷한 태그의 배경화면
"""

from typing import Optional

from .models import FileType, SearchQuery


class QueryParseError(ValueError):
    """검색어 문법 오류"""


class InvalidFileTypeError(QueryParseError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid file type '{value}' (expected png or jpg)")


class UnknownDirectiveError(QueryParseError):
    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"unrecognized directive '{key}:{value}'")


def parse_query(raw: str) -> SearchQuery:
    """검색어 문자열을 SearchQuery로 변환

    공백 단위로 토큰을 나누고, 'id:'가 나오면 그때까지의 결과를 버리고 즉시 반환
    """
    tags: list[str] = []
    username: Optional[str] = None
    filetype: Optional[FileType] = None
    like: Optional[str] = None

    for token in raw.split(" "):
        if not token:
            continue

        parts = token.split(":")
        if len(parts) == 2:
            key, value = parts
            if key == "id":
                return SearchQuery(id=value)
            elif key == "type":
                if value not in ("png", "jpg"):
                    raise InvalidFileTypeError(value)
                filetype = FileType(value)
            elif key == "like":
                like = value
            else:
                raise UnknownDirectiveError(key, value)
        elif token.startswith("@"):
            # 여러 번 나오면 마지막 값 사용
            username = token[1:]
        else:
            tags.append(token)

    return SearchQuery(
        tags=tuple(tags) or None,
        username=username,
        filetype=filetype,
        like=like,
    )
