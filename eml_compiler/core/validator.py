"""Tag whitelist validation"""
from typing import Iterable

from ..common.constants import DEFAULT_VALID_TAGS
from ..common.errors import InvalidTagError
from ..dom.serializer import to_html


class TagValidator:
    """태그 이름이 화이트리스트에 있는지 검사 (대소문자 구분)"""

    def __init__(self, valid_tags: Iterable[str] = DEFAULT_VALID_TAGS):
        self.valid_tags = frozenset(valid_tags)

    def validate(self, tag: str) -> bool:
        return tag in self.valid_tags

    def check(self, element):
        """허용되지 않은 태그면 해당 요소의 마크업을 담아 InvalidTagError 발생"""
        if not self.validate(element.tag):
            raise InvalidTagError(element.tag, to_html(element))
