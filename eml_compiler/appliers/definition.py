"""Applier definitions

EML 레이아웃 속성 하나를 CSS class 토큰 또는 inline style 선언으로 바꾸는
규칙을 데이터로 표현한다. 정의는 불변이며 모든 컴파일 호출이 공유한다.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Dict, Iterable, Optional, Union

from ..css.buffers import add_to_class_name, add_to_inline_style

logger = logging.getLogger(__name__)

DefaultValue = Union[str, int]


class Category(Enum):
    FLEXBOX = "flexbox"
    MARGIN = "margin"
    PADDING = "padding"
    WIDTH = "width"
    HEIGHT = "height"


class TargetBuffer(Enum):
    STYLE = "style"
    CLASS = "class"


@dataclass(frozen=True)
class ApplierDefinition:
    """속성 하나의 변환 규칙

    css_name은 TargetBuffer.CLASS일 때 class 토큰의 접두사,
    TargetBuffer.STYLE일 때 CSS 속성 이름으로 쓰인다.
    """

    attribute_key: str
    default_value: DefaultValue
    category: Category
    target_buffer: TargetBuffer
    css_name: str

    def render(self, value) -> str:
        """값을 class 토큰 또는 style 선언 문자열로 변환"""
        if self.target_buffer is TargetBuffer.CLASS:
            return f"{self.css_name}-{value}"
        return f"{self.css_name}:{value}"


def apply_definition(definition: ApplierDefinition, element,
                     default_value: Optional[DefaultValue] = None) -> None:
    """element에서 속성을 읽어 제거하고 변환 결과를 class/style 버퍼에 추가

    속성이 없거나 빈 문자열이면 기본값을 사용한다.
    """
    if default_value is None:
        default_value = definition.default_value

    value = element.attributes.pop(definition.attribute_key, None) or default_value
    output = definition.render(value)

    if definition.target_buffer is TargetBuffer.CLASS:
        element.attributes["class"] = add_to_class_name(
            element.attributes.get("class"), output)
    else:
        element.attributes["style"] = add_to_inline_style(
            element.attributes.get("style"), output)
    logger.debug("applied %s -> %s on %r", definition.attribute_key, output, element)


Applier = Callable[..., None]


class ApplierSet:
    """카테고리 하나에 속한 applier 함수 묶음

    attribute 이름 -> applier 함수 테이블을 초기화 시 한 번 만든다.
    """

    def __init__(self, category: Category, definitions: Iterable[ApplierDefinition]):
        self.category = category
        self.definitions: Dict[str, ApplierDefinition] = {}
        self.appliers: Dict[str, Applier] = {}
        for definition in definitions:
            if definition.category is not category:
                raise ValueError(
                    f"definition '{definition.attribute_key}' belongs to "
                    f"{definition.category.value}, not {category.value}"
                )
            self.definitions[definition.attribute_key] = definition
            self.appliers[definition.attribute_key] = partial(apply_definition, definition)

    def handles(self, attribute: str) -> bool:
        return attribute in self.appliers

    def apply(self, element, attribute: str, default_value: Optional[DefaultValue] = None) -> bool:
        """속성을 처리했으면 True, 이 카테고리 소관이 아니면 False"""
        applier = self.appliers.get(attribute)
        if applier is None:
            return False
        applier(element, default_value)
        return True

    def __contains__(self, attribute) -> bool:
        return self.handles(attribute)

    def __iter__(self):
        return iter(self.definitions.values())

    def __repr__(self) -> str:
        return f"ApplierSet({self.category.value}, {list(self.definitions)})"
