"""Flexbox companion stylesheet

class 타입 applier가 만들어내는 토큰(flex-direction-row 등)에 대응하는
CSS 규칙을 생성한다. 렌더러는 이 스타일시트를 함께 로드해야 한다.
"""
from typing import Dict, List, Tuple

from ..appliers import TargetBuffer, all_definitions

# CSS 속성별로 허용되는 키워드 값
KEYWORD_VALUES: Dict[str, Tuple[str, ...]] = {
    "flex-direction": ("row", "row-reverse", "column", "column-reverse"),
    "flex-wrap": ("nowrap", "wrap", "wrap-reverse"),
    "justify-content": (
        "flex-start", "flex-end", "center",
        "space-between", "space-around", "space-evenly",
    ),
    "align-items": ("flex-start", "flex-end", "center", "baseline", "stretch"),
    "align-content": (
        "flex-start", "flex-end", "center",
        "space-between", "space-around", "stretch",
    ),
    "align-self": ("auto", "flex-start", "flex-end", "center", "baseline", "stretch"),
}


def class_properties() -> List[str]:
    """class 토큰으로 출력되는 CSS 속성 이름 (중복 제거, 정의 순서 유지)"""
    properties = []
    for definition in all_definitions():
        if definition.target_buffer is TargetBuffer.CLASS \
                and definition.css_name not in properties:
            properties.append(definition.css_name)
    return properties


def flexbox_rules() -> List[Tuple[str, str, str]]:
    """(class 이름, CSS 속성, 값) 목록"""
    rules = []
    for prop in class_properties():
        for value in KEYWORD_VALUES.get(prop, ()):
            rules.append((f"{prop}-{value}", prop, value))
    return rules


def flexbox_stylesheet() -> str:
    return "\n".join(
        f".{class_name} {{ {prop}: {value}; }}"
        for class_name, prop, value in flexbox_rules()
    ) + "\n"
