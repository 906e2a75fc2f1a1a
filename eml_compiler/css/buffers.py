"""class / style 속성 버퍼 조작 헬퍼

두 버퍼 모두 중복 검사 없이 뒤에 덧붙이기만 한다. 같은 속성이 여러 번
쓰이면 텍스트 상에 모두 남고, CSS 해석 시 마지막 선언이 이긴다.
"""
from typing import List, Optional

CLASS_SEPARATOR = " "
STYLE_SEPARATOR = ";"


def _tokens(existing: Optional[str], separator: str) -> List[str]:
    if not existing:
        return []
    return [token for token in existing.split(separator) if token.strip()]


def add_to_class_name(existing: Optional[str], new_class: str) -> str:
    """공백으로 구분된 class 문자열 끝에 토큰 추가"""
    tokens = _tokens(existing, CLASS_SEPARATOR)
    tokens.append(new_class)
    return CLASS_SEPARATOR.join(tokens)


def add_to_inline_style(existing: Optional[str], new_style: str) -> str:
    """세미콜론으로 구분된 style 문자열 끝에 선언 추가"""
    declarations = _tokens(existing, STYLE_SEPARATOR)
    declarations.append(new_style)
    return STYLE_SEPARATOR.join(declarations)
