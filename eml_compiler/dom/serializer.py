"""DOM 트리를 다시 마크업 문자열로 직렬화"""
import html

from .element import Element
from .html_parser import HTMLParser


def _attributes_to_html(attributes):
    return "".join(
        f' {name}="{html.escape(str(value), quote=True)}"'
        for name, value in attributes.items()
    )


def to_html(node) -> str:
    """노드 자신을 포함한 outer markup 반환"""
    out = []
    # (노드, 닫는 태그 차례인지)
    stack = [(node, False)]
    while stack:
        current, closing = stack.pop()
        if closing:
            out.append(f"</{current.tag}>")
            continue
        if not isinstance(current, Element):
            out.append(html.escape(current.text, quote=False))
            continue

        out.append(f"<{current.tag}{_attributes_to_html(current.attributes)}>")
        if current.tag in HTMLParser.SELF_CLOSING_TAGS:
            continue
        stack.append((current, True))
        for child in reversed(current.children):
            stack.append((child, False))
    return "".join(out)


def inner_html(node) -> str:
    """자식 노드들만 직렬화 (body 내용 추출용)"""
    return "".join(to_html(child) for child in node.children)
