"""Compiled DOM -> RenderTree 변환 (검증 없음)"""
from ..css import CSSParser
from ..dom import HTMLParser, find_child, inner_html
from ..dom.element import Element
from .render_node import RenderNode, RenderTree


def _convert(node) -> RenderNode:
    """자식을 제외한 노드 하나만 변환"""
    if not isinstance(node, Element):
        return RenderNode(kind="text", text=node.text)

    style = {}
    if "style" in node.attributes:
        style = CSSParser(node.attributes["style"]).body()
    return RenderNode(kind="tag", tag=node.tag, attributes=dict(node.attributes), style=style)


def to_render_node(node) -> RenderNode:
    root = _convert(node)
    stack = [(node, root)]
    while stack:
        source, target = stack.pop()
        for child in source.children:
            converted = _convert(child)
            target.children.append(converted)
            stack.append((child, converted))
    return root


def to_render_tree(body: Element) -> RenderTree:
    """컴파일된 body를 마크업으로 직렬화한 뒤 다시 파싱해 RenderTree 생성"""
    markup = inner_html(body)
    root = HTMLParser(markup, fragment=True).parse()
    parsed_body = find_child(root, "body")
    children = parsed_body.children if parsed_body is not None else []
    return RenderTree(
        markup=markup,
        children=[to_render_node(child) for child in children],
    )
