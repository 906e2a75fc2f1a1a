# Output adapter - 컴파일된 트리를 렌더러용 트리로 변환
from .render_node import RenderNode, RenderTree
from .adapter import to_render_node, to_render_tree

__all__ = ['RenderNode', 'RenderTree', 'to_render_node', 'to_render_tree']
