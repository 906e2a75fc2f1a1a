"""Unit tests for the render tree adapter."""

from eml_compiler.dom import Element, Text
from eml_compiler.render import RenderNode, RenderTree, to_render_node, to_render_tree


def build_body():
    body = Element("body", {}, None)
    view = Element("view", {"class": "a b", "style": "order:1;color: rgb(0, 0, 0)"}, body)
    view.children.append(Text("x", view))
    body.children.append(view)
    return body


class TestRenderAdapter:

    def test_render_tree_markup(self):
        tree = to_render_tree(build_body())
        assert isinstance(tree, RenderTree)
        assert tree.markup == '<view class="a b" style="order:1;color: rgb(0, 0, 0)">x</view>'

    def test_render_node_fields(self):
        node = to_render_tree(build_body()).children[0]
        assert isinstance(node, RenderNode)
        assert node.kind == "tag"
        assert node.tag == "view"
        assert node.class_names == ["a", "b"]
        assert node.style == {"order": "1", "color": "rgb(0, 0, 0)"}
        assert node.children[0] == RenderNode(kind="text", text="x")

    def test_empty_body(self):
        tree = to_render_tree(Element("body", {}, None))
        assert tree.markup == ""
        assert tree.children == []

    def test_text_node(self):
        node = to_render_node(Text("hi", None))
        assert node.kind == "text"
        assert repr(node) == "'hi'"

    def test_class_names_empty(self):
        assert RenderNode(kind="tag", tag="view").class_names == []
