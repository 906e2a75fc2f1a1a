# DOM (Document Object Model) components
from .element import Element
from .text import Text
from .html_parser import HTMLParser
from .serializer import to_html, inner_html
from .tree_utils import print_tree, tree_to_list, find_child, descendants

__all__ = [
    'Element',
    'Text',
    'HTMLParser',
    'to_html',
    'inner_html',
    'print_tree',
    'tree_to_list',
    'find_child',
    'descendants',
]
