# CSS components - class/style 버퍼, inline style 파서, flexbox 스타일시트
from .buffers import add_to_class_name, add_to_inline_style
from .css_parser import CSSParser
from .stylesheet import flexbox_rules, flexbox_stylesheet

__all__ = [
    'add_to_class_name',
    'add_to_inline_style',
    'CSSParser',
    'flexbox_rules',
    'flexbox_stylesheet',
]
