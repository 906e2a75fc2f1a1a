# EML Compiler Package
# EML 마크업을 검증하고 레이아웃 속성을 CSS class/style로 변환

__version__ = "1.0.0"

from .common import (
    CompilerConfig,
    load_config,
    EMLError,
    InvalidTagError,
    UnknownPropertyError,
    ConfigError,
)
from .core import EMLCompiler, compile
from .render import RenderNode, RenderTree
from .css import flexbox_stylesheet

__all__ = [
    'EMLCompiler',
    'compile',
    'CompilerConfig',
    'load_config',
    'EMLError',
    'InvalidTagError',
    'UnknownPropertyError',
    'ConfigError',
    'RenderNode',
    'RenderTree',
    'flexbox_stylesheet',
]
