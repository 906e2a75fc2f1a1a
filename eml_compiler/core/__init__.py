# Core compiler components
from .compiler import EMLCompiler, compile
from .dispatcher import AttributeDispatcher
from .validator import TagValidator

__all__ = [
    'EMLCompiler',
    'compile',
    'AttributeDispatcher',
    'TagValidator',
]
