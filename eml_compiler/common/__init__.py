# Common utilities and constants shared across packages
from .constants import (
    DEFAULT_VALID_TAGS,
    PASSTHROUGH_ATTRIBUTES,
    DEFAULT_TRACE_FILE,
    MAX_TRACE_EVENTS,
)
from .errors import EMLError, InvalidTagError, UnknownPropertyError, ConfigError
from .config import CompilerConfig, load_config

__all__ = [
    'DEFAULT_VALID_TAGS',
    'PASSTHROUGH_ATTRIBUTES',
    'DEFAULT_TRACE_FILE',
    'MAX_TRACE_EVENTS',
    'EMLError',
    'InvalidTagError',
    'UnknownPropertyError',
    'ConfigError',
    'CompilerConfig',
    'load_config',
]
