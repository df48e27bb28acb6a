"""
Typed access to environment variables: string, integer, boolean and JSON
accessors with uniform default, warning and error behaviour.
"""

from .domain import EnvStore, WarningSink
from .stores import MappingStore, OsEnvironStore
from .utils import (
    MISSING,
    Config,
    EnvConfig,
    EnvVarError,
    ErrorCode,
    InvalidFormatError,
    MissingVariableError,
    configure_logging,
    get_logger,
    parse_bool_from_env,
    parse_int_from_env,
    parse_json_from_env,
    parse_string_from_env,
)

__version__ = "1.0.0"
__all__ = [
    "MISSING",
    "Config",
    "EnvConfig",
    "EnvStore",
    "WarningSink",
    "OsEnvironStore",
    "MappingStore",
    "EnvVarError",
    "MissingVariableError",
    "InvalidFormatError",
    "ErrorCode",
    "parse_string_from_env",
    "parse_int_from_env",
    "parse_bool_from_env",
    "parse_json_from_env",
    "configure_logging",
    "get_logger",
]
