from .config import (
    MISSING,
    Config,
    EnvConfig,
    parse_bool_from_env,
    parse_int_from_env,
    parse_json_from_env,
    parse_string_from_env,
)
from .error_codes import ErrorCode
from .errors import EnvVarError, InvalidFormatError, MissingVariableError
from .logger import (
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
)
from .parsing import (
    FALSY,
    TRUTHY,
    parse_bool_token,
    parse_int_prefix,
    parse_json,
)

__all__ = [
    "MISSING",
    "Config",
    "EnvConfig",
    "parse_string_from_env",
    "parse_int_from_env",
    "parse_bool_from_env",
    "parse_json_from_env",
    "ErrorCode",
    "EnvVarError",
    "MissingVariableError",
    "InvalidFormatError",
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "PlainFormatter",
    "TRUTHY",
    "FALSY",
    "parse_int_prefix",
    "parse_bool_token",
    "parse_json",
]
