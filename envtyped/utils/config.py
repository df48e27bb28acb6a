import logging
from typing import Any, Callable, Protocol, TypeVar

from ..domain import EnvStore, WarningSink
from ..stores import OsEnvironStore
from .errors import InvalidFormatError, MissingVariableError
from .parsing import parse_bool_token, parse_int_prefix, parse_json

T = TypeVar("T")


class _Missing:
    """Marks an omitted default; None stays usable as a real default."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Config(Protocol):
    """Typed config interface."""
    def get_str(self, name: str, default: str = MISSING) -> str:
        ...
    def get_int(self, name: str, default: int = MISSING) -> int:
        ...
    def get_bool(self, name: str, default: bool = MISSING) -> bool:
        ...
    def get_json(self, name: str, default: T = MISSING) -> T:
        ...


def _coerce_str(raw: str) -> str:
    return raw


def _coerce_int(raw: str) -> int:
    value = parse_int_prefix(raw)
    if value is None:
        raise ValueError
    return value


def _coerce_bool(raw: str) -> bool:
    value = parse_bool_token(raw)
    if value is None:
        raise ValueError
    return value


class EnvConfig:
    """
    Environment-backed config provider.

    Every accessor follows the same resolution: a well-formed value is coerced
    and returned; a malformed value falls back to the default with a warning,
    or raises InvalidFormatError; an absent value falls back to the default
    silently, or raises MissingVariableError.
    """

    def __init__(self, store: EnvStore | None = None, log: WarningSink | None = None) -> None:
        self.store = store if store is not None else OsEnvironStore()
        self.log = log if log is not None else logging.getLogger("envtyped.config")

    def get_str(self, name: str, default: str = MISSING) -> str:
        """Any present value, empty string included, is returned verbatim."""
        return self._resolve(name, default, "string", _coerce_str)

    def get_int(self, name: str, default: int = MISSING) -> int:
        """Lenient base-10 parse; an empty value counts as absent."""
        return self._resolve(name, default, "integer", _coerce_int, empty_is_absent=True)

    def get_bool(self, name: str, default: bool = MISSING) -> bool:
        """true/1/yes/on and false/0/no/off/"" in any case."""
        return self._resolve(name, default, "boolean", _coerce_bool)

    def get_json(self, name: str, default: T = MISSING) -> T:
        """
        Parses the value as a JSON document and returns it as the caller's type.
        The shape is not checked; the default is returned as-is, never parsed.
        """
        return self._resolve(name, default, "JSON", parse_json)

    def _resolve(
        self,
        name: str,
        default: Any,
        value_type: str,
        coerce: Callable[[str], Any],
        *,
        empty_is_absent: bool = False,
    ) -> Any:
        raw = self.store.get(name)

        if raw is None or (empty_is_absent and raw == ""):
            if default is not MISSING:
                return default
            raise MissingVariableError(name)

        try:
            return coerce(raw)
        except ValueError as e:
            detail = str(e) or None
            if default is MISSING:
                raise InvalidFormatError(name, raw, value_type, detail) from e

            message = f'Invalid {value_type} value for environment variable {name}: "{raw}". Using default value.'
            if detail:
                message = f"{message} Error: {detail}"
            self.log.warning(message, extra={"env_key": name, "raw_value": raw, "value_type": value_type})
            return default


_default_config = EnvConfig()


def parse_string_from_env(key: str, default: str = MISSING) -> str:
    """String accessor over the process environment."""
    return _default_config.get_str(key, default)


def parse_int_from_env(key: str, default: int = MISSING) -> int:
    """Integer accessor over the process environment."""
    return _default_config.get_int(key, default)


def parse_bool_from_env(key: str, default: bool = MISSING) -> bool:
    """Boolean accessor over the process environment."""
    return _default_config.get_bool(key, default)


def parse_json_from_env(key: str, default: T = MISSING) -> T:
    """JSON accessor over the process environment."""
    return _default_config.get_json(key, default)
