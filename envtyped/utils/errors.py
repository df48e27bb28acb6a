from .error_codes import ErrorCode


class EnvVarError(RuntimeError):
    """Base error for environment variable access."""

    code: ErrorCode

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class MissingVariableError(EnvVarError):
    """Variable is absent and no default was supplied."""

    code = ErrorCode.MISSING_VARIABLE

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Missing environment variable: {key}")


class InvalidFormatError(EnvVarError):
    """Variable is present but cannot be coerced, and no default was supplied."""

    code = ErrorCode.INVALID_FORMAT

    def __init__(self, key: str, raw: str, value_type: str, detail: str | None = None) -> None:
        message = (
            f'Invalid {value_type} value for environment variable {key}: "{raw}" '
            "and no default value provided."
        )
        if detail:
            message = f"{message} Error: {detail}"
        super().__init__(key, message)
        self.raw = raw
        self.value_type = value_type
        self.detail = detail
