from enum import Enum

class ErrorCode(str, Enum):
    """Centralized error codes carried by accessor errors."""
    MISSING_VARIABLE = "missing_variable"
    INVALID_FORMAT = "invalid_format"
