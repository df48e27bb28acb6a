"""
Domain ports for typed environment access.
Adapters implement these so accessors never touch process state directly.
"""

from __future__ import annotations

from typing import Any, Protocol


class EnvStore(Protocol):
    """Read-only key/value lookup; returns None for absent keys."""

    def get(self, key: str) -> str | None: ...


class WarningSink(Protocol):
    """Receives non-fatal diagnostics. A logging.Logger satisfies this."""

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
