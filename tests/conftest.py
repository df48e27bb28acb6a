import logging
from typing import Any

import pytest

from envtyped import EnvConfig, MappingStore


class RecordingSink:
    """Collects warnings so tests can assert on them."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self.extras: list[dict[str, Any]] = []

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.messages.append(msg % args if args else msg)
        self.extras.append(kwargs.get("extra") or {})


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("envtyped")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    try:
        yield
    finally:
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_config(sink):
    def _make(values: dict[str, str] | None = None) -> EnvConfig:
        return EnvConfig(store=MappingStore(values), log=sink)

    return _make
