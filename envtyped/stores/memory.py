from typing import Mapping


class MappingStore:
    """
    Environment store over an explicit mapping.
    The mapping is copied so later changes by the caller are not observed.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)
