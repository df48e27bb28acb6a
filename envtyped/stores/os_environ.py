import os


class OsEnvironStore:
    """Environment store backed by the live process environment."""

    def get(self, key: str) -> str | None:
        return os.environ.get(key)
