from .memory import MappingStore
from .os_environ import OsEnvironStore

__all__ = [
    "OsEnvironStore",
    "MappingStore",
]
