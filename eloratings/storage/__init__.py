from .InMemoryRegistry import InMemoryRegistry
from .InMemoryStorage import InMemoryStorage
from .NullStorage import NullStorage

__all__ = [
    "InMemoryRegistry",
    "InMemoryStorage",
    "NullStorage",
]
