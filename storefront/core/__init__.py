# Core modules

from .config import Settings, get_settings
from .cache import QueryCache
from .events import InvalidationBus
from .session import Session, Identity

__all__ = [
    "Settings",
    "get_settings",
    "QueryCache",
    "InvalidationBus",
    "Session",
    "Identity",
]
