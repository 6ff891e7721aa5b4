"""Domain models for cs_cache: pure dataclasses, no I/O."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ReadSource(str, Enum):
    """Where a read was served from. Diagnostics only."""

    CACHE = "cache"
    DATABASE = "database"


@dataclass(frozen=True)
class CachedRead(Generic[T]):
    value: T
    source: ReadSource
