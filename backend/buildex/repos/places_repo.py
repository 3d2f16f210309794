import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from buildex.models.places_model import Place


@dataclass(frozen=True)
class CacheEntry:
    places: List[Place]
    timestamp: float


class PlacesCache:
    """
    In-memory TTL cache for nearby place lookups.

    Keys combine the category, the origin rounded to `precision` decimals and the radius.
    A stale entry is ignored but left in place until the next successful fetch overwrites it.
    There is no size bound; clear() is the only eviction.
    """

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
        precision: int = 4,
    ):
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.precision = precision
        self._entries: Dict[str, CacheEntry] = {}

    def make_key(self, category: str, lat: float, lng: float, radius: int) -> str:
        return f"{category}|{self._coordinate(lat)}|{self._coordinate(lng)}|{radius}"

    def _coordinate(self, value: float) -> str:
        # + 0.0 turns -0.0 into 0.0 so both sides of the equator share a key
        return f"{round(value, self.precision) + 0.0:.{self.precision}f}"

    def get(self, key: str) -> Optional[List[Place]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() - entry.timestamp >= self.ttl_seconds:
            return None
        return list(entry.places)

    def put(self, key: str, places: List[Place]) -> None:
        self._entries[key] = CacheEntry(places=list(places), timestamp=self.clock())

    def clear(self) -> int:
        """Drop every entry and return how many there were."""
        count = len(self._entries)
        self._entries.clear()
        return count

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
