"""In-process cache hit/miss counters."""

import threading
from collections import Counter
from typing import Any, Dict


def key_family(key: str) -> str:
    """Group a key with its siblings by dropping the last segment."""
    return key.rsplit(":", 1)[0] if ":" in key else key


class CacheMetrics:
    """Cache performance counters, grouped by key family."""

    def __init__(self):
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        with self._lock:
            self._hits = 0
            self._misses = 0
            self._errors = 0
            self._family_hits: Counter = Counter()
            self._family_misses: Counter = Counter()

    def record_hit(self, key: str) -> None:
        with self._lock:
            self._hits += 1
            self._family_hits[key_family(key)] += 1

    def record_miss(self, key: str) -> None:
        with self._lock:
            self._misses += 1
            self._family_misses[key_family(key)] += 1

    def record_error(self, key: str) -> None:
        with self._lock:
            self._errors += 1

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            total_requests = self._hits + self._misses
            hit_ratio = (self._hits / total_requests) if total_requests > 0 else 0.0
            families = sorted(set(self._family_hits) | set(self._family_misses))
            return {
                "hit_count": self._hits,
                "miss_count": self._misses,
                "error_count": self._errors,
                "total_requests": total_requests,
                "hit_ratio": round(hit_ratio, 4),
                "key_families": {
                    family: {
                        "hits": self._family_hits[family],
                        "misses": self._family_misses[family],
                    }
                    for family in families
                },
            }
