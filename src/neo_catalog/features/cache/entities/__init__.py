"""Cache entities and protocols."""

from .protocols import CacheAdapter, CacheMetricsRecorder

__all__ = ["CacheAdapter", "CacheMetricsRecorder"]
