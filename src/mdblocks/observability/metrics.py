"""Metrics hook protocol and no-op default implementation.

The converter emits counters and timings after each conversion.  By default
a :class:`NoopMetricsHook` is used so there is zero overhead.  Callers can
supply any object satisfying :class:`MetricsHook` through
:attr:`ConverterConfig.metrics <mdblocks.config.ConverterConfig.metrics>` to
route metrics to StatsD, Prometheus, or similar.

Emitted metric names:

* ``mdblocks.blocks_created_total``     -- counter, tagged by ``kind``
* ``mdblocks.segments_split_total``     -- counter
* ``mdblocks.conversion_duration_ms``   -- timing
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict whose keys and values are
    strings.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...


class NoopMetricsHook:
    """Default metrics implementation that silently discards all data points.

    Lets metrics call-sites skip ``if metrics is not None`` guards.
    """

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
