"""
Metrics service for tracking API performance.

Thread-safe request counters, error counters and response times kept in a
bounded deque per endpoint.
"""

from asyncio import to_thread
from collections import defaultdict, deque
from dataclasses import dataclass, field
from logging import getLogger
from threading import Lock
from time import perf_counter
from types import TracebackType
from typing import Any, Self

from psutil import cpu_percent as get_cpu_percent
from psutil import virtual_memory

from bloglist.configs import file_logger

logger = file_logger(getLogger(__name__))

_MAX_RESPONSE_TIMES: int = 1000
_BYTES_PER_MB: int = 1024 * 1024
_CPU_SAMPLE_INTERVAL: float = 0.1


@dataclass(slots=True)
class ResponseTimeStats:
    """Response times for one endpoint with a running sum for O(1) averages."""

    times: deque[float] = field(default_factory=lambda: deque(maxlen=_MAX_RESPONSE_TIMES))
    _sum: float = field(default=0.0, repr=False)

    def add(self, duration: float) -> None:
        if len(self.times) == self.times.maxlen:
            # Oldest value is about to be evicted
            self._sum -= self.times[0]
        self.times.append(duration)
        self._sum += duration

    @property
    def average(self) -> float:
        return self._sum / len(self.times) if self.times else 0.0

    @property
    def count(self) -> int:
        return len(self.times)


class MetricsManager:
    """Thread-safe metrics collector for API performance tracking."""

    __slots__ = (
        "_lock",
        "_request_counts",
        "_error_counts",
        "_response_times",
        "_rate_limit_hits",
    )

    def __init__(self) -> None:
        self._lock = Lock()
        self._request_counts: dict[str, int] = defaultdict(int)
        self._error_counts: dict[str, int] = defaultdict(int)
        self._response_times: dict[str, ResponseTimeStats] = defaultdict(ResponseTimeStats)
        self._rate_limit_hits: int = 0

    def record_request(self, endpoint: str) -> None:
        with self._lock:
            self._request_counts[endpoint] += 1

    def record_error(self, endpoint: str) -> None:
        with self._lock:
            self._error_counts[endpoint] += 1

    def record_response_time(self, endpoint: str, duration: float) -> None:
        with self._lock:
            self._response_times[endpoint].add(duration)

    def record_rate_limit_hit(self) -> None:
        with self._lock:
            self._rate_limit_hits += 1

    def get_metrics(self) -> dict[str, Any]:
        """
        Get current metrics summary (thread-safe snapshot).

        Returns:
            Dictionary containing all metrics with computed statistics.
        """
        with self._lock:
            return {
                "request_counts": dict(self._request_counts),
                "error_counts": dict(self._error_counts),
                "avg_response_times": {
                    endpoint: stats.average
                    for endpoint, stats in self._response_times.items()
                    if stats.count > 0
                },
                "rate_limit_hits": self._rate_limit_hits,
            }

    def reset_metrics(self) -> None:
        """Reset all metrics (thread-safe)."""
        with self._lock:
            self._request_counts.clear()
            self._error_counts.clear()
            self._response_times.clear()
            self._rate_limit_hits = 0
        logger.info("Metrics reset")


metrics_manager = MetricsManager()


class RequestTimer:
    """Context manager timing a request and recording it on a metrics manager."""

    __slots__ = ("_endpoint", "_start_time", "_metrics")

    def __init__(
        self,
        endpoint: str,
        metrics: MetricsManager | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._start_time: float = 0.0
        self._metrics = metrics or metrics_manager

    def __enter__(self) -> Self:
        self._start_time = perf_counter()
        self._metrics.record_request(self._endpoint)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        duration = perf_counter() - self._start_time
        self._metrics.record_response_time(self._endpoint, duration)

        if exc_type is not None:
            self._metrics.record_error(self._endpoint)

    async def __aenter__(self) -> Self:
        return self.__enter__()

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)


async def get_system_metrics() -> dict[str, Any]:
    """
    Get process host CPU and memory usage.

    The blocking psutil calls run in a worker thread.

    Returns:
        Dictionary containing system metrics or error information.
    """

    def _collect_metrics() -> dict[str, Any]:
        memory = virtual_memory()
        return {
            "cpu_percent": get_cpu_percent(interval=_CPU_SAMPLE_INTERVAL),
            "memory": {
                "percent": memory.percent,
                "used_mb": round(memory.used / _BYTES_PER_MB, 2),
                "total_mb": round(memory.total / _BYTES_PER_MB, 2),
            },
        }

    try:
        return await to_thread(_collect_metrics)
    except OSError as e:
        logger.exception("Failed to get system metrics")
        return {"error": f"Failed to collect system metrics: {e}"}
