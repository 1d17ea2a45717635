from bloglist.managers.metrics import (
    MetricsManager,
    RequestTimer,
    get_system_metrics,
    metrics_manager,
)
from bloglist.managers.rate_limiter import close_limiter, limiter, rate_limit_exceeded_handler

__all__ = [
    "MetricsManager",
    "RequestTimer",
    "close_limiter",
    "get_system_metrics",
    "limiter",
    "metrics_manager",
    "rate_limit_exceeded_handler",
]
