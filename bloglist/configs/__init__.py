from bloglist.configs.logger import file_logger
from bloglist.configs.settings import (
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    LimiterConfig,
    pool_kwargs,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "LimiterConfig",
    "file_logger",
    "pool_kwargs",
    "settings",
]
