"""
Utility functions for path enumeration.
"""

import gc
import logging
import os
import time
from typing import Optional

import psutil  # type: ignore # Missing stubs

# Configure logging
logger = logging.getLogger(__name__)

# Constants
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between RSS samples
DEFAULT_MAX_MEMORY_MB: Optional[float] = None  # No limit


class MemoryManager:
    """Memory guard for path enumeration.

    Enumerating every simple path can grow exponentially with graph size. The
    manager samples the process resident set size at most once per
    ``check_interval`` seconds and raises ``MemoryError`` once growth since
    construction exceeds the configured limit.
    """

    def __init__(
        self,
        max_memory_mb: Optional[float] = DEFAULT_MAX_MEMORY_MB,
        check_interval: Optional[float] = None,
    ):
        """Initialize memory manager."""
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ValueError("max_memory_mb must be positive")

        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        # Unlimited managers never sample the process
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = (
            MEMORY_CHECK_INTERVAL if check_interval is None else check_interval
        )

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        if not self.max_memory:
            return

        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory before giving up
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.warning(
                    f"Path enumeration exceeded memory limit of "
                    f"{self.max_memory / 1024 / 1024:.1f}MB"
                )
                raise MemoryError(
                    f"Memory usage {current / 1024 / 1024:.1f}MB exceeds "
                    f"limit of {self.max_memory / 1024 / 1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
