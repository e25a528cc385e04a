"""
Process memory reporting.

The URI post transformation keeps one table per rule in memory for the whole
run; its size is reported here so large runs can be diagnosed from the log.
"""

import logging

import psutil

from ..constants import MemoryLimits

logger = logging.getLogger(__name__)


class MemoryManager:
    """Reads process and system memory through psutil."""

    REPORT_THRESHOLD = MemoryLimits.REWRITE_TABLE_REPORT_THRESHOLD

    @staticmethod
    def get_available_memory_mb() -> float:
        """
        Get available system memory in MB.

        Returns:
            Available memory in MB, or infinity if detection fails.
        """
        try:
            return psutil.virtual_memory().available / (1024 * 1024)
        except (psutil.Error, OSError) as e:
            logger.warning(f"Could not determine available memory: {e}")
            return float('inf')

    @staticmethod
    def get_memory_usage_mb() -> float:
        """
        Get current process memory usage in MB.

        Returns:
            Resident memory of this process in MB, 0.0 if unknown.
        """
        try:
            return psutil.Process().memory_info().rss / (1024 * 1024)
        except (psutil.Error, OSError):
            return 0.0

    @classmethod
    def log_memory_status(cls, context: str = "", entries: int = 0) -> None:
        """
        Log current memory status.

        Logged at INFO once ``entries`` exceeds the report threshold,
        otherwise at DEBUG.

        Args:
            context: Optional context string to include in log message.
            entries: Number of in-memory table entries being reported on.
        """
        process_mb = cls.get_memory_usage_mb()
        available_mb = cls.get_available_memory_mb()
        prefix = f"[{context}] " if context else ""
        level = logging.INFO if entries > cls.REPORT_THRESHOLD else logging.DEBUG
        logger.log(
            level,
            f"{prefix}Memory status: {entries} table entries, process using {process_mb:.0f}MB, "
            f"system available: {available_mb:.0f}MB"
        )
