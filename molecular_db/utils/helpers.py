import logging
from typing import Any, Dict, Optional
import time

from molecular_db.core.config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger("molecular_db")

def log_api_call(endpoint: str, method: str, user_agent: str = None, **kwargs):
    """Log API calls for monitoring"""
    if kwargs.get("error"):
        logger.warning(f"API Call: {method} {endpoint} - Error: {kwargs['error']}")
        return
    logger.info(f"API Call: {method} {endpoint} - User-Agent: {user_agent}")


class SourceQueryTimer:
    """Context manager to time a simulated source query and log its outcome"""
    def __init__(self, database_id: str, operation: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        self.database_id = database_id
        self.operation = operation
        self.metadata = metadata or {}
        self.start_ns = 0
        self.elapsed_ms = 0
        self.hits = None

    def __enter__(self):
        self.start_ns = time.perf_counter_ns()
        return self

    def set_hits(self, hits: int):
        self.hits = hits

    def __exit__(self, exc_type, exc, tb):
        self.elapsed_ms = int((time.perf_counter_ns() - self.start_ns) / 1_000_000)
        outcome = "success" if exc is None else f"failed ({exc})"
        logger.debug(
            f"Source query: {self.database_id} {self.operation} - {self.elapsed_ms}ms - "
            f"hits={self.hits} - {outcome}"
        )
