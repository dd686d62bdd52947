"""
Monitoring utilities for metrics and error tracking
"""
from typing import Dict, Any, Optional
from datetime import datetime, timezone
import inspect
import logging
import time
from functools import wraps

logger = logging.getLogger(__name__)


def track_error(
    error_type: str,
    metadata: Optional[Dict[str, Any]] = None
):
    """
    Track error for monitoring.
    
    Args:
        error_type: Type of error
        metadata: Additional metadata
    """
    error_data = {
        "error_type": error_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "metadata": metadata or {},
    }
    
    logger.error(f"Error tracked: {error_data}")


def track_metric(
    metric_name: str,
    value: float,
    tags: Optional[Dict[str, str]] = None
):
    """
    Track metric for monitoring.
    
    Args:
        metric_name: Name of metric
        value: Metric value
        tags: Additional tags
    """
    metric_data = {
        "metric": metric_name,
        "value": value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "tags": tags or {},
    }
    
    logger.info(f"Metric: {metric_data}")


def monitor_performance(func):
    """
    Decorator to monitor function performance.
    
    Usage:
        @monitor_performance
        def seed():
            ...
    """
    @wraps(func)
    async def async_wrapper(*args, **kwargs):
        start_time = time.time()
        
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            duration = time.time() - start_time
            track_error(
                f"{func.__name__}.error",
                metadata={"error": str(e), "duration": duration}
            )
            track_metric(f"{func.__name__}.duration", duration, tags={"status": "error"})
            raise
        
        track_metric(f"{func.__name__}.duration", time.time() - start_time, tags={"status": "success"})
        return result
    
    @wraps(func)
    def sync_wrapper(*args, **kwargs):
        start_time = time.time()
        
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            duration = time.time() - start_time
            track_error(
                f"{func.__name__}.error",
                metadata={"error": str(e), "duration": duration}
            )
            track_metric(f"{func.__name__}.duration", duration, tags={"status": "error"})
            raise
        
        track_metric(f"{func.__name__}.duration", time.time() - start_time, tags={"status": "success"})
        return result
    
    if inspect.iscoroutinefunction(func):
        return async_wrapper
    return sync_wrapper
