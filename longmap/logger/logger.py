import json
import logging
import os

import psutil

from longmap.logger.log_types import ErrorLog, LogEvent, ResizeLog

logger = logging.getLogger('longmap')
logger.addHandler(logging.NullHandler())


def get_memory_usage() -> int:
    """Return current process RSS memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def log_map_event(event: LogEvent, capacity: int, size: int):
    """Log a lifecycle event of a map (creation, copy, clear)"""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(json.dumps({
        "event": event,
        "capacity": capacity,
        "size": size
    }))


def log_resize_event(old_capacity: int, new_capacity: int, size: int, threshold: float):
    """Log a capacity change, including the process RSS after the rehash"""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    log_data = ResizeLog(
        event=LogEvent.MAP_RESIZED,
        old_capacity=old_capacity,
        new_capacity=new_capacity,
        size=size,
        threshold=threshold,
        rss_bytes=get_memory_usage(),
    )
    logger.debug(json.dumps(log_data))


def log_error_event(event: LogEvent, error: str):
    """Log an error event"""
    logger.error(json.dumps(ErrorLog(event=event, error=error)))
