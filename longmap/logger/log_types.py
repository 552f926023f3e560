from enum import Enum
from typing import Dict


class LogEvent(str, Enum):
    MAP_CREATED = "map_created"
    MAP_COPIED = "map_copied"
    MAP_RESIZED = "map_resized"
    MAP_CLEARED = "map_cleared"
    INVALID_ARGUMENT = "invalid_argument"


class ResizeLog(Dict):
    event: LogEvent
    old_capacity: int
    new_capacity: int
    size: int
    threshold: float
    rss_bytes: int


class ErrorLog(Dict):
    event: LogEvent
    error: str
