"""Infrastructure layer - Configuration and logging bridge"""

from .config import Settings, configure_logging, get_settings, reload_settings
from .event_log import EventLog

__all__ = ["Settings", "configure_logging", "get_settings", "reload_settings", "EventLog"]
