"""Custom structlog processors for storage logging"""

import socket
from pathlib import PurePath

from structlog.types import EventDict, WrappedLogger

from tinystorage.core.container_path import ContainerPath


class ServiceContext:
    """Adds service-level context to every log event"""

    def __init__(self, service: str, environment: str):
        self.service = service
        self.environment = environment
        try:
            self.hostname = socket.gethostname()
        except OSError:
            self.hostname = None

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("service", self.service)
        event_dict.setdefault("environment", self.environment)
        if self.hostname:
            event_dict.setdefault("hostname", self.hostname)
        return event_dict


def render_paths(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Render container paths and native paths as plain strings"""
    for key, value in event_dict.items():
        if isinstance(value, ContainerPath):
            event_dict[key] = value.to_string() or "/"
        elif isinstance(value, PurePath):
            event_dict[key] = str(value)

    return event_dict


def set_log_severity(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Set proper severity field for log aggregation systems"""
    level_map = {
        "debug": "DEBUG",
        "info": "INFO",
        "warning": "WARNING",
        "error": "ERROR",
        "critical": "CRITICAL"
    }

    if "level" in event_dict:
        event_dict["severity"] = level_map.get(event_dict["level"], "INFO")

    return event_dict
