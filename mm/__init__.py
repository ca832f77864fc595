"""
Maintenance mode client for hosts tracked by the monitoring service.

A small command-line tool that enables, disables and queries host maintenance
windows through the monitoring service's maintenance REST API.
"""

__version__ = "0.1.0"

# Package metadata
__title__ = "mm"
__description__ = "Maintenance mode client for the monitoring service REST API"
__license__ = "Apache License 2.0"

# Export main components for easier imports
from .models import (
    Action,
    MaintenanceOptions,
    MaintenanceRecord,
    MaintenanceRequest,
    Settings,
    StatusFilter,
    TimeWindow,
)

__all__ = [
    "Action",
    "MaintenanceOptions",
    "MaintenanceRecord",
    "MaintenanceRequest",
    "Settings",
    "StatusFilter",
    "TimeWindow",
    "__version__",
]
