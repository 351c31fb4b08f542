"""Dashboard configuration."""

from config.dashboard_config import DashboardConfig

__all__ = [
    "DashboardConfig",
]
