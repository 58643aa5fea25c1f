"""Client-side state for the dashboard and review screens."""

from .dashboard import DashboardScreen
from .feedback import TransientFlags
from .review import ReviewScreen

__all__ = ["DashboardScreen", "ReviewScreen", "TransientFlags"]
