"""
Views layer - UI presentation components.
"""

from views.tracker_view import TrackerView

__all__ = ["TrackerView"]
