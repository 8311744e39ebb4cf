"""View adapters binding connectors to PyQt6 widgets."""

from .qt_binding import connect_widget

__all__ = ["connect_widget"]
