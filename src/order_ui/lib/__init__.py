"""
Local library modules for the Order Browser UI.

Modules:
    logs: Logging utilities
"""

from order_ui.lib import logs

__all__ = ["logs"]
