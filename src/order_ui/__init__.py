"""
Order Browser UI: A Dash application for browsing orders.

This package provides a web interface for listing, searching, inspecting
and generating orders served by the order service HTTP API.

Subpackages:
- components: Reusable Dash UI components
- models: Data models and serialization
- services: Data access layer (demo and HTTP implementations)
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Dash application instance (for WSGI deployment)
- controller.OrderListController: UI-agnostic order list controller
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
