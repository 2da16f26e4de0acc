"""
Static and demo data for the Order Browser UI.

This package contains fixture data used by DemoOrderService for
development, testing, and demonstrations without a running order service.

Modules:
- demo_orders: Order payloads in the order service wire format
"""
