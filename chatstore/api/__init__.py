"""
HTTP transport layer: routers, dependencies and exception handlers.
"""
