"""
HTTP API layer: router, exception handlers and middleware.
"""
