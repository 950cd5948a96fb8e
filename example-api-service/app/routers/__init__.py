"""API route handlers.

This module contains FastAPI routers for:
- The example resource (fetch by id, create)
"""
