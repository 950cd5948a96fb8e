"""Example API Service Application Package.

This package contains the core application components:
- models: Pydantic models for the example resource
- routers: API route handlers
- services: Request binding and validation
- utils: Field validators and request errors
"""

__version__ = "0.1.0"
