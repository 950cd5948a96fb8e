"""Pydantic models for request/response handling.

This module contains data models used for:
- Binding the example request body
- Field-level validation error entries
"""
