"""Utility functions and helpers.

This module contains:
- Named field validators and the rule registry
- Client-facing request error types
"""
