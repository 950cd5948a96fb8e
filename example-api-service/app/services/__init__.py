"""Request handling services.

This module contains:
- Body deserialization into the example record
- Aggregated per-field validation
"""
