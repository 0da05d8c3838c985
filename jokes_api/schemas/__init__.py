"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Each response model serializes to exactly one key
"""
