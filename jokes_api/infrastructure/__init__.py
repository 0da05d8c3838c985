"""Infrastructure Layer: upstream HTTP client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All external calls wrapped with timeout and error mapping
"""
