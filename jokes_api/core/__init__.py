"""Core Layer: pure logic, no IO, no async.

Invariants:
    - No module in core/ imports from api/, infrastructure/ or schemas/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the HTTP shell (query building and
      payload extraction are testable without a network)
"""
