"""Route Modules: one file per concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain business logic (delegate to the JokeSource)
"""
