"""Route Modules - one file per resource.

Invariants:
    - Each module defines its own APIRouter with tags; paths are unversioned
    - Handlers hold no business logic: bind body, one ORM call, serialize

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
