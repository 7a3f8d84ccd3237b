"""Infrastructure Layer - database pool and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Driver exceptions are mapped to core/errors.py types before leaving this layer
"""
