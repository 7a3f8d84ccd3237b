"""Core Layer - framework-free pieces shared by the API and infrastructure.

Invariants:
    - Core never imports from api/ or infrastructure/
"""
