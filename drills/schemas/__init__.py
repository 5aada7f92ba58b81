"""Schemas Layer — Pydantic models at the console boundary.

Invariants:
    - Schemas import only from core/ (enums), never from services/ or infrastructure/
"""
