"""Infrastructure Layer — cross-cutting concerns (logging).

Invariants:
    - Infrastructure never imports from core/ drill logic
"""
