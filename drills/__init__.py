"""Recursion Drills — fibonacci, countdown, triangular numbers and gcd.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
