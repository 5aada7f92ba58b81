"""Core Layer — pure drill logic, no IO, no logging, no settings.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/ or config
    - Every precondition violation raises InvalidArgument; nothing is caught here

Design Decisions:
    - Functional core separated from imperative shell (countdown takes an emit callable)
"""
