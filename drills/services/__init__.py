"""Services Layer — drill dispatch and console input prompting.

Invariants:
    - Drill dispatch uses an explicit dict mapping (no auto-discovery)
    - Retry policy lives here, never in core/
"""
