"""Core Layer — pure forum rules: access policy, vote transitions, notification events.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (timestamps come from callers)

Design Decisions:
    - Functional core separated from imperative shell: services do the IO around these rules
"""
