"""API Layer — FastAPI routes, identity dependency, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - Every write endpoint resolves the actor through api.dependencies.get_actor

Design Decisions:
    - Thin routes delegate to services
"""
