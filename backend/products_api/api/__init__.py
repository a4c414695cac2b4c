"""API Layer — FastAPI routes, validation gate, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON
"""
