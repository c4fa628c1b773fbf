"""API Layer: FastAPI routes, body parsing and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error bodies have the shape {"error": <message>}
"""
