"""Route Handlers — one module per plugin route.

Invariants:
    - Each module exports its path constant and one async handler
    - Handlers receive a RequestContext plus the collaborators they need, nothing global
"""
