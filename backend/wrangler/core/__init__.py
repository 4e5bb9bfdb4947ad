"""Core Layer — pure rules, errors, domain types and host contracts. No IO.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
"""
