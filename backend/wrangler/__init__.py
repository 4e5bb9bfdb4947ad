"""Wrangler Plugin HTTP Surface.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
