"""Core Layer: pure greeting logic and boundary contracts, no IO.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic
"""
