"""Core Layer — argument shaping, response normalization, domain types. No IO.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - Shaping and normalization functions are pure and deterministic
"""
