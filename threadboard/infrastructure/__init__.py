"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports forum rules from core/ (errors module excepted)
    - All SQLAlchemy failures mapped to DatabaseError before leaving this layer
"""
