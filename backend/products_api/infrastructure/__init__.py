"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports route code
    - Storage faults leave this layer as PersistenceError
"""
