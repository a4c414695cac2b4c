"""Products API Package — REST service for the Product resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
