"""Infrastructure Layer: database engine lifecycle and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
"""
