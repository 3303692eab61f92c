"""Core Layer: error hierarchy, database error codes and boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or persistence/
    - Nothing in core/ performs IO
"""
