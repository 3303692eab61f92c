"""Q&A API package: questions and answers over PostgreSQL.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
