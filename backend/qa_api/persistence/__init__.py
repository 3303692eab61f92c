"""Persistence Layer: SQL implementations of the DAO protocols.

Invariants:
    - One DAO per table, each bound to a single AsyncSession
    - DAOs commit their own writes and roll back on failure
    - Only InvalidUUIDError and DatabaseError escape a DAO
"""
