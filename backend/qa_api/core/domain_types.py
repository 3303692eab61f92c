"""Domain Types: database error codes the DAOs recognise.

Invariants:
    - Postgres error codes are SQLSTATE strings
"""


class PostgresErrorCode:
    """SQLSTATE codes the DAOs translate into domain errors."""
    FOREIGN_KEY_VIOLATION = "23503"
