"""Services Layer: handlers between the HTTP routes and the DAOs.

Invariants:
    - One handler module per resource
    - Handlers raise only BadRequestError or InternalError
"""
