"""
Domain errors raised by the service layer.
Translated into HTTP responses by the exception handlers in main.py.
"""


class ConflictError(Exception):
    """A uniqueness constraint was violated (duplicate page slug)."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.message = message
        self.field = field
