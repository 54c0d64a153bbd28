"""
Announcer Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions raised by the service layer.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the right HTTP status code.
Who:   Raised by AnnouncementService; caught by the handlers in main.py.

Exception Hierarchy:
    AnnouncerError (base)
    └── DatabaseError   → 500 {"error": "Database error"}
"""

from typing import Any, Dict, Optional


class AnnouncerError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description (logged)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(AnnouncerError):
    """
    Raised when the announcement store cannot be reached or queried.

    When:    Startup connection check fails with db_connect_required set,
             or a query fails at request time (connection lost, table
             missing, pool exhausted).
    HTTP:    500 Internal Server Error

    The response body is always the generic `{"error": "Database error"}`.
    The driver error, its type and the failing operation go into `context`
    and the server log only.
    """

    def __init__(
        self,
        message: str = "Database error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
