# hostel_api/core/exceptions.py
"""Custom exceptions for the hostel API.

Every failure the API reports goes out in the same envelope,
``{"success": false, "message": ...}``; the exception class decides the
HTTP status code.
"""


class HostelException(Exception):
    """Base exception for the hostel API."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(HostelException):
    """Missing or malformed request input, raised before any query runs."""
    def __init__(self, message: str):
        super().__init__(message, 400)


class BusinessRuleError(HostelException):
    """A recoverable rule failure such as "Student not found".

    Reported with HTTP 200 and ``success: false`` so clients branch on the
    envelope rather than the status code.
    """
    def __init__(self, message: str):
        super().__init__(message, 200)


class NotFoundError(BusinessRuleError):
    """Resource not found exception"""
    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")


class DatabaseError(HostelException):
    """Exception raised for database errors."""
    def __init__(self, message: str = "Database error"):
        super().__init__(message, 500)
