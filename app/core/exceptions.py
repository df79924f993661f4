from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the service.
    Keeps the error payload returned to clients in one shape.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

# =========================================================
# 1. COMMON ERRORS
# =========================================================

class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found", details: dict = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )

# =========================================================
# 2. STUDENT DOMAIN ERRORS
# =========================================================

class StudentNotFoundError(NotFoundException):
    """404: no student stored under the requested id."""
    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(
            message="Student not found",
            details={"id": student_id}
        )

class SummarizerError(BaseAPIException):
    """
    500: the summarizer could not produce a text
    (network error, timeout, bad stream, empty response...).
    Not retried.
    """
    def __init__(self, message: str, provider: str = "summarizer"):
        self.provider = provider
        super().__init__(
            message=f"Error from {provider}: {message}",
            code="SUMMARIZER_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
