"""
Custom exception classes for the application
"""
from typing import Optional, Dict, Any


class ResumeForgeException(Exception):
    """Base exception for ResumeForge"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(ResumeForgeException):
    """Malformed or incomplete requests"""

    def __init__(self, message: str = "Bad request", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class AuthenticationError(ResumeForgeException):
    """Authentication related errors"""

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=401, details=details)


class NotFoundError(ResumeForgeException):
    """Resource not found errors"""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message, status_code=404)


class ValidationError(ResumeForgeException):
    """Validation errors"""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=422, details=details)


class ProcessingError(ResumeForgeException):
    """File processing errors"""

    def __init__(self, message: str = "Processing failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=422, details=details)


class TextExtractionError(ResumeForgeException):
    """Raised when an uploaded document yields no readable text layer"""

    def __init__(self, message: str = "Failed to parse document", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


class EmailDeliveryError(ResumeForgeException):
    """Outgoing email could not be handed to the mail server"""

    def __init__(self, message: str = "Email could not be sent", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)
