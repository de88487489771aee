"""Custom exceptions for the application"""

from typing import List, Optional


class CMSException(Exception):
    """Base exception class for the CMS backend"""
    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


class AuthenticationError(CMSException):
    """Raised when authentication fails"""
    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationError(CMSException):
    """Raised when authorization fails"""
    def __init__(self, message: str = "Access denied"):
        super().__init__(message, "AUTHORIZATION_ERROR")


class ValidationError(CMSException):
    """Raised when validation fails"""
    def __init__(self, message: str = "Validation failed", code: str = "VALIDATION_ERROR"):
        super().__init__(message, code)


class SlugValidationError(ValidationError):
    """Raised when a slug breaks one or more format rules"""
    def __init__(self, errors: Optional[List[str]] = None, message: str = "Slug failed validation"):
        self.errors = list(errors or [])
        super().__init__(message)


class InvalidMethodError(ValidationError):
    """Raised when an unsupported slug generation method is requested"""
    def __init__(self, message: str = "Unsupported slug generation method"):
        super().__init__(message, "INVALID_METHOD")


class NotFoundError(CMSException):
    """Raised when a resource is not found"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, "NOT_FOUND_ERROR")


class ConflictError(CMSException):
    """Raised when there's a conflict (e.g., duplicate slug)"""
    def __init__(self, message: str = "Conflict occurred", code: str = "CONFLICT_ERROR"):
        super().__init__(message, code)


class PersistenceConflictError(ConflictError):
    """Raised when concurrent writes keep colliding on the same slug"""
    def __init__(self, message: str = "Slug write kept colliding with concurrent writers"):
        super().__init__(message, "PERSISTENCE_CONFLICT")


class SlugExhaustedError(ConflictError):
    """Raised when no free numeric suffix is found within the probe limit"""
    def __init__(self, message: str = "Could not find a free slug"):
        super().__init__(message, "SLUG_EXHAUSTED")


class PersistenceUnavailableError(CMSException):
    """Raised when the database cannot be reached"""
    def __init__(self, message: str = "Storage is unavailable"):
        super().__init__(message, "PERSISTENCE_UNAVAILABLE")
