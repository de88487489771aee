from .slug import (
    SlugMethod, SlugCandidate, ValidationResult, FallbackSlugGenerator,
    normalize, apply_method, build_candidate, truncate_slug, validate_slug,
    contains_korean, guess_separator
)
from .exceptions import (
    CMSException, AuthenticationError, AuthorizationError, ValidationError,
    SlugValidationError, InvalidMethodError, NotFoundError, ConflictError,
    PersistenceConflictError, SlugExhaustedError, PersistenceUnavailableError
)

__all__ = [
    # Slug utils
    'SlugMethod', 'SlugCandidate', 'ValidationResult', 'FallbackSlugGenerator',
    'normalize', 'apply_method', 'build_candidate', 'truncate_slug', 'validate_slug',
    'contains_korean', 'guess_separator',
    # Exception utils
    'CMSException', 'AuthenticationError', 'AuthorizationError', 'ValidationError',
    'SlugValidationError', 'InvalidMethodError', 'NotFoundError', 'ConflictError',
    'PersistenceConflictError', 'SlugExhaustedError', 'PersistenceUnavailableError'
]
