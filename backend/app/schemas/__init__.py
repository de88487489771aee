from .slug import *

__all__ = [
    # Slug schemas
    "SlugGenerateRequest",
    "SlugGenerateResponse",
    "SlugValidation",
    "SlugValidateRequest",
    "SlugValidateResponse",
    "SlugBatchRequest",
    "SlugBatchResponse",
    "BatchFailure",
]
