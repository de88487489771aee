from .slugs import router as slugs_router

__all__ = [
    "slugs_router"
]
