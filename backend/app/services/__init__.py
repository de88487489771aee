from .slug_repository import SlugRepository, SaveOutcome
from .slug import SlugService, UniquenessResolver, ResolutionResult

__all__ = [
    "SlugRepository",
    "SaveOutcome",
    "SlugService",
    "UniquenessResolver",
    "ResolutionResult",
]
