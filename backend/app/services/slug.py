from dataclasses import dataclass
from typing import Optional, Dict
from sqlalchemy.orm import Session
import logging
import re
import time
import uuid

from app.core.config import settings
from app.models.content_type import ContentType
from app.schemas.slug import (
    SlugGenerateRequest, SlugGenerateResponse, SlugValidation,
    SlugValidateRequest, SlugValidateResponse,
    SlugBatchRequest, SlugBatchResponse, BatchFailure
)
from app.services.slug_repository import SlugRepository, SaveOutcome
from app.utils.exceptions import (
    NotFoundError, SlugValidationError, SlugExhaustedError, PersistenceConflictError
)
from app.utils.slug import (
    SlugMethod, SlugCandidate, FallbackSlugGenerator, build_candidate,
    validate_slug, truncate_slug, contains_korean, guess_separator
)

logger = logging.getLogger(__name__)

# "<base><sep><number>", e.g. "my-post-3" -> ("my-post", "3")
NUMERIC_SUFFIX_PATTERN = re.compile(r"^(?P<base>.+)[-_](?P<number>\d+)$")

URL_SEGMENTS = {
    ContentType.POST: "posts",
    ContentType.PAGE: "pages",
    ContentType.CATEGORY: "categories",
    ContentType.TAG: "tags",
}


@dataclass(frozen=True)
class ResolutionResult:
    unique_slug: str
    was_unique: bool


class UniquenessResolver:
    """Find a free slug within a content type by appending numeric suffixes"""

    def __init__(
        self,
        repository: SlugRepository,
        max_attempts: Optional[int] = None,
        max_length: Optional[int] = None
    ):
        self.repository = repository
        self.max_attempts = max_attempts or settings.SLUG_MAX_PROBE_ATTEMPTS
        self.max_length = max_length or settings.SLUG_MAX_LENGTH

    def resolve(
        self,
        candidate: str,
        content_type: ContentType,
        exclude_id: Optional[uuid.UUID] = None,
        separator: str = "-"
    ) -> ResolutionResult:
        if not self.repository.exists_slug(content_type, candidate, exclude_id):
            return ResolutionResult(unique_slug=candidate, was_unique=True)

        base = self._probe_base(candidate, content_type, exclude_id)

        for counter in range(1, self.max_attempts + 1):
            suffix = f"{separator}{counter}"
            probe = truncate_slug(base, self.max_length - len(suffix)) + suffix
            if not self.repository.exists_slug(content_type, probe, exclude_id):
                return ResolutionResult(unique_slug=probe, was_unique=False)

        raise SlugExhaustedError(
            f"No free slug for '{candidate}' after {self.max_attempts} attempts"
        )

    def _probe_base(
        self,
        candidate: str,
        content_type: ContentType,
        exclude_id: Optional[uuid.UUID]
    ) -> str:
        """Strip a numeric suffix only when it was appended to an existing slug

        "x-1" resolves next to "x-2" (not "x-1-1") when "x" is taken, while a
        title that simply ends in a number ("top-10") keeps it.
        """
        match = NUMERIC_SUFFIX_PATTERN.match(candidate)
        if match and self.repository.exists_slug(content_type, match.group("base"), exclude_id):
            return match.group("base")
        return candidate


class SlugService:
    def __init__(self, db: Session, fallback: Optional[FallbackSlugGenerator] = None):
        self.db = db
        self.repository = SlugRepository(db)
        self.resolver = UniquenessResolver(self.repository)
        self.fallback = fallback or FallbackSlugGenerator()

    def build_candidate(self, title: str, method: SlugMethod, separator: str = "-") -> SlugCandidate:
        candidate = build_candidate(title, method, separator, fallback=self.fallback)
        if candidate.used_fallback:
            logger.info(f"No usable slug in title '{title}', using fallback '{candidate.normalized}'")
        elif candidate.truncated:
            logger.info(f"Slug for title '{title[:50]}' truncated to {len(candidate.normalized)} characters")
        return candidate

    async def generate_slug(self, request: SlugGenerateRequest) -> SlugGenerateResponse:
        """Preview the slug a title would get, without saving anything"""
        candidate = self.build_candidate(request.title, request.method, request.separator)
        validation = validate_slug(candidate.normalized)
        resolution = self.resolver.resolve(
            candidate.normalized, request.content_type, separator=request.separator
        )

        return SlugGenerateResponse(
            original_title=request.title,
            generated_slug=candidate.normalized,
            unique_slug=resolution.unique_slug,
            method_used=request.method,
            separator=request.separator,
            is_unique=resolution.was_unique,
            validation=SlugValidation(is_valid=validation.is_valid, errors=validation.errors),
            url_preview=self._url_preview(request.content_type, resolution.unique_slug),
            character_count=len(candidate.normalized),
            contains_korean=contains_korean(candidate.normalized),
            content_type=request.content_type,
            suggestions=self._suggestions(request.title, request.method, request.separator)
        )

    async def validate_slug(self, request: SlugValidateRequest) -> SlugValidateResponse:
        """Check slug format and availability"""
        validation = validate_slug(request.slug)
        is_unique = not self.repository.exists_slug(
            request.content_type, request.slug, request.exclude_id
        )

        suggested_slug = None
        if validation.is_valid and not is_unique:
            suggested_slug = self.resolver.resolve(
                request.slug,
                request.content_type,
                exclude_id=request.exclude_id,
                separator=guess_separator(request.slug)
            ).unique_slug

        return SlugValidateResponse(
            slug=request.slug,
            is_valid=validation.is_valid,
            is_unique=is_unique,
            validation_errors=validation.errors,
            content_type=request.content_type,
            suggested_slug=suggested_slug
        )

    async def assign_slug(
        self,
        content_type: ContentType,
        entity_id: uuid.UUID,
        slug: Optional[str] = None,
        method: SlugMethod = SlugMethod.AUTO,
        separator: str = "-"
    ) -> str:
        """Give an entity a unique slug and save it

        Called by the entity save workflow. A user-supplied slug is validated
        as-is; otherwise one is generated from the entity's title or name.
        """
        entity = self.repository.get_entity(content_type, entity_id)
        if not entity:
            raise NotFoundError(f"{content_type.value.capitalize()} not found")

        if slug is not None:
            validation = validate_slug(slug)
            if not validation.is_valid:
                raise SlugValidationError(validation.errors)
            base, separator = slug, guess_separator(slug)
        else:
            title = self.repository.title_of(content_type, entity) or "untitled"
            base = self.build_candidate(title, method, separator).normalized

        return self._resolve_and_save(
            content_type, entity_id, base, separator, current_slug=entity.slug
        )

    async def batch_generate(self, request: SlugBatchRequest) -> SlugBatchResponse:
        """Bulk (re)generate slugs for one content type

        Callers must have checked admin privileges. One failing item never
        stops the run; max_items and time_budget end it early as a partial
        result.
        """
        start_time = time.perf_counter()
        content_type = request.content_type
        result = SlugBatchResponse(
            content_type=content_type,
            method_used=request.method,
            force_update=request.force_update
        )
        logger.info(
            f"Starting slug batch for {content_type.value} "
            f"(method={request.method.value}, force_update={request.force_update})"
        )

        for entity in self.repository.iter_entities(content_type, settings.BATCH_CHUNK_SIZE):
            if request.max_items is not None and result.total_processed >= request.max_items:
                result.is_partial = True
                break
            if request.time_budget is not None and time.perf_counter() - start_time >= request.time_budget:
                result.is_partial = True
                break

            result.total_processed += 1
            entity_id = entity.id
            current_slug = entity.slug

            if not request.force_update and current_slug:
                if validate_slug(current_slug).is_valid:
                    result.skipped_count += 1
                    continue
                logger.warning(
                    f"Regenerating invalid slug '{current_slug}' for {content_type.value} {entity_id}"
                )

            try:
                title = self.repository.title_of(content_type, entity) or "untitled"
                candidate = self.build_candidate(title, request.method, request.separator)
                new_slug = self._resolve_and_save(
                    content_type, entity_id, candidate.normalized, request.separator,
                    current_slug=current_slug
                )
            except Exception as e:
                self.db.rollback()
                result.failed_count += 1
                result.failures.append(BatchFailure(entity_id=entity_id, error=str(e)))
                logger.error(f"Slug generation failed for {content_type.value} {entity_id}: {e}")
                continue

            if new_slug == current_slug:
                result.skipped_count += 1
            else:
                result.updated_count += 1

        result.processing_time = round(time.perf_counter() - start_time, 2)
        logger.info(
            f"Slug batch for {content_type.value} finished: {result.updated_count} updated, "
            f"{result.skipped_count} skipped, {result.failed_count} failed"
            + (" (partial)" if result.is_partial else "")
        )
        return result

    # Helper methods
    def _resolve_and_save(
        self,
        content_type: ContentType,
        entity_id: uuid.UUID,
        base: str,
        separator: str,
        current_slug: Optional[str] = None
    ) -> str:
        """Resolve and write a slug, re-resolving when a concurrent writer wins"""
        attempts = settings.SLUG_CONFLICT_RETRIES + 1
        for attempt in range(1, attempts + 1):
            resolution = self.resolver.resolve(
                base, content_type, exclude_id=entity_id, separator=separator
            )
            if resolution.unique_slug == current_slug:
                return current_slug
            outcome = self.repository.save_slug(entity_id, content_type, resolution.unique_slug)
            if outcome is SaveOutcome.SAVED:
                logger.info(f"Assigned slug '{resolution.unique_slug}' to {content_type.value} {entity_id}")
                return resolution.unique_slug
            logger.warning(
                f"Slug '{resolution.unique_slug}' conflicted for {content_type.value} {entity_id} "
                f"(attempt {attempt}/{attempts})"
            )

        raise PersistenceConflictError(
            f"Could not save a unique slug for {content_type.value} {entity_id} after {attempts} attempts"
        )

    def _suggestions(self, title: str, method: SlugMethod, separator: str) -> Dict[str, str]:
        """Alternative renderings of the title; they are never saved"""
        suggestions = {}
        for alternative in SlugMethod:
            if alternative is not method:
                suggestions[alternative.value] = self.build_candidate(title, alternative, separator).normalized

        if separator == "-":
            suggestions["underscore"] = self.build_candidate(title, SlugMethod.AUTO, "_").normalized
        else:
            suggestions["hyphen"] = self.build_candidate(title, SlugMethod.AUTO, "-").normalized

        return {key: value for key, value in suggestions.items() if value}

    @staticmethod
    def _url_preview(content_type: ContentType, slug: str) -> str:
        return f"{settings.SITE_URL.rstrip('/')}/{URL_SEGMENTS[content_type]}/{slug}"
