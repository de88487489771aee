"""Slug persistence against the content tables"""

from enum import Enum
from typing import Iterator, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, OperationalError
import logging
import uuid

from app.db.base import Base
from app.models.content_type import ContentType, content_model, title_attribute
from app.utils.exceptions import NotFoundError, PersistenceUnavailableError

logger = logging.getLogger(__name__)


class SaveOutcome(str, Enum):
    SAVED = "saved"
    CONFLICT = "conflict"


class SlugRepository:
    def __init__(self, db: Session):
        self.db = db

    def exists_slug(
        self,
        content_type: ContentType,
        slug: str,
        exclude_id: Optional[uuid.UUID] = None
    ) -> bool:
        """Check if slug is taken within content_type (soft-deleted rows included)"""
        model = content_model(content_type)
        query = self.db.query(model.id).filter(model.slug == slug)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)

        try:
            return bool(self.db.query(query.exists()).scalar())
        except OperationalError as e:
            logger.error(f"Error checking slug '{slug}' for {content_type.value}: {e}")
            raise PersistenceUnavailableError("Could not check slug availability") from e

    def get_entity(self, content_type: ContentType, entity_id: uuid.UUID) -> Optional[Base]:
        """Get a live entity by ID"""
        model = content_model(content_type)
        try:
            return self.db.query(model).filter(
                model.id == entity_id, model.deleted_at.is_(None)
            ).first()
        except OperationalError as e:
            logger.error(f"Error loading {content_type.value} {entity_id}: {e}")
            raise PersistenceUnavailableError(f"Could not load {content_type.value}") from e

    def save_slug(self, entity_id: uuid.UUID, content_type: ContentType, slug: str) -> SaveOutcome:
        """Write slug onto the entity; a unique index violation is reported as a conflict"""
        entity = self.get_entity(content_type, entity_id)
        if not entity:
            raise NotFoundError(f"{content_type.value.capitalize()} not found")

        entity.slug = slug
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Slug '{slug}' was taken concurrently for {content_type.value}")
            return SaveOutcome.CONFLICT
        except OperationalError as e:
            self.db.rollback()
            logger.error(f"Error saving slug for {content_type.value} {entity_id}: {e}")
            raise PersistenceUnavailableError("Could not save slug") from e

        return SaveOutcome.SAVED

    def iter_entities(self, content_type: ContentType, chunk_size: int = 100) -> Iterator[Base]:
        """Yield live entities in primary key order, one chunk at a time"""
        model = content_model(content_type)
        last_id = None

        while True:
            query = self.db.query(model).filter(model.deleted_at.is_(None))
            if last_id is not None:
                query = query.filter(model.id > last_id)

            try:
                chunk = query.order_by(model.id).limit(chunk_size).all()
            except OperationalError as e:
                logger.error(f"Error listing {content_type.value} items: {e}")
                raise PersistenceUnavailableError(f"Could not list {content_type.value} items") from e

            if not chunk:
                return

            # Read before yielding; callers commit and expire loaded rows
            last_id = chunk[-1].id
            yield from chunk

    @staticmethod
    def title_of(content_type: ContentType, entity: Base) -> Optional[str]:
        return getattr(entity, title_attribute(content_type))
