import uuid
from typing import Optional
from sqlalchemy import String, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from app.db.base import Base


class Tag(Base):
    __tablename__ = "tags"
    __table_args__ = (
        Index("ix_tags_slug", "slug", unique=True),
    )
    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[Optional[str]] = mapped_column(String(255))
