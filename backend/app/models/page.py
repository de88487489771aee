import uuid
from typing import Optional
from sqlalchemy import String, Text, Boolean, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from app.db.base import Base


class Page(Base):
    __tablename__ = "pages"
    __table_args__ = (
        Index("ix_pages_slug", "slug", unique=True),
    )
    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[Optional[str]] = mapped_column(String(255))
    content: Mapped[Optional[str]] = mapped_column(Text)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
