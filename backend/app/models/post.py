import uuid
from typing import Optional
from sqlalchemy import String, Text, ForeignKey, Enum, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.base import Base


class Post(Base):
    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_slug", "slug", unique=True),
        Index("ix_posts_category_id", "category_id"),
        Index("ix_posts_status", "status"),
    )
    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[Optional[str]] = mapped_column(String(255))
    excerpt: Mapped[Optional[str]] = mapped_column(Text)
    content: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[str] = mapped_column(Enum('draft', 'published', 'archived', name='post_status'), nullable=False, default='draft')
    category_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid(as_uuid=True), ForeignKey("categories.id", ondelete="SET NULL"))

    # relationships
    category: Mapped[Optional["Category"]] = relationship("Category", back_populates="posts")
