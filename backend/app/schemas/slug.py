from typing import Optional, List, Dict
from pydantic import BaseModel, Field
import uuid

from app.models.content_type import ContentType
from app.utils.slug import SlugMethod


class SlugGenerateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255, description="Title to convert")
    method: SlugMethod = Field(default=SlugMethod.AUTO, description="Generation method")
    separator: str = Field(default="-", pattern="^[-_]$", description="Word separator")
    content_type: ContentType = Field(default=ContentType.POST, description="Slug namespace to check against")


class SlugValidation(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)


class SlugGenerateResponse(BaseModel):
    original_title: str
    generated_slug: str
    unique_slug: str
    method_used: SlugMethod
    separator: str
    is_unique: bool
    validation: SlugValidation
    url_preview: str
    character_count: int
    contains_korean: bool
    content_type: ContentType
    suggestions: Dict[str, str] = Field(default_factory=dict)


class SlugValidateRequest(BaseModel):
    slug: str = Field(..., max_length=255, description="Slug to check")
    content_type: ContentType = Field(default=ContentType.POST)
    exclude_id: Optional[uuid.UUID] = Field(None, description="Entity being edited, ignored in the uniqueness check")


class SlugValidateResponse(BaseModel):
    slug: str
    is_valid: bool
    is_unique: bool
    validation_errors: List[str] = Field(default_factory=list)
    content_type: ContentType
    suggested_slug: Optional[str] = None


class SlugBatchRequest(BaseModel):
    content_type: ContentType
    method: SlugMethod = Field(default=SlugMethod.AUTO)
    separator: str = Field(default="-", pattern="^[-_]$")
    force_update: bool = Field(default=False, description="Regenerate slugs that are already set")
    max_items: Optional[int] = Field(None, ge=1, description="Stop after this many items")
    time_budget: Optional[float] = Field(None, ge=0, description="Stop after this many seconds")


class BatchFailure(BaseModel):
    entity_id: uuid.UUID
    error: str


class SlugBatchResponse(BaseModel):
    total_processed: int = 0
    updated_count: int = 0
    skipped_count: int = 0
    failed_count: int = 0
    processing_time: float = 0.0
    content_type: ContentType
    method_used: SlugMethod
    force_update: bool
    is_partial: bool = False
    failures: List[BatchFailure] = Field(default_factory=list, description="Items that could not be slugged")
