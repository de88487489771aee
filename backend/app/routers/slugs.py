"""Slug generation routes"""

from typing import Annotated, Any, Dict
from fastapi import APIRouter, Depends

from app.dependencies import get_slug_service, require_admin
from app.services.slug import SlugService
from app.schemas.slug import (
    SlugGenerateRequest, SlugGenerateResponse,
    SlugValidateRequest, SlugValidateResponse,
    SlugBatchRequest, SlugBatchResponse
)

router = APIRouter(prefix="/v1/slugs", tags=["Slugs"])


@router.post("/generate", response_model=SlugGenerateResponse)
async def generate_slug(
    request: SlugGenerateRequest,
    slug_service: Annotated[SlugService, Depends(get_slug_service)]
):
    """Preview a URL-friendly slug for a Korean or English title"""
    return await slug_service.generate_slug(request)


@router.post("/validate", response_model=SlugValidateResponse, response_model_exclude_none=True)
async def validate_slug(
    request: SlugValidateRequest,
    slug_service: Annotated[SlugService, Depends(get_slug_service)]
):
    """Check slug format and uniqueness, suggesting a free alternative when taken"""
    return await slug_service.validate_slug(request)


@router.post("/batch-generate", response_model=SlugBatchResponse)
async def batch_generate(
    request: SlugBatchRequest,
    admin: Annotated[Dict[str, Any], Depends(require_admin)],
    slug_service: Annotated[SlugService, Depends(get_slug_service)]
):
    """Regenerate slugs for existing content (admin only)"""
    return await slug_service.batch_generate(request)
