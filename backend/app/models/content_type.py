"""Content types that own a slug namespace"""

from enum import Enum
from typing import Dict, Tuple, Type

from app.db.base import Base
from .post import Post
from .page import Page
from .category import Category
from .tag import Tag


class ContentType(str, Enum):
    POST = "post"
    PAGE = "page"
    CATEGORY = "category"
    TAG = "tag"


# model class and the attribute a slug is derived from
CONTENT_MODELS: Dict[ContentType, Tuple[Type[Base], str]] = {
    ContentType.POST: (Post, "title"),
    ContentType.PAGE: (Page, "title"),
    ContentType.CATEGORY: (Category, "name"),
    ContentType.TAG: (Tag, "name"),
}


def content_model(content_type: ContentType) -> Type[Base]:
    return CONTENT_MODELS[ContentType(content_type)][0]


def title_attribute(content_type: ContentType) -> str:
    return CONTENT_MODELS[ContentType(content_type)][1]
