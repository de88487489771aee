from .post import Post
from .page import Page
from .category import Category
from .tag import Tag
from .content_type import ContentType, CONTENT_MODELS, content_model, title_attribute
