"""Unit tests for numeric-suffix uniqueness resolution."""

import uuid

import pytest

from app.models.content_type import ContentType
from app.services.slug import UniquenessResolver
from app.utils.exceptions import SlugExhaustedError


class FakeSlugRepository:
    """In-memory stand-in keyed by (content_type, slug)."""

    def __init__(self, taken=None):
        self.taken = dict(taken or {})
        self.lookups = []

    def take(self, slug, content_type=ContentType.POST, owner=None):
        self.taken[(content_type, slug)] = owner or uuid.uuid4()

    def exists_slug(self, content_type, slug, exclude_id=None):
        self.lookups.append(slug)
        owner = self.taken.get((content_type, slug))
        return owner is not None and owner != exclude_id


@pytest.fixture
def repository():
    return FakeSlugRepository()


@pytest.fixture
def resolver(repository):
    return UniquenessResolver(repository, max_attempts=1000, max_length=100)


class TestUniquenessResolver:
    """Test UniquenessResolver.resolve."""

    def test_free_slug_is_returned_unchanged(self, resolver):
        result = resolver.resolve("new-post", ContentType.POST)
        assert result.unique_slug == "new-post"
        assert result.was_unique is True

    def test_first_duplicate_gets_suffix_one(self, repository, resolver):
        repository.take("중복-테스트")
        result = resolver.resolve("중복-테스트", ContentType.POST)
        assert result.unique_slug == "중복-테스트-1"
        assert result.was_unique is False

    def test_first_free_suffix_wins(self, repository, resolver):
        for slug in ["x", "x-1", "x-2", "x-3"]:
            repository.take(slug)
        assert resolver.resolve("x", ContentType.POST).unique_slug == "x-4"

    def test_suffixed_candidate_does_not_grow(self, repository, resolver):
        repository.take("x")
        repository.take("x-1")
        assert resolver.resolve("x-1", ContentType.POST).unique_slug == "x-2"

    def test_number_from_title_is_kept(self, repository, resolver):
        repository.take("top-10")
        assert resolver.resolve("top-10", ContentType.POST).unique_slug == "top-10-1"

    def test_underscore_separator(self, repository, resolver):
        repository.take("a_b")
        assert resolver.resolve("a_b", ContentType.POST, separator="_").unique_slug == "a_b_1"

    def test_content_types_are_separate_namespaces(self, repository, resolver):
        repository.take("news", ContentType.CATEGORY)
        assert resolver.resolve("news", ContentType.TAG).unique_slug == "news"
        assert resolver.resolve("news", ContentType.CATEGORY).unique_slug == "news-1"

    def test_own_slug_is_ignored(self, repository, resolver):
        owner = uuid.uuid4()
        repository.take("my-post", owner=owner)
        result = resolver.resolve("my-post", ContentType.POST, exclude_id=owner)
        assert result.unique_slug == "my-post"
        assert result.was_unique is True

    def test_suffix_fits_max_length(self, repository, resolver):
        base = "a" * 100
        repository.take(base)
        result = resolver.resolve(base, ContentType.POST)
        assert result.unique_slug == "a" * 98 + "-1"
        assert len(result.unique_slug) == 100

    def test_gives_up_after_max_attempts(self, repository):
        for slug in ["x", "x-1", "x-2", "x-3"]:
            repository.take(slug)
        resolver = UniquenessResolver(repository, max_attempts=3, max_length=100)

        with pytest.raises(SlugExhaustedError) as exc_info:
            resolver.resolve("x", ContentType.POST)

        assert exc_info.value.code == "SLUG_EXHAUSTED"
        assert repository.lookups == ["x", "x-1", "x-2", "x-3"]
