"""Slug utility functions for converting titles to URL-friendly strings

Slugs keep ASCII letters and digits plus Korean Hangul syllables, joined by a
single separator (``-`` or ``_``). Everything here is pure; uniqueness against
stored content lives in ``app.services.slug``.
"""

import random
import re
import secrets
import string
import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from slugify import slugify

from app.core.config import settings
from .exceptions import InvalidMethodError, ValidationError

SEPARATORS = ("-", "_")

HANGUL_SYLLABLE_PATTERN = re.compile(r"[가-힣]")
SLUG_CHARSET_PATTERN = re.compile(r"[A-Za-z0-9가-힣\-_]+")
EDGE_SEPARATOR_PATTERN = re.compile(r"^[-_]|[-_]$")
REPEATED_SEPARATOR_PATTERN = re.compile(r"[-_]{2,}")


class SlugMethod(str, Enum):
    AUTO = "auto"
    KOREAN = "korean"
    ENGLISH = "english"


@dataclass(frozen=True)
class SlugCandidate:
    original_title: str
    normalized: str
    separator: str
    method: SlugMethod
    used_fallback: bool = False
    truncated: bool = False


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


def _is_hangul(char: str) -> bool:
    return "가" <= char <= "힣"


def _check_separator(separator: str) -> None:
    if separator not in SEPARATORS:
        raise ValidationError(f"Unsupported slug separator: {separator!r}")


def contains_korean(text: str) -> bool:
    """Check if text contains at least one Hangul syllable"""
    return bool(text) and HANGUL_SYLLABLE_PATTERN.search(text) is not None


def normalize(title: str, separator: str = "-", keep_hangul: bool = True) -> str:
    """Convert a title to a slug candidate

    Returns an empty string when nothing usable is left, so the caller can
    fall back to a generated slug.
    """
    _check_separator(separator)
    if not title:
        return ""

    # Compose decomposed jamo into syllables before looking at characters
    text = unicodedata.normalize("NFC", title)

    chars = []
    for char in text:
        if _is_hangul(char):
            chars.append(char if keep_hangul else " ")
            continue
        # Fold accents and compatibility forms down to plain ASCII
        for part in unicodedata.normalize("NFKD", char):
            if part.isascii() and part.isalnum():
                chars.append(part.lower())
            elif not unicodedata.combining(part):
                chars.append(" ")

    # Whitespace and anything disallowed collapse into a single separator
    slug = re.sub(r"\s+", separator, "".join(chars))
    return slug.strip(separator)


def apply_method(title: str, method: str, separator: str = "-") -> str:
    """Run the generation strategy named by method"""
    try:
        method = SlugMethod(method)
    except ValueError:
        raise InvalidMethodError(f"Unsupported slug generation method: {method!r}")

    if method is SlugMethod.AUTO:
        method = SlugMethod.KOREAN if contains_korean(title) else SlugMethod.ENGLISH

    if method is SlugMethod.KOREAN:
        return normalize(title, separator)

    slug = normalize(title, separator, keep_hangul=False)
    if not slug:
        # Nothing Latin left; romanize instead (e.g. Hangul-only titles)
        slug = normalize(slugify(title or "", separator=separator), separator)
    return slug


class FallbackSlugGenerator:
    """Random slugs for titles that normalize to nothing"""

    ALPHABET = string.ascii_letters + string.digits

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        prefix: Optional[str] = None,
        length: Optional[int] = None,
    ):
        self.rng = rng or secrets.SystemRandom()
        self.prefix = prefix or settings.SLUG_FALLBACK_PREFIX
        self.length = length or settings.SLUG_FALLBACK_LENGTH

    def generate(self, separator: str = "-") -> str:
        # "page-XXXXXXXX"; the prefix is joined with the requested separator,
        # so underscore-style slugs get "page_XXXXXXXX"
        suffix = "".join(self.rng.choice(self.ALPHABET) for _ in range(self.length))
        return f"{self.prefix}{separator}{suffix}"


def truncate_slug(slug: str, max_length: Optional[int] = None) -> str:
    """Cut a slug to max_length without leaving a dangling separator"""
    if max_length is None:
        max_length = settings.SLUG_MAX_LENGTH
    if len(slug) <= max_length:
        return slug
    return slug[:max_length].rstrip("".join(SEPARATORS))


def build_candidate(
    title: str,
    method: str = SlugMethod.AUTO,
    separator: str = "-",
    fallback: Optional[FallbackSlugGenerator] = None,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> SlugCandidate:
    """Normalize, truncate and (if needed) replace a title's slug candidate"""
    if min_length is None:
        min_length = settings.SLUG_MIN_LENGTH
    if max_length is None:
        max_length = settings.SLUG_MAX_LENGTH

    normalized = apply_method(title, method, separator)

    truncated = len(normalized) > max_length
    if truncated:
        normalized = truncate_slug(normalized, max_length)

    used_fallback = len(normalized) < min_length
    if used_fallback:
        normalized = (fallback or FallbackSlugGenerator()).generate(separator)

    return SlugCandidate(
        original_title=title,
        normalized=normalized,
        separator=separator,
        method=SlugMethod(method),
        used_fallback=used_fallback,
        truncated=truncated,
    )


def validate_slug(
    slug: str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> ValidationResult:
    """Check a slug against the format rules, collecting every failure"""
    if min_length is None:
        min_length = settings.SLUG_MIN_LENGTH
    if max_length is None:
        max_length = settings.SLUG_MAX_LENGTH

    if not slug:
        return ValidationResult(is_valid=False, errors=["Slug must not be empty."])

    errors = []
    if len(slug) < min_length:
        errors.append(f"Slug must be at least {min_length} characters long.")
    if len(slug) > max_length:
        errors.append(f"Slug must be at most {max_length} characters long.")
    if not SLUG_CHARSET_PATTERN.fullmatch(slug):
        errors.append(
            "Slug may only contain letters, digits, Hangul, hyphens (-) and underscores (_)."
        )
    if EDGE_SEPARATOR_PATTERN.search(slug):
        errors.append("Slug must not start or end with a hyphen or underscore.")
    if REPEATED_SEPARATOR_PATTERN.search(slug):
        errors.append("Slug must not contain consecutive separators.")

    return ValidationResult(is_valid=not errors, errors=errors)


def guess_separator(slug: str) -> str:
    """Pick the separator a slug already uses, defaulting to a hyphen"""
    if "_" in slug and "-" not in slug:
        return "_"
    return "-"
