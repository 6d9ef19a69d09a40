"""Slug derivation — deterministic, URL-safe normalization of job titles.

Invariants:
    - slugify() is pure: same title, same slug
    - Output matches ^[a-z0-9]+(-[a-z0-9]+)*$ or is the fallback "job"
    - Suffix candidates are "{base}", "{base}-1", "{base}-2", ... in that order
"""

import re
from typing import Iterator

FALLBACK_SLUG = "job"

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def slugify(title: str) -> str:
    slug = _DISALLOWED.sub("", (title or "").lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug).strip("-")
    return slug or FALLBACK_SLUG


def slug_candidates(base: str, max_attempts: int) -> Iterator[str]:
    """Yield the base slug followed by numbered variants, max_attempts in total."""
    if max_attempts < 1:
        return
    yield base
    for counter in range(1, max_attempts):
        yield f"{base}-{counter}"
