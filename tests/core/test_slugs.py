"""Slug derivation — verifies normalization and the suffix probe order.

Tests:
    - Titles lower-cased, punctuation dropped, whitespace collapsed to single hyphens
    - Leading/trailing hyphens stripped; empty result falls back to "job"
    - slug_candidates yields base, base-1, base-2 ... bounded by max_attempts
"""

import re

import pytest

from talentflow.core.slugs import FALLBACK_SLUG, slug_candidates, slugify

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


@pytest.mark.parametrize("title, expected", [
    ("Backend Engineer", "backend-engineer"),
    ("Senior   Frontend\tDeveloper", "senior-frontend-developer"),
    ("C++ / Rust Engineer!", "c-rust-engineer"),
    ("QA -- Engineer", "qa-engineer"),
    ("  - Data Scientist -  ", "data-scientist"),
    ("Sales Representative #42", "sales-representative-42"),
])
def test_slugify_normalizes_titles(title, expected):
    assert slugify(title) == expected


@pytest.mark.parametrize("title", ["", "!!!", "---", "日本語"])
def test_slugify_falls_back_when_nothing_survives(title):
    assert slugify(title) == FALLBACK_SLUG


def test_slugify_output_is_url_safe():
    for title in ["Head of Growth & Marketing", "DevOps/SRE (Remote)", "  x  "]:
        assert SLUG_PATTERN.match(slugify(title))


def test_slug_candidates_probe_order():
    assert list(slug_candidates("backend-engineer", 4)) == [
        "backend-engineer",
        "backend-engineer-1",
        "backend-engineer-2",
        "backend-engineer-3",
    ]


def test_slug_candidates_bounded_by_max_attempts():
    assert len(list(slug_candidates("job", 1000))) == 1000
    assert list(slug_candidates("job", 0)) == []
