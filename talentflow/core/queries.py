"""Query Helpers — pure filtering and pagination over lists of documents.

Invariants:
    - Filters never reorder their input (ordering is the store's job)
    - Search is a case-insensitive substring match
    - Tag filter is match-any
    - paginate() clamps nothing: an out-of-range page yields empty data
"""

import math


def job_matches(job: dict, status: str | None = None,
                tags: list[str] | None = None, search: str | None = None) -> bool:
    if status and job.get("status") != status:
        return False
    job_tags = job.get("tags") or []
    if tags and not any(tag in job_tags for tag in tags):
        return False
    if search:
        term = search.lower()
        haystacks = [job.get("title") or "", job.get("description") or "", *job_tags]
        if not any(term in h.lower() for h in haystacks):
            return False
    return True


def candidate_matches(candidate: dict, search: str | None = None) -> bool:
    if not search:
        return True
    term = search.lower()
    return (
        term in (candidate.get("name") or "").lower()
        or term in (candidate.get("email") or "").lower()
    )


def paginate(items: list, page: int, page_size: int) -> dict:
    """Slice items into a page envelope. page is 1-based."""
    total = len(items)
    offset = (page - 1) * page_size
    return {
        "data": items[offset:offset + page_size],
        "page": page,
        "page_size": page_size,
        "total": total,
        "total_pages": math.ceil(total / page_size),
        "has_more": offset + page_size < total,
    }
