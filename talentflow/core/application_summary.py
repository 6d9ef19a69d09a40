"""Application Summary — pure partition of a candidate's applications by status.

Invariants:
    - Input is a list of application dicts (no IO, no DB)
    - Every application lands in at most one bucket; unknown statuses only count in total
    - Derived on every call, never persisted
"""

from talentflow.core.domain_types import CandidateStage, INTERVIEW_STAGES


def summarize_applications(applications: list[dict]) -> dict:
    """Partition applications into hired/rejected/interview_scheduled/applied."""
    def with_status(*statuses: str) -> list[dict]:
        return [a for a in applications if a.get("status") in statuses]

    return {
        "total_applications": len(applications),
        "hired": with_status(CandidateStage.HIRED.value),
        "rejected": with_status(CandidateStage.REJECTED.value),
        "interview_scheduled": with_status(*(s.value for s in INTERVIEW_STAGES)),
        "applied": with_status(CandidateStage.APPLIED.value),
    }
