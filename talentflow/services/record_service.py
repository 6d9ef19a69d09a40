"""Record Service — the single entry point that mutates the store.

Invariants:
    - Every public operation is bound explicitly below — no getattr magic, no
      auto-discovery
    - Every operation runs in exactly one store transaction (see handle_*.py)
    - Errors propagate unchanged: domain errors from the handlers, StorageError
      from the store

Design Decisions:
    - Split handlers by entity family: small classes, one shared store
    - Attributes instead of a name->handler dict: callers await
      service.create_job(...) directly and type checkers follow the binding
"""

from talentflow.config import Settings, get_settings
from talentflow.infrastructure.store import LocalStore
from talentflow.services.handle_applications import ApplicationHandlers
from talentflow.services.handle_assessments import (
    AssessmentHandlers, AssessmentResponseHandlers,
)
from talentflow.services.handle_candidates import CandidateHandlers
from talentflow.services.handle_jobs import JobHandlers, JobQueries
from talentflow.services.handle_notes import NoteHandlers
from talentflow.services.handle_stats import StatsHandlers


class RecordService:
    """Record-level operations over a LocalStore."""

    def __init__(self, store: LocalStore, settings: Settings | None = None):
        settings = settings or get_settings()
        self.store = store
        self.settings = settings
        job_queries = JobQueries(store, settings)
        jobs = JobHandlers(store, settings)
        candidates = CandidateHandlers(store, settings)
        notes = NoteHandlers(store, settings)
        assessments = AssessmentHandlers(store, settings)
        responses = AssessmentResponseHandlers(store, settings)
        applications = ApplicationHandlers(store, settings)
        stats = StatsHandlers(store, settings)

        # Jobs
        self.list_jobs = job_queries.list_jobs
        self.get_job_by_id = job_queries.get_job_by_id
        self.get_job_by_slug = job_queries.get_job_by_slug
        self.is_slug_unique = job_queries.is_slug_unique
        self.create_job = jobs.create_job
        self.update_job = jobs.update_job
        self.delete_job = jobs.delete_job
        self.reorder_jobs = jobs.reorder_jobs

        # Candidates & timeline
        self.list_candidates = candidates.list_candidates
        self.get_candidate_by_id = candidates.get_candidate_by_id
        self.create_candidate = candidates.create_candidate
        self.update_candidate = candidates.update_candidate
        self.delete_candidate = candidates.delete_candidate
        self.get_candidate_timeline = candidates.get_candidate_timeline

        # Notes
        self.create_note = notes.create_note
        self.get_candidate_notes = notes.get_candidate_notes
        self.update_note = notes.update_note
        self.delete_note = notes.delete_note

        # Assessments & responses
        self.list_assessments = assessments.list_assessments
        self.get_assessment_by_id = assessments.get_assessment_by_id
        self.get_assessment_by_job_id = assessments.get_assessment_by_job_id
        self.create_assessment = assessments.create_assessment
        self.update_assessment = assessments.update_assessment
        self.delete_assessment = assessments.delete_assessment
        self.create_assessment_response = responses.create_assessment_response
        self.get_assessment_response = responses.get_assessment_response

        # Job applications
        self.create_job_application = applications.create_job_application
        self.apply_candidate_to_job = applications.apply_candidate_to_job
        self.update_job_application = applications.update_job_application
        self.update_job_application_status = applications.update_job_application_status
        self.get_candidate_job_applications = applications.get_candidate_job_applications
        self.get_job_applications_by_status = applications.get_job_applications_by_status
        self.get_candidate_job_status = applications.get_candidate_job_status

        # Store-wide
        self.get_stats = stats.get_stats
        self.clear_all_data = stats.clear_all_data
