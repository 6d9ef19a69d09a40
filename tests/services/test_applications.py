"""Job applications — verifies duplicates, status history, enrichment and summaries.

Tests:
    - A second application to the same job raises DuplicateApplicationError
    - Status updates keep previous notes when given none and log a status_change event
    - A generic patch never moves the application and logs nothing
    - Reads enrich each application with the live job
    - Status summary partitions applications without storing anything
"""

import pytest

from talentflow.core.errors import DuplicateApplicationError, NotFoundError, ValidationError


async def test_apply_writes_application_and_event(service, job, candidate):
    application = await service.apply_candidate_to_job(candidate["id"], job["id"])
    assert application["status"] == "applied"
    assert application["job_title"] == "Backend Engineer"
    assert application["applied_at"] is not None

    events = [
        e for e in await service.get_candidate_timeline(candidate["id"])
        if e["type"] == "job_application"
    ]
    assert events[0]["title"] == "Applied for Backend Engineer"
    assert events[0]["metadata"] == {
        "job_id": job["id"], "application_id": application["id"], "status": "applied",
    }


async def test_duplicate_application_rejected(service, job, candidate):
    await service.apply_candidate_to_job(candidate["id"], job["id"])
    with pytest.raises(DuplicateApplicationError):
        await service.apply_candidate_to_job(candidate["id"], job["id"])
    assert len(await service.get_candidate_job_applications(candidate["id"])) == 1


async def test_apply_to_unknown_job_or_candidate(service, job, candidate):
    with pytest.raises(NotFoundError) as exc:
        await service.apply_candidate_to_job(candidate["id"], "missing")
    assert exc.value.resource_type == "Job"
    with pytest.raises(NotFoundError) as exc:
        await service.apply_candidate_to_job("missing", job["id"])
    assert exc.value.resource_type == "Candidate"


async def test_status_update_keeps_notes_and_logs_event(service, job, candidate):
    application = await service.create_job_application({
        "candidate_id": candidate["id"], "job_id": job["id"], "notes": "Referred by Sam",
    })
    updated = await service.update_job_application_status(application["id"], "tech")
    assert updated["status"] == "tech"
    assert updated["notes"] == "Referred by Sam"

    updated = await service.update_job_application_status(application["id"], "offer", "Strong loop")
    assert updated["notes"] == "Strong loop"

    events = [
        e for e in await service.get_candidate_timeline(candidate["id"])
        if e["type"] == "status_change"
    ]
    assert len(events) == 2
    assert events[0]["title"] == "Status changed to offer"
    assert events[0]["metadata"] == {
        "job_id": job["id"],
        "application_id": application["id"],
        "old_status": "tech",
        "new_status": "offer",
        "notes": "Strong loop",
    }


async def test_generic_patch_writes_no_event(service, job, candidate):
    application = await service.apply_candidate_to_job(candidate["id"], job["id"])
    before = await service.get_candidate_timeline(candidate["id"])

    patched = await service.update_job_application(application["id"], {
        "notes": "Call back Monday", "job_id": "elsewhere", "source": "referral",
    })

    assert patched["notes"] == "Call back Monday"
    assert patched["source"] == "referral"
    assert patched["job_id"] == job["id"]
    assert patched["status"] == "applied"
    assert await service.get_candidate_timeline(candidate["id"]) == before
    with pytest.raises(ValidationError):
        await service.update_job_application(application["id"], {"status": "ghosted"})
    with pytest.raises(NotFoundError):
        await service.update_job_application("missing", {"notes": "x"})

async def test_status_update_validation(service, job, candidate):
    application = await service.apply_candidate_to_job(candidate["id"], job["id"])
    with pytest.raises(ValidationError):
        await service.update_job_application_status(application["id"], "ghosted")
    with pytest.raises(NotFoundError):
        await service.update_job_application_status("missing", "hired")


async def test_enrichment_uses_live_job_title(service, job, candidate):
    await service.apply_candidate_to_job(candidate["id"], job["id"])
    await service.update_job(job["id"], {"title": "Senior Backend Engineer"})
    [application] = await service.get_candidate_job_applications(candidate["id"])
    assert application["job_title"] == "Senior Backend Engineer"
    assert application["job_details"]["id"] == job["id"]


async def test_applications_by_status(service, job, candidate):
    other = await service.create_job({"title": "Designer"})
    await service.apply_candidate_to_job(candidate["id"], job["id"])
    second = await service.apply_candidate_to_job(candidate["id"], other["id"])
    await service.update_job_application_status(second["id"], "hired")

    hired = await service.get_job_applications_by_status("hired")
    assert [a["id"] for a in hired] == [second["id"]]
    assert hired[0]["candidate_details"]["id"] == candidate["id"]
    assert hired[0]["job_details"]["title"] == "Designer"
    with pytest.raises(ValidationError):
        await service.get_job_applications_by_status("unknown")


async def test_candidate_job_status_summary(service, job, candidate):
    jobs = [job] + [await service.create_job({"title": t}) for t in ("Designer", "PM")]
    applications = [
        await service.apply_candidate_to_job(candidate["id"], j["id"]) for j in jobs
    ]
    await service.update_job_application_status(applications[1]["id"], "tech")
    await service.update_job_application_status(applications[2]["id"], "hired")

    result = await service.get_candidate_job_status(candidate["id"])
    summary = result["status_summary"]
    assert len(result["applications"]) == 3
    assert summary["total_applications"] == 3
    assert len(summary["applied"]) == 1
    assert len(summary["interview_scheduled"]) == 1
    assert len(summary["hired"]) == 1
    assert summary["rejected"] == []
