from __future__ import annotations

from pydantic import ValidationError

from jobmatch.schemas.normalized import JobMetadataResponse, ParsedJobMetadata

from .utils import load_json_object, schema_error


def empty_job_metadata() -> JobMetadataResponse:
    return JobMetadataResponse()


def flatten_job_metadata(parsed: ParsedJobMetadata) -> JobMetadataResponse:
    # salary, applicationDeadline, remote, benefits and additionalInfo are
    # never requested from the model and stay empty.
    return JobMetadataResponse(
        company_linked_in_url=parsed.company.linkedin_url,
        company_logo_url=parsed.company.logo,
        company_name=parsed.company.name,
        job_title=parsed.job.title,
        location=parsed.job.location,
        posted_date=parsed.job.posted,
        job_type=parsed.job.employment_type,
        apply_url=parsed.job.apply_url,
        applicants=parsed.job.applicants,
        promoted_by=parsed.job.promoted_by,
        responses_managed=parsed.job.responses_managed,
    )


def normalize_job_metadata(raw: str) -> JobMetadataResponse:
    data = load_json_object(raw, what="job metadata extraction")
    try:
        parsed = ParsedJobMetadata.model_validate(data)
    except ValidationError as exc:
        raise schema_error(exc, what="job metadata") from exc
    return flatten_job_metadata(parsed)
