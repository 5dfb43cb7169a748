from __future__ import annotations

import logging

from jobmatch.ai.types import CompletionClient, CompletionRequest
from jobmatch.core.errors import AnalysisError
from jobmatch.normalize.normalize_jd import normalize_structured_jd
from jobmatch.normalize.normalize_match import normalize_match_analysis
from jobmatch.normalize.normalize_metadata import normalize_job_metadata
from jobmatch.normalize.normalize_resume import normalize_structured_resume
from jobmatch.normalize.normalize_tailored import empty_tailored_resume, normalize_tailored_resume
from jobmatch.normalize.sanitize import sanitize_text
from jobmatch.prompts import (
    build_jd_extraction_request,
    build_match_analysis_request,
    build_metadata_extraction_request,
    build_raw_match_request,
    build_resume_extraction_request,
    build_tailored_resume_request,
    to_prompt_json,
)
from jobmatch.prompts.extraction import EXTRACTION_INPUT_CHARS
from jobmatch.schemas.normalized import (
    AnalysisResult,
    JobMetadataResponse,
    MatchAnalysis,
    StructuredJD,
    StructuredResume,
    TailoredResume,
)

logger = logging.getLogger(__name__)


async def _complete(client: CompletionClient, request: CompletionRequest) -> str:
    return await client.complete(
        request.messages,
        temperature=request.temperature,
        max_tokens=request.max_tokens,
        model=request.model,
    )


async def preprocess_jd(client: CompletionClient, jd: str) -> StructuredJD:
    try:
        raw = await _complete(client, build_jd_extraction_request(jd))
        return normalize_structured_jd(raw)
    except Exception as exc:  # noqa: BLE001 - every failure of a mandatory step is wrapped
        logger.error("jd_preprocess_failed jd_len=%s: %s", len(jd or ""), exc)
        raise AnalysisError(f"Failed to preprocess job description: {exc}") from exc


async def preprocess_resume(client: CompletionClient, resume_text: str) -> StructuredResume:
    """Extract a structured resume.

    Transport and configuration failures raise ``AnalysisError``. Output that is
    not usable JSON does not: it degrades to an empty resume whose summary holds
    the start of the sanitized input.
    """
    sanitized = sanitize_text((resume_text or "")[:EXTRACTION_INPUT_CHARS])
    try:
        raw = await _complete(client, build_resume_extraction_request(resume_text))
    except Exception as exc:  # noqa: BLE001
        logger.error("resume_preprocess_failed resume_len=%s: %s", len(resume_text or ""), exc)
        raise AnalysisError(f"Failed to preprocess resume: {exc}") from exc
    return normalize_structured_resume(raw, sanitized)


async def parse_job_metadata(client: CompletionClient, metadata_html: str) -> JobMetadataResponse:
    raw = await _complete(client, build_metadata_extraction_request(metadata_html))
    return normalize_job_metadata(raw)


async def analyze_match(
    client: CompletionClient,
    jd: str,
    structured_jd: StructuredJD,
    structured_resume: StructuredResume,
) -> MatchAnalysis:
    request = build_match_analysis_request(
        jd,
        to_prompt_json(structured_jd),
        to_prompt_json(structured_resume),
    )
    try:
        raw = await _complete(client, request)
        return normalize_match_analysis(raw)
    except Exception as exc:  # noqa: BLE001
        logger.error("match_analysis_failed: %s", exc)
        raise AnalysisError(f"Failed to run match analysis: {exc}") from exc


async def generate_tailored_resume(
    client: CompletionClient,
    structured_jd: StructuredJD,
    structured_resume: StructuredResume,
) -> TailoredResume:
    request = build_tailored_resume_request(
        to_prompt_json(structured_jd, indent=2),
        to_prompt_json(structured_resume, indent=2),
    )
    try:
        raw = await _complete(client, request)
        return normalize_tailored_resume(raw)
    except Exception as exc:  # noqa: BLE001
        logger.error("tailored_resume_failed: %s", exc)
        raise AnalysisError(f"Failed to generate tailored resume: {exc}") from exc


async def analyze(
    client: CompletionClient,
    jd: str,
    structured_resume: StructuredResume,
    metadata_source: str | None = None,
) -> AnalysisResult:
    """Full analysis for a job description against an already structured resume.

    JD extraction and match analysis are mandatory: their failure aborts the
    call. Metadata extraction and tailoring are best-effort: on failure the
    result carries no ``job_metadata`` or the empty placeholder tailored resume.
    """
    try:
        structured_jd = await preprocess_jd(client, jd)

        job_metadata: JobMetadataResponse | None = None
        if metadata_source and metadata_source.strip():
            try:
                job_metadata = await parse_job_metadata(client, metadata_source)
                logger.info("job_metadata_parsed company=%s", job_metadata.company_name)
            except Exception as exc:  # noqa: BLE001 - metadata is optional
                logger.warning("job_metadata_failed html_len=%s: %s", len(metadata_source), exc)

        match = await analyze_match(client, jd, structured_jd, structured_resume)
    except AnalysisError as exc:
        raise AnalysisError(f"Failed to analyze job description and resume: {exc}") from exc

    result = AnalysisResult(
        **match.model_dump(),
        structured_jd=structured_jd,
        tailored_resume=empty_tailored_resume(),
        job_metadata=job_metadata,
    )

    try:
        tailored = await generate_tailored_resume(client, structured_jd, structured_resume)
    except AnalysisError as exc:
        logger.warning("tailored_resume_skipped: %s", exc)
        return result

    return result.model_copy(update={"tailored_resume": tailored})


async def analyze_raw(client: CompletionClient, jd: str, resume_text: str) -> AnalysisResult:
    """Single match-analysis call against raw JD and resume text; no preprocessing or tailoring."""
    try:
        raw = await _complete(client, build_raw_match_request(jd, resume_text))
        match = normalize_match_analysis(raw)
    except Exception as exc:  # noqa: BLE001
        logger.error("raw_analysis_failed jd_len=%s resume_len=%s: %s", len(jd or ""), len(resume_text or ""), exc)
        raise AnalysisError(f"Failed to analyze job description and resume: {exc}") from exc
    return AnalysisResult(**match.model_dump())
