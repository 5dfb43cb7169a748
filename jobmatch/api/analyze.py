from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from jobmatch.ai.types import CompletionClient
from jobmatch.api.deps import get_llm_client
from jobmatch.api.validation import optional_text, require_text
from jobmatch.normalize.sanitize import sanitize_text
from jobmatch.schemas.api import AnalyzeRequest
from jobmatch.schemas.normalized import AnalysisResult
from jobmatch.services.analyzer_service import analyze, analyze_raw

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=AnalysisResult, response_model_exclude_none=True)
async def analyze_route(
    payload: AnalyzeRequest,
    client: CompletionClient = Depends(get_llm_client),
):
    jd = require_text(payload.jd, field="jd", message="Job description is required")
    sanitized_jd = sanitize_text(jd)

    if payload.structured_resume is not None:
        metadata_source = optional_text(payload.job_metadata, field="jobMetadata")
        logger.info(
            "analysis_started mode=structured jd_length=%s has_metadata=%s",
            len(sanitized_jd),
            bool(metadata_source and metadata_source.strip()),
        )
        result = await analyze(client, sanitized_jd, payload.structured_resume, metadata_source)
    else:
        resume = require_text(payload.resume, field="resume", message="Resume is required")
        sanitized_resume = sanitize_text(resume)
        logger.info(
            "analysis_started mode=raw jd_length=%s resume_length=%s",
            len(sanitized_jd),
            len(sanitized_resume),
        )
        result = await analyze_raw(client, sanitized_jd, sanitized_resume)

    logger.info("analysis_succeeded match_score=%s", result.match_score)
    return result
