from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from jobmatch.ai.types import CompletionClient
from jobmatch.api.deps import get_llm_client
from jobmatch.api.validation import require_text
from jobmatch.normalize.sanitize import sanitize_text
from jobmatch.schemas.api import (
    PreprocessJDRequest,
    PreprocessJDResponse,
    PreprocessResumeRequest,
    PreprocessResumeResponse,
)
from jobmatch.services.analyzer_service import preprocess_jd, preprocess_resume

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/preprocess/jd", response_model=PreprocessJDResponse)
async def preprocess_jd_route(
    payload: PreprocessJDRequest,
    client: CompletionClient = Depends(get_llm_client),
):
    jd = require_text(payload.jd, field="jd", message="Job description is required")
    sanitized = sanitize_text(jd)
    logger.info("jd_preprocess_started length=%s", len(sanitized))

    structured_jd = await preprocess_jd(client, sanitized)

    logger.info("jd_preprocess_succeeded title=%s", structured_jd.title)
    return PreprocessJDResponse(structured_jd=structured_jd)


@router.post(
    "/preprocess/resume",
    response_model=PreprocessResumeResponse,
    response_model_exclude_none=True,
)
async def preprocess_resume_route(
    payload: PreprocessResumeRequest,
    client: CompletionClient = Depends(get_llm_client),
):
    resume_text = require_text(payload.resume_text, field="resumeText", message="Resume text is required")
    sanitized = sanitize_text(resume_text)
    logger.info("resume_preprocess_started length=%s", len(sanitized))

    structured_resume = await preprocess_resume(client, sanitized)

    logger.info("resume_preprocess_succeeded skills=%s", len(structured_resume.skills))
    return PreprocessResumeResponse(structured_resume=structured_resume)
