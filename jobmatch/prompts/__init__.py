from .extraction import (
    build_jd_extraction_request,
    build_metadata_extraction_request,
    build_resume_extraction_request,
)
from .matching import (
    build_match_analysis_request,
    build_raw_match_request,
    build_tailored_resume_request,
    to_prompt_json,
)

__all__ = [
    "build_jd_extraction_request",
    "build_resume_extraction_request",
    "build_metadata_extraction_request",
    "build_match_analysis_request",
    "build_raw_match_request",
    "build_tailored_resume_request",
    "to_prompt_json",
]
