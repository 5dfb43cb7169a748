from __future__ import annotations

import json
from typing import Any

from jobmatch.ai.types import CompletionRequest
from jobmatch.normalize.sanitize import sanitize_text

from .extraction import JSON_ONLY_RULE, chat_request

MATCH_JD_CHARS = 3000
MATCH_RESUME_CHARS = 6000

_MATCH_SYSTEM = "You are a job resume matching expert that produces accurate, structured JSON analyses."

_MATCH_SCHEMA = """{
  "matchScore": number,         // overall job fit, integer 0-100
  "matchedSkills": string[],    // exact and semantically similar skills present in both
  "missingSkills": string[],    // key JD skills missing or weakly represented in the resume
  "suggestions": string[],      // actionable resume improvements
  "sampleBullets": string[],    // example bullets that improve alignment
  "summary": string             // 2-3 sentences on fit, strengths and gaps
}"""

_TAILOR_SYSTEM = (
    "You are a professional resume writer that produces tailored, authentic resume content in JSON format."
)

_TAILOR_SCHEMA = """{
  "tailoredSummary": string,
  "tailoredSkills": string[],
  "tailoredExperience": [
    {"role": string, "company": string, "bullets": string[]}
  ],
  "tailoredProjects": [
    {"name": string, "description": string, "bullets": string[]}
  ],
  "coverLetterHighlights": string[]
}"""

_MATCH_GUIDELINES = (
    "Guidelines:\n"
    "1. Consider explicit and inferred skills and experience in the resume, including experience, "
    "inferredExperience, projects and technologies.\n"
    "2. Judge semantic similarity, not just keyword overlap (\"React.js\" ~ \"React\", \"Node\" ~ \"Express\").\n"
    "3. Check that the role level (junior/mid/senior) fits the experience and responsibilities.\n"
    "4. Check the domain and tooling fit, e.g. FinTech, SaaS, Healthcare.\n"
    "5. Name must-have skills that are missing or weakly represented. A skill backed by years of "
    "inferred experience (e.g. \"5 years of sales experience\") counts as present.\n"
    "6. Give 3-5 actionable suggestions for aligning the resume with this job.\n"
    "7. Give 3-5 sample bullet points that naturally work in missing or weak skills.\n"
    f"8. {JSON_ONLY_RULE}\n"
)


def to_prompt_json(value: Any, *, indent: int | None = None) -> str:
    if hasattr(value, "model_dump"):
        value = value.model_dump(by_alias=True, exclude_none=True)
    return json.dumps(value, indent=indent, ensure_ascii=False)


def build_match_analysis_request(jd: str, structured_jd_json: str, structured_resume_json: str) -> CompletionRequest:
    sanitized_jd = sanitize_text((jd or "")[:MATCH_JD_CHARS])
    user = (
        "You are an expert technical recruiter and resume evaluator. Compare:\n"
        "1. The original job description text (for tone, role intent and domain cues).\n"
        "2. The structured job description JSON (for explicit requirements, skills and responsibilities).\n"
        "3. The structured resume JSON (for the candidate's skills, experience, education and projects).\n\n"
        "Produce a thorough job-resume fit analysis.\n\n"
        f"{_MATCH_GUIDELINES}\n"
        f"Return JSON in exactly this shape:\n{_MATCH_SCHEMA}\n\n"
        f"Job Description (raw text):\n{sanitized_jd}\n\n"
        f"Structured Job Description (JSON):\n{structured_jd_json}\n\n"
        f"Structured Resume (JSON):\n{structured_resume_json}\n"
    )
    return chat_request(_MATCH_SYSTEM, user, temperature=0.5, max_tokens=1800)


def build_raw_match_request(jd: str, resume_text: str) -> CompletionRequest:
    sanitized_jd = sanitize_text((jd or "")[:MATCH_JD_CHARS])
    sanitized_resume = sanitize_text((resume_text or "")[:MATCH_RESUME_CHARS])
    user = (
        "You are an expert technical recruiter and resume evaluator. Compare the job description "
        "and the resume below, both given as plain text, and produce a job-resume fit analysis.\n\n"
        f"{_MATCH_GUIDELINES}\n"
        f"Return JSON in exactly this shape:\n{_MATCH_SCHEMA}\n\n"
        f"Job Description:\n{sanitized_jd}\n\n"
        f"Resume:\n{sanitized_resume}\n"
    )
    return chat_request(_MATCH_SYSTEM, user, temperature=0.5, max_tokens=1800)


def build_tailored_resume_request(structured_jd_json: str, structured_resume_json: str) -> CompletionRequest:
    user = (
        "You are an expert resume writer and career coach. Using the structured job description and "
        "the candidate's structured resume, write resume sections that show the best fit between "
        "the candidate and this job.\n\n"
        "Guidelines:\n"
        "1. Write a 2-3 sentence professional summary stressing the most relevant experience, skills "
        "and achievements for this role.\n"
        "2. Reorder skills so that the job's must-have and nice-to-have skills come first.\n"
        "3. For the top 2 experience entries, write 4-5 bullet points each that:\n"
        "   - combine skills the job asks for with skills the resume already shows\n"
        "   - highlight achievements aligned with the job requirements\n"
        "   - quantify results where possible\n"
        "   - show progression and impact\n"
        "   - keep the company name from the structured resume\n"
        "4. For projects, write descriptions that stress technologies and outcomes relevant to the job.\n"
        "5. Give 3-5 cover letter highlights the candidate should emphasize.\n\n"
        "Important:\n"
        "- Stay truthful to the candidate's actual experience; reframe, never fabricate.\n"
        "- Match the tone and terminology of the job description.\n"
        "- Prioritize the job's must-have skills, domain, technologies and responsibilities.\n"
        f"- {JSON_ONLY_RULE}\n\n"
        f"Return JSON in exactly this shape:\n{_TAILOR_SCHEMA}\n\n"
        f"Structured Job Description:\n{structured_jd_json}\n\n"
        f"Structured Resume:\n{structured_resume_json}\n"
    )
    return chat_request(_TAILOR_SYSTEM, user, temperature=0.7, max_tokens=2000)
