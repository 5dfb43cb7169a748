from __future__ import annotations

from jobmatch.ai.types import ChatMessage, CompletionRequest
from jobmatch.normalize.sanitize import sanitize_text

EXTRACTION_INPUT_CHARS = 6000

JSON_ONLY_RULE = "Respond ONLY with a valid JSON object. No markdown, no code fences, no explanations."

_JD_SYSTEM = "You are a professional job description parser that outputs structured JSON."

_JD_SCHEMA = """{
  "title": string,
  "company": string,
  "location": string,
  "employmentType": string,        // e.g. "Full-time", "Contract"
  "experienceLevel": string,       // e.g. "Entry-level", "Mid-level", "Senior"
  "educationRequirements": string[],
  "domain": string,                // e.g. "FinTech", "Healthcare"
  "responsibilities": string[],
  "mustHaveSkills": string[],
  "niceToHaveSkills": string[],
  "technologies": string[],
  "summary": string                // 2-3 sentences
}"""

_RESUME_SYSTEM = "You extract structured JSON from resumes."

_RESUME_SCHEMA = """{
  "name": string,
  "email": string,
  "phone": string,
  "location": string,
  "summary": string,
  "skills": string[],              // explicit and inferred skills
  "education": [
    {"institution": string, "degree": string, "field": string, "startDate": string, "endDate": string}
  ],
  "inferredExperience": [
    {"bullets": string[], "technologies": string[]}
  ],
  "experience": [
    {
      "company": string,
      "title": string,
      "location": string,
      "startDate": string,
      "endDate": string,
      "bullets": string[],         // concise key achievements
      "technologies": string[]     // tools and technologies named in the text
    }
  ],
  "projects": [
    {"name": string, "description": string, "technologies": string[], "bullets": string[]}
  ],
  "certifications": string[]
}"""

_METADATA_SYSTEM = "You are an HTML parser that extracts structured job metadata from HTML content."

_METADATA_SCHEMA = """{
  "company": {
    "name": "",
    "logo": "",
    "linkedinUrl": ""
  },
  "job": {
    "title": "",
    "location": "",
    "employmentType": "",
    "applyUrl": "",
    "posted": "",
    "applicants": "",
    "promotedBy": "",
    "responsesManaged": ""
  }
}"""


def chat_request(system: str, user: str, *, temperature: float, max_tokens: int) -> CompletionRequest:
    return CompletionRequest(
        messages=(
            ChatMessage(role="system", content=system),
            ChatMessage(role="user", content=user),
        ),
        temperature=temperature,
        max_tokens=max_tokens,
    )


def build_jd_extraction_request(jd: str) -> CompletionRequest:
    sanitized = sanitize_text((jd or "")[:EXTRACTION_INPUT_CHARS])
    user = (
        "You are an expert job description analyst. Read the job description below and extract a "
        "structured JSON object with everything needed to match candidates against it.\n\n"
        "Guidelines:\n"
        "1. Read the text in context: infer the role type, the required technologies and the domain.\n"
        "2. Split skills into mustHaveSkills (explicitly required or strongly implied) and "
        "niceToHaveSkills (optional or supporting).\n"
        "3. List the main responsibilities as short bullet-style strings.\n"
        "4. Extract experience level, education requirements, employment type and location when present.\n"
        "5. Put every tool, framework, library or technology mentioned into technologies.\n"
        "6. Avoid filler words and duplicates; use consistent casing and concise phrasing.\n"
        f"7. {JSON_ONLY_RULE}\n"
        "8. Use an empty string or an empty array for anything the text does not state.\n\n"
        f"Return JSON in exactly this shape:\n{_JD_SCHEMA}\n\n"
        f"Job Description Text:\n{sanitized}\n"
    )
    return chat_request(_JD_SYSTEM, user, temperature=0.3, max_tokens=1200)


def build_resume_extraction_request(resume_text: str) -> CompletionRequest:
    sanitized = sanitize_text((resume_text or "")[:EXTRACTION_INPUT_CHARS])
    user = (
        "You are an expert resume analyst. Analyze the resume below and extract a comprehensive "
        "structured JSON object.\n\n"
        "Guidelines:\n"
        "1. Read the resume as a whole; infer details only when they are clearly implied.\n"
        "2. When there is no explicit skills section, collect skills from experience, projects and summary.\n"
        "3. Normalize and deduplicate skills (\"React.js\" -> \"React\", \"Javascript\" -> \"JavaScript\").\n"
        "4. Order education, experience and projects chronologically where possible.\n"
        "5. Record inferred time spent with skills or areas in inferredExperience, "
        "e.g. \"4 years of frontend experience\", \"2 years of backend experience\".\n"
        "6. Rewrite experience and project bullets briefly but clearly.\n"
        "7. Use ISO dates: YYYY-MM-DD when the full date is known, otherwise YYYY-MM.\n"
        "8. Never invent unrealistic data.\n"
        "9. Keep all strings trimmed and concise.\n"
        f"10. {JSON_ONLY_RULE}\n\n"
        f"Return JSON in exactly this shape:\n{_RESUME_SCHEMA}\n\n"
        f"Resume Text:\n{sanitized}\n"
    )
    return chat_request(_RESUME_SYSTEM, user, temperature=0.2, max_tokens=1200)


def build_metadata_extraction_request(html: str) -> CompletionRequest:
    sanitized = sanitize_text((html or "")[:EXTRACTION_INPUT_CHARS])
    user = (
        "You are an expert HTML parser for job posting pages such as LinkedIn. Extract the job "
        "posting metadata from the HTML below into this JSON shape:\n\n"
        f"{_METADATA_SCHEMA}\n\n"
        "Instructions:\n"
        "- Extract only what is visible or explicitly stated in the HTML. Do not infer or guess.\n"
        "- Use an empty string for any field that is missing or unclear.\n"
        "- Keep URLs exactly as they appear, even when they are relative.\n"
        "- company.logo: the src of the <img> whose alt text contains \"logo\".\n"
        "- company.name and company.linkedinUrl: the text and href of the company name <a> tag.\n"
        "- job.title: the full text of the <h1> job title link.\n"
        "- job.location: the text giving city, state or country.\n"
        "- job.employmentType: the text next to the check icon, e.g. \"Full-time\".\n"
        "- job.applyUrl: the href of the job title link (<h1><a>...</a></h1>).\n"
        "- job.posted: the text containing \"Reposted\", \"Posted\" or a similar phrase.\n"
        "- job.applicants: a phrase such as \"Over 100 people clicked apply\".\n"
        "- job.promotedBy and job.responsesManaged: the text following those labels, if present.\n"
        f"- {JSON_ONLY_RULE}\n\n"
        f"HTML:\n\n{sanitized}\n"
    )
    return chat_request(_METADATA_SYSTEM, user, temperature=0.2, max_tokens=1000)
