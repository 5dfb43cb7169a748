import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobmatch.ai.types import ChatMessage, CompletionRequest  # noqa: E402
from jobmatch.core.errors import AnalysisError, LLMRetryExhaustedError  # noqa: E402
from jobmatch.schemas.normalized import StructuredResume  # noqa: E402
from jobmatch.services.analyzer_service import (  # noqa: E402
    _complete,
    analyze,
    analyze_raw,
    preprocess_jd,
    preprocess_resume,
)

JD_TEXT = (
    "Senior Backend Engineer at Acme. Must have Python, PostgreSQL and AWS. "
    "Nice to have Kubernetes. You will design APIs and mentor engineers."
)

JD_JSON = json.dumps(
    {
        "title": "Senior Backend Engineer",
        "company": "Acme",
        "mustHaveSkills": ["Python", "PostgreSQL", "AWS"],
        "niceToHaveSkills": ["Kubernetes"],
    }
)
MATCH_JSON = json.dumps(
    {
        "matchScore": 82,
        "matchedSkills": ["Python", "PostgreSQL"],
        "missingSkills": ["AWS"],
        "suggestions": ["Mention cloud deployments"],
        "sampleBullets": ["Deployed services to AWS ECS"],
        "summary": "Strong backend fit.",
    }
)
TAILOR_JSON = json.dumps(
    {
        "tailoredSummary": "Backend engineer focused on Python APIs.",
        "tailoredSkills": ["Python", "PostgreSQL"],
        "tailoredExperience": [{"role": "Engineer", "company": "Globex", "bullets": ["Built APIs"]}],
        "coverLetterHighlights": ["API design"],
    }
)
METADATA_JSON = json.dumps({"company": {"name": "Acme"}, "job": {"title": "Senior Backend Engineer"}})

_TASK_MARKERS = {
    "job description parser": "jd",
    "extract structured JSON from resumes": "resume",
    "HTML parser": "metadata",
    "matching expert": "match",
    "resume writer": "tailor",
}


class FakeCompletionClient:
    """Answers each sub-task by its system prompt; an Exception value is raised instead."""

    def __init__(self, **responses):
        self.responses = {"jd": JD_JSON, "match": MATCH_JSON, "tailor": TAILOR_JSON, "metadata": METADATA_JSON}
        self.responses.update(responses)
        self.calls: list[str] = []
        self.models: list[str | None] = []

    async def complete(self, messages, *, temperature, max_tokens=None, model=None):
        system = messages[0].content
        task = next(name for marker, name in _TASK_MARKERS.items() if marker in system)
        self.calls.append(task)
        self.models.append(model)
        response = self.responses[task]
        if isinstance(response, Exception):
            raise response
        return response


def _resume() -> StructuredResume:
    return StructuredResume(
        name="",
        summary="Backend engineer with 6 years of Python.",
        skills=["Python", "PostgreSQL"],
        experience=[{"company": "Globex", "title": "Engineer", "bullets": ["Built APIs"]}],
    )


class AnalyzeOrchestrationTests(unittest.IsolatedAsyncioTestCase):
    async def test_full_analysis_populates_every_section(self):
        client = FakeCompletionClient()

        result = await analyze(client, JD_TEXT, _resume(), "<h1>Senior Backend Engineer</h1>")

        self.assertEqual(client.calls, ["jd", "metadata", "match", "tailor"])
        self.assertEqual(result.match_score, 82)
        self.assertEqual(result.structured_jd.company, "Acme")
        self.assertEqual(result.tailored_resume.tailored_experience[0].company, "Globex")
        self.assertEqual(result.job_metadata.company_name, "Acme")

    async def test_blank_metadata_source_is_skipped(self):
        client = FakeCompletionClient()
        result = await analyze(client, JD_TEXT, _resume(), "   ")
        self.assertNotIn("metadata", client.calls)
        self.assertIsNone(result.job_metadata)

    async def test_metadata_failure_leaves_metadata_absent(self):
        client = FakeCompletionClient(metadata=ConnectionError("network unreachable"))

        result = await analyze(client, JD_TEXT, _resume(), "<div>posting</div>")

        self.assertIsNone(result.job_metadata)
        self.assertEqual(result.match_score, 82)
        self.assertEqual(result.structured_jd.title, "Senior Backend Engineer")
        self.assertEqual(result.tailored_resume.tailored_summary, "Backend engineer focused on Python APIs.")
        self.assertNotIn("jobMetadata", result.model_dump(by_alias=True, exclude_none=True))

    async def test_unparsable_metadata_leaves_metadata_absent(self):
        client = FakeCompletionClient(metadata="not json")
        result = await analyze(client, JD_TEXT, _resume(), "<div>posting</div>")
        self.assertIsNone(result.job_metadata)
        self.assertIn("tailor", client.calls)

    async def test_tailoring_failure_keeps_empty_placeholder(self):
        client = FakeCompletionClient(
            tailor=LLMRetryExhaustedError("OpenAI API call failed after 3 attempts: busy", attempts=3)
        )

        result = await analyze(client, JD_TEXT, _resume())

        self.assertEqual(result.match_score, 82)
        self.assertEqual(result.matched_skills, ["Python", "PostgreSQL"])
        self.assertEqual(result.tailored_resume.tailored_summary, "")
        self.assertEqual(result.tailored_resume.tailored_skills, [])
        self.assertEqual(result.tailored_resume.tailored_experience, [])
        self.assertEqual(result.tailored_resume.tailored_projects, [])
        self.assertEqual(result.tailored_resume.cover_letter_highlights, [])

    async def test_jd_failure_aborts_analysis(self):
        client = FakeCompletionClient(jd="not json at all")

        with self.assertRaises(AnalysisError) as ctx:
            await analyze(client, JD_TEXT, _resume())

        self.assertIn("Failed to preprocess job description", str(ctx.exception))
        self.assertEqual(client.calls, ["jd"])

    async def test_match_failure_aborts_analysis(self):
        client = FakeCompletionClient(match=TimeoutError("timed out"))

        with self.assertRaises(AnalysisError) as ctx:
            await analyze(client, JD_TEXT, _resume())

        self.assertIn("Failed to analyze job description and resume", str(ctx.exception))
        self.assertNotIn("tailor", client.calls)

    async def test_loosely_typed_replies_do_not_abort_analysis(self):
        client = FakeCompletionClient(
            jd=json.dumps({"title": "Engineer", "educationRequirements": "BS in Computer Science"}),
            match=json.dumps({"matchScore": 64, "matchedSkills": [{"skill": "Python"}, "SQL"]}),
        )

        result = await analyze(client, JD_TEXT, _resume())

        self.assertEqual(result.structured_jd.education_requirements, ["BS in Computer Science"])
        self.assertEqual(result.matched_skills, ["SQL"])
        self.assertEqual(result.match_score, 64)
        self.assertEqual(client.calls, ["jd", "match", "tailor"])

    async def test_match_score_is_clamped_in_result(self):
        client = FakeCompletionClient(match=json.dumps({"matchScore": 150}))
        result = await analyze(client, JD_TEXT, _resume())
        self.assertEqual(result.match_score, 100)
        self.assertEqual(result.missing_skills, [])


class SubTaskTests(unittest.IsolatedAsyncioTestCase):
    async def test_raw_analysis_makes_a_single_match_call(self):
        client = FakeCompletionClient(match=json.dumps({"matchScore": -10, "summary": "Weak fit."}))

        result = await analyze_raw(client, JD_TEXT, "Frontend developer with React experience.")

        self.assertEqual(client.calls, ["match"])
        self.assertEqual(result.match_score, 0)
        self.assertEqual(result.summary, "Weak fit.")
        self.assertEqual(result.structured_jd.title, "")
        self.assertEqual(result.tailored_resume.tailored_skills, [])

    async def test_request_model_override_reaches_the_client(self):
        client = FakeCompletionClient()
        request = CompletionRequest(
            messages=(ChatMessage(role="system", content="You are a job description parser."),),
            temperature=0.3,
            max_tokens=1200,
            model="gpt-4o",
        )

        await _complete(client, request)
        await preprocess_jd(client, JD_TEXT)

        self.assertEqual(client.models, ["gpt-4o", None])

    async def test_preprocess_jd_wraps_errors(self):
        client = FakeCompletionClient(jd=RuntimeError("boom"))
        with self.assertRaises(AnalysisError) as ctx:
            await preprocess_jd(client, JD_TEXT)
        self.assertIn("boom", str(ctx.exception))

    async def test_preprocess_resume_degrades_on_bad_json(self):
        resume_text = "Jane Doe jane@example.com " + "Experienced engineer. " * 100
        client = FakeCompletionClient(resume="```not json```")

        resume = await preprocess_resume(client, resume_text)

        self.assertEqual(len(resume.summary), 1000)
        self.assertTrue(resume.summary.startswith("Jane Doe [email]"))
        self.assertEqual(resume.skills, [])

    async def test_preprocess_resume_raises_on_transport_failure(self):
        client = FakeCompletionClient(resume=ConnectionError("down"))
        with self.assertRaises(AnalysisError) as ctx:
            await preprocess_resume(client, "Resume text that is long enough")
        self.assertIn("Failed to preprocess resume", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
