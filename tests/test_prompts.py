import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobmatch.prompts import (  # noqa: E402
    build_jd_extraction_request,
    build_match_analysis_request,
    build_metadata_extraction_request,
    build_raw_match_request,
    build_resume_extraction_request,
    build_tailored_resume_request,
    to_prompt_json,
)
from jobmatch.schemas.normalized import StructuredJD  # noqa: E402


class PromptBuilderTests(unittest.TestCase):
    def test_sampling_parameters_per_task(self):
        cases = [
            (build_jd_extraction_request("JD text"), 0.3, 1200),
            (build_resume_extraction_request("Resume text"), 0.2, 1200),
            (build_metadata_extraction_request("<h1>Job</h1>"), 0.2, 1000),
            (build_match_analysis_request("JD text", "{}", "{}"), 0.5, 1800),
            (build_tailored_resume_request("{}", "{}"), 0.7, 2000),
            (build_raw_match_request("JD text", "Resume text"), 0.5, 1800),
        ]
        for request, temperature, max_tokens in cases:
            with self.subTest(system=request.messages[0].content):
                self.assertEqual(request.temperature, temperature)
                self.assertEqual(request.max_tokens, max_tokens)
                self.assertEqual([m.role for m in request.messages], ["system", "user"])
                self.assertIn("ONLY with a valid JSON object", request.messages[1].content)

    def test_jd_prompt_is_sanitized_and_truncated(self):
        jd = "Contact hr@acme.io. " + "x" * 7000
        user = build_jd_extraction_request(jd).messages[1].content
        self.assertIn("[email]", user)
        self.assertNotIn("hr@acme.io", user)
        self.assertNotIn("x" * 6000, user)
        self.assertIn("mustHaveSkills", user)

    def test_match_prompt_truncates_raw_jd_to_3000(self):
        user = build_match_analysis_request("y" * 5000, '{"title": "SRE"}', '{"name": ""}').messages[1].content
        self.assertIn("y" * 3000, user)
        self.assertNotIn("y" * 3001, user)
        self.assertIn('{"title": "SRE"}', user)
        self.assertIn("matchScore", user)

    def test_raw_match_prompt_keeps_resume_past_jd_limit(self):
        resume = "a" * 2990 + " SKILLS: Kubernetes Terraform"
        user = build_raw_match_request("j" * 5000, resume).messages[1].content
        resume_section = user.split("Resume:\n", 1)[1]
        self.assertIn("Kubernetes Terraform", resume_section)
        self.assertNotIn("j" * 3001, user)

    def test_raw_match_prompt_caps_resume_at_6000(self):
        user = build_raw_match_request("JD text", "r" * 9000).messages[1].content
        self.assertIn("r" * 6000, user)
        self.assertNotIn("r" * 6001, user)

    def test_tailored_prompt_embeds_json_untruncated(self):
        resume_json = json.dumps({"summary": "z" * 8000})
        user = build_tailored_resume_request("{}", resume_json).messages[1].content
        self.assertIn("z" * 8000, user)
        self.assertIn("coverLetterHighlights", user)

    def test_prompt_json_uses_wire_names(self):
        dumped = json.loads(to_prompt_json(StructuredJD(must_have_skills=["Go"])))
        self.assertEqual(dumped["mustHaveSkills"], ["Go"])


if __name__ == "__main__":
    unittest.main()
