import sys
import unittest
from pathlib import Path

from pydantic import TypeAdapter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.normalize.document import InvalidDocumentType, normalize_document  # noqa: E402
from app.normalize.normalize_jd import normalize_jd  # noqa: E402
from app.normalize.normalize_resume import normalize_resume  # noqa: E402
from app.schemas.normalized import CVDocument, ExtractedDocument, JDDocument  # noqa: E402
from document_factories import complete_cv_payload, complete_jd_payload  # noqa: E402


class ResumeNormalizationTests(unittest.TestCase):
    def test_absent_fields_are_none_and_sequences_are_empty(self):
        cv = normalize_resume({})

        self.assertEqual(cv.document_type, "cv")
        self.assertIsNone(cv.personal_info.name)
        self.assertIsNone(cv.personal_info.email)
        self.assertIsNone(cv.personal_info.summary)
        self.assertEqual(cv.experience, ())
        self.assertEqual(cv.education, ())
        self.assertEqual(cv.skills.technical, ())
        self.assertEqual(cv.skills.soft, ())
        self.assertEqual(cv.certifications, ())

    def test_provided_empty_string_is_kept_distinct_from_missing(self):
        cv = normalize_resume({"personalInfo": {"name": "   ", "email": None}})

        self.assertEqual(cv.personal_info.name, "")
        self.assertIsNone(cv.personal_info.email)

    def test_complete_payload_maps_every_field(self):
        cv = normalize_resume(complete_cv_payload())

        self.assertEqual(cv.personal_info.name, "Jane Doe")
        self.assertEqual(cv.personal_info.linkedin, "linkedin.com/in/janedoe")
        self.assertEqual(cv.experience[0].dates, "2020-03 - Present")
        self.assertEqual(cv.education[0].institution, "TU Berlin")
        self.assertEqual(cv.skills.technical, ("Python", "PostgreSQL", "Docker", "Kubernetes", "Terraform"))
        self.assertEqual(cv.personal_info.github, "github.com/janedoe")
        self.assertEqual(cv.certifications, ("AWS Certified Developer",))

    def test_snake_case_keys_and_top_level_summary_are_accepted(self):
        cv = normalize_resume(
            {
                "personal_info": {"full_name": "Jane Doe", "phone_number": 4930123456},
                "summary": "Data engineer",
                "work_experience": [{"position": "Analyst", "employer": "Acme", "duration": "2 years"}],
            }
        )

        self.assertEqual(cv.personal_info.name, "Jane Doe")
        self.assertEqual(cv.personal_info.phone, "4930123456")
        self.assertEqual(cv.personal_info.summary, "Data engineer")
        self.assertEqual(cv.experience[0].title, "Analyst")
        self.assertEqual(cv.experience[0].company, "Acme")
        self.assertEqual(cv.experience[0].dates, "2 years")

    def test_skill_strings_are_split_and_deduplicated(self):
        cv = normalize_resume({"skills": {"technical": "Python, python; Go\n- SQL", "soft": ["Teamwork", ""]}})

        self.assertEqual(cv.skills.technical, ("Python", "Go", "SQL"))
        self.assertEqual(cv.skills.soft, ("Teamwork",))

    def test_flat_skill_list_counts_as_technical(self):
        cv = normalize_resume({"skills": ["Python", "Docker"]})

        self.assertEqual(cv.skills.technical, ("Python", "Docker"))
        self.assertEqual(cv.skills.soft, ())

    def test_entry_strings_split_on_lines_not_commas(self):
        cv = normalize_resume(
            {
                "experience": "Engineer at Acme, 2019-2021\n\nAnalyst at Initech, 2017",
                "education": "BSc Physics, LMU Munich",
                "certifications": "AWS Certified Developer, Associate\n- CKA",
                "skills": "Python, Go",
            }
        )

        self.assertEqual(
            [entry.description for entry in cv.experience],
            ["Engineer at Acme, 2019-2021", "Analyst at Initech, 2017"],
        )
        self.assertEqual([entry.degree for entry in cv.education], ["BSc Physics, LMU Munich"])
        self.assertEqual(cv.certifications, ("AWS Certified Developer, Associate", "CKA"))
        self.assertEqual(cv.skills.technical, ("Python", "Go"))

    def test_malformed_nested_values_are_tolerated(self):
        cv = normalize_resume(
            {
                "personalInfo": "Jane Doe",
                "experience": {"title": "not a list"},
                "certifications": [{"name": "CKA", "issuer": "CNCF"}, 42, None],
            }
        )

        self.assertIsNone(cv.personal_info.name)
        self.assertEqual(cv.experience, ())
        self.assertEqual(cv.certifications, ("CKA", "42"))


class JDNormalizationTests(unittest.TestCase):
    def test_absent_fields_are_none_and_sequences_are_empty(self):
        jd = normalize_jd(None)

        self.assertEqual(jd.document_type, "jd")
        self.assertIsNone(jd.job_title)
        self.assertIsNone(jd.compensation)
        self.assertEqual(jd.responsibilities, ())
        self.assertEqual(jd.requirements.required, ())
        self.assertEqual(jd.requirements.preferred, ())

    def test_salary_mapping_is_rendered_as_compensation(self):
        jd = normalize_jd(complete_jd_payload())

        self.assertEqual(jd.compensation, "80000-95000 EUR yearly")
        self.assertEqual(jd.requirements.preferred, ("Kafka",))
        self.assertEqual(len(jd.responsibilities), 3)

    def test_responsibility_string_splits_on_lines_only(self):
        jd = normalize_jd({"responsibilities": "Design APIs, review code\nMentor engineers", "requirements": "Python; SQL"})

        self.assertEqual(jd.responsibilities, ("Design APIs, review code", "Mentor engineers"))
        self.assertEqual(jd.requirements.required, ("Python", "SQL"))

    def test_flat_requirement_list_is_treated_as_required(self):
        jd = normalize_jd({"requirements": ["Python", "SQL"]})

        self.assertEqual(jd.requirements.required, ("Python", "SQL"))
        self.assertEqual(jd.requirements.preferred, ())


class NormalizeDocumentTests(unittest.TestCase):
    def test_dispatches_on_document_type(self):
        self.assertIsInstance(normalize_document({}, "cv"), CVDocument)
        self.assertIsInstance(normalize_document({}, "jd"), JDDocument)

    def test_normalized_documents_round_trip_through_the_tagged_union(self):
        adapter = TypeAdapter(ExtractedDocument)
        for payload, document_type in ((complete_cv_payload(), "cv"), (complete_jd_payload(), "jd")):
            with self.subTest(document_type=document_type):
                document = normalize_document(payload, document_type)
                self.assertEqual(adapter.validate_python(document.model_dump()), document)

    def test_unknown_document_type_is_rejected(self):
        for document_type in ("resume", "CV", "", None):
            with self.subTest(document_type=document_type):
                with self.assertRaises(InvalidDocumentType) as ctx:
                    normalize_document({"jobTitle": "Engineer"}, document_type)
                self.assertEqual(ctx.exception.document_type, document_type)
                self.assertEqual(ctx.exception.status_code, 422)


if __name__ == "__main__":
    unittest.main()
