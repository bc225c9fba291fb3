from __future__ import annotations

from app.schemas.normalized import JDDocument

from .catalog import Check, FieldCheck, has_items, has_text, threshold


def _has_any_requirements(jd: JDDocument) -> bool:
    return has_items(jd.requirements.required) or has_items(jd.requirements.preferred)


def _has_required_requirements(jd: JDDocument) -> bool:
    # With no requirements at all only the requirements check fires.
    return not has_items(jd.requirements.preferred) or has_items(jd.requirements.required)


def _has_preferred_requirements(jd: JDDocument) -> bool:
    return not has_items(jd.requirements.required) or has_items(jd.requirements.preferred)


def _enough_responsibilities(jd: JDDocument) -> bool:
    count = len(jd.responsibilities)
    # Zero responsibilities is reported by the responsibilities check.
    return count == 0 or count >= threshold("min_responsibilities", 3)


JD_CATALOG: tuple[Check, ...] = (
    FieldCheck(
        field="jobTitle",
        category="personal-info",
        importance="critical",
        penalty=15,
        minutes=2,
        reason="The job title tells candidates what the role is",
        action="add-job-title",
        present=lambda jd: has_text(jd.job_title),
        example="Senior Software Engineer",
        templates=("Senior/Lead [Role]", "[Role] Engineer/Developer", "[Position] Manager/Coordinator"),
    ),
    FieldCheck(
        field="responsibilities",
        category="experience",
        importance="critical",
        penalty=20,
        minutes=10,
        reason="Responsibilities help candidates understand what they will do day-to-day",
        action="add-responsibilities",
        present=lambda jd: has_items(jd.responsibilities),
        example="Develop and maintain web applications; collaborate with cross-functional teams",
        templates=(
            "[Action verb] [task/deliverable] to achieve [result]",
            "Manage/Oversee [process/system] ensuring [outcome]",
            "Design/Implement [solution/feature] for [purpose]",
        ),
    ),
    FieldCheck(
        field="requirements",
        category="education",
        importance="critical",
        penalty=15,
        minutes=12,
        reason="Requirements help candidates judge whether they are qualified",
        action="define-requirements",
        present=_has_any_requirements,
        example="Required: 3+ years with React. Preferred: AWS experience, TypeScript",
        templates=(
            "Required: [must-have qualifications], [essential skills]",
            "Preferred: [nice-to-have skills], [bonus experience]",
        ),
    ),
    FieldCheck(
        field="requirements.required",
        category="education",
        importance="critical",
        penalty=10,
        minutes=8,
        reason="Required qualifications help filter candidates effectively",
        action="add-required-qualifications",
        present=_has_required_requirements,
        example="3+ years of software development experience, degree in Computer Science",
        templates=(
            "[Number]+ years of [skill/experience]",
            "Degree in [field] or related field",
            "Experience with [specific technologies/tools]",
        ),
    ),
    FieldCheck(
        field="company",
        category="personal-info",
        importance="recommended",
        penalty=8,
        minutes=1,
        reason="The company name helps candidates evaluate the opportunity",
        action="add-company-name",
        present=lambda jd: has_text(jd.company),
        example="Tech Corporation",
        templates=("Company Name", "Organization Name"),
    ),
    FieldCheck(
        field="location",
        category="personal-info",
        importance="recommended",
        penalty=6,
        minutes=2,
        reason="Location helps candidates judge commute or relocation",
        action="add-job-location",
        present=lambda jd: has_text(jd.location),
        example="San Francisco, CA (Hybrid)",
        templates=("City, State (Remote/On-site/Hybrid)", "Remote - [Time Zone]"),
    ),
    FieldCheck(
        check_id="responsibilities.count",
        field="responsibilities",
        category="experience",
        importance="recommended",
        penalty=8,
        minutes=8,
        reason="Aim for 3-7 responsibilities to give candidates a complete picture",
        action="expand-responsibilities",
        present=_enough_responsibilities,
        example="Add 2-4 more responsibilities covering different aspects of the role",
        templates=(
            "Include team collaboration responsibilities",
            "Add technical development tasks",
            "Consider client or stakeholder interaction",
        ),
    ),
    FieldCheck(
        field="summary",
        category="summary",
        importance="recommended",
        penalty=7,
        minutes=10,
        reason="A job summary gives context about the role and company culture",
        action="write-job-summary",
        present=lambda jd: has_text(jd.summary),
        example="We are seeking a Software Engineer to join our team building web applications used by millions.",
        templates=(
            "We are looking for a [role] to join our [team type] team",
            "[Company] is seeking a [role] to help [achieve goal]",
        ),
    ),
    FieldCheck(
        field="skills.technical",
        category="skills",
        importance="recommended",
        penalty=8,
        minutes=8,
        reason="Technical skills tell candidates which technologies the role uses",
        action="list-technical-skills",
        present=lambda jd: has_items(jd.skills.technical),
        example="Python, React, PostgreSQL, AWS, Docker",
        templates=("Frontend: [frameworks]", "Backend: [languages/frameworks]", "Infrastructure: [cloud/devops tools]"),
    ),
    FieldCheck(
        field="requirements.preferred",
        category="education",
        importance="recommended",
        penalty=5,
        minutes=5,
        reason="Preferred qualifications help candidates stand out and show growth potential",
        action="add-preferred-qualifications",
        present=_has_preferred_requirements,
        example="AWS experience, TypeScript, mentoring experience",
        templates=(
            "Experience with [advanced technologies]",
            "[Certification] or similar qualification",
        ),
    ),
    FieldCheck(
        field="compensation",
        category="personal-info",
        importance="optional",
        penalty=5,
        minutes=2,
        reason="Published compensation attracts more qualified applicants",
        action="add-compensation",
        present=lambda jd: has_text(jd.compensation),
        example="90,000-120,000 EUR yearly",
        templates=("[Min]-[Max] [Currency] per [period]",),
    ),
    FieldCheck(
        field="employmentType",
        category="personal-info",
        importance="optional",
        penalty=3,
        minutes=1,
        reason="Employment type sets expectations about the engagement",
        action="add-employment-type",
        present=lambda jd: has_text(jd.employment_type),
        example="Full-time",
        templates=("Full-time", "Part-time", "Contract", "Freelance"),
    ),
)
