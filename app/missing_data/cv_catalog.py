from __future__ import annotations

import re

from app.schemas.normalized import CVDocument, ExperienceEntry

from .catalog import Check, EntryCheck, FieldCheck, has_items, has_text, threshold

EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def _email_well_formed(cv: CVDocument) -> bool:
    email = cv.personal_info.email
    if not has_text(email):
        # Absence is reported by the personalInfo.email check.
        return True
    return bool(EMAIL_RE.match(email or ""))


def _has_any_skills(cv: CVDocument) -> bool:
    return has_items(cv.skills.technical) or has_items(cv.skills.soft)


def _description_detailed(entry: ExperienceEntry) -> bool:
    description = entry.description or ""
    return len(description.strip()) >= threshold("min_description_chars", 20)


def _summary_detailed(cv: CVDocument) -> bool:
    summary = cv.personal_info.summary
    if not has_text(summary):
        # Absence is reported by the personalInfo.summary check.
        return True
    return len((summary or "").strip()) >= threshold("min_summary_chars", 30)


def _has_soft_skills(cv: CVDocument) -> bool:
    # Only meaningful once technical skills exist; otherwise the skills check decides.
    return not has_items(cv.skills.technical) or has_items(cv.skills.soft)


def _enough_technical_skills(cv: CVDocument) -> bool:
    count = len(cv.skills.technical)
    return count == 0 or count >= threshold("min_technical_skills", 5)


def _has_github(cv: CVDocument) -> bool:
    # Listed technical skills are taken as the sign of a technical role.
    return not has_items(cv.skills.technical) or has_text(cv.personal_info.github)


CV_CATALOG: tuple[Check, ...] = (
    FieldCheck(
        field="personalInfo.name",
        category="personal-info",
        importance="critical",
        penalty=20,
        minutes=1,
        reason="Your name is the most basic identifier on your CV",
        action="add-full-name",
        present=lambda cv: has_text(cv.personal_info.name),
        example="John Smith",
        templates=("First Last", "John Michael Smith"),
    ),
    FieldCheck(
        field="personalInfo.email",
        category="contact-info",
        importance="critical",
        penalty=15,
        minutes=1,
        reason="Recruiters need your email to contact you",
        action="fix-contact-email",
        present=lambda cv: has_text(cv.personal_info.email),
        example="john.smith@email.com",
        templates=("name@gmail.com", "firstname.lastname@company.com"),
    ),
    FieldCheck(
        check_id="personalInfo.email.format",
        field="personalInfo.email",
        category="contact-info",
        importance="critical",
        penalty=12,
        minutes=2,
        reason="An invalid email format may prevent recruiters from contacting you",
        action="fix-contact-email",
        present=_email_well_formed,
        example="john.smith@email.com",
        templates=("name@gmail.com", "firstname.lastname@company.com"),
    ),
    FieldCheck(
        field="experience",
        category="experience",
        importance="critical",
        penalty=20,
        minutes=10,
        reason="Work experience is essential for most professional roles",
        action="add-work-experience",
        present=lambda cv: has_items(cv.experience),
        example="Software Engineer at Tech Corp (2020 - Present)",
        templates=(
            "Job Title at Company (Start Year - End Year)",
            "Role at Organization (Month Year - Present)",
        ),
    ),
    EntryCheck(
        sequence="experience",
        field="title",
        category="experience",
        importance="critical",
        penalty=8,
        minutes=2,
        reason="Job title is essential for understanding your role",
        action="complete-experience-details",
        present=lambda entry: has_text(entry.title),
        example="Senior Software Engineer",
        templates=("Software Engineer", "Product Manager", "Data Analyst"),
    ),
    EntryCheck(
        sequence="experience",
        field="company",
        category="experience",
        importance="critical",
        penalty=8,
        minutes=2,
        reason="Company name provides context for your experience",
        action="complete-experience-details",
        present=lambda entry: has_text(entry.company),
        example="Tech Corporation",
        templates=("Company Name", "Organization Name"),
    ),
    EntryCheck(
        sequence="experience",
        field="dates",
        category="experience",
        importance="critical",
        penalty=6,
        minutes=2,
        reason="Employment dates show your career progression",
        action="complete-experience-details",
        present=lambda entry: has_text(entry.dates),
        example="2020 - Present",
        templates=("Start Year - End Year", "Start Year - Present"),
    ),
    FieldCheck(
        field="skills",
        category="skills",
        importance="critical",
        penalty=15,
        minutes=10,
        reason="A skills section is crucial for ATS systems and quick recruiter scanning",
        action="add-skills-section",
        present=_has_any_skills,
        example="JavaScript, React, Node.js, Communication, Leadership",
        templates=(
            "Technical: JavaScript, Python, React, Node.js, AWS",
            "Soft: Communication, Leadership, Problem-solving, Teamwork",
        ),
    ),
    FieldCheck(
        field="personalInfo.phone",
        category="contact-info",
        importance="recommended",
        penalty=8,
        minutes=1,
        reason="A phone number gives recruiters another way to reach you",
        action="add-phone-number",
        present=lambda cv: has_text(cv.personal_info.phone),
        example="+1 (555) 123-4567",
        templates=("+1 (XXX) XXX-XXXX", "(XXX) XXX-XXXX"),
    ),
    FieldCheck(
        field="personalInfo.location",
        category="personal-info",
        importance="recommended",
        penalty=5,
        minutes=1,
        reason="Location helps employers judge fit for on-site or remote positions",
        action="add-location",
        present=lambda cv: has_text(cv.personal_info.location),
        example="San Francisco, CA",
        templates=("City, State", "City, Country"),
    ),
    FieldCheck(
        field="personalInfo.summary",
        category="summary",
        importance="recommended",
        penalty=7,
        minutes=8,
        reason="A summary helps recruiters quickly understand your background and goals",
        action="write-professional-summary",
        present=lambda cv: has_text(cv.personal_info.summary),
        example=(
            "Experienced Software Engineer with 5+ years in full-stack development, "
            "passionate about building scalable web applications."
        ),
        templates=(
            "Professional with [X] years of experience in [field], specializing in [skills]",
            "Results-driven [role] with expertise in [technologies] and [achievements]",
        ),
    ),
    FieldCheck(
        check_id="personalInfo.summary.length",
        field="personalInfo.summary",
        category="summary",
        importance="recommended",
        penalty=4,
        minutes=5,
        reason="A summary of 2-4 sentences gives recruiters meaningful context",
        action="expand-professional-summary",
        present=_summary_detailed,
        example="Expand your summary to include years of experience, key skills and career goals",
        templates=(
            "Add your years of experience and key technical skills",
            "Include 1-2 major achievements or career highlights",
        ),
    ),
    EntryCheck(
        sequence="experience",
        field="description",
        category="experience",
        importance="recommended",
        penalty=5,
        minutes=5,
        reason="Detailed descriptions help recruiters understand your responsibilities and achievements",
        action="describe-experience-impact",
        present=_description_detailed,
        example="Developed and maintained web applications using React and Node.js, improving performance by 30%.",
        templates=(
            "Developed [technology] to achieve [result]",
            "Managed [project] leading to [outcome]",
            "Improved [process] by [metric]",
        ),
    ),
    FieldCheck(
        field="education",
        category="education",
        importance="recommended",
        penalty=10,
        minutes=5,
        reason="Educational background is important for many roles",
        action="add-education",
        present=lambda cv: has_items(cv.education),
        example="BSc Computer Science, University of Technology (2020)",
        templates=(
            "Degree in Field from University (Year)",
            "Certificate in Subject from Institution (Year)",
        ),
    ),
    EntryCheck(
        sequence="education",
        field="degree",
        category="education",
        importance="recommended",
        penalty=5,
        minutes=2,
        reason="The degree shows your educational qualifications",
        action="complete-education-details",
        present=lambda entry: has_text(entry.degree),
        example="Bachelor of Science in Computer Science",
        templates=("Bachelor of Science in Field", "Master of Arts in Subject"),
    ),
    EntryCheck(
        sequence="education",
        field="institution",
        category="education",
        importance="recommended",
        penalty=5,
        minutes=2,
        reason="The institution name gives credibility to your education",
        action="complete-education-details",
        present=lambda entry: has_text(entry.institution),
        example="University of Technology",
        templates=("University Name", "College Name"),
    ),
    FieldCheck(
        field="skills.soft",
        category="skills",
        importance="recommended",
        penalty=6,
        minutes=5,
        reason="Soft skills show how you work with others",
        action="add-soft-skills",
        present=_has_soft_skills,
        example="Communication, Leadership, Problem-solving, Teamwork",
        templates=(
            "Communication: Written, Verbal, Presentation",
            "Leadership: Team Management, Project Leadership",
        ),
    ),
    FieldCheck(
        check_id="skills.technical.count",
        field="skills.technical",
        category="skills",
        importance="recommended",
        penalty=4,
        minutes=5,
        reason="More technical skills raise your chances of matching job requirements",
        action="enhance-technical-skills",
        present=_enough_technical_skills,
        example="Add 2-3 more relevant technologies",
        templates=(
            "Consider adding: Testing frameworks, CI/CD tools, Cloud platforms",
            "Include: Version control, Database technologies, API skills",
        ),
    ),
    FieldCheck(
        field="certifications",
        category="achievements",
        importance="optional",
        penalty=5,
        minutes=5,
        reason="Certifications validate specialised knowledge",
        action="add-certifications",
        present=lambda cv: has_items(cv.certifications),
        example="AWS Certified Solutions Architect",
        templates=("[Certification] - [Issuer] ([Year])",),
    ),
    FieldCheck(
        field="personalInfo.linkedin",
        category="personal-info",
        importance="optional",
        penalty=3,
        minutes=2,
        reason="A LinkedIn profile adds professional context and networking reach",
        action="add-linkedin-profile",
        present=lambda cv: has_text(cv.personal_info.linkedin),
        example="linkedin.com/in/johnsmith",
        templates=("linkedin.com/in/yourname",),
    ),
    FieldCheck(
        field="personalInfo.github",
        category="personal-info",
        importance="optional",
        penalty=4,
        minutes=2,
        reason="GitHub showcases your coding skills and project contributions",
        action="add-github-profile",
        present=_has_github,
        example="github.com/johnsmith",
        templates=("github.com/yourusername",),
    ),
)
