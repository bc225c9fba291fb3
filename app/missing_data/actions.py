from __future__ import annotations

from dataclasses import dataclass

from app.schemas.normalized import Difficulty


@dataclass(frozen=True)
class ActionTemplate:
    title: str
    description: str
    difficulty: Difficulty

    def render_title(self, count: int) -> str:
        return self.title.format(count=count, plural="" if count == 1 else "s")


# Keyed by the ``action`` named on each catalog check.
ACTION_TABLE: dict[str, ActionTemplate] = {
    # CV
    "add-full-name": ActionTemplate(
        "Add Your Full Name",
        "Put your first and last name at the top of the CV",
        "easy",
    ),
    "fix-contact-email": ActionTemplate(
        "Add a Valid Email Address",
        "Recruiters reply by email, so make sure a correct address is listed",
        "easy",
    ),
    "add-phone-number": ActionTemplate(
        "Add a Phone Number",
        "Give recruiters a direct way to reach you",
        "easy",
    ),
    "add-location": ActionTemplate(
        "Add Your Location",
        "State your city and country, and whether you are open to remote work",
        "easy",
    ),
    "add-linkedin-profile": ActionTemplate(
        "Link Your LinkedIn Profile",
        "Add your LinkedIn URL for extra professional context",
        "easy",
    ),
    "add-certifications": ActionTemplate(
        "List Your Certifications",
        "Add professional certifications with issuer and year",
        "easy",
    ),
    "write-professional-summary": ActionTemplate(
        "Write a Professional Summary",
        "Add a 2-3 sentence summary to grab recruiter attention",
        "medium",
    ),
    "add-skills-section": ActionTemplate(
        "Add a Skills Section",
        "List 5-8 relevant technical and soft skills for better ATS matching",
        "medium",
    ),
    "add-education": ActionTemplate(
        "Add Your Education",
        "Include your highest degree, institution and graduation year",
        "medium",
    ),
    "complete-education-details": ActionTemplate(
        "Complete {count} Education Detail{plural}",
        "Fill in missing degree and institution names",
        "easy",
    ),
    "complete-experience-details": ActionTemplate(
        "Complete {count} Experience Detail{plural}",
        "Every role needs a title, a company and employment dates",
        "medium",
    ),
    "describe-experience-impact": ActionTemplate(
        "Describe Your Impact in {count} Role{plural}",
        "Expand short role descriptions with responsibilities and measurable results",
        "medium",
    ),
    "add-github-profile": ActionTemplate(
        "Link Your GitHub Profile",
        "Show reviewers your code and project contributions",
        "easy",
    ),
    "expand-professional-summary": ActionTemplate(
        "Expand Your Professional Summary",
        "Grow the summary to 2-4 sentences with your experience and goals",
        "easy",
    ),
    "add-soft-skills": ActionTemplate(
        "Add Soft Skills",
        "Name the interpersonal strengths you bring to a team",
        "easy",
    ),
    "enhance-technical-skills": ActionTemplate(
        "Add More Technical Skills",
        "List at least 5-8 relevant technical skills for better ATS matching",
        "easy",
    ),
    "add-work-experience": ActionTemplate(
        "Add Work Experience",
        "Include at least one role with title, company and dates",
        "hard",
    ),
    # JD
    "add-job-title": ActionTemplate(
        "Add a Job Title",
        "Name the position so candidates can find and recognise it",
        "easy",
    ),
    "add-company-name": ActionTemplate(
        "Add the Company Name",
        "Tell candidates who is hiring",
        "easy",
    ),
    "add-job-location": ActionTemplate(
        "Add the Job Location",
        "State the office location and the remote or hybrid policy",
        "easy",
    ),
    "list-technical-skills": ActionTemplate(
        "List Technical Requirements",
        "Specify key technologies, tools and frameworks used in the role",
        "easy",
    ),
    "add-compensation": ActionTemplate(
        "Publish a Salary Range",
        "Add the compensation range and pay period",
        "easy",
    ),
    "add-employment-type": ActionTemplate(
        "State the Employment Type",
        "Say whether the role is full-time, part-time or contract",
        "easy",
    ),
    "write-job-summary": ActionTemplate(
        "Write a Job Summary",
        "Add a short summary of the role and the team",
        "medium",
    ),
    "expand-responsibilities": ActionTemplate(
        "Expand the Responsibilities",
        "List 3-7 responsibilities so candidates get a complete picture",
        "medium",
    ),
    "add-responsibilities": ActionTemplate(
        "Add Key Responsibilities",
        "Describe what the person in this role will do day-to-day",
        "hard",
    ),
    "define-requirements": ActionTemplate(
        "Define Required Qualifications",
        "List essential and preferred skills, experience and education",
        "hard",
    ),
    "add-required-qualifications": ActionTemplate(
        "Add Must-Have Qualifications",
        "Separate the essential requirements from the nice-to-haves",
        "medium",
    ),
    "add-preferred-qualifications": ActionTemplate(
        "Add Preferred Qualifications",
        "Name the bonus skills that help strong candidates stand out",
        "easy",
    ),
}
