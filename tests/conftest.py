import copy

import pytest

from ats_engine.models.resume import ResumeRecord

SUMMARY = (
    "Software Engineer with 8 years of experience in the technology sector. "
    "Led a platform team that increased deployment frequency by 25% and developed "
    "internal tooling adopted across the company. "
    + " ".join(["Focused on reliable delivery and clear communication with partners."] * 6)
)

STRONG_RESUME = {
    "personalInfo": {
        "fullName": "Jane Doe",
        "email": "jane.doe@janedoe.dev",
        "phone": "+1 (555) 123-4567",
        "location": "Seattle, WA",
        "linkedin": "https://linkedin.com/in/janedoe",
    },
    "summary": SUMMARY,
    "experience": [
        {
            "id": "1",
            "title": "Senior Software Engineer",
            "company": "Acme Cloud",
            "location": "Seattle, WA",
            "startDate": "Jan 2021",
            "endDate": "",
            "current": True,
            "description": (
                "• Led a team of 6 engineers building a multi-tenant data pipeline on AWS and Kubernetes\n"
                "• Reduced infrastructure cost by 30% by migrating batch jobs to serverless workers\n"
                "• Designed a GraphQL API in Python and TypeScript serving 2,000,000 requests per day\n"
                "• Mentored 4 junior engineers through code review and pairing"
            ),
        },
        {
            "id": "2",
            "title": "Software Engineer",
            "company": "Brightside Health Tech",
            "location": "Portland, OR",
            "startDate": "Mar 2018",
            "endDate": "Dec 2020",
            "current": False,
            "description": (
                "• Developed React and Node.js features for a patient scheduling platform used by 40,000 users\n"
                "• Improved page load time by 45% through caching and bundle splitting\n"
                "• Implemented CI/CD with Docker and GitHub Actions, cutting release time from 2 days to 3 hours\n"
                "• Collaborated with product and design on quarterly roadmap planning"
            ),
        },
        {
            "id": "3",
            "title": "Junior Developer",
            "company": "Northwind Labs",
            "location": "Portland, OR",
            "startDate": "Jun 2016",
            "endDate": "Feb 2018",
            "current": False,
            "description": (
                "• Built internal reporting tools in Python and PostgreSQL for the finance team\n"
                "• Automated weekly data exports, saving 10 hours per week for 5 analysts\n"
                "• Resolved 120 customer support tickets related to reporting errors"
            ),
        },
    ],
    "education": [
        {
            "id": "1",
            "degree": "Bachelor of Science in Computer Science",
            "school": "University of Washington",
            "location": "Seattle, WA",
            "graduationDate": "May 2016",
            "gpa": "3.8",
        }
    ],
    "skills": [
        "Python", "TypeScript", "React", "Node.js", "AWS", "Docker",
        "Kubernetes", "PostgreSQL", "GraphQL", "Leadership", "Communication", "Mentoring",
    ],
}


@pytest.fixture
def strong_resume_data():
    return copy.deepcopy(STRONG_RESUME)


@pytest.fixture
def strong_record(strong_resume_data):
    return ResumeRecord.model_validate(strong_resume_data)


@pytest.fixture
def empty_record():
    return ResumeRecord()


@pytest.fixture
def messy_record():
    return ResumeRecord.model_validate({
        "personalInfo": {
            "fullName": "j0hn d0e!!!",
            "email": "sexyninja4200@hotmail",
            "phone": "12",
            "location": "Earth",
            "linkedin": "myprofile",
        },
        "summary": "Hardworking!!! person ★★★",
        "experience": [
            {"title": "x" * 60, "company": "", "startDate": "", "description": "did stuff"},
            {"title": "Intern", "company": "Co", "startDate": "2019-01", "endDate": "03/2020"},
        ],
        "education": [{"degree": "", "school": "", "graduationDate": "", "gpa": "n/a"}],
        "skills": ["hardworking", "motivated", "team player", "self-starter"],
    })
