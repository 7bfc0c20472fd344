from dataclasses import asdict

import pytest
from pydantic import ValidationError

from ats_engine.models.resume import ResumeRecord
from ats_engine.services.ats_checker import (
    ATSChecker,
    CategoryResult,
    check_ats_compatibility,
    overall_score,
    pass_status_for,
    prioritize_recommendations,
    score_label,
)
from ats_engine.services.patterns import PatternLibrary


def _category(report, name):
    return next(c for c in report.categories if c.name == name)


@pytest.mark.parametrize("fixture_name", ["strong_record", "empty_record", "messy_record"])
def test_scores_stay_within_bounds(request, fixture_name):
    report = check_ats_compatibility(request.getfixturevalue(fixture_name))

    assert 0 <= report.overall_score <= 100
    assert len(report.categories) == 7
    for category in report.categories:
        assert 0 <= category.score <= category.max_score
    for value in (report.keyword_density, report.readability_score, report.impact_score, report.star_score):
        assert 0 <= value <= 100
    assert len(report.recommendations) <= 10
    assert len(report.recommendations) == len(set(report.recommendations))


def test_categories_run_in_fixed_order(strong_record):
    report = check_ats_compatibility(strong_record)
    assert [c.name for c in report.categories] == [
        "Contact Information",
        "Professional Summary",
        "Work Experience",
        "Education",
        "Skills",
        "Keyword Optimization",
        "ATS Formatting",
    ]
    assert [c.max_score for c in report.categories] == [20, 20, 30, 15, 20, 15, 15]
    assert [c.weight for c in report.categories] == [1.0, 1.2, 1.5, 0.8, 1.3, 1.4, 1.0]


def test_empty_record_fails_every_category(empty_record):
    report = check_ats_compatibility(empty_record)

    assert all(not c.passed for c in report.categories)
    assert report.overall_score <= 5
    assert report.pass_status == "poor"
    assert report.star_score == 0
    assert report.impact_score == 0
    assert report.readability_score == 0
    assert report.industry_match is None


def test_contact_only_record_is_formatted_not_empty():
    record = ResumeRecord.model_validate(
        {"personalInfo": {"fullName": "Jane Doe", "email": "jane.doe@example.com"}}
    )
    formatting = _category(check_ats_compatibility(record), "ATS Formatting")

    assert "Resume has no content to evaluate" not in formatting.issues
    # decorative 4 + punctuation 2 + dates 3 + sections 1, too few words for length points
    assert formatting.score == 10


def test_keyword_density_is_capped_at_100():
    record = ResumeRecord(summary="Led, cut, led, cut, grew, led managed.", skills=["Go"])
    # 7 verb hits over 6 words longer than 3 characters
    assert ATSChecker().keyword_density(record) == 100
    assert check_ats_compatibility(record).keyword_density == 100


@pytest.mark.parametrize(
    "summary,expected",
    [
        (" ".join(["team"] * 30) + ".", 80),
        (" ".join(["team"] * 22) + ".", 90),
        ("Led teams. Built tools.", 85),
        (" ".join(["internationalization"] * 10), 85),
        (" ".join(["managed mentored"] * 5), 95),
    ],
)
def test_readability_bands(summary, expected):
    assert ATSChecker().readability_score(ResumeRecord(summary=summary)) == expected


@pytest.mark.parametrize(
    "summary,expected",
    [
        # revenue, cost savings and growth: 3/8 * 70 = 26.25, plus one metric token
        ("Grew revenue by 40% and saved budget while mentoring staff of the growing company.", 31),
        (
            "Grew revenue by 40% and saved costs, automated deploys, served 5,000 users, "
            "led a team of engineers, was promoted, improved quality. 10% 20% 30% 50% 60% 70%",
            100,
        ),
        ("Grew revenue by 40%.", 0),
    ],
)
def test_impact_score(summary, expected):
    assert ATSChecker().impact_score(ResumeRecord(summary=summary)) == expected


@pytest.mark.parametrize(
    "description,expected",
    [
        ("Developed internal dashboards for the operations group over several quarters", 25),
        ("Developed internal dashboards for the operations group, which reduced reporting effort", 50),
        (
            "Inherited a legacy billing system; tasked with cutting failures, I implemented retries, "
            "resulting in 40% fewer incidents.",
            100,
        ),
        ("Developed dashboards.", 0),
    ],
)
def test_star_score_per_component(description, expected):
    record = ResumeRecord(experience=[{"title": "Engineer", "description": description}])
    assert ATSChecker().star_score(record) == expected


def test_industry_match_needs_three_keywords():
    record = ResumeRecord(summary="Python developer who enjoys hiking, cooking and reading novels on weekends.")
    assert ATSChecker().industry_match(record) is None


def test_industry_match_at_three_keywords():
    record = ResumeRecord(summary="Worked with Python, Docker and Kubernetes on small internal tools for the team.")
    match = ATSChecker().industry_match(record)

    assert match.industry == "tech"
    assert match.match_percentage == 10
    assert match.matched_keywords == ["Kubernetes", "Docker", "Python"]
    assert len(match.missing_keywords) == 28


TECH_STACK = ["Python", "TypeScript", "React", "Node.js", "AWS", "Docker", "Kubernetes", "Terraform", "GraphQL"]


def test_tech_bonus_needs_ten_current_skills():
    checker = ATSChecker()
    # 8 of 31 tech keywords either way; Kafka is the tenth current skill
    without_bonus = checker.industry_match(ResumeRecord(skills=TECH_STACK))
    with_bonus = checker.industry_match(ResumeRecord(skills=TECH_STACK + ["Kafka"]))

    assert without_bonus.match_percentage == 26
    assert with_bonus.match_percentage == 36


def test_strong_record_scores_well(strong_record):
    report = check_ats_compatibility(strong_record)

    contact = _category(report, "Contact Information")
    assert contact.score == 20
    assert contact.passed
    assert _category(report, "Work Experience").passed
    assert _category(report, "Skills").passed
    assert report.overall_score >= 65
    assert report.pass_status in ("excellent", "good")


def test_missing_skills_short_circuits(strong_resume_data):
    strong_resume_data["skills"] = []
    report = check_ats_compatibility(strong_resume_data)

    skills = _category(report, "Skills")
    assert skills.score == 0
    assert not skills.passed
    assert skills.issues[0].startswith("No skills listed")


def test_rich_summary_scores_high(strong_record):
    summary = _category(check_ats_compatibility(strong_record), "Professional Summary")
    assert summary.score >= 16


def test_missing_summary_scores_zero(strong_resume_data):
    strong_resume_data["summary"] = "   "
    summary = _category(check_ats_compatibility(strong_resume_data), "Professional Summary")
    assert summary.score == 0
    assert summary.issues == ["Professional summary is missing"]


def test_adding_experience_raises_scores(strong_resume_data):
    with_experience = check_ats_compatibility(strong_resume_data)
    strong_resume_data["experience"] = []
    without_experience = check_ats_compatibility(strong_resume_data)

    before = _category(without_experience, "Work Experience").score
    after = _category(with_experience, "Work Experience").score
    assert before == 0
    assert after > before
    assert with_experience.overall_score > without_experience.overall_score


def test_check_is_idempotent(strong_record):
    first = check_ats_compatibility(strong_record)
    second = check_ats_compatibility(strong_record)
    assert asdict(first) == asdict(second)


def test_mapping_input_matches_record_input(strong_resume_data):
    from_mapping = check_ats_compatibility(strong_resume_data)
    from_record = check_ats_compatibility(ResumeRecord.model_validate(strong_resume_data))
    assert asdict(from_mapping) == asdict(from_record)


def test_rejects_non_record_input():
    with pytest.raises(TypeError):
        check_ats_compatibility("not a resume")


def test_rejects_malformed_skills():
    with pytest.raises(ValidationError):
        check_ats_compatibility({"skills": "python, go"})


def test_contact_penalties(messy_record):
    contact = _category(check_ats_compatibility(messy_record), "Contact Information")
    assert contact.score < 20 * 0.7
    assert not contact.passed
    assert "Email format is invalid - ATS may fail to parse" in contact.issues
    assert "Phone number appears invalid" in contact.issues
    assert "Location should include city and state/country" in contact.issues


def test_freemail_scores_below_custom_domain(strong_resume_data):
    strong_resume_data["personalInfo"]["email"] = "jane.doe@gmail.com"
    contact = _category(check_ats_compatibility(strong_resume_data), "Contact Information")
    assert contact.score == 19.5


def test_strong_gpa_adds_bonus(strong_resume_data):
    with_gpa = _category(check_ats_compatibility(strong_resume_data), "Education").score
    strong_resume_data["education"][0]["gpa"] = "2.5/4.0"
    without_bonus = _category(check_ats_compatibility(strong_resume_data), "Education").score
    assert with_gpa - without_bonus == 2


def test_inconsistent_date_formats_flagged(messy_record):
    formatting = _category(check_ats_compatibility(messy_record), "ATS Formatting")
    assert "Inconsistent date formats detected" in formatting.issues
    assert "Contains special characters that may break ATS parsing" in formatting.issues


def test_experience_issues_are_capped(messy_record):
    experience = _category(check_ats_compatibility(messy_record), "Work Experience")
    assert len(experience.issues) <= 6
    assert "Position 1: Job title too long - may be truncated" in experience.issues


def test_auxiliary_scores_for_strong_record(strong_record):
    report = check_ats_compatibility(strong_record)

    assert report.star_score >= 50
    assert report.impact_score > 0
    assert report.keyword_density > 0
    assert report.industry_match is not None
    assert report.industry_match.industry == "tech"
    assert "Python" in report.industry_match.matched_keywords
    assert "Python" not in report.industry_match.missing_keywords


def test_custom_library_is_used(strong_record):
    checker = ATSChecker(library=PatternLibrary(action_verbs=("zzzverb",)))
    summary = next(c for c in checker.check(strong_record).categories if c.name == "Professional Summary")
    assert "No action verbs found - weakens impact" in summary.issues


def test_max_recommendations_is_configurable(messy_record):
    report = ATSChecker(max_recommendations=3).check(messy_record)
    assert len(report.recommendations) == 3


def test_prioritize_recommendations_dedupes_and_orders():
    recommendations = [
        "Add a phone number",
        "Polish your summary",
        "Use an action verb",
        "Polish your summary",
        "Add LinkedIn",
        "List a skill",
    ]
    assert prioritize_recommendations(recommendations) == [
        "Use an action verb",
        "List a skill",
        "Polish your summary",
        "Add a phone number",
        "Add LinkedIn",
    ]


def test_prioritize_recommendations_caps_output():
    recommendations = [f"Recommendation {i}" for i in range(15)]
    assert prioritize_recommendations(recommendations) == recommendations[:10]


def test_weighted_average_of_82_is_excellent():
    categories = [
        CategoryResult(name="A", score=74, max_score=100, weight=1.0),
        CategoryResult(name="B", score=45, max_score=50, weight=1.0),
    ]
    score = overall_score(categories)
    assert score == 82
    assert pass_status_for(score) == "excellent"


@pytest.mark.parametrize(
    "score,status,label",
    [
        (100, "excellent", "Excellent"),
        (80, "excellent", "Excellent"),
        (79, "good", "Good"),
        (65, "good", "Good"),
        (64, "fair", "Fair"),
        (50, "fair", "Fair"),
        (49, "poor", "Needs Work"),
        (0, "poor", "Needs Work"),
    ],
)
def test_score_tiers(score, status, label):
    assert pass_status_for(score) == status
    assert score_label(score) == label
