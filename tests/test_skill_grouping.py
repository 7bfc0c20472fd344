import pytest

from ats_engine.services.skill_grouping import (
    GroupedSkills,
    SkillGroup,
    SkillGrouper,
    categorize_skill,
    category_icon,
    flatten_grouped_skills,
    group_skills,
    parse_grouped_skills_response,
    suggest_categories,
)


def _group_of(grouped, skill):
    return next((g.category for g in grouped.groups if skill in g.skills), None)


def test_mixed_skills_land_in_expected_groups():
    grouped = group_skills(["Python", "React", "Leadership", "Quantum Flux Whatsit"])

    assert _group_of(grouped, "Python") == "Programming Languages"
    assert _group_of(grouped, "React") == "Frameworks & Libraries"
    assert _group_of(grouped, "Leadership") == "Soft Skills"
    assert grouped.ungrouped == ["Quantum Flux Whatsit"]


@pytest.mark.parametrize(
    "skills",
    [
        [],
        ["Python", "python", "Go", "Docker", "AWS", "", "  ", "Basket Weaving"],
        ["C++", "C#", ".NET", "Node.js", "Spring Boot", "Project Management", "HIPAA"],
    ],
)
def test_every_skill_is_placed_exactly_once(skills):
    grouped = group_skills(skills)
    placed = [s for g in grouped.groups for s in g.skills]

    assert len(placed) + len(grouped.ungrouped) == len(skills)
    assert sorted(placed + grouped.ungrouped) == sorted(skills)


def test_groups_sorted_by_size():
    grouped = group_skills(["Docker", "Python", "Kubernetes", "AWS", "Go"])
    sizes = [len(g.skills) for g in grouped.groups]
    assert sizes == sorted(sizes, reverse=True)
    assert grouped.groups[0].category == "Cloud & DevOps"
    assert grouped.groups[0].skills == ["Docker", "Kubernetes", "AWS"]


@pytest.mark.parametrize(
    "skill,category",
    [
        ("C++", "Programming Languages"),
        ("  TypeScript!  ", "Programming Languages"),
        ("Spring Boot", "Frameworks & Libraries"),
        ("PostgreSQL", "Databases"),
        ("Jira", "Tools & Platforms"),
        ("Pytest", "Testing & QA"),
        ("Machine Learning", "Data & Analytics"),
        ("Scrum", "Methodologies"),
        ("Public Speaking", "Soft Skills"),
        ("Wireframing", "Design & UX"),
        ("Financial Modeling", "Finance & Business"),
        ("Epic", "Healthcare"),
    ],
)
def test_categorize_skill(skill, category):
    assert categorize_skill(skill) == category


def test_single_letter_keyword_does_not_claim_longer_words():
    assert categorize_skill("React") == "Frameworks & Libraries"
    assert categorize_skill("Leadership") == "Soft Skills"
    assert categorize_skill("R") == "Programming Languages"


def test_longer_keywords_match_inside_compound_skills():
    assert categorize_skill("JavaScript/TypeScript") == "Programming Languages"
    assert categorize_skill("Kubernetes Operators") == "Cloud & DevOps"
    # "sql" is short, so it only counts as a separate token
    assert categorize_skill("PostgreSQL") == "Databases"


def test_blank_skill_is_uncategorized():
    assert categorize_skill("") is None
    assert categorize_skill("!!!") is None


def test_first_matching_category_wins():
    grouper = SkillGrouper({"First": ("cloud",), "Second": ("cloud computing",)})
    assert grouper.categorize("Cloud Computing") == "First"


def test_parse_grouped_skills_response():
    grouped = parse_grouped_skills_response(
        "Programming Languages: Python, Go\nCloud & DevOps: AWS, Docker;Figma, Sketch\n\n"
    )
    assert grouped.groups == [
        SkillGroup(category="Programming Languages", skills=["Python", "Go"]),
        SkillGroup(category="Cloud & DevOps", skills=["AWS", "Docker"]),
    ]
    assert grouped.ungrouped == ["Figma", "Sketch"]


def test_flatten_grouped_skills():
    grouped = GroupedSkills(
        groups=[SkillGroup("A", ["a1", "a2"]), SkillGroup("B", ["b1"])],
        ungrouped=["u1"],
    )
    assert flatten_grouped_skills(grouped) == ["a1", "a2", "b1", "u1"]


def test_suggest_categories_from_job_description():
    categories = suggest_categories("We need Python and Go developers with AWS, Docker and Kubernetes experience")
    assert "Programming Languages" in categories
    assert "Cloud & DevOps" in categories
    assert "Healthcare" not in categories


def test_category_icon():
    assert category_icon("Databases") == "database"
    assert category_icon("Underwater Basketry") == "tag"
