from ats_engine.models.resume import ResumeRecord
from ats_engine.services.template_recommender import (
    TemplateRecommender,
    recommend_templates,
    resume_text,
    top_recommendation,
)
from ats_engine.services.templates import DEFAULT_TEMPLATES, ResumeTemplate, get_template

GENERAL_IDS = ["classic", "modern", "professional"]


def test_catalog_has_general_and_industry_templates():
    assert [t.id for t in DEFAULT_TEMPLATES if t.is_general] == GENERAL_IDS
    assert [t.industry for t in DEFAULT_TEMPLATES if not t.is_general] == ["tech", "finance", "healthcare"]
    assert get_template("tech").name == "Tech & Engineering"
    assert get_template("missing") is None


def test_short_resume_gets_general_templates_only():
    recommendations = recommend_templates(ResumeRecord.model_validate({"personalInfo": {"fullName": "Al"}}))

    assert [r.template.id for r in recommendations] == GENERAL_IDS
    assert all(r.match_score == 0 for r in recommendations)
    assert all(r.reason == "Add more content for personalized recommendations." for r in recommendations)


def test_weak_signal_puts_general_templates_first():
    record = ResumeRecord(summary="Enjoys gardening and long walks on the beach every weekend")
    recommendations = recommend_templates(record)

    assert [r.template.id for r in recommendations[:3]] == GENERAL_IDS
    assert all(r.match_score == 5 for r in recommendations[:3])
    assert len(recommendations) == 6
    assert all(r.match_score < 10 for r in recommendations[3:])


def test_tech_resume_ranks_tech_first(strong_record):
    recommendations = recommend_templates(strong_record)

    top = recommendations[0]
    assert top.template.id == "tech"
    assert top.match_score > 30
    assert top.reason.startswith("Strong match! Found")
    assert len(top.matched_keywords) <= 10
    assert len({k.lower() for k in top.matched_keywords}) == len(top.matched_keywords)

    scores = [r.match_score for r in recommendations[:3]]
    assert scores == sorted(scores, reverse=True)
    assert [r.template.id for r in recommendations[-3:]] == GENERAL_IDS
    assert all(r.match_score == 0 for r in recommendations[-3:])


def test_job_title_outweighs_context_word():
    record = ResumeRecord(summary="Registered nurse working nights in a busy city hospital ward")
    recommendations = recommend_templates(record)
    healthcare = next(r for r in recommendations if r.template.id == "healthcare")
    # "registered nurse" (+5), "nurse" (+2), "hospital" (+2)
    assert healthcare.match_score == 9
    assert "registered nurse" in healthcare.matched_keywords


def test_whole_word_matching():
    record = ResumeRecord(summary="Appreciates applesauce and happy codebreakers of all kinds")
    recommendations = recommend_templates(record)
    tech = next(r for r in recommendations if r.template.id == "tech")
    assert tech.match_score == 0
    assert tech.reason == "Limited industry-specific content detected."


def test_resume_text_is_normalized(strong_record):
    text = resume_text(strong_record)
    assert text == text.lower()
    assert "  " not in text
    assert "node js" in text


def test_top_recommendation(strong_record):
    assert top_recommendation(strong_record).template.id == "tech"


def test_custom_catalog():
    catalog = (
        ResumeTemplate(id="plain", name="Plain", description="", preview="plain"),
        ResumeTemplate(
            id="chef", name="Chef", description="", preview="chef", industry="culinary",
            keywords=("sous vide", "pastry", "menu design", "kitchen"),
        ),
    )
    recommender = TemplateRecommender(templates=catalog, industry_names={"culinary": "Culinary"})
    record = ResumeRecord(summary="Pastry lead running a kitchen team, owns menu design and sous vide prep")

    recommendations = recommender.recommend(record)
    assert [r.template.id for r in recommendations] == ["chef", "plain"]
    assert recommendations[0].match_score == 12
    assert recommendations[0].reason == "Moderate match. Some Culinary elements detected."
