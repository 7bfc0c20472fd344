from ats_engine.services.patterns import (
    ACTION_VERBS,
    DEFAULT_LIBRARY,
    IMPACT_PATTERNS,
    INDUSTRY_KEYWORDS,
    RECOMMENDATION_PRIORITIES,
    STAR_PATTERNS,
    PatternLibrary,
)


def test_default_library_uses_module_tables():
    library = PatternLibrary()

    assert library.star_patterns is STAR_PATTERNS
    assert library.impact_patterns is IMPACT_PATTERNS
    assert library.industry_keywords is INDUSTRY_KEYWORDS
    assert library.recommendation_priorities is RECOMMENDATION_PRIORITIES
    assert len(library.action_verb_patterns) == len(ACTION_VERBS)
    assert DEFAULT_LIBRARY.industry_keywords is INDUSTRY_KEYWORDS


def test_custom_verbs_compile_their_own_patterns():
    library = PatternLibrary(action_verbs=("shipped", "owned"))

    assert len(library.action_verb_patterns) == 2
    assert library.action_verb_patterns[0].search("Shipped the release")
    assert library.star_patterns is STAR_PATTERNS


def test_tables_can_be_overridden():
    library = PatternLibrary(industry_keywords={"retail": ("Merchandising", "POS", "Inventory")})
    assert list(library.industry_keywords) == ["retail"]
