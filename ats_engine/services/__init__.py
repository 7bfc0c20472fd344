"""Services for the ATS engine."""
from ats_engine.services.ats_checker import ATSChecker, check_ats_compatibility, get_ats_checker
from ats_engine.services.action_verbs import (
    ActionVerbEnhancer,
    analyze_action_verbs,
    enhance_experience_description,
)
from ats_engine.services.skill_grouping import SkillGrouper, categorize_skill, group_skills
from ats_engine.services.template_recommender import TemplateRecommender, recommend_templates

__all__ = [
    "ATSChecker",
    "check_ats_compatibility",
    "get_ats_checker",
    "ActionVerbEnhancer",
    "analyze_action_verbs",
    "enhance_experience_description",
    "SkillGrouper",
    "categorize_skill",
    "group_skills",
    "TemplateRecommender",
    "recommend_templates",
]
