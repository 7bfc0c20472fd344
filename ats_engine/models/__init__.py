"""Data models for the ATS engine."""
from ats_engine.models.resume import (
    PersonalInfo,
    ExperienceEntry,
    EducationEntry,
    ResumeRecord,
)
from ats_engine.models.analysis import (
    CategoryScoreResponse,
    IndustryMatchResponse,
    CheckReportResponse,
    ActionVerbRequest,
    EnhancementResponse,
    GroupedSkillsResponse,
    TemplateInfo,
    TemplateRecommendationResponse,
    HealthResponse,
)

__all__ = [
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "ResumeRecord",
    "CategoryScoreResponse",
    "IndustryMatchResponse",
    "CheckReportResponse",
    "ActionVerbRequest",
    "EnhancementResponse",
    "GroupedSkillsResponse",
    "TemplateInfo",
    "TemplateRecommendationResponse",
    "HealthResponse",
]
