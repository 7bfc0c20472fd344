"""Request and response models for the analysis API."""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class CategoryScoreResponse(BaseModel):
    """Score details for one ATS category."""
    name: str
    score: float = Field(..., ge=0)
    max_score: int = Field(..., alias="maxScore")
    issues: List[str] = Field(default_factory=list)
    passed: bool
    weight: float

    class Config:
        populate_by_name = True


class IndustryMatchResponse(BaseModel):
    """Best industry alignment for the resume."""
    industry: str
    match_percentage: int = Field(..., alias="matchPercentage", ge=0, le=100)
    matched_keywords: List[str] = Field(alias="matchedKeywords", default_factory=list)
    missing_keywords: List[str] = Field(alias="missingKeywords", default_factory=list)

    class Config:
        populate_by_name = True


class CheckReportResponse(BaseModel):
    """Complete ATS compatibility report."""
    success: bool = True
    overall_score: int = Field(..., alias="overallScore", ge=0, le=100)
    label: str
    pass_status: Literal["excellent", "good", "fair", "poor"] = Field(..., alias="passStatus")
    categories: List[CategoryScoreResponse]
    recommendations: List[str] = Field(default_factory=list)
    keyword_density: int = Field(..., alias="keywordDensity", ge=0, le=100)
    readability_score: int = Field(..., alias="readabilityScore", ge=0, le=100)
    impact_score: int = Field(..., alias="impactScore", ge=0, le=100)
    star_score: int = Field(..., alias="starScore", ge=0, le=100)
    industry_match: Optional[IndustryMatchResponse] = Field(None, alias="industryMatch")
    analysis_time_ms: Optional[float] = Field(None, alias="analysisTimeMs")

    class Config:
        populate_by_name = True


class ActionVerbRequest(BaseModel):
    """Text to scan for weak verbs."""
    text: str = Field(..., description="Sentence, paragraph or bulleted description")
    bullets: bool = Field(False, description="Treat the text as bullet lines")


class VerbReplacementResponse(BaseModel):
    original: str
    position: int = Field(..., ge=0)
    suggestions: List[str] = Field(default_factory=list)
    category: str


class EnhancementResponse(BaseModel):
    """Weak-verb analysis of a block of text."""
    original_text: str = Field(..., alias="originalText")
    enhanced_text: str = Field(..., alias="enhancedText")
    replacements: List[VerbReplacementResponse] = Field(default_factory=list)
    score: int = Field(..., ge=0, le=100)
    label: str

    class Config:
        populate_by_name = True


class PowerVerbRequest(BaseModel):
    context: str = Field(..., description="Bullet or sentence the verbs are for")


class PowerVerbResponse(BaseModel):
    verbs: List[str] = Field(default_factory=list)


class SkillsRequest(BaseModel):
    skills: List[str] = Field(default_factory=list)


class SkillGroupResponse(BaseModel):
    category: str
    icon: str
    skills: List[str] = Field(default_factory=list)


class GroupedSkillsResponse(BaseModel):
    groups: List[SkillGroupResponse] = Field(default_factory=list)
    ungrouped: List[str] = Field(default_factory=list)


class SkillCategoryRequest(BaseModel):
    skill: str


class SkillCategoryResponse(BaseModel):
    skill: str
    category: Optional[str] = None


class TemplateInfo(BaseModel):
    """Information about a resume template."""
    id: str
    name: str
    description: str
    preview: str
    industry: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class TemplateRecommendationResponse(BaseModel):
    template: TemplateInfo
    match_score: int = Field(..., alias="matchScore", ge=0)
    matched_keywords: List[str] = Field(alias="matchedKeywords", default_factory=list)
    reason: str

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    """Health check response."""
    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime
    cache_enabled: bool = Field(alias="cacheEnabled")

    class Config:
        populate_by_name = True
