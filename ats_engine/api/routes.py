"""
API Routes for the ATS engine.

Provides endpoints for:
- Scoring resumes for ATS compatibility
- Weak action verb analysis and power verb suggestions
- Skill grouping
- Template listing and recommendation
- Health checks
"""
import logging
import time
from dataclasses import asdict
from datetime import datetime

from fastapi import APIRouter, HTTPException

from ats_engine.config import get_settings
from ats_engine.models.analysis import (
    ActionVerbRequest,
    CategoryScoreResponse,
    CheckReportResponse,
    EnhancementResponse,
    GroupedSkillsResponse,
    HealthResponse,
    IndustryMatchResponse,
    PowerVerbRequest,
    PowerVerbResponse,
    SkillCategoryRequest,
    SkillCategoryResponse,
    SkillGroupResponse,
    SkillsRequest,
    TemplateInfo,
    TemplateRecommendationResponse,
    VerbReplacementResponse,
)
from ats_engine.models.resume import ResumeRecord
from ats_engine.services.action_verbs import ActionVerbEnhancer, EnhancementResult, verb_strength_label
from ats_engine.services.ats_checker import ATSChecker, CheckReport, score_label
from ats_engine.services.cache import cache_get_json, cache_set_json, content_key, get_redis_client
from ats_engine.services.skill_grouping import SkillGrouper, category_icon
from ats_engine.services.template_recommender import TemplateRecommender
from ats_engine.services.templates import DEFAULT_TEMPLATES, ResumeTemplate

logger = logging.getLogger(__name__)
router = APIRouter()

# Initialize services
ats_checker = ATSChecker(max_recommendations=get_settings().max_recommendations)
verb_enhancer = ActionVerbEnhancer()
skill_grouper = SkillGrouper()
template_recommender = TemplateRecommender()


def _template_info(template: ResumeTemplate) -> TemplateInfo:
    return TemplateInfo(
        id=template.id,
        name=template.name,
        description=template.description,
        preview=template.preview,
        industry=template.industry,
        keywords=list(template.keywords),
    )


def _report_response(report: CheckReport, elapsed_ms: float) -> CheckReportResponse:
    industry = report.industry_match
    return CheckReportResponse(
        success=True,
        overall_score=report.overall_score,
        label=score_label(report.overall_score),
        pass_status=report.pass_status,
        categories=[
            CategoryScoreResponse(
                name=c.name,
                score=c.score,
                max_score=c.max_score,
                issues=c.issues,
                passed=c.passed,
                weight=c.weight,
            )
            for c in report.categories
        ],
        recommendations=report.recommendations,
        keyword_density=report.keyword_density,
        readability_score=report.readability_score,
        impact_score=report.impact_score,
        star_score=report.star_score,
        industry_match=IndustryMatchResponse(**asdict(industry)) if industry else None,
        analysis_time_ms=round(elapsed_ms, 2),
    )


def _enhancement_response(result: EnhancementResult) -> EnhancementResponse:
    return EnhancementResponse(
        original_text=result.original_text,
        enhanced_text=result.enhanced_text,
        replacements=[VerbReplacementResponse(**asdict(r)) for r in result.replacements],
        score=result.score,
        label=verb_strength_label(result.score),
    )


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns the service status, version, and whether the Redis cache is configured.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.utcnow(),
        cacheEnabled=get_redis_client() is not None,
    )


@router.post("/ats/check", response_model=CheckReportResponse, tags=["ATS"])
async def check_resume(resume_data: ResumeRecord):
    """
    Score a resume for ATS compatibility.

    Request body: the resume record in the frontend format
    (personalInfo, summary, experience, education, skills).

    Returns:
    - overallScore / passStatus: weighted 0-100 score and its tier
    - categories: per-category score, issues and pass flag
    - recommendations: up to 10 prioritized, de-duplicated suggestions
    - keywordDensity, readabilityScore, impactScore, starScore, industryMatch
    """
    settings = get_settings()
    cache_key = content_key("ats:v1", resume_data.model_dump(by_alias=True))
    cached = await cache_get_json(cache_key)
    if cached:
        return CheckReportResponse.model_validate(cached)

    try:
        start = time.perf_counter()
        report = ats_checker.check(resume_data)
        response = _report_response(report, (time.perf_counter() - start) * 1000)
    except Exception as e:
        logger.error(f"ATS check failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    await cache_set_json(cache_key, response.model_dump(by_alias=True, mode="json"), ttl=settings.cache_ttl)
    return response


@router.post("/action-verbs/analyze", response_model=EnhancementResponse, tags=["Action Verbs"])
async def analyze_verbs(request: ActionVerbRequest):
    """
    Find weak verbs and propose power-verb replacements.

    Set `bullets` to analyze a multi-line experience description line by line.
    """
    try:
        if request.bullets:
            result = verb_enhancer.enhance_description(request.text)
        else:
            result = verb_enhancer.analyze(request.text)
        return _enhancement_response(result)
    except Exception as e:
        logger.error(f"Action verb analysis failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/action-verbs/suggest", response_model=PowerVerbResponse, tags=["Action Verbs"])
async def suggest_verbs(request: PowerVerbRequest):
    """Suggest up to 10 power verbs that fit the given context."""
    return PowerVerbResponse(verbs=verb_enhancer.suggest_power_verbs(request.context))


@router.post("/skills/group", response_model=GroupedSkillsResponse, tags=["Skills"])
async def group_skills(request: SkillsRequest):
    """Group a flat skills list into categories, largest group first."""
    try:
        grouped = skill_grouper.group(request.skills)
    except Exception as e:
        logger.error(f"Skill grouping failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return GroupedSkillsResponse(
        groups=[
            SkillGroupResponse(category=g.category, icon=category_icon(g.category), skills=g.skills)
            for g in grouped.groups
        ],
        ungrouped=grouped.ungrouped,
    )


@router.post("/skills/categorize", response_model=SkillCategoryResponse, tags=["Skills"])
async def categorize_skill(request: SkillCategoryRequest):
    """Category of a single skill, or null when it matches none."""
    return SkillCategoryResponse(skill=request.skill, category=skill_grouper.categorize(request.skill))


@router.get("/templates", response_model=list[TemplateInfo], tags=["Templates"])
async def list_templates():
    """
    List all available resume templates.

    General templates have no `industry`; industry templates carry the
    keyword list they are matched against.
    """
    settings = get_settings()
    cache_key = "templates:v1"
    cached = await cache_get_json(cache_key)
    if cached:
        return [TemplateInfo(**template) for template in cached]

    templates = [_template_info(t) for t in DEFAULT_TEMPLATES]
    await cache_set_json(cache_key, [t.model_dump() for t in templates], ttl=settings.templates_cache_ttl)
    return templates


@router.post(
    "/templates/recommend",
    response_model=list[TemplateRecommendationResponse],
    tags=["Templates"],
)
async def recommend_templates(resume_data: ResumeRecord):
    """Rank templates for a resume by industry keyword match."""
    try:
        recommendations = template_recommender.recommend(resume_data)
    except Exception as e:
        logger.error(f"Template recommendation failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return [
        TemplateRecommendationResponse(
            template=_template_info(r.template),
            match_score=r.match_score,
            matched_keywords=r.matched_keywords,
            reason=r.reason,
        )
        for r in recommendations
    ]
