"""Template recommendation by industry keyword match.

Each industry template is scored against the resume text with three tiers:
- primary industry keywords: +3 each
- contextual/domain words: +2 each
- job title phrases: +5 each

A weak best score (< 10) puts the general templates first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from ats_engine.models.resume import ResumeRecord
from ats_engine.services.ats_checker import coerce_resume_record
from ats_engine.services.patterns import (
    INDUSTRY_CONTEXT_KEYWORDS,
    INDUSTRY_JOB_TITLES,
    INDUSTRY_KEYWORDS,
    INDUSTRY_NAMES,
)
from ats_engine.services.templates import DEFAULT_TEMPLATES, ResumeTemplate
from ats_engine.services.text_utils import normalize_text

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 20
WEAK_MATCH_THRESHOLD = 10
MAX_MATCHED_KEYWORDS = 10

PRIMARY_POINTS = 3
CONTEXT_POINTS = 2
JOB_TITLE_POINTS = 5


@dataclass
class TemplateRecommendation:
    template: ResumeTemplate
    match_score: int
    matched_keywords: list[str] = field(default_factory=list)
    reason: str = ""


def resume_text(record: ResumeRecord) -> str:
    """Normalized text of the fields that signal an industry."""
    parts = [record.personal_info.full_name, record.summary]
    for exp in record.experience:
        parts.extend([exp.title, exp.company, exp.description])
    for edu in record.education:
        parts.extend([edu.degree, edu.school])
    parts.extend(record.skills)
    return normalize_text(" ".join(p for p in parts if p))


class TemplateRecommender:
    def __init__(
        self,
        templates: Sequence[ResumeTemplate] = DEFAULT_TEMPLATES,
        industry_keywords: Mapping[str, Sequence[str]] = INDUSTRY_KEYWORDS,
        context_keywords: Mapping[str, Sequence[str]] = INDUSTRY_CONTEXT_KEYWORDS,
        job_titles: Mapping[str, Sequence[str]] = INDUSTRY_JOB_TITLES,
        industry_names: Mapping[str, str] = INDUSTRY_NAMES,
    ):
        self.templates = tuple(templates)
        self.industry_keywords = industry_keywords
        self.context_keywords = context_keywords
        self.job_titles = job_titles
        self.industry_names = industry_names

    def _industry_score(self, text: str, template: ResumeTemplate) -> tuple[int, list[str]]:
        industry = template.industry or ""
        padded = f" {text} "
        tiers = (
            (template.keywords or tuple(self.industry_keywords.get(industry, ())), PRIMARY_POINTS),
            (tuple(self.context_keywords.get(industry, ())), CONTEXT_POINTS),
            (tuple(self.job_titles.get(industry, ())), JOB_TITLE_POINTS),
        )

        score = 0
        matched: list[str] = []
        seen: set[str] = set()
        for terms, points in tiers:
            for term in terms:
                normalized = normalize_text(term)
                if normalized and f" {normalized} " in padded:
                    score += points
                    if term.lower() not in seen:
                        seen.add(term.lower())
                        matched.append(term)
        return score, matched

    def _reason(self, industry: str, matched: Sequence[str], score: int) -> str:
        name = self.industry_names.get(industry, industry)
        if score > 30:
            return f"Strong match! Found {len(matched)} {name} keywords including: {', '.join(matched[:3])}."
        elif score > 15:
            return f"Good match. Detected {name} focus with keywords like: {', '.join(matched[:3])}."
        elif score > 5:
            return f"Moderate match. Some {name} elements detected."
        return "Limited industry-specific content detected."

    def recommend(self, resume: Any) -> list[TemplateRecommendation]:
        """
        Rank the catalog for a resume.

        Args:
            resume: ResumeRecord, or a mapping in the frontend shape

        Returns:
            Recommendations, industry templates ordered by descending score
        """
        record = coerce_resume_record(resume)
        text = resume_text(record)
        general = [t for t in self.templates if t.is_general]

        if len(text) < MIN_TEXT_LENGTH:
            return [
                TemplateRecommendation(
                    template=t,
                    match_score=0,
                    matched_keywords=[],
                    reason="Add more content for personalized recommendations.",
                )
                for t in general
            ]

        recommendations = []
        for template in self.templates:
            if template.is_general:
                continue
            score, matched = self._industry_score(text, template)
            recommendations.append(
                TemplateRecommendation(
                    template=template,
                    match_score=score,
                    matched_keywords=matched[:MAX_MATCHED_KEYWORDS],
                    reason=self._reason(template.industry, matched, score),
                )
            )
        recommendations.sort(key=lambda r: r.match_score, reverse=True)

        top_score = recommendations[0].match_score if recommendations else 0
        logger.debug(f"Template recommendation top score={top_score}")

        if top_score < WEAK_MATCH_THRESHOLD:
            # Weak signal: do not push an industry layout
            return [
                TemplateRecommendation(
                    template=t,
                    match_score=5,
                    matched_keywords=[],
                    reason="Universal format suitable for most industries and roles.",
                )
                for t in general
            ] + recommendations

        recommendations.extend(
            TemplateRecommendation(
                template=t,
                match_score=0,
                matched_keywords=[],
                reason="Classic format works well across all industries.",
            )
            for t in general
        )
        return recommendations

    def top_recommendation(self, resume: Any) -> Optional[TemplateRecommendation]:
        recommendations = self.recommend(resume)
        return recommendations[0] if recommendations else None


_default_recommender = TemplateRecommender()


def recommend_templates(resume: Any) -> list[TemplateRecommendation]:
    return _default_recommender.recommend(resume)


def top_recommendation(resume: Any) -> Optional[TemplateRecommendation]:
    return _default_recommender.top_recommendation(resume)
