"""
ATS (Applicant Tracking System) compatibility checker.

Scores a structured resume record against seven weighted categories that
approximate how ATS parsers and recruiters judge a resume:
- Contact information
- Professional summary
- Work experience
- Education
- Skills
- Keyword optimization
- ATS formatting

Category percentages are combined into a weight-normalized overall score,
and a handful of auxiliary metrics (keyword density, readability, STAR
adherence, impact, industry match) are computed from the same record.
Everything is deterministic and regex based.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Mapping, Optional, Sequence

from ats_engine.models.resume import EducationEntry, ExperienceEntry, PersonalInfo, ResumeRecord
from ats_engine.services.patterns import (
    BULLET_MARKERS,
    BUSINESS_KEYWORD_PATTERN,
    DEFAULT_LIBRARY,
    DEGREE_PATTERN,
    EMAIL_PATTERN,
    EXCESSIVE_PUNCTUATION,
    FREEMAIL_PATTERN,
    INDUSTRY_TERM_PATTERN,
    NAME_PATTERN,
    NAME_SPECIAL_CHARACTERS,
    PROBLEMATIC_CHARACTERS,
    QUANTIFIABLE_TOKEN,
    RECOMMENDATION_PRIORITIES,
    ROLE_PATTERN,
    SOFT_SKILL_PATTERN,
    TECHNICAL_SKILL_PATTERN,
    UNPROFESSIONAL_EMAIL_PATTERN,
    VAGUE_SKILL_PATTERN,
    YEARS_PATTERN,
    PatternLibrary,
)
from ats_engine.services.text_utils import (
    clamp,
    contains_term,
    count_matches,
    round_half_up,
    sentences,
    word_count,
    words,
)

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 10

# Category weights encode relative hiring impact
CATEGORY_WEIGHTS = {
    "contact": 1.0,
    "summary": 1.2,
    "experience": 1.5,
    "education": 0.8,
    "skills": 1.3,
    "keywords": 1.4,
    "formatting": 1.0,
}

GPA_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")


@dataclass
class CategoryResult:
    """Score for one ATS category."""
    name: str
    score: float
    max_score: int
    issues: list[str] = field(default_factory=list)
    passed: bool = False
    weight: float = 1.0


@dataclass
class CheckOutcome:
    """A category result plus the recommendations its checker emitted."""
    category: CategoryResult
    recommendations: list[str] = field(default_factory=list)


@dataclass
class IndustryMatch:
    """Best-aligned industry profile for the resume text."""
    industry: str
    match_percentage: int
    matched_keywords: list[str]
    missing_keywords: list[str]


@dataclass
class CheckReport:
    """Complete ATS compatibility report."""
    overall_score: int  # 0-100
    categories: list[CategoryResult]
    recommendations: list[str]
    pass_status: str  # excellent, good, fair, poor
    keyword_density: int
    readability_score: int
    impact_score: int
    star_score: int
    industry_match: Optional[IndustryMatch] = None


def coerce_resume_record(resume: Any) -> ResumeRecord:
    """Accept a ResumeRecord or a mapping in the frontend shape; reject anything else."""
    if isinstance(resume, ResumeRecord):
        return resume
    if isinstance(resume, Mapping):
        return ResumeRecord.model_validate(dict(resume))
    raise TypeError(
        f"Expected a ResumeRecord or a mapping of resume fields, got {type(resume).__name__}"
    )


def pass_status_for(score: int) -> str:
    """Map an overall score onto the four-tier pass status."""
    if score >= 80:
        return "excellent"
    elif score >= 65:
        return "good"
    elif score >= 50:
        return "fair"
    return "poor"


def score_label(score: int) -> str:
    """Human-readable label for an overall score."""
    if score >= 80:
        return "Excellent"
    elif score >= 65:
        return "Good"
    elif score >= 50:
        return "Fair"
    return "Needs Work"


def prioritize_recommendations(
    recommendations: Sequence[str],
    priorities: Mapping[str, int] = RECOMMENDATION_PRIORITIES,
    limit: int = MAX_RECOMMENDATIONS,
) -> list[str]:
    """
    De-duplicate recommendations and order them by keyword priority.

    Each recommendation takes the highest weight of any priority keyword it
    contains (0 when none). The sort is stable, so ties keep their original
    collection order.
    """
    unique = list(dict.fromkeys(recommendations))

    def priority(text: str) -> int:
        lowered = text.lower()
        return max((weight for keyword, weight in priorities.items() if keyword in lowered), default=0)

    return sorted(unique, key=priority, reverse=True)[:limit]


def overall_score(categories: Sequence[CategoryResult]) -> int:
    """Weight-normalized average of category percentages, 0-100."""
    weighted_total = sum(c.score / c.max_score * 100 * c.weight for c in categories)
    weighted_max = sum(100 * c.weight for c in categories)
    if weighted_max <= 0:
        return 0
    return int(clamp(round_half_up(weighted_total / weighted_max * 100), 0, 100))


class ATSChecker:
    """
    Rule-based ATS compatibility engine.

    All seven category checks run on every call, in a fixed order (contact,
    summary, experience, education, skills, keywords, formatting); the order
    only affects how recommendations are collected before prioritizing.
    """

    def __init__(
        self,
        library: PatternLibrary = DEFAULT_LIBRARY,
        max_recommendations: int = MAX_RECOMMENDATIONS,
    ):
        self.library = library
        self.max_recommendations = max_recommendations

    def check(self, resume: Any) -> CheckReport:
        """
        Score a resume record.

        Args:
            resume: ResumeRecord, or a mapping in the frontend shape

        Returns:
            CheckReport with category breakdown and prioritized recommendations

        Raises:
            TypeError / pydantic.ValidationError when the input is not a resume record
        """
        record = coerce_resume_record(resume)

        outcomes = [
            self._check_contact_info(record.personal_info),
            self._check_summary(record.summary),
            self._check_experience(record.experience),
            self._check_education(record.education),
            self._check_skills(record.skills),
            self._check_keyword_optimization(record),
            self._check_formatting(record),
        ]

        categories = [o.category for o in outcomes]
        collected = [rec for o in outcomes for rec in o.recommendations]

        score = overall_score(categories)
        report = CheckReport(
            overall_score=score,
            categories=categories,
            recommendations=prioritize_recommendations(
                collected, self.library.recommendation_priorities, self.max_recommendations
            ),
            pass_status=pass_status_for(score),
            keyword_density=self.keyword_density(record),
            readability_score=self.readability_score(record),
            impact_score=self.impact_score(record),
            star_score=self.star_score(record),
            industry_match=self.industry_match(record),
        )
        logger.debug(
            f"ATS check: overall={report.overall_score} status={report.pass_status} "
            f"recommendations={len(report.recommendations)}"
        )
        return report

    # ------------------------------------------------------------------
    # Category checkers
    # ------------------------------------------------------------------

    def _check_contact_info(self, info: PersonalInfo) -> CheckOutcome:
        issues: list[str] = []
        recommendations: list[str] = []
        score = 0.0
        max_score = 20

        # Full name (5 points)
        name = info.full_name.strip()
        if name:
            score += 3
            if NAME_PATTERN.match(name):
                score += 2
            elif re.match(r"[A-Z]", name):
                score += 1
                issues.append("Name formatting could be improved (use proper capitalization)")
            else:
                issues.append("Name should start with capital letter")

            if NAME_SPECIAL_CHARACTERS.search(name):
                issues.append("Name contains special characters that may confuse ATS")
                score -= 1
        else:
            issues.append("Full name is missing - this is critical for ATS")
            recommendations.append("Add your full legal name as it appears on official documents")

        # Email (5 points)
        email = info.email.strip().lower()
        if email:
            if EMAIL_PATTERN.match(email):
                score += 4
                # Custom domains read as more professional than free mail
                score += 0.5 if FREEMAIL_PATTERN.search(email) else 1
                if UNPROFESSIONAL_EMAIL_PATTERN.search(email):
                    issues.append("Email may appear unprofessional")
                    score -= 1
            else:
                issues.append("Email format is invalid - ATS may fail to parse")
                recommendations.append("Use a valid email format (example@domain.com)")
        else:
            issues.append("Email address is missing - required for recruiter contact")
            recommendations.append("Add a professional email address")

        # Phone (4 points)
        if info.phone.strip():
            digits = re.sub(r"\D", "", info.phone)
            if 10 <= len(digits) <= 15:
                score += 4
            elif 7 <= len(digits) <= 9:
                score += 2
                issues.append("Phone number may be incomplete")
            else:
                issues.append("Phone number appears invalid")
        else:
            issues.append("Phone number is missing")
            recommendations.append("Add a phone number - recruiters need multiple contact options")

        # Location (3 points)
        location = info.location.strip()
        if location:
            if "," in location or len(location.split(" ")) >= 2:
                score += 3
            else:
                score += 2
                issues.append("Location should include city and state/country")
        else:
            issues.append("Location is missing - important for job matching")
            recommendations.append("Add city and state/country for location-based job matching")

        # LinkedIn (3 points)
        linkedin = (info.linkedin or "").strip().lower()
        if linkedin:
            if "linkedin.com/in/" in linkedin:
                score += 3
            elif "linkedin" in linkedin:
                score += 2
                issues.append("LinkedIn URL format should be linkedin.com/in/yourname")
            else:
                score += 1
                issues.append("LinkedIn URL appears invalid")
        else:
            recommendations.append("Add LinkedIn profile URL - 87% of recruiters use LinkedIn")

        score = clamp(score, 0, max_score)
        return CheckOutcome(
            category=CategoryResult(
                name="Contact Information",
                score=score,
                max_score=max_score,
                issues=issues,
                passed=score >= max_score * 0.7,
                weight=CATEGORY_WEIGHTS["contact"],
            ),
            recommendations=recommendations,
        )

    def _check_summary(self, summary: str) -> CheckOutcome:
        issues: list[str] = []
        recommendations: list[str] = []
        score = 0
        max_score = 20

        if not summary.strip():
            issues.append("Professional summary is missing")
            recommendations.append(
                "Add a 2-4 sentence professional summary highlighting your value proposition"
            )
            return CheckOutcome(
                category=CategoryResult(
                    name="Professional Summary",
                    score=0,
                    max_score=max_score,
                    issues=issues,
                    passed=False,
                    weight=CATEGORY_WEIGHTS["summary"],
                ),
                recommendations=recommendations,
            )

        # Length (6 points), optimal 50-150 words
        count = word_count(summary)
        if 50 <= count <= 150:
            score += 6
        elif 30 <= count <= 200:
            score += 4
            if count < 50:
                issues.append("Summary is short - aim for 50-150 words")
            else:
                issues.append("Summary is slightly long - ATS may truncate")
        elif count >= 20:
            score += 2
            recommendations.append("Expand your summary to 50-150 words for optimal ATS parsing")
        else:
            issues.append("Summary is too brief to communicate your value")
            recommendations.append("Write a compelling 50-150 word summary showcasing your expertise")

        # Action verbs (4 points)
        verb_count = sum(1 for p in self.library.action_verb_patterns if p.search(summary))
        if verb_count >= 3:
            score += 4
        elif verb_count >= 2:
            score += 3
        elif verb_count >= 1:
            score += 2
            recommendations.append("Use more action verbs (developed, managed, achieved) in your summary")
        else:
            issues.append("No action verbs found - weakens impact")
            recommendations.append("Start sentences with action verbs like 'Developed', 'Led', 'Achieved'")

        # Quantifiable achievements (4 points)
        if self._has_quantifiable(summary):
            score += 4
        else:
            issues.append("No quantifiable achievements")
            recommendations.append("Add metrics (e.g., 'increased revenue by 25%', 'managed team of 10')")

        # Role + industry keywords (3 points)
        has_role = bool(ROLE_PATTERN.search(summary))
        has_industry = bool(INDUSTRY_TERM_PATTERN.search(summary))
        if has_role and has_industry:
            score += 3
        elif has_role or has_industry:
            score += 2
            recommendations.append("Include both your target role and industry keywords")
        else:
            issues.append("Missing job title and industry keywords")
            recommendations.append("Mention your target job title and industry for better ATS matching")

        # Years of experience (3 points)
        if YEARS_PATTERN.search(summary):
            score += 3
        else:
            recommendations.append("Consider mentioning your years of experience (e.g., '8+ years')")

        score = min(score, max_score)
        return CheckOutcome(
            category=CategoryResult(
                name="Professional Summary",
                score=score,
                max_score=max_score,
                issues=issues,
                passed=score >= max_score * 0.6,
                weight=CATEGORY_WEIGHTS["summary"],
            ),
            recommendations=recommendations,
        )

    def _check_experience(self, experience: Sequence[ExperienceEntry]) -> CheckOutcome:
        issues: list[str] = []
        recommendations: list[str] = []
        score = 0
        max_score = 30

        if not experience:
            issues.append("No work experience listed - critical for ATS ranking")
            recommendations.append("Add at least 2-3 relevant positions with detailed achievements")
            return CheckOutcome(
                category=CategoryResult(
                    name="Work Experience",
                    score=0,
                    max_score=max_score,
                    issues=issues,
                    passed=False,
                    weight=CATEGORY_WEIGHTS["experience"],
                ),
                recommendations=recommendations,
            )

        # Number of positions (6 points), optimal 3-5
        entries = len(experience)
        if 3 <= entries <= 5:
            score += 6
        elif 2 <= entries <= 7:
            score += 4
            if entries < 3:
                issues.append("Consider adding more relevant experience")
        elif entries == 1:
            score += 2
            issues.append("Only one position listed - add more if available")
        else:
            score += 4
            issues.append("Too many positions - focus on most recent/relevant 5-7")

        description_points = 0
        with_dates = 0
        with_action_verbs = 0
        with_quantifiables = 0
        bullet_markers = 0

        for index, exp in enumerate(experience, start=1):
            entry_issues: list[str] = []

            if not exp.title.strip():
                entry_issues.append(f"Position {index}: Missing job title (critical)")
            elif len(exp.title) > 50:
                entry_issues.append(f"Position {index}: Job title too long - may be truncated")

            if not exp.company.strip():
                entry_issues.append(f"Position {index}: Missing company name")

            if exp.start_date:
                with_dates += 1
                if not exp.end_date and not exp.current:
                    entry_issues.append(f"Position {index}: Missing end date")
            else:
                entry_issues.append(f"Position {index}: Missing start date")

            desc = exp.description
            if desc.strip():
                desc_words = word_count(desc)
                bullet_markers += len(BULLET_MARKERS.findall(desc))

                if 50 <= desc_words <= 150:
                    description_points += 4
                elif 30 <= desc_words <= 200:
                    description_points += 3
                elif desc_words >= 15:
                    description_points += 2
                    entry_issues.append(f"Position {index}: Description could be more detailed")
                else:
                    description_points += 1
                    entry_issues.append(f"Position {index}: Description too brief")

                if any(p.search(desc) for p in self.library.action_verb_patterns):
                    with_action_verbs += 1
                else:
                    entry_issues.append(f"Position {index}: Missing action verbs")

                if self._has_quantifiable(desc):
                    with_quantifiables += 1
            else:
                entry_issues.append(f"Position {index}: No description provided")

            issues.extend(entry_issues[:3])

        # Date completeness (5 points)
        score += round_half_up(with_dates / entries * 5)

        # Description quality (7 points)
        score += min(round_half_up(description_points / entries * 1.75), 7)

        # Action verbs (6 points)
        action_ratio = with_action_verbs / entries
        score += round_half_up(action_ratio * 6)
        if action_ratio < 0.8:
            recommendations.append(
                "Start each bullet point with a strong action verb (Led, Developed, Achieved)"
            )

        # Quantifiable achievements (6 points)
        quantifiable_ratio = with_quantifiables / entries
        score += round_half_up(quantifiable_ratio * 6)
        if quantifiable_ratio < 0.6:
            recommendations.append("Add measurable achievements (%, $, numbers) to at least 60% of positions")

        # Structured bullets bonus
        if bullet_markers >= entries * 3:
            score += 1

        score = int(clamp(score, 0, max_score))
        return CheckOutcome(
            category=CategoryResult(
                name="Work Experience",
                score=score,
                max_score=max_score,
                issues=issues[:6],
                passed=score >= max_score * 0.6,
                weight=CATEGORY_WEIGHTS["experience"],
            ),
            recommendations=recommendations,
        )

    def _check_education(self, education: Sequence[EducationEntry]) -> CheckOutcome:
        issues: list[str] = []
        recommendations: list[str] = []
        score = 0
        max_score = 15

        if not education:
            issues.append("No education listed")
            recommendations.append("Add your highest degree with institution name and graduation date")
            return CheckOutcome(
                category=CategoryResult(
                    name="Education",
                    score=0,
                    max_score=max_score,
                    issues=issues,
                    passed=False,
                    weight=CATEGORY_WEIGHTS["education"],
                ),
                recommendations=recommendations,
            )

        score += min(len(education) * 2, 4)

        for index, edu in enumerate(education):
            position = index + 1
            primary = index == 0

            if edu.degree.strip():
                if primary:
                    score += 4
                    if not DEGREE_PATTERN.search(edu.degree):
                        issues.append("Consider specifying degree type (e.g., Bachelor's, Master's)")
                else:
                    score += 1
            else:
                issues.append(f"Education {position}: Missing degree/certification")

            if edu.school.strip():
                if primary:
                    score += 3
            else:
                issues.append(f"Education {position}: Missing institution name")

            if edu.graduation_date.strip():
                if primary:
                    score += 2
            else:
                issues.append(f"Education {position}: Missing graduation date")

        # GPA bonus, only worth showing when strong
        gpas = [g for g in (self._parse_gpa(edu.gpa) for edu in education) if g is not None]
        if any(g >= 3.5 for g in gpas):
            score += 2
        elif any(g >= 3.0 for g in gpas):
            score += 1

        score = min(score, max_score)
        return CheckOutcome(
            category=CategoryResult(
                name="Education",
                score=score,
                max_score=max_score,
                issues=issues,
                passed=score >= max_score * 0.6,
                weight=CATEGORY_WEIGHTS["education"],
            ),
            recommendations=recommendations,
        )

    def _check_skills(self, skills: Sequence[str]) -> CheckOutcome:
        issues: list[str] = []
        recommendations: list[str] = []
        score = 0
        max_score = 20

        if not skills:
            issues.append("No skills listed - critical for ATS keyword matching")
            recommendations.append("Add 10-20 relevant skills matching your target job requirements")
            return CheckOutcome(
                category=CategoryResult(
                    name="Skills",
                    score=0,
                    max_score=max_score,
                    issues=issues,
                    passed=False,
                    weight=CATEGORY_WEIGHTS["skills"],
                ),
                recommendations=recommendations,
            )

        # Skill count (8 points), optimal 10-20
        count = len(skills)
        if 10 <= count <= 20:
            score += 8
        elif 8 <= count <= 25:
            score += 6
            if count < 10:
                issues.append("Add more skills - aim for 10-20 relevant skills")
            else:
                issues.append("Consider focusing on most relevant 15-20 skills")
        elif count >= 5:
            score += 4
            recommendations.append("Expand skills section to 10-20 items for better ATS matching")
        else:
            score += 2
            issues.append("Skills section needs significant expansion")
            recommendations.append("Add 10-20 skills including both technical and transferable skills")

        # Technical / soft mix (6 points)
        joined = " ".join(skills).lower()
        has_technical = len(TECHNICAL_SKILL_PATTERN.findall(joined)) >= 3
        has_soft = len(SOFT_SKILL_PATTERN.findall(joined)) >= 2
        if has_technical and has_soft:
            score += 6
        elif has_technical:
            score += 4
            recommendations.append("Add 2-3 soft skills (communication, leadership, problem-solving)")
        elif has_soft:
            score += 3
            recommendations.append("Add more technical/hard skills relevant to your field")
        else:
            score += 1
            recommendations.append("Add a mix of technical and soft skills for comprehensive coverage")

        # Specificity (3 points)
        vague = len(VAGUE_SKILL_PATTERN.findall(joined))
        if vague == 0:
            score += 3
        elif vague <= 2:
            score += 2
            issues.append("Replace vague skills with specific, measurable abilities")
        else:
            score += 1
            recommendations.append("Remove generic skills like 'hardworking' - focus on specific competencies")

        # Concise formatting (3 points)
        average_length = sum(len(s) for s in skills) / count
        well_formed = all(2 <= len(s) <= 40 for s in skills)
        if well_formed and average_length <= 25:
            score += 3
        elif average_length <= 30:
            score += 2
        else:
            score += 1
            issues.append("Some skills are too verbose - keep them concise (1-4 words each)")

        score = min(score, max_score)
        return CheckOutcome(
            category=CategoryResult(
                name="Skills",
                score=score,
                max_score=max_score,
                issues=issues,
                passed=score >= max_score * 0.6,
                weight=CATEGORY_WEIGHTS["skills"],
            ),
            recommendations=recommendations,
        )

    def _check_keyword_optimization(self, record: ResumeRecord) -> CheckOutcome:
        issues: list[str] = []
        recommendations: list[str] = []
        score = 0
        max_score = 15

        all_text = self._full_text(record)

        # Action verb occurrences (5 points)
        verb_hits = count_matches(all_text, self.library.action_verb_patterns)
        if verb_hits >= 15:
            score += 5
        elif verb_hits >= 10:
            score += 4
        elif verb_hits >= 5:
            score += 3
            recommendations.append("Use more varied action verbs throughout your resume")
        else:
            score += 1
            issues.append("Insufficient action verbs for strong ATS performance")
            recommendations.append("Incorporate 15+ different action verbs across your resume")

        # Skill reinforcement (5 points): listed skills should reappear elsewhere
        repeated = 0
        for skill in record.skills:
            skill = skill.lower().strip()
            if not skill:
                continue
            hits = re.findall(rf"\b{re.escape(skill)}\b", all_text)
            if len(hits) >= 2:
                repeated += 1

        ratio = repeated / len(record.skills) if record.skills else 0
        if ratio >= 0.5:
            score += 5
        elif ratio >= 0.3:
            score += 3
            recommendations.append("Mention your top skills in both Skills section and Experience descriptions")
        else:
            score += 1
            issues.append("Skills aren't reinforced throughout the resume")
            recommendations.append(
                "Integrate key skills into your experience descriptions for better ATS matching"
            )

        # Business / industry vocabulary (5 points)
        business_hits = len(BUSINESS_KEYWORD_PATTERN.findall(all_text))
        if business_hits >= 25:
            score += 5
        elif business_hits >= 15:
            score += 4
        elif business_hits >= 8:
            score += 2
            recommendations.append("Add more business/industry keywords (project, client, strategy, etc.)")
        else:
            score += 1
            issues.append("Missing common professional keywords")

        score = min(score, max_score)
        return CheckOutcome(
            category=CategoryResult(
                name="Keyword Optimization",
                score=score,
                max_score=max_score,
                issues=issues,
                passed=score >= max_score * 0.6,
                weight=CATEGORY_WEIGHTS["keywords"],
            ),
            recommendations=recommendations,
        )

    def _check_formatting(self, record: ResumeRecord) -> CheckOutcome:
        issues: list[str] = []
        recommendations: list[str] = []
        score = 0
        max_score = 15

        dumped = record.model_dump(by_alias=True)
        if not self._has_text(dumped):
            issues.append("Resume has no content to evaluate")
            recommendations.append(
                "Include all standard sections: Contact, Summary, Experience, Education, Skills"
            )
            return CheckOutcome(
                category=CategoryResult(
                    name="ATS Formatting",
                    score=0,
                    max_score=max_score,
                    issues=issues,
                    passed=False,
                    weight=CATEGORY_WEIGHTS["formatting"],
                ),
                recommendations=recommendations,
            )

        serialized = json.dumps(dumped, ensure_ascii=False, separators=(",", ":"))

        # Decorative characters (4 points)
        if not PROBLEMATIC_CHARACTERS.search(serialized):
            score += 4
        else:
            issues.append("Contains special characters that may break ATS parsing")
            recommendations.append("Remove decorative characters, symbols, and graphics")
            score += 1

        # Punctuation runs (2 points)
        if not EXCESSIVE_PUNCTUATION.search(serialized):
            score += 2
        else:
            issues.append("Excessive punctuation detected")
            score += 1

        # Date format consistency (3 points)
        dates = [d for exp in record.experience for d in (exp.start_date, exp.end_date) if d]
        dates.extend(edu.graduation_date for edu in record.education if edu.graduation_date)
        if len(dates) > 1:
            families = [
                any("/" in d for d in dates),
                any("-" in d for d in dates),
                any(re.search(r"[A-Za-z]", d) for d in dates),
            ]
            if sum(families) <= 1:
                score += 3
            else:
                score += 1
                issues.append("Inconsistent date formats detected")
                recommendations.append("Use consistent date format (e.g., 'Jan 2020' or '01/2020' throughout)")
        else:
            score += 3

        # Content length (3 points), optimal 400-800 words
        content_words = word_count(serialized, min_length=3)
        if 400 <= content_words <= 800:
            score += 3
        elif 300 <= content_words <= 1000:
            score += 2
            if content_words < 400:
                issues.append("Resume content is thin - add more detail")
            else:
                issues.append("Resume may be too lengthy")
        elif content_words >= 200:
            score += 1
            recommendations.append("Aim for 400-800 words of content for optimal ATS parsing")
        else:
            issues.append("Resume needs significantly more content")

        # Section completeness (3 points)
        has_all_sections = bool(
            record.personal_info.full_name
            and record.summary
            and record.experience
            and record.education
            and record.skills
        )
        if has_all_sections:
            score += 3
        else:
            score += 1
            issues.append("Resume is missing standard sections")
            recommendations.append(
                "Include all standard sections: Contact, Summary, Experience, Education, Skills"
            )

        score = min(score, max_score)
        return CheckOutcome(
            category=CategoryResult(
                name="ATS Formatting",
                score=score,
                max_score=max_score,
                issues=issues,
                passed=score >= max_score * 0.6,
                weight=CATEGORY_WEIGHTS["formatting"],
            ),
            recommendations=recommendations,
        )

    # ------------------------------------------------------------------
    # Auxiliary scores
    # ------------------------------------------------------------------

    def keyword_density(self, record: ResumeRecord) -> int:
        """Action-verb hits per substantive (>3 char) word, as a percentage."""
        text = " ".join(
            [record.summary, *(e.description for e in record.experience), " ".join(record.skills)]
        ).lower()
        total = word_count(text, min_length=4)
        if total == 0:
            return 0
        hits = count_matches(text, self.library.action_verb_patterns)
        return int(clamp(round_half_up(hits / total * 100), 0, 100))

    def readability_score(self, record: ResumeRecord) -> int:
        """Sentence and word length heuristic; 100 is easiest to scan."""
        text = " ".join([record.summary, *(e.description for e in record.experience)])
        sentence_list = sentences(text)
        word_list = words(text)
        if not sentence_list or not word_list:
            return 0

        words_per_sentence = len(word_list) / len(sentence_list)
        average_word_length = sum(len(w) for w in word_list) / len(word_list)

        score = 100
        if words_per_sentence > 25:
            score -= 20
        elif words_per_sentence > 20:
            score -= 10
        elif words_per_sentence < 8:
            score -= 15

        if average_word_length > 8:
            score -= 15
        elif average_word_length > 7:
            score -= 5

        return int(clamp(score, 0, 100))

    def star_score(self, record: ResumeRecord) -> int:
        """25 points for each STAR component present in the experience descriptions."""
        text = " ".join(e.description for e in record.experience)
        if len(text.strip()) < 50:
            return 0
        matched = sum(1 for p in self.library.star_patterns.values() if p.search(text))
        return matched * 25

    def impact_score(self, record: ResumeRecord) -> int:
        text = " ".join([record.summary, *(e.description for e in record.experience)])
        if len(text.strip()) < 50:
            return 0

        patterns = self.library.impact_patterns
        matched = sum(1 for p in patterns.values() if p.search(text))
        base = matched / len(patterns) * 70 if patterns else 0
        bonus = min(30, 5 * len(QUANTIFIABLE_TOKEN.findall(text)))
        return round_half_up(min(100, base + bonus))

    def industry_match(self, record: ResumeRecord) -> Optional[IndustryMatch]:
        """
        Best industry profile by keyword coverage.

        An industry qualifies with at least 3 matched keywords. A tech match
        gets up to 20 bonus points when the resume also covers 10 or more
        current tech skills.
        """
        text = self._full_text(record)
        if len(text.strip()) < 50:
            return None

        best: Optional[IndustryMatch] = None
        best_percentage = -1.0
        for industry, keywords in self.library.industry_keywords.items():
            if not keywords:
                continue
            matched = [kw for kw in keywords if contains_term(text, kw.lower())]
            if len(matched) < 3:
                continue

            percentage = len(matched) / len(keywords) * 100
            if industry == "tech":
                tech_hits = sum(1 for skill in self.library.tech_skills if contains_term(text, skill))
                if tech_hits >= 10:
                    percentage += min(20, tech_hits)
            percentage = min(100.0, percentage)

            if percentage > best_percentage:
                best_percentage = percentage
                best = IndustryMatch(
                    industry=industry,
                    match_percentage=round_half_up(percentage),
                    matched_keywords=matched,
                    missing_keywords=[kw for kw in keywords if kw not in matched],
                )
        return best

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _has_quantifiable(self, text: str) -> bool:
        return any(p.search(text) for p in self.library.quantifiable_patterns)

    @staticmethod
    def _parse_gpa(value: Optional[str]) -> Optional[float]:
        """Leading number of a GPA string ("3.8/4.0" -> 3.8)."""
        if not value:
            return None
        match = GPA_NUMBER.match(value.strip())
        return float(match.group()) if match else None

    @classmethod
    def _has_text(cls, value: Any) -> bool:
        """True when any string inside a dumped record is non-blank."""
        if isinstance(value, str):
            return bool(value.strip())
        if isinstance(value, Mapping):
            return any(cls._has_text(v) for v in value.values())
        if isinstance(value, (list, tuple)):
            return any(cls._has_text(v) for v in value)
        return False

    @staticmethod
    def _full_text(record: ResumeRecord) -> str:
        """Lowercased text of every scored section."""
        parts = [record.summary]
        parts.extend(f"{e.title} {e.company} {e.description}" for e in record.experience)
        parts.extend(f"{e.degree} {e.school}" for e in record.education)
        parts.append(" ".join(record.skills))
        return " ".join(parts).lower()


@lru_cache(maxsize=1)
def get_ats_checker() -> ATSChecker:
    """Get or create the shared default checker."""
    return ATSChecker()


def check_ats_compatibility(resume: Any) -> CheckReport:
    """Score a resume with the default pattern library."""
    return get_ats_checker().check(resume)
