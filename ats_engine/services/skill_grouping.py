"""Skill grouping.

Sorts a flat skills list into the standard categories recruiters scan for
(languages, frameworks, cloud, databases, soft skills, ...). Categories are
tried in table order and the first match wins, so a generic keyword in an
early category can claim a skill that a later category describes better.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from ats_engine.services.patterns import CATEGORY_ICONS, SKILL_CATEGORIES
from ats_engine.services.text_utils import contains_term

logger = logging.getLogger(__name__)

SKILL_NOISE = re.compile(r"[^\w\s+#.-]")
CATEGORY_LINE = re.compile(r"^([^:]+):\s*(.+)$")
SHORT_KEYWORD_LENGTH = 3


@dataclass
class SkillGroup:
    category: str
    skills: list[str] = field(default_factory=list)


@dataclass
class GroupedSkills:
    groups: list[SkillGroup] = field(default_factory=list)
    ungrouped: list[str] = field(default_factory=list)


def normalize_skill(skill: str) -> str:
    return SKILL_NOISE.sub("", skill.lower()).strip()


class SkillGrouper:
    """Keyword-table skill categorizer."""

    def __init__(self, categories: Mapping[str, Sequence[str]] = SKILL_CATEGORIES):
        self.categories = {
            name: tuple(normalize_skill(k) for k in keywords) for name, keywords in categories.items()
        }

    @staticmethod
    def _contains(text: str, needle: str) -> bool:
        # Short needles only count on token boundaries: "r" must not claim "react"
        if len(needle) <= SHORT_KEYWORD_LENGTH:
            return contains_term(text, needle)
        return needle in text

    def _matches(self, skill: str, keyword: str) -> bool:
        return skill == keyword or self._contains(skill, keyword) or self._contains(keyword, skill)

    def categorize(self, skill: str) -> Optional[str]:
        """Category name for ``skill``, or None when nothing matches."""
        normalized = normalize_skill(skill)
        if not normalized:
            return None
        for name, keywords in self.categories.items():
            if any(self._matches(normalized, keyword) for keyword in keywords if keyword):
                return name
        return None

    def group(self, skills: Sequence[str]) -> GroupedSkills:
        """
        Group skills by category, largest group first.

        Every input skill lands in exactly one group or in ``ungrouped``,
        keeping its original spelling.
        """
        buckets: dict[str, list[str]] = {}
        ungrouped: list[str] = []
        for skill in skills:
            category = self.categorize(skill)
            if category:
                buckets.setdefault(category, []).append(skill)
            else:
                ungrouped.append(skill)

        groups = [SkillGroup(category=name, skills=members) for name, members in buckets.items()]
        groups.sort(key=lambda g: len(g.skills), reverse=True)
        logger.debug(f"Grouped {len(skills)} skills into {len(groups)} categories, {len(ungrouped)} ungrouped")
        return GroupedSkills(groups=groups, ungrouped=ungrouped)

    def suggest_categories(self, job_description: str) -> list[str]:
        """Categories with at least two keywords mentioned in a job description."""
        text = job_description.lower()
        return [
            name
            for name, keywords in self.categories.items()
            if sum(1 for keyword in keywords if contains_term(text, keyword)) >= 2
        ]


def parse_grouped_skills_response(response: str) -> GroupedSkills:
    """
    Parse "Category: skill, skill" lines into groups.

    Lines (or ``;``-separated chunks) without a category prefix are read as
    comma-separated ungrouped skills.
    """
    grouped = GroupedSkills()
    for line in re.split(r"\n|;", response):
        line = line.strip()
        if not line:
            continue
        match = CATEGORY_LINE.match(line)
        if match:
            members = [s.strip() for s in match.group(2).split(",") if s.strip()]
            if members:
                grouped.groups.append(SkillGroup(category=match.group(1).strip(), skills=members))
        else:
            grouped.ungrouped.extend(s.strip() for s in line.split(",") if s.strip())
    return grouped


def flatten_grouped_skills(grouped: GroupedSkills) -> list[str]:
    flat = [skill for group in grouped.groups for skill in group.skills]
    flat.extend(grouped.ungrouped)
    return flat


def category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, "tag")


_default_grouper = SkillGrouper()


def categorize_skill(skill: str) -> Optional[str]:
    return _default_grouper.categorize(skill)


def group_skills(skills: Sequence[str]) -> GroupedSkills:
    return _default_grouper.group(skills)


def suggest_categories(job_description: str) -> list[str]:
    return _default_grouper.suggest_categories(job_description)
