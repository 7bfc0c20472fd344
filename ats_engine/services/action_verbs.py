"""Action verb enhancer.

Finds weak or passive verb phrases ("was responsible for", "helped",
"worked on") in resume text and proposes ranked power-verb replacements,
along with a 0-100 strength score based on weak-verb density.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from ats_engine.services.patterns import POWER_VERBS_BY_CATEGORY, WEAK_VERBS
from ats_engine.services.text_utils import round_half_up, word_count

# Newlines and the bullet glyphs commonly pasted from word processors
BULLET_SPLIT = re.compile(r"(?:\r?\n|•|▪|◦|➤|→|►|■|□|●|○)")

# Context cue substrings -> power verb category
CONTEXT_CUES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("team", "lead", "manage"), "Leadership"),
    (("develop", "build", "create"), "Creation"),
    (("improve", "optimize", "enhance"), "Improvement"),
    (("revenue", "cost", "budget", "save"), "Financial"),
    (("code", "software", "system", "deploy"), "Technical"),
    (("grow", "scale", "expand"), "Growth"),
    (("analyz", "research", "evaluat"), "Analysis"),
)


@dataclass
class VerbReplacement:
    original: str
    position: int
    suggestions: list[str]
    category: str


@dataclass
class EnhancementResult:
    original_text: str
    enhanced_text: str
    replacements: list[VerbReplacement] = field(default_factory=list)
    score: int = 100


def _match_case(replacement: str, original: str) -> str:
    """Mirror the first-letter case of ``original`` onto ``replacement``."""
    if not replacement or not original:
        return replacement
    if original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement[0].lower() + replacement[1:]


def verb_strength_label(score: int) -> str:
    if score >= 90:
        return "Excellent"
    elif score >= 70:
        return "Good"
    elif score >= 50:
        return "Fair"
    return "Needs Work"


class ActionVerbEnhancer:
    """Weak-verb detection over a (phrase -> category, suggestions) table."""

    def __init__(
        self,
        weak_verbs: Mapping[str, tuple[str, Sequence[str]]] = WEAK_VERBS,
        power_verbs: Mapping[str, Sequence[str]] = POWER_VERBS_BY_CATEGORY,
    ):
        self.weak_verbs = weak_verbs
        self.power_verbs = power_verbs
        # Longest phrase first so "was responsible for" claims its span before "was"
        self._patterns = [
            (re.compile(rf"\b{re.escape(phrase)}\b", re.I), category, list(suggestions))
            for phrase, (category, suggestions) in sorted(
                weak_verbs.items(), key=lambda item: len(item[0]), reverse=True
            )
        ]

    def analyze(self, text: str) -> EnhancementResult:
        """
        Detect weak verbs in a single block of text.

        Replacement spans never overlap and are returned in position order.
        The enhanced text applies the top suggestion at every recorded span.
        """
        if not text or not text.strip():
            return EnhancementResult(original_text=text, enhanced_text=text, replacements=[], score=100)

        replacements: list[VerbReplacement] = []
        claimed: list[tuple[int, int]] = []
        for pattern, category, suggestions in self._patterns:
            for match in pattern.finditer(text):
                start, end = match.span()
                if any(start < taken_end and taken_start < end for taken_start, taken_end in claimed):
                    continue
                claimed.append((start, end))
                replacements.append(
                    VerbReplacement(
                        original=match.group(),
                        position=start,
                        suggestions=list(suggestions),
                        category=category,
                    )
                )

        replacements.sort(key=lambda r: r.position)

        pieces: list[str] = []
        cursor = 0
        for rep in replacements:
            pieces.append(text[cursor:rep.position])
            pieces.append(_match_case(rep.suggestions[0], rep.original) if rep.suggestions else rep.original)
            cursor = rep.position + len(rep.original)
        pieces.append(text[cursor:])

        total_words = word_count(text)
        ratio = len(replacements) / total_words if total_words else 0
        score = max(0, round_half_up(100 - ratio * 500))

        return EnhancementResult(
            original_text=text,
            enhanced_text="".join(pieces),
            replacements=replacements,
            score=score,
        )

    def enhance_description(self, description: str) -> EnhancementResult:
        """
        Analyze a bulleted description line by line.

        Enhanced lines are re-joined as bullets and the score is the plain
        mean of the per-line scores. Replacement positions are offsets into
        ``description`` itself.
        """
        segments: list[tuple[str, int]] = []
        cursor = 0
        for delimiter in [*BULLET_SPLIT.finditer(description), None]:
            end = delimiter.start() if delimiter else len(description)
            raw = description[cursor:end]
            line = raw.strip()
            if line:
                segments.append((line, cursor + len(raw) - len(raw.lstrip())))
            if delimiter:
                cursor = delimiter.end()

        if not segments:
            return self.analyze(description)

        enhanced_lines: list[str] = []
        replacements: list[VerbReplacement] = []
        total_score = 0
        for line, offset in segments:
            result = self.analyze(line)
            enhanced_lines.append(result.enhanced_text)
            for rep in result.replacements:
                rep.position += offset
                replacements.append(rep)
            total_score += result.score

        return EnhancementResult(
            original_text=description,
            enhanced_text="\n• ".join(enhanced_lines),
            replacements=replacements,
            score=round_half_up(total_score / len(segments)),
        )

    def suggest_power_verbs(self, context: str) -> list[str]:
        """Up to 10 unique power verbs picked from cue words in ``context``."""
        context = context.lower().strip()
        suggestions: list[str] = []
        for cues, category in CONTEXT_CUES:
            if any(cue in context for cue in cues):
                suggestions.extend(self.power_verbs.get(category, ())[:3])
        return list(dict.fromkeys(suggestions))[:10]


_default_enhancer = ActionVerbEnhancer()


def analyze_action_verbs(text: str) -> EnhancementResult:
    return _default_enhancer.analyze(text)


def enhance_experience_description(description: str) -> EnhancementResult:
    return _default_enhancer.enhance_description(description)


def suggest_power_verbs(context: str) -> list[str]:
    return _default_enhancer.suggest_power_verbs(context)
