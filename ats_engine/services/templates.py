"""Resume template catalog."""

from dataclasses import dataclass
from typing import Optional

from ats_engine.services.patterns import INDUSTRY_KEYWORDS


@dataclass(frozen=True)
class ResumeTemplate:
    """A layout the frontend can render; ``industry`` is None for general templates."""
    id: str
    name: str
    description: str
    preview: str
    industry: Optional[str] = None
    keywords: tuple[str, ...] = ()

    @property
    def is_general(self) -> bool:
        return not self.industry


DEFAULT_TEMPLATES: tuple[ResumeTemplate, ...] = (
    ResumeTemplate(
        id="classic",
        name="Classic",
        description="Traditional format trusted by Fortune 500 companies and ATS systems worldwide",
        preview="classic",
    ),
    ResumeTemplate(
        id="modern",
        name="Modern",
        description="Clean contemporary layout optimized for tech, finance, and professional services",
        preview="modern",
    ),
    ResumeTemplate(
        id="professional",
        name="Professional",
        description="Executive-level format ideal for senior roles and management positions",
        preview="professional",
    ),
    ResumeTemplate(
        id="tech",
        name="Tech & Engineering",
        description="Optimized for software, data, DevOps, and technical roles with ATS-friendly keywords",
        preview="tech",
        industry="tech",
        keywords=INDUSTRY_KEYWORDS["tech"],
    ),
    ResumeTemplate(
        id="finance",
        name="Finance & Banking",
        description="Tailored for investment banking, asset management, and financial services roles",
        preview="finance",
        industry="finance",
        keywords=INDUSTRY_KEYWORDS["finance"],
    ),
    ResumeTemplate(
        id="healthcare",
        name="Healthcare & Medical",
        description="Designed for clinical, administrative, and healthcare management positions",
        preview="healthcare",
        industry="healthcare",
        keywords=INDUSTRY_KEYWORDS["healthcare"],
    ),
)


def get_template(template_id: str) -> Optional[ResumeTemplate]:
    return next((t for t in DEFAULT_TEMPLATES if t.id == template_id), None)
