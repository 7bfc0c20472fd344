"""Resume record models matching the frontend structure."""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


def _none_to_empty(v):
    return "" if v is None else v


class PersonalInfo(BaseModel):
    """Contact block of the resume."""
    full_name: str = Field("", alias="fullName", description="Full name")
    email: str = Field("", description="Email address")
    phone: str = Field("", description="Phone number")
    location: str = Field("", description="Location (City, State/Country)")
    linkedin: Optional[str] = Field(None, description="LinkedIn profile URL")
    portfolio: Optional[str] = Field(None, description="Portfolio or personal website URL")

    class Config:
        populate_by_name = True

    @field_validator("full_name", "email", "phone", "location", mode="before")
    @classmethod
    def coerce_missing(cls, v):
        return _none_to_empty(v)


class ExperienceEntry(BaseModel):
    """Work experience entry. ``description`` is free text, usually bulleted."""
    id: str = Field("", description="Unique identifier")
    title: str = Field("", description="Job title")
    company: str = Field("", description="Company name")
    location: str = Field("", description="Job location")
    start_date: str = Field("", alias="startDate", description="Start date (e.g., 'Jan 2020')")
    end_date: str = Field("", alias="endDate", description="End date, empty when current")
    current: bool = Field(False, description="Is this the current job?")
    description: str = Field("", description="Responsibilities and achievements")

    class Config:
        populate_by_name = True

    @field_validator("id", "title", "company", "location", "start_date", "end_date", "description", mode="before")
    @classmethod
    def coerce_missing(cls, v):
        return _none_to_empty(v)


class EducationEntry(BaseModel):
    """Education entry."""
    id: str = Field("", description="Unique identifier")
    degree: str = Field("", description="Degree type (e.g., 'Bachelor of Science')")
    school: str = Field("", description="School/University name")
    location: str = Field("", description="Institution location")
    graduation_date: str = Field("", alias="graduationDate", description="Graduation date")
    gpa: Optional[str] = Field(None, description="GPA (optional)")

    class Config:
        populate_by_name = True

    @field_validator("id", "degree", "school", "location", "graduation_date", mode="before")
    @classmethod
    def coerce_missing(cls, v):
        return _none_to_empty(v)


class ResumeRecord(BaseModel):
    """Complete resume record consumed by the scoring engine."""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo, alias="personalInfo")
    summary: str = Field("", description="Professional summary")
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    @field_validator("summary", mode="before")
    @classmethod
    def coerce_summary(cls, v):
        return _none_to_empty(v)

    @field_validator("personal_info", mode="before")
    @classmethod
    def coerce_personal_info(cls, v):
        return {} if v is None else v

    @field_validator("experience", "education", mode="before")
    @classmethod
    def coerce_sections(cls, v):
        return [] if v is None else v

    @field_validator("skills", mode="before")
    @classmethod
    def drop_missing_skills(cls, v):
        """Drop null entries; anything that is not a list is left for validation to reject."""
        if v is None:
            return []
        if isinstance(v, list):
            return [item for item in v if item is not None]
        return v
