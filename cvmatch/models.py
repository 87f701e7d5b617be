from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional, Dict, Any

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from .config import KEYWORD_VARIANTS, EXPERIENCE_VARIANTS, EDUCATION_VARIANTS, WEIGHTS


class EmploymentType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class SalaryRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: Optional[float] = None
    max: Optional[float] = None
    currency: str = "USD"


class CandidateProfile(BaseModel):
    """Resume-derived attributes used as scoring input."""
    model_config = ConfigDict(frozen=True)

    skills: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    education: List[str] = Field(default_factory=list)
    years_experience: Optional[float] = None

    @field_validator("skills", "keywords", "experience", "education", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return [] if v is None else v


class JobPosting(BaseModel):
    """Normalized job listing used as scoring input."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: str
    company: str
    location: str = ""
    description: str = ""
    requirements: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    salary: Optional[SalaryRange] = None
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    remote: bool = False
    posted_date: Optional[datetime] = None
    application_url: Optional[str] = None
    source: str = "manual"

    @field_validator("requirements", "responsibilities", "skills", "keywords", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return [] if v is None else v

    @field_validator("description", "location", mode="before")
    @classmethod
    def none_to_blank(cls, v):
        return "" if v is None else v


class SubScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)
    education: int = Field(ge=0, le=100)


class MatchResult(BaseModel):
    """Scored match of one job against one candidate. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    job: JobPosting
    overall_score: int = Field(ge=0, le=100)
    sub_scores: SubScores
    matching_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class JobSearchFilters(BaseModel):
    search: Optional[str] = None
    location: Optional[str] = None
    employment_type: Optional[EmploymentType] = None
    remote: Optional[bool] = None
    skills: List[str] = Field(default_factory=list)
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None


class ScoringConfig(BaseModel):
    """Weighting table and signal variants; fixed for a deployment."""
    model_config = ConfigDict(frozen=True)

    weights: Dict[str, float] = Field(default_factory=lambda: dict(WEIGHTS))
    keyword_variant: str = "job_overlap"
    experience_variant: str = "years"
    education_variant: str = "binary"

    @field_validator("weights")
    @classmethod
    def validate_weights(cls, v: Dict[str, float]) -> Dict[str, float]:
        if set(v) != set(WEIGHTS):
            raise ValueError(f"Weights must define exactly: {', '.join(WEIGHTS)}")
        if any(w < 0 for w in v.values()):
            raise ValueError("Weights must be non-negative")
        if abs(sum(v.values()) - 1.0) > 1e-6:
            raise ValueError(f"Weights must sum to 1.0, got {sum(v.values()):.4f}")
        return v

    @model_validator(mode="after")
    def validate_variants(self) -> "ScoringConfig":
        checks = [
            ("keyword_variant", self.keyword_variant, KEYWORD_VARIANTS),
            ("experience_variant", self.experience_variant, EXPERIENCE_VARIANTS),
            ("education_variant", self.education_variant, EDUCATION_VARIANTS),
        ]
        for name, value, allowed in checks:
            if value not in allowed:
                raise ValueError(f"{name} must be one of: {', '.join(allowed)}")
        return self
