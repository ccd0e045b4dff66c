"""Candidate profile schemas consumed by the CRS engine.

Field names are snake_case in Python; the camelCase names used by the
profile documents upstream are accepted (and emitted) as aliases.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class EducationLevel(str, Enum):
    HIGH_SCHOOL = "highSchool"
    ONE_YEAR_DIPLOMA = "oneYearDiploma"
    TWO_YEAR_DIPLOMA = "twoYearDiploma"
    BACHELORS = "bachelors"
    TWO_OR_MORE_DEGREES = "twoOrMoreDegrees"
    MASTERS = "masters"
    PHD = "phd"
    CERTIFICATE = "certificate"


class MaritalStatus(str, Enum):
    SINGLE = "single"
    MARRIED = "married"
    COMMON_LAW = "commonLaw"
    DIVORCED = "divorced"
    SEPARATED = "separated"
    WIDOWED = "widowed"


class ProfileModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Explicit nulls in stored documents mean "absent": the field keeps its default."""
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ClbEquivalent(ProfileModel):
    """Canadian Language Benchmark level per ability."""

    speaking: int = Field(0, ge=0)
    listening: int = Field(0, ge=0)
    reading: int = Field(0, ge=0)
    writing: int = Field(0, ge=0)


class LanguageProficiency(ProfileModel):
    language: str = Field("", description="english or french")
    test: Optional[str] = Field(None, description="IELTS, CELPIP, PTE, TEF, TCF")
    speaking: Optional[float] = None
    listening: Optional[float] = None
    reading: Optional[float] = None
    writing: Optional[float] = None
    clb_equivalent: Optional[ClbEquivalent] = None


class Education(ProfileModel):
    level: str = Field("", description="One of EducationLevel; anything else scores 0")
    field: Optional[str] = None
    institution: Optional[str] = None
    country: Optional[str] = None


class Occupation(ProfileModel):
    noc: str = ""


class WorkInterval(ProfileModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    hours_per_week: float = Field(0, ge=0, le=168)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def calendar_day(cls, v):
        """Timestamps (driver datetimes, ISO strings with a time part) count by their date."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str):
            if not v.strip():
                return None
            try:
                return datetime.fromisoformat(v.strip().replace("Z", "+00:00")).date()
            except ValueError:
                return v
        return v


class WorkExperience(WorkInterval):
    occupation: Optional[Occupation] = None
    country: Optional[str] = None
    is_canadian_experience: bool = False


class JobOfferDetails(ProfileModel):
    noc: str = ""
    lmia_exempt: bool = False


class RelativesInCanada(ProfileModel):
    has: bool = False


class AdaptabilityFactors(ProfileModel):
    relatives_in_canada: Optional[RelativesInCanada] = None


class SpouseProfile(ProfileModel):
    education: Optional[Education] = None
    language_proficiency: list[LanguageProficiency] = Field(default_factory=list)
    canadian_work_experience: list[WorkInterval] = Field(default_factory=list)


class CandidateProfile(ProfileModel):
    age: int = Field(0, ge=0)
    marital_status: str = MaritalStatus.SINGLE.value
    spouse_profile: Optional[SpouseProfile] = None
    education: list[Education] = Field(default_factory=list)
    language_proficiency: list[LanguageProficiency] = Field(default_factory=list)
    work_experience: list[WorkExperience] = Field(default_factory=list)
    has_job_offer: bool = False
    job_offer_details: Optional[JobOfferDetails] = None
    has_provincial_nomination: bool = False
    adaptability_factors: Optional[AdaptabilityFactors] = None

    @property
    def has_counted_spouse(self) -> bool:
        """Spouse factors apply only to a married applicant with a spouse profile."""
        return self.marital_status == MaritalStatus.MARRIED.value and self.spouse_profile is not None


class QuickEstimateInput(ProfileModel):
    """Coarse self-reported answers for the quick estimate."""

    age: str = ""
    education: str = ""
    language_proficiency: str = ""
    canadian_work_experience: str = "none"
