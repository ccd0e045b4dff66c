"""Output schemas: points breakdown, eligibility verdict, draw comparison."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResultModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CoreHumanCapitalPoints(ResultModel):
    age: int = 0
    education: int = 0
    language_proficiency: int = 0
    canadian_work_experience: int = 0
    subtotal: int = 0


class SpousePoints(ResultModel):
    education: int = 0
    language_proficiency: int = 0
    canadian_work_experience: int = 0
    subtotal: int = 0


class SkillTransferabilityPoints(ResultModel):
    education: int = Field(0, description="Post-secondary degree combined with language")
    foreign_work_experience: int = Field(0, description="Foreign work experience combined with language")
    certificate_of_qualification: int = 0
    subtotal: int = 0


class AdditionalPoints(ResultModel):
    provincial_nomination: int = 0
    job_offer: int = 0
    canadian_education: int = 0
    french_language_skills: int = 0
    sibling: int = 0
    subtotal: int = 0


class PointsBreakdown(ResultModel):
    core_human_capital: CoreHumanCapitalPoints = Field(default_factory=CoreHumanCapitalPoints)
    spouse: SpousePoints = Field(default_factory=SpousePoints)
    skill_transferability: SkillTransferabilityPoints = Field(default_factory=SkillTransferabilityPoints)
    additional: AdditionalPoints = Field(default_factory=AdditionalPoints)
    total: int = Field(0, description="Sum of the four subtotals, clamped to the ceiling (max 1200)")

    @property
    def raw_total(self) -> int:
        return (
            self.core_human_capital.subtotal
            + self.spouse.subtotal
            + self.skill_transferability.subtotal
            + self.additional.subtotal
        )


class EligibilityResult(ResultModel):
    is_eligible: bool = False
    eligible_programs: list[str] = Field(default_factory=list)
    reasons: list[str] = Field(default_factory=list)


class Draw(ResultModel):
    """A past invitation round, as supplied by the caller."""

    draw_number: int
    draw_date: dt.date = Field(..., alias="date")
    program: str = "All programs"
    invitations_issued: int = 0
    minimum_score: int


class DrawOutcome(ResultModel):
    draw_number: int
    draw_date: dt.date = Field(..., alias="date")
    program: str
    minimum_score: int
    qualifies: bool
    margin: int = Field(..., description="score - minimum_score; negative when below the cutoff")
