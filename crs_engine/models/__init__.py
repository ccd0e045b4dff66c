from crs_engine.models.profile import (
    AdaptabilityFactors,
    CandidateProfile,
    ClbEquivalent,
    Education,
    EducationLevel,
    JobOfferDetails,
    LanguageProficiency,
    MaritalStatus,
    Occupation,
    QuickEstimateInput,
    RelativesInCanada,
    SpouseProfile,
    WorkExperience,
    WorkInterval,
)
from crs_engine.models.results import (
    AdditionalPoints,
    CoreHumanCapitalPoints,
    Draw,
    DrawOutcome,
    EligibilityResult,
    PointsBreakdown,
    SkillTransferabilityPoints,
    SpousePoints,
)

__all__ = [
    "AdaptabilityFactors",
    "AdditionalPoints",
    "CandidateProfile",
    "ClbEquivalent",
    "CoreHumanCapitalPoints",
    "Draw",
    "DrawOutcome",
    "Education",
    "EducationLevel",
    "EligibilityResult",
    "JobOfferDetails",
    "LanguageProficiency",
    "MaritalStatus",
    "Occupation",
    "PointsBreakdown",
    "QuickEstimateInput",
    "RelativesInCanada",
    "SkillTransferabilityPoints",
    "SpouseProfile",
    "SpousePoints",
    "WorkExperience",
    "WorkInterval",
]
