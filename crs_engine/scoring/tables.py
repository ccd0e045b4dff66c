"""
CRS point tables.

Every table maps a discrete input to points. Tables that depend on whether
the applicant brings a counted spouse store ``(single, with_spouse)`` pairs.
Values follow the published IRCC Comprehensive Ranking System criteria.
Tables are read-only; keys absent from a table score 0.
"""

from __future__ import annotations

from types import MappingProxyType

from crs_engine.models.profile import EducationLevel as L

# --- Core human capital ---

# Age -> (single, with_spouse). Ages <= 17 and >= 45 are absent (0 points).
AGE_POINTS = MappingProxyType({
    18: (99, 90),
    19: (105, 95),
    20: (110, 100),
    21: (110, 100),
    22: (110, 100),
    23: (110, 100),
    24: (110, 100),
    25: (110, 100),
    26: (110, 100),
    27: (110, 100),
    28: (110, 100),
    29: (110, 100),
    30: (105, 95),
    31: (99, 90),
    32: (94, 85),
    33: (88, 80),
    34: (83, 75),
    35: (77, 70),
    36: (72, 65),
    37: (66, 60),
    38: (61, 55),
    39: (55, 50),
    40: (50, 45),
    41: (39, 35),
    42: (28, 25),
    43: (17, 15),
    44: (6, 5),
})

EDUCATION_POINTS = MappingProxyType({
    L.HIGH_SCHOOL.value: (30, 28),
    L.ONE_YEAR_DIPLOMA.value: (90, 84),
    L.TWO_YEAR_DIPLOMA.value: (98, 91),
    L.BACHELORS.value: (120, 112),
    L.TWO_OR_MORE_DEGREES.value: (128, 119),
    L.MASTERS.value: (135, 126),
    L.PHD.value: (150, 140),
})

# First official language, by effective CLB. CLB above 10 saturates at 10.
FIRST_LANGUAGE_POINTS = MappingProxyType({
    4: (6, 6),
    5: (6, 6),
    6: (9, 8),
    7: (17, 16),
    8: (23, 22),
    9: (31, 29),
    10: (34, 32),
})
FIRST_LANGUAGE_MAX_CLB = 10

# Second official language bonus, by effective CLB. CLB above 9 saturates at 9.
SECOND_LANGUAGE_POINTS = MappingProxyType({
    5: 1,
    6: 1,
    7: 3,
    8: 3,
    9: 6,
})
SECOND_LANGUAGE_MAX_CLB = 9
SECOND_LANGUAGE_CAP = 6

# Canadian work experience, by whole years. Five or more saturates at 5.
CANADIAN_WORK_POINTS = MappingProxyType({
    0: (0, 0),
    1: (40, 35),
    2: (53, 46),
    3: (64, 56),
    4: (72, 63),
    5: (80, 70),
})
CANADIAN_WORK_MAX_YEARS = 5

# --- Spouse factors ---

SPOUSE_EDUCATION_POINTS = MappingProxyType({
    L.HIGH_SCHOOL.value: 2,
    L.ONE_YEAR_DIPLOMA.value: 6,
    L.TWO_YEAR_DIPLOMA.value: 7,
    L.BACHELORS.value: 8,
    L.TWO_OR_MORE_DEGREES.value: 9,
    L.MASTERS.value: 10,
    L.PHD.value: 10,
})

# Per ability: (minimum CLB, points), highest threshold first.
SPOUSE_LANGUAGE_BANDS = ((9, 5), (7, 3), (5, 1))
SPOUSE_LANGUAGE_CAP = 20

SPOUSE_CANADIAN_WORK_POINTS = MappingProxyType({
    0: 0,
    1: 3,
    2: 5,
    3: 8,
    4: 8,
    5: 10,
})
SPOUSE_CANADIAN_WORK_MAX_YEARS = 5

# --- Skill transferability ---

DEGREE_LEVELS = frozenset({L.BACHELORS.value, L.TWO_OR_MORE_DEGREES.value, L.MASTERS.value, L.PHD.value})

# Language tiers shared by the transferability combinations.
CLB_TIER_MODERATE = "clb7-8"
CLB_TIER_HIGH = "clb9+"

EDUCATION_LANGUAGE_POINTS = MappingProxyType({
    CLB_TIER_MODERATE: 25,
    CLB_TIER_HIGH: 50,
})

# (foreign years tier, language tier) -> points. Year tiers: 1 = one or two years, 3 = three or more.
FOREIGN_WORK_LANGUAGE_POINTS = MappingProxyType({
    (1, CLB_TIER_MODERATE): 13,
    (1, CLB_TIER_HIGH): 25,
    (3, CLB_TIER_MODERATE): 25,
    (3, CLB_TIER_HIGH): 50,
})

# Canadian work years tier (1 = one year, 2 = two or more) -> points, for a degree holder.
EDUCATION_CANADIAN_WORK_POINTS = MappingProxyType({
    1: 25,
    2: 50,
})

# (foreign years tier, Canadian years tier) -> points.
FOREIGN_CANADIAN_WORK_POINTS = MappingProxyType({
    (1, 1): 13,
    (1, 2): 25,
    (3, 1): 25,
    (3, 2): 50,
})

CERTIFICATE_LANGUAGE_POINTS = MappingProxyType({
    CLB_TIER_MODERATE: 25,
    CLB_TIER_HIGH: 50,
})

TRANSFERABILITY_FACTOR_CAP = 50
SKILL_TRANSFERABILITY_MAX = 100

# --- Additional points ---

PROVINCIAL_NOMINATION_POINTS = 600
JOB_OFFER_SENIOR_MANAGEMENT_POINTS = 200
JOB_OFFER_SKILLED_POINTS = 50
SIBLING_POINTS = 15

CANADIAN_EDUCATION_POINTS = MappingProxyType({
    L.HIGH_SCHOOL.value: 0,
    L.ONE_YEAR_DIPLOMA.value: 15,
    L.TWO_YEAR_DIPLOMA.value: 30,
    L.BACHELORS.value: 30,
    L.TWO_OR_MORE_DEGREES.value: 30,
    L.MASTERS.value: 30,
    L.PHD.value: 30,
})

FRENCH_MIN_CLB = 7
FRENCH_WITH_ENGLISH_POINTS = 50
FRENCH_ONLY_POINTS = 25
FRENCH_ENGLISH_MIN_CLB = 5

# --- Work-hour proration ---

FULL_TIME_HOURS = 30
PART_TIME_HOURS = 15
