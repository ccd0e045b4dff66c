"""
Tests for skill transferability points.
"""

import pytest

from crs_engine.scoring.transferability import calculate_skill_transferability


class TestEducationLanguage:
    """Degree combined with the highest CLB."""

    @pytest.mark.parametrize("level,clb,expected", [
        ("bachelors", 6, 0),
        ("bachelors", 7, 25),
        ("twoOrMoreDegrees", 8, 25),
        ("masters", 9, 50),
        ("phd", 10, 50),
        ("twoYearDiploma", 9, 0),
        ("highSchool", 10, 0),
    ])
    def test_combinations(self, make_profile, make_language, level, clb, expected):
        profile = make_profile(
            education=[{"level": level}],
            languageProficiency=[make_language("english", clb)],
        )
        assert calculate_skill_transferability(profile).education == expected

    def test_uses_highest_clb_across_languages(self, make_profile, make_language):
        profile = make_profile(
            education=[{"level": "bachelors"}],
            languageProficiency=[make_language("english", 6), make_language("french", 9)],
        )
        assert calculate_skill_transferability(profile).education == 50

    def test_no_languages(self, make_profile):
        profile = make_profile(education=[{"level": "phd"}])
        assert calculate_skill_transferability(profile).education == 0


class TestForeignWorkLanguage:
    """Foreign work years combined with the highest CLB."""

    @pytest.mark.parametrize("months,clb,expected", [
        (11, 10, 0),
        (12, 6, 0),
        (12, 7, 13),
        (24, 8, 13),
        (24, 9, 25),
        (36, 7, 25),
        (36, 9, 50),
        (120, 10, 50),
    ])
    def test_combinations(self, make_profile, make_language, make_work, months, clb, expected):
        profile = make_profile(
            languageProficiency=[make_language("english", clb)],
            workExperience=[make_work(months, canadian=False)],
        )
        assert calculate_skill_transferability(profile).foreign_work_experience == expected

    def test_canadian_work_is_not_foreign(self, make_profile, make_language, make_work):
        profile = make_profile(
            languageProficiency=[make_language("english", 9)],
            workExperience=[make_work(60, canadian=True)],
        )
        assert calculate_skill_transferability(profile).foreign_work_experience == 0

    def test_part_time_foreign_work(self, make_profile, make_language, make_work):
        profile = make_profile(
            languageProficiency=[make_language("english", 9)],
            workExperience=[make_work(72, canadian=False, hours=20)],
        )
        assert calculate_skill_transferability(profile).foreign_work_experience == 50


class TestEducationCanadianWork:
    """Degree combined with Canadian work years, added to the education factor."""

    @pytest.mark.parametrize("level,months,expected", [
        ("bachelors", 11, 0),
        ("bachelors", 12, 25),
        ("masters", 24, 50),
        ("phd", 60, 50),
        ("twoYearDiploma", 60, 0),
    ])
    def test_without_language(self, make_profile, make_work, level, months, expected):
        profile = make_profile(
            education=[{"level": level}],
            workExperience=[make_work(months, canadian=True)],
        )
        assert calculate_skill_transferability(profile).education == expected

    def test_adds_to_language_combination(self, make_profile, make_language, make_work):
        profile = make_profile(
            education=[{"level": "bachelors"}],
            languageProficiency=[make_language("english", 7)],
            workExperience=[make_work(24, canadian=True)],
        )
        assert calculate_skill_transferability(profile).education == 50

    def test_one_year_plus_moderate_language(self, make_profile, make_language, make_work):
        profile = make_profile(
            education=[{"level": "bachelors"}],
            languageProficiency=[make_language("english", 8)],
            workExperience=[make_work(12, canadian=True)],
        )
        assert calculate_skill_transferability(profile).education == 50


class TestForeignCanadianWork:
    """Foreign work years combined with Canadian work years."""

    @pytest.mark.parametrize("foreign,canadian,expected", [
        (12, 12, 13),
        (24, 24, 25),
        (36, 12, 25),
        (36, 24, 50),
        (36, 0, 0),
        (0, 60, 0),
    ])
    def test_without_language(self, make_profile, make_work, foreign, canadian, expected):
        profile = make_profile(workExperience=[
            make_work(foreign, canadian=False),
            make_work(canadian, canadian=True),
        ])
        assert calculate_skill_transferability(profile).foreign_work_experience == expected

    def test_adds_to_language_combination(self, make_profile, make_language, make_work):
        profile = make_profile(
            languageProficiency=[make_language("english", 7)],
            workExperience=[make_work(12, canadian=False), make_work(12, canadian=True)],
        )
        assert calculate_skill_transferability(profile).foreign_work_experience == 13 + 13

    def test_combined_factor_capped(self, make_profile, make_language, make_work):
        profile = make_profile(
            languageProficiency=[make_language("english", 9)],
            workExperience=[make_work(48, canadian=False), make_work(36, canadian=True)],
        )
        assert calculate_skill_transferability(profile).foreign_work_experience == 50


class TestCertificate:
    @pytest.mark.parametrize("clb,expected", [(5, 0), (6, 0), (7, 25), (8, 25), (9, 50), (12, 50)])
    def test_certificate_tiers(self, make_profile, make_language, clb, expected):
        profile = make_profile(
            education=[{"level": "certificate"}],
            languageProficiency=[make_language("english", clb)],
        )
        assert calculate_skill_transferability(profile).certificate_of_qualification == expected

    def test_no_certificate(self, make_profile, make_language):
        profile = make_profile(
            education=[{"level": "bachelors"}],
            languageProficiency=[make_language("english", 10)],
        )
        assert calculate_skill_transferability(profile).certificate_of_qualification == 0


class TestSubtotal:
    def test_subtotal_is_unclamped_sum(self, make_profile, make_language, make_work):
        profile = make_profile(
            education=[{"level": "masters"}, {"level": "certificate"}],
            languageProficiency=[make_language("english", 9)],
            workExperience=[make_work(36, canadian=False)],
        )
        points = calculate_skill_transferability(profile)
        assert (points.education, points.foreign_work_experience, points.certificate_of_qualification) == (50, 50, 50)
        assert points.subtotal == 150

    def test_every_factor_capped_at_50(self, make_profile, make_language, make_work):
        profile = make_profile(
            education=[{"level": "phd"}, {"level": "certificate"}],
            languageProficiency=[make_language("english", 12), make_language("french", 12)],
            workExperience=[make_work(240, canadian=False), make_work(240, canadian=True)],
        )
        points = calculate_skill_transferability(profile)
        assert max(points.education, points.foreign_work_experience, points.certificate_of_qualification) <= 50
