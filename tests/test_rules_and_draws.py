"""
Tests for the rules summary and draw comparison.
"""

from datetime import date

from crs_engine import RULES_SUMMARY, evaluate_draws, latest_qualifying_draw, rules_signature
from crs_engine.models import Draw

DRAWS = [
    {"drawNumber": 122, "date": "2025-04-15", "program": "CEC only", "invitationsIssued": 1000, "minimumScore": 458},
    {"drawNumber": 123, "date": "2025-05-01", "program": "All programs", "invitationsIssued": 3500, "minimumScore": 470},
]


class TestRulesSummary:
    def test_maximums_match_tables(self):
        assert RULES_SUMMARY["max_points"] == 1200
        assert RULES_SUMMARY["age_max_single"] == 110
        assert RULES_SUMMARY["age_max_spouse"] == 100
        assert RULES_SUMMARY["education_max_single"] == 150
        assert RULES_SUMMARY["education_max_spouse"] == 140
        assert RULES_SUMMARY["canadian_work_max_single"] == 80
        assert RULES_SUMMARY["canadian_work_max_spouse"] == 70
        assert RULES_SUMMARY["canadian_study_1_2yr"] == 15
        assert RULES_SUMMARY["canadian_study_3plus"] == 30
        assert RULES_SUMMARY["second_language"] == 6
        assert RULES_SUMMARY["provincial_nomination"] == 600

    def test_signature_is_stable(self):
        signature = rules_signature()
        assert signature == rules_signature()
        assert len(signature) == 16
        int(signature, 16)


class TestDraws:
    def test_most_recent_first(self):
        outcomes = evaluate_draws(460, DRAWS)
        assert [o.draw_number for o in outcomes] == [123, 122]
        assert outcomes[0].qualifies is False
        assert outcomes[0].margin == -10
        assert outcomes[1].qualifies is True
        assert outcomes[1].margin == 2

    def test_cutoff_is_inclusive(self):
        assert latest_qualifying_draw(470, DRAWS).draw_number == 123

    def test_latest_qualifying(self):
        assert latest_qualifying_draw(460, DRAWS).draw_number == 122
        assert latest_qualifying_draw(400, DRAWS) is None

    def test_accepts_models(self):
        draw = Draw(draw_number=1, draw_date=date(2024, 1, 10), minimum_score=500)
        outcome = evaluate_draws(520, [draw])[0]
        assert outcome.program == "All programs"
        assert outcome.model_dump(by_alias=True)["date"] == date(2024, 1, 10)

    def test_no_draws(self):
        assert evaluate_draws(500, []) == []
