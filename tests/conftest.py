"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest

from crs_engine.config import get_settings
from crs_engine.models import CandidateProfile

WORK_START = date(2018, 1, 1)


def _add_months(start: date, months: int) -> date:
    year, month = divmod(start.month - 1 + months, 12)
    return date(start.year + year, month + 1, start.day)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from default settings."""
    for name in ("CRS_MAX_POINTS", "CRS_AWARD_JOB_OFFER_POINTS", "CRS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_language():
    """Language entry with a CLB equivalent; reading/writing default to speaking."""
    def _make(language="english", speaking=7, listening=None, reading=None, writing=None):
        listening = speaking if listening is None else listening
        reading = speaking if reading is None else reading
        writing = speaking if writing is None else writing
        return {
            "language": language,
            "test": "CELPIP" if language == "english" else "TEF",
            "clbEquivalent": {
                "speaking": speaking,
                "listening": listening,
                "reading": reading,
                "writing": writing,
            },
        }
    return _make


@pytest.fixture
def make_work():
    def _make(months, noc="2171", canadian=True, hours=40):
        return {
            "occupation": {"noc": noc},
            "country": "Canada" if canadian else "India",
            "isCanadianExperience": canadian,
            "startDate": WORK_START,
            "endDate": _add_months(WORK_START, months),
            "hoursPerWeek": hours,
        }
    return _make


@pytest.fixture
def make_profile():
    def _make(**fields):
        data = {"age": 30, "maritalStatus": "single"}
        data.update(fields)
        return CandidateProfile.model_validate(data)
    return _make


@pytest.fixture
def skilled_worker(make_profile, make_language, make_work):
    """Single, 30, master's, CLB 9, three years Canadian and three years foreign work."""
    return make_profile(
        education=[{"level": "masters", "country": "India"}],
        languageProficiency=[make_language("english", 9)],
        workExperience=[
            make_work(36, canadian=True),
            make_work(36, canadian=False),
        ],
    )


@pytest.fixture
def spouse_data(make_language, make_work):
    return {
        "education": {"level": "bachelors"},
        "languageProficiency": [make_language("english", 7)],
        "canadianWorkExperience": [make_work(12)],
    }
