"""Shared fixtures for county ACS tests."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from county_acs.etl.variables import VARIABLES


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload=None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json body")
        return self._payload


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def raw_record() -> pd.DataFrame:
    """Raw Record for one county using the end-to-end example counts."""
    estimates = {
        "totalpop": 1000,
        "medincome": 75000,
        "medage": 38,
        "natborn_total": 1000,
        "natborn_foreign": 100,
        "military_total": 500,
        "military_veteran": 50,
        "originrace_total_all": 1000,
        "originrace_whitealone": 700,
        "education_total": 800,
        "education_bachelors": 200,
        "education_gradprofess": 100,
    }
    row = {"GEOID": "51059", "NAME": "Fairfax County, Virginia"}
    for name in VARIABLES:
        row[f"{name}E"] = estimates[name]
        row[f"{name}M"] = 12
    return pd.DataFrame([row])
