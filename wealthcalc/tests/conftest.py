from __future__ import annotations

import json

import pytest
from flask import Flask
from flask.testing import FlaskClient

from wealthcalc.app import create_app
from wealthcalc.core.insights import InsightProvider, parse_insight

INSIGHT_JSON = json.dumps(
    {
        "analysis": "Steady compounding over a decade.",
        "proTip": "Step up the SIP every year.",
        "warning": "Returns are not guaranteed.",
    }
)


class StaticProvider(InsightProvider):
    def __init__(self):
        self.calls = []

    def generate(self, inputs, result):
        self.calls.append((inputs, result))
        return parse_insight(INSIGHT_JSON)


class BrokenProvider(InsightProvider):
    def generate(self, inputs, result):
        raise ConnectionError("network down")


@pytest.fixture()
def insight_json() -> str:
    return INSIGHT_JSON


@pytest.fixture()
def static_provider() -> StaticProvider:
    return StaticProvider()


@pytest.fixture()
def broken_provider() -> BrokenProvider:
    return BrokenProvider()


@pytest.fixture()
def app() -> Flask:
    return create_app(
        {
            "TESTING": True,
            "GEMINI_API_KEY": "",
            "INSIGHT_PROVIDER": None,
        }
    )


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
