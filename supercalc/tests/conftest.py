from __future__ import annotations

from decimal import Decimal

import pytest
from flask.testing import FlaskClient

from supercalc.app import create_app
from supercalc.config import Settings
from supercalc.models import ProjectionRequest


@pytest.fixture()
def app():
    flask_app = create_app(Settings(LOG_LEVEL="DEBUG", DEFAULT_RETIREMENT_AGE=67))
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


def build_request(**overrides) -> ProjectionRequest:
    fields = {
        "current_age": 30,
        "retirement_age": 67,
        "current_balance": Decimal("50000"),
        "annual_salary": Decimal("85000"),
        "employer_contribution_rate": Decimal("11.5"),
        "salary_growth_rate": Decimal("3.0"),
        "expected_return_rate": Decimal("7.5"),
        "inflation_rate": Decimal("2.5"),
    }
    fields.update(overrides)
    return ProjectionRequest(**fields)


@pytest.fixture()
def make_request():
    """Factory for ProjectionRequest with realistic defaults; keyword overrides win."""
    return build_request


@pytest.fixture()
def base_request() -> ProjectionRequest:
    return build_request()
