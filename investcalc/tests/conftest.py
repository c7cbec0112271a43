from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from investcalc.app import create_app
from investcalc.core.config import Settings
from investcalc.schemas.investment import InvestmentParameters


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings(env="test", log_level="WARNING", max_years=60))
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def params() -> InvestmentParameters:
    return InvestmentParameters(
        initialAmount=10000,
        monthlyContribution=500,
        annualReturnPercent=7,
        years=10,
        inflationRatePercent=3,
        taxRatePercent=15,
    )
