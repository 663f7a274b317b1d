"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from implied_growth.api.main import create_app
from implied_growth.api.dependencies import get_model_variant
from implied_growth.domain.models import ModelInputs, ModelVariant


def _client_for(variant: ModelVariant) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_model_variant] = lambda: variant
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client solving with the closed-form variant"""
    return _client_for(ModelVariant.CLOSED_FORM)


@pytest.fixture
def direct_client() -> TestClient:
    """FastAPI test client solving with the direct-D1 variant"""
    return _client_for(ModelVariant.DIRECT_D1)


@pytest.fixture
def default_inputs() -> ModelInputs:
    """Calculator defaults: $100 price, $5 dividend, 7% required return"""
    return ModelInputs(market_price=100.0, current_dividend=5.0, required_return=7.0)


@pytest.fixture
def direct_inputs() -> ModelInputs:
    """Inputs for the direct-D1 variant with a supplied next dividend"""
    return ModelInputs(
        market_price=50.0,
        current_dividend=2.0,
        required_return=10.0,
        expected_dividend=2.5,
    )
