"""
Shared fixtures: the reference window model and a FastAPI test client.
"""

import pytest
from fastapi.testclient import TestClient

from core.models import PricingModel
from web.api import app


@pytest.fixture
def window_model():
    """100000 base, 50/mm width, 40/mm height, 25000 accessory."""
    return PricingModel(
        base_price=100000,
        cost_per_mm_width=50,
        cost_per_mm_height=40,
        accessory_price=25000,
    )


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
