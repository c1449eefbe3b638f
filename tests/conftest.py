from __future__ import annotations

import pytest
from rest_framework.test import APIClient

from portfolio.seed import seed_defaults


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def seeded(db) -> dict[str, int]:
    """Database populated with the default portfolio content."""
    return seed_defaults()
