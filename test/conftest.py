"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- Catalog builders shared by unit and integration tests
- A TestClient whose container serves an in-memory store
- BDD step definitions (imported from bdd_steps_loader.py)
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time by src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['CINEMA_STORE'] = 'memory'
    os.environ['TIMEZONE'] = 'UTC'
    os.environ.setdefault('OVERLAP_CHECK_MODE', 'literal')
    os.environ.setdefault('DELETE_CORRUPTED_ROWS', 'false')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.ticketer.driven_adapter.repo.in_memory_cinema_store_impl import (  # noqa: E402
    InMemoryCinemaStoreImpl,
)
from test.fixture_loader import *  # noqa: E402, F401, F403
from test.bdd_steps_loader import *  # noqa: E402, F401, F403


@pytest.fixture
def context() -> dict[str, Any]:
    """Shared scratchpad for BDD steps."""
    return {}


@pytest.fixture
def api_store(live_now: Any) -> InMemoryCinemaStoreImpl:
    """Store seeded with screenings that are active around the real clock."""
    from test.service.ticketer.catalog_factory import build_live_catalog_rows

    return InMemoryCinemaStoreImpl(**build_live_catalog_rows(live_now))


@pytest.fixture
def client(api_store: InMemoryCinemaStoreImpl) -> Generator[TestClient, None, None]:
    from src.main import app

    container.cinema_store.override(providers.Object(api_store))
    container.cinema_catalog.reset()
    container.booking_arrangement.reset()
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        container.cinema_store.reset_override()
        container.cinema_catalog.reset()
        container.booking_arrangement.reset()
