"""
Shared test fixtures and path constants for csv-dashboard tests.

All input file paths are defined here as module-level constants for
easy discovery and modification. If input files move or new ones are
added, update this file.
"""

from pathlib import Path

import pytest

from csv_dashboard.parsers import DiagnosticCollector

# ---------------------------------------------------------------------------
# Input file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
INPUT_DIR = Path(__file__).resolve().parent.parent / "inputs"

WEBSITE_TRAFFIC_CSV = INPUT_DIR / "website_traffic.csv"
BUILD_RECOMMENDATIONS_CSV = INPUT_DIR / "build_recommendations.csv"
COMPONENT_CTR_CSV = INPUT_DIR / "component_click_through_rates.csv"
USER_SATISFACTION_CSV = INPUT_DIR / "user_satisfaction.csv"
MARKETING_CAMPAIGNS_CSV = INPUT_DIR / "marketing_campaigns.csv"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def collector() -> DiagnosticCollector:
    """A fresh in-memory diagnostics sink."""
    return DiagnosticCollector()


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against the sample input files)",
    )
