"""
Shared pytest fixtures for the lead builder test suite.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture
def full_lead():
    """A lead with every scored field filled in."""
    return {
        "company_name": "Acme Inc",
        "contact_name": "Jane Doe",
        "job_title": "VP of Sales",
        "linkedin_url": "https://www.linkedin.com/in/janedoe",
        "company_size": "1500 employees",
        "pain_points": "High churn and manual onboarding",
    }


@pytest.fixture
def modest_lead():
    """Complete but unremarkable lead: 25 + 8 + 8 + 5 + 6 + 4 + 10 = 66."""
    return {
        "company_name": "Acme",
        "contact_name": "Sam Lee",
        "job_title": "Analyst",
        "linkedin_url": "https://www.linkedin.com/in/samlee",
        "company_size": "20",
        "pain_points": "Onboarding takes weeks.",
    }


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
