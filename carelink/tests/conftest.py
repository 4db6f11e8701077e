"""
Test Configuration and Fixtures

Shared fixtures wiring use cases to in-memory repositories and fakes.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from carelink.application.dispatch import BestEffortDispatcher

from carelink.tests.fakes import (
    InMemoryCareFacilityRepository,
    InMemoryChildRepository,
    InMemoryCounselReportRepository,
    InMemoryCounselRequestRepository,
    InMemoryReviewRepository,
    InMemoryUserRepository,
    PlainTextHasher,
    RecordingNotificationGateway,
)

SEOUL = ZoneInfo("Asia/Seoul")


@pytest.fixture
def review_repository() -> InMemoryReviewRepository:
    return InMemoryReviewRepository()


@pytest.fixture
def report_repository() -> InMemoryCounselReportRepository:
    return InMemoryCounselReportRepository()


@pytest.fixture
def request_repository() -> InMemoryCounselRequestRepository:
    return InMemoryCounselRequestRepository()


@pytest.fixture
def child_repository() -> InMemoryChildRepository:
    return InMemoryChildRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def facility_repository() -> InMemoryCareFacilityRepository:
    return InMemoryCareFacilityRepository()


@pytest.fixture
def hasher() -> PlainTextHasher:
    return PlainTextHasher()


@pytest.fixture
def notifications() -> RecordingNotificationGateway:
    return RecordingNotificationGateway()


@pytest.fixture
def dispatcher() -> BestEffortDispatcher:
    return BestEffortDispatcher()


@pytest.fixture
def seoul() -> ZoneInfo:
    return SEOUL


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-06-15 01:00 UTC (10:00 in Seoul)."""
    instant = datetime(2024, 6, 15, 1, 0, tzinfo=timezone.utc)
    return lambda: instant
