"""SQL repository implementations of the domain repository interfaces."""

from carelink.infrastructure.database.repositories.base import SQLRepository
from carelink.infrastructure.database.repositories.care_facility_repository import SQLCareFacilityRepository
from carelink.infrastructure.database.repositories.child_repository import SQLChildRepository
from carelink.infrastructure.database.repositories.counsel_report_repository import SQLCounselReportRepository
from carelink.infrastructure.database.repositories.counsel_request_repository import SQLCounselRequestRepository
from carelink.infrastructure.database.repositories.review_repository import SQLReviewRepository
from carelink.infrastructure.database.repositories.user_repository import SQLUserRepository

__all__ = [
    "SQLRepository",
    "SQLCareFacilityRepository",
    "SQLChildRepository",
    "SQLCounselReportRepository",
    "SQLCounselRequestRepository",
    "SQLReviewRepository",
    "SQLUserRepository",
]
