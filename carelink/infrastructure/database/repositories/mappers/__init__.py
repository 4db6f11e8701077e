"""Domain/SQL mappers."""

from carelink.infrastructure.database.repositories.mappers.care_facility_mapper import CareFacilityMapper
from carelink.infrastructure.database.repositories.mappers.child_mapper import ChildMapper
from carelink.infrastructure.database.repositories.mappers.counsel_report_mapper import CounselReportMapper
from carelink.infrastructure.database.repositories.mappers.counsel_request_mapper import CounselRequestMapper
from carelink.infrastructure.database.repositories.mappers.review_mapper import ReviewMapper
from carelink.infrastructure.database.repositories.mappers.user_mapper import UserMapper

__all__ = [
    "CareFacilityMapper",
    "ChildMapper",
    "CounselReportMapper",
    "CounselRequestMapper",
    "ReviewMapper",
    "UserMapper",
]
