"""Counsel requests and their routing to institutions."""

from carelink.domain.counsel_request.entities import (
    CounselRequest,
    CounselRequestStatusChanged,
)
from carelink.domain.counsel_request.repositories import CounselRequestRepository
from carelink.domain.counsel_request.value_objects import (
    CareType,
    CounselRequestStatus,
    PriorityReason,
)

__all__ = [
    "CounselRequest",
    "CounselRequestStatusChanged",
    "CounselRequestRepository",
    "CareType",
    "CounselRequestStatus",
    "PriorityReason",
]
