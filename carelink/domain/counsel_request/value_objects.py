"""Counsel request status table and intake classifications."""

from enum import Enum


class CounselRequestStatus(str, Enum):
    """
    Counsel request status enumeration.

    PENDING -> RECOMMENDED -> MATCHED -> IN_PROGRESS -> COMPLETED. A pending
    request may also be matched directly. Any open request can be rejected.
    COMPLETED and REJECTED are terminal.
    """

    PENDING = "PENDING"
    RECOMMENDED = "RECOMMENDED"
    MATCHED = "MATCHED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def allowed_transitions(self) -> frozenset["CounselRequestStatus"]:
        return _TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    @property
    def accepts_reports(self) -> bool:
        """Session reports are written only while counseling is under way."""
        return self == CounselRequestStatus.IN_PROGRESS

    def can_transition_to(self, target_status: "CounselRequestStatus") -> bool:
        return target_status in _TRANSITIONS[self]


_TRANSITIONS: dict[CounselRequestStatus, frozenset[CounselRequestStatus]] = {
    CounselRequestStatus.PENDING: frozenset(
        {
            CounselRequestStatus.RECOMMENDED,
            CounselRequestStatus.MATCHED,
            CounselRequestStatus.REJECTED,
        }
    ),
    CounselRequestStatus.RECOMMENDED: frozenset(
        {CounselRequestStatus.MATCHED, CounselRequestStatus.REJECTED}
    ),
    CounselRequestStatus.MATCHED: frozenset(
        {CounselRequestStatus.IN_PROGRESS, CounselRequestStatus.REJECTED}
    ),
    CounselRequestStatus.IN_PROGRESS: frozenset(
        {CounselRequestStatus.COMPLETED, CounselRequestStatus.REJECTED}
    ),
    CounselRequestStatus.COMPLETED: frozenset(),
    CounselRequestStatus.REJECTED: frozenset(),
}

_DISPLAY_NAMES = {
    CounselRequestStatus.PENDING: "접수 대기",
    CounselRequestStatus.RECOMMENDED: "AI 추천 완료",
    CounselRequestStatus.MATCHED: "기관 선택 완료",
    CounselRequestStatus.IN_PROGRESS: "상담 진행 중",
    CounselRequestStatus.COMPLETED: "상담 완료",
    CounselRequestStatus.REJECTED: "매칭 거부",
}


class CareType(str, Enum):
    """Basis on which the child uses the center."""

    PRIORITY = "PRIORITY"
    GENERAL = "GENERAL"
    SPECIAL = "SPECIAL"


class PriorityReason(str, Enum):
    """Why a PRIORITY child qualifies for priority care."""

    BASIC_LIVELIHOOD = "BASIC_LIVELIHOOD"
    LOW_INCOME = "LOW_INCOME"
    MEDICAL_AID = "MEDICAL_AID"
    DISABILITY = "DISABILITY"
    MULTICULTURAL = "MULTICULTURAL"
    SINGLE_PARENT = "SINGLE_PARENT"
    GRANDPARENT = "GRANDPARENT"
    EDUCATION_SUPPORT = "EDUCATION_SUPPORT"
    MULTI_CHILD = "MULTI_CHILD"
