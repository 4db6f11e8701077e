"""CounselRequest aggregate root."""

from datetime import date
from typing import Any
from uuid import UUID

from carelink.domain.shared.base import AggregateRoot, DomainEvent
from carelink.domain.shared.exceptions import BusinessRuleError, DomainError, ValidationError
from carelink.domain.shared.result import Result
from carelink.domain.counsel_request.value_objects import (
    CareType,
    CounselRequestStatus,
    PriorityReason,
)


class CounselRequestStatusChanged(DomainEvent):
    """Event raised when a counsel request moves through its lifecycle."""

    child_id: UUID
    old_status: CounselRequestStatus
    new_status: CounselRequestStatus


class CounselRequest(AggregateRoot):
    """
    Intake form asking for counseling of a child.

    A request is received as PENDING. It is routed to an institution either
    through the recommendation flow (RECOMMENDED, then the guardian selects
    one institution) or by a direct match with an institution and counselor.
    Counseling then starts and completes; session reports are written while
    it is in progress. An open request may be rejected at any point.

    ``status`` only changes through ``set_status``.
    """

    child_id: UUID
    guardian_id: UUID
    center_name: str
    counselor_name: str
    child_name: str
    care_type: CareType
    priority_reason: PriorityReason | None = None
    request_date: date
    motivation: str | None = None
    goals: str | None = None
    status: CounselRequestStatus = CounselRequestStatus.PENDING
    matched_institution_id: UUID | None = None
    matched_counselor_id: UUID | None = None
    rejection_reason: str | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "status":
            raise AttributeError(
                "Counsel request status can only change through set_status()"
            )
        super().__setattr__(name, value)

    @staticmethod
    def create(
        *,
        child_id: UUID | None,
        guardian_id: UUID | None,
        center_name: str | None,
        counselor_name: str | None,
        child_name: str | None,
        care_type: CareType,
        request_date: date,
        priority_reason: PriorityReason | None = None,
        motivation: str | None = None,
        goals: str | None = None,
    ) -> Result["CounselRequest", ValidationError]:
        """
        Receive a new request in PENDING status.

        Returns:
            Result holding the request, or the first failed intake rule
        """
        if not (child_id and guardian_id):
            return Result.fail(
                ValidationError(
                    "필수 필드가 누락되었습니다.", code="MISSING_REQUIRED_FIELDS"
                )
            )
        if not (center_name or "").strip():
            return Result.fail(
                ValidationError(
                    "센터명은 필수입니다", "center_name", code="MISSING_CENTER_NAME"
                )
            )
        if not (counselor_name or "").strip():
            return Result.fail(
                ValidationError(
                    "담당자 이름은 필수입니다",
                    "counselor_name",
                    code="MISSING_COUNSELOR_NAME",
                )
            )
        if not (child_name or "").strip():
            return Result.fail(
                ValidationError(
                    "아동 이름은 필수입니다", "child_name", code="MISSING_CHILD_NAME"
                )
            )
        if care_type == CareType.PRIORITY and priority_reason is None:
            return Result.fail(
                ValidationError(
                    "우선돌봄 아동은 세부 사유를 선택해야 합니다",
                    "priority_reason",
                    code="MISSING_PRIORITY_REASON",
                )
            )

        return Result.ok(
            CounselRequest(
                child_id=child_id,
                guardian_id=guardian_id,
                center_name=center_name.strip(),
                counselor_name=counselor_name.strip(),
                child_name=child_name.strip(),
                care_type=care_type,
                # Only priority care carries a reason
                priority_reason=priority_reason if care_type == CareType.PRIORITY else None,
                request_date=request_date,
                motivation=(motivation or "").strip() or None,
                goals=(goals or "").strip() or None,
            )
        )

    @staticmethod
    def restore(**stored: Any) -> "CounselRequest":
        return CounselRequest(**stored)

    # Lifecycle

    def set_status(self, target: CounselRequestStatus) -> Result[None, BusinessRuleError]:
        if not self.status.can_transition_to(target):
            return Result.fail(
                BusinessRuleError(
                    f"'{self.status.value}' 상태에서 '{target.value}' 상태로 변경할 수 없습니다.",
                    code="INVALID_STATUS_TRANSITION",
                    details={"from": self.status.value, "to": target.value},
                )
            )

        old_status = self.status
        super().__setattr__("status", target)
        self.mark_updated()
        self.add_domain_event(
            CounselRequestStatusChanged(
                aggregate_id=self.id,
                child_id=self.child_id,
                old_status=old_status,
                new_status=target,
            )
        )
        return Result.ok()

    def mark_as_recommended(self) -> Result[None, BusinessRuleError]:
        """Recommendations for the request have arrived."""
        if self.status != CounselRequestStatus.PENDING:
            return self._refuse("AI 추천은 접수 대기 상태에서만 가능합니다")
        return self.set_status(CounselRequestStatus.RECOMMENDED)

    def select_institution(self, institution_id: UUID | None) -> Result[None, DomainError]:
        """Accept one of the recommended institutions."""
        if self.status != CounselRequestStatus.RECOMMENDED:
            return self._refuse("기관 선택은 AI 추천 완료 상태에서만 가능합니다")
        if institution_id is None:
            return Result.fail(
                ValidationError(
                    "기관 ID는 필수입니다", "institution_id", code="MISSING_INSTITUTION_ID"
                )
            )

        result = self.set_status(CounselRequestStatus.MATCHED)
        if result.is_success:
            self.matched_institution_id = institution_id
        return result

    def match_with(
        self, institution_id: UUID | None, counselor_id: UUID | None
    ) -> Result[None, DomainError]:
        """Assign an institution and counselor to a pending request directly."""
        if self.status != CounselRequestStatus.PENDING:
            return self._refuse("접수 대기 상태에서만 매칭할 수 있습니다")
        if institution_id is None or counselor_id is None:
            return Result.fail(
                ValidationError(
                    "기관 ID와 상담사 ID는 필수입니다", code="MISSING_MATCH_TARGET"
                )
            )

        result = self.set_status(CounselRequestStatus.MATCHED)
        if result.is_success:
            self.matched_institution_id = institution_id
            self.matched_counselor_id = counselor_id
        return result

    def start_counseling(self) -> Result[None, BusinessRuleError]:
        if self.status != CounselRequestStatus.MATCHED:
            return self._refuse("매칭 완료 상태에서만 상담을 시작할 수 있습니다")
        return self.set_status(CounselRequestStatus.IN_PROGRESS)

    def complete_counseling(self) -> Result[None, BusinessRuleError]:
        if self.status != CounselRequestStatus.IN_PROGRESS:
            return self._refuse("상담 진행 중 상태에서만 완료할 수 있습니다")
        return self.set_status(CounselRequestStatus.COMPLETED)

    def reject(self, reason: str | None = None) -> Result[None, BusinessRuleError]:
        if self.status == CounselRequestStatus.COMPLETED:
            return self._refuse("완료된 상담의뢰는 거부할 수 없습니다")
        if self.status == CounselRequestStatus.REJECTED:
            return self._refuse("이미 거부된 상담의뢰입니다")

        result = self.set_status(CounselRequestStatus.REJECTED)
        if result.is_success:
            self.rejection_reason = (reason or "").strip() or None
        return result

    # Queries

    def accepts_reports(self) -> bool:
        return self.status.accepts_reports

    def is_matched_to(self, institution_id: UUID) -> bool:
        return self.matched_institution_id == institution_id

    def _refuse(self, message: str) -> Result[None, BusinessRuleError]:
        return Result.fail(
            BusinessRuleError(
                message,
                code="INVALID_STATUS_TRANSITION",
                details={"status": self.status.value},
            )
        )
