"""CounselReport aggregate root."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from carelink.domain.shared.base import AggregateRoot, DomainEvent, utc_now
from carelink.domain.shared.exceptions import BusinessRuleError, DomainError, ValidationError
from carelink.domain.shared.result import Result
from carelink.domain.counsel_report.value_objects import ReportStatus


class CounselReportStatusChanged(DomainEvent):
    """Event raised when a counsel report moves through its lifecycle."""

    counsel_request_id: UUID
    session_number: int
    old_status: ReportStatus
    new_status: ReportStatus


class CounselReport(AggregateRoot):
    """
    Per-session counsel report written by a counselor.

    The report is editable while it is a draft. Once submitted it is visible
    to the guardian, who confirms it (REVIEWED) and approves it with feedback.
    A submitted report can be returned to draft for revision.

    ``status`` is only ever changed by ``set_status``, which consults the
    transition table; assigning it directly raises ``AttributeError``.
    """

    counsel_request_id: UUID
    child_id: UUID
    counselor_id: UUID
    institution_id: UUID
    session_number: int
    report_date: date
    center_name: str
    counselor_signature: str | None = None
    counsel_reason: str
    counsel_content: str
    center_feedback: str | None = None
    home_feedback: str | None = None
    attachment_urls: list[str] = Field(default_factory=list)
    status: ReportStatus = ReportStatus.DRAFT
    submitted_at: datetime | None = None
    reviewed_at: datetime | None = None
    guardian_feedback: str | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "status":
            raise AttributeError(
                "Counsel report status can only change through set_status()"
            )
        super().__setattr__(name, value)

    @staticmethod
    def create(
        *,
        counsel_request_id: UUID | None,
        child_id: UUID | None,
        counselor_id: UUID | None,
        institution_id: UUID | None,
        session_number: int,
        report_date: date,
        center_name: str | None,
        counsel_reason: str | None,
        counsel_content: str | None,
        counselor_signature: str | None = None,
        center_feedback: str | None = None,
        home_feedback: str | None = None,
        attachment_urls: list[str] | None = None,
    ) -> Result["CounselReport", ValidationError]:
        """
        Start a new draft report.

        Returns:
            Result holding the draft, or the first failed creation rule
        """
        if session_number < 1:
            return Result.fail(
                ValidationError(
                    "회차는 1 이상이어야 합니다.",
                    "session_number",
                    code="INVALID_SESSION_NUMBER",
                )
            )

        if not (counsel_request_id and child_id and counselor_id and institution_id):
            return Result.fail(
                ValidationError(
                    "필수 필드가 누락되었습니다.", code="MISSING_REQUIRED_FIELDS"
                )
            )

        if not (counsel_reason or "").strip() or not (counsel_content or "").strip():
            return Result.fail(
                ValidationError(
                    "상담 사유와 내용은 필수입니다.", code="MISSING_COUNSEL_CONTENT"
                )
            )

        if not (center_name or "").strip():
            return Result.fail(
                ValidationError(
                    "센터명은 필수입니다.", "center_name", code="MISSING_CENTER_NAME"
                )
            )

        return Result.ok(
            CounselReport(
                counsel_request_id=counsel_request_id,
                child_id=child_id,
                counselor_id=counselor_id,
                institution_id=institution_id,
                session_number=session_number,
                report_date=report_date,
                center_name=center_name.strip(),
                counselor_signature=counselor_signature,
                counsel_reason=counsel_reason,
                counsel_content=counsel_content,
                center_feedback=center_feedback,
                home_feedback=home_feedback,
                attachment_urls=list(attachment_urls or []),
            )
        )

    @staticmethod
    def restore(**stored: Any) -> "CounselReport":
        """Rehydrate a stored report (all columns, including status and stamps)."""
        return CounselReport(**stored)

    # Lifecycle

    def set_status(self, target: ReportStatus) -> Result[None, BusinessRuleError]:
        """
        Move to ``target`` if the transition table allows it.

        The report is left untouched when the transition is refused.
        """
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
            CounselReportStatusChanged(
                aggregate_id=self.id,
                counsel_request_id=self.counsel_request_id,
                session_number=self.session_number,
                old_status=old_status,
                new_status=target,
            )
        )
        return Result.ok()

    def submit(self) -> Result[None, BusinessRuleError]:
        """Submit a draft (counselor -> platform)."""
        if not self.status.can_transition_to(ReportStatus.SUBMITTED):
            return self._refuse("현재 상태에서 제출할 수 없습니다.")

        if not self.counsel_reason.strip() or not self.counsel_content.strip():
            return Result.fail(
                BusinessRuleError(
                    "상담 사유와 내용을 모두 작성해야 제출할 수 있습니다.",
                    code="INCOMPLETE_REPORT",
                )
            )

        return self.set_status(ReportStatus.SUBMITTED).map(
            lambda _: self._stamp("submitted_at")
        )

    def mark_as_reviewed(self) -> Result[None, BusinessRuleError]:
        """Guardian confirms having read a submitted report."""
        if not self.status.can_transition_to(ReportStatus.REVIEWED):
            return self._refuse("제출된 상태에서만 확인 처리할 수 있습니다.")

        return self.set_status(ReportStatus.REVIEWED).map(
            lambda _: self._stamp("reviewed_at")
        )

    def approve_with_feedback(self, feedback: str | None) -> Result[None, DomainError]:
        """Guardian approves a reviewed report, leaving written feedback."""
        if not self.status.can_transition_to(ReportStatus.APPROVED):
            return self._refuse("확인된 상태에서만 승인할 수 있습니다.")

        if not (feedback or "").strip():
            return Result.fail(
                ValidationError(
                    "피드백은 비어있을 수 없습니다.",
                    "guardian_feedback",
                    code="INVALID_FEEDBACK",
                )
            )

        result = self.set_status(ReportStatus.APPROVED)
        if result.is_success:
            self.guardian_feedback = feedback.strip()
        return result

    def reject(self) -> Result[None, BusinessRuleError]:
        """Return a submitted report to draft for revision."""
        if self.status != ReportStatus.SUBMITTED:
            return self._refuse("제출된 상태에서만 반려할 수 있습니다.")

        result = self.set_status(ReportStatus.DRAFT)
        if result.is_success:
            self.submitted_at = None
        return result

    # Content

    def update(
        self,
        *,
        counsel_reason: str | None = None,
        counsel_content: str | None = None,
        center_feedback: str | None = None,
        home_feedback: str | None = None,
        counselor_signature: str | None = None,
        attachment_urls: list[str] | None = None,
    ) -> Result[None, DomainError]:
        """
        Edit a draft. Arguments left as ``None`` keep their current value.

        Returns:
            Failure when the report is no longer a draft or a required text
            field would become blank; nothing is changed in that case
        """
        if not self.status.is_counselor_editable:
            return Result.fail(
                BusinessRuleError(
                    "작성 중 상태에서만 수정할 수 있습니다.",
                    code="CANNOT_UPDATE_SUBMITTED_REPORT",
                )
            )

        if counsel_reason is not None and not counsel_reason.strip():
            return Result.fail(
                ValidationError(
                    "상담 사유는 비어있을 수 없습니다.",
                    "counsel_reason",
                    code="INVALID_COUNSEL_REASON",
                )
            )
        if counsel_content is not None and not counsel_content.strip():
            return Result.fail(
                ValidationError(
                    "상담 내용은 비어있을 수 없습니다.",
                    "counsel_content",
                    code="INVALID_COUNSEL_CONTENT",
                )
            )

        changes = {
            "counsel_reason": counsel_reason,
            "counsel_content": counsel_content,
            "center_feedback": center_feedback,
            "home_feedback": home_feedback,
            "counselor_signature": counselor_signature,
            "attachment_urls": list(attachment_urls) if attachment_urls is not None else None,
        }
        for field_name, value in changes.items():
            if value is not None:
                setattr(self, field_name, value)

        self.mark_updated()
        return Result.ok()

    # Queries

    def can_edit(self) -> bool:
        return self.status.is_counselor_editable

    def is_visible_to_guardian(self) -> bool:
        return self.status.is_guardian_viewable

    def is_authored_by(self, counselor_id: UUID) -> bool:
        return self.counselor_id == counselor_id

    def _stamp(self, field_name: str) -> None:
        setattr(self, field_name, utc_now())

    def _refuse(self, message: str) -> Result[None, BusinessRuleError]:
        return Result.fail(
            BusinessRuleError(
                message,
                code="INVALID_STATUS_TRANSITION",
                details={"status": self.status.value},
            )
        )
