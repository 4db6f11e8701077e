"""
Counsel report use cases.

Counselors write and submit reports; the child's guardian confirms and
approves them; the counselor's institution may return a submitted report
to draft. Ownership is checked before any state change.
"""

from uuid import UUID

from carelink.domain.child import ChildRepository
from carelink.domain.counsel_report import CounselReport, CounselReportRepository
from carelink.domain.counsel_request import CounselRequest, CounselRequestRepository
from carelink.domain.shared import (
    BusinessRuleError,
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    Result,
    ValidationError,
)
from carelink.application.dispatch import BestEffortDispatcher
from carelink.application.dtos.counsel_report_dtos import (
    ApproveCounselReportCommand,
    CounselReportListResponse,
    CounselReportResponse,
    CreateCounselReportCommand,
    UpdateCounselReportCommand,
)
from carelink.application.ports import NotificationGateway
from carelink.application.use_cases.base import UseCase, check_paging
from carelink.application.use_cases.counsel_request_use_cases import counsel_request_not_found


def to_counsel_report_response(report: CounselReport) -> CounselReportResponse:
    return CounselReportResponse(
        id=report.id,
        counsel_request_id=report.counsel_request_id,
        child_id=report.child_id,
        counselor_id=report.counselor_id,
        institution_id=report.institution_id,
        session_number=report.session_number,
        report_date=report.report_date,
        center_name=report.center_name,
        counselor_signature=report.counselor_signature,
        counsel_reason=report.counsel_reason,
        counsel_content=report.counsel_content,
        center_feedback=report.center_feedback,
        home_feedback=report.home_feedback,
        attachment_urls=list(report.attachment_urls),
        status=report.status,
        submitted_at=report.submitted_at,
        reviewed_at=report.reviewed_at,
        guardian_feedback=report.guardian_feedback,
        created_at=report.created_at,
        updated_at=report.updated_at,
    )


def _report_not_found(report_id: UUID) -> NotFoundError:
    return NotFoundError(
        "면담결과지를 찾을 수 없습니다.",
        code="REPORT_NOT_FOUND",
        details={"report_id": str(report_id)},
    )


def _check_request_accepts(
    request: CounselRequest, command: CreateCounselReportCommand
) -> Result[None, DomainError]:
    if not request.accepts_reports():
        return Result.fail(
            BusinessRuleError(
                "상담 진행 중인 상담의뢰지에만 면담결과지를 작성할 수 있습니다.",
                code="COUNSEL_REQUEST_NOT_IN_PROGRESS",
                details={"status": request.status.value},
            )
        )
    if request.child_id != command.child_id:
        return Result.fail(
            ValidationError(
                "상담의뢰지의 아동과 일치하지 않습니다.", "child_id", code="CHILD_MISMATCH"
            )
        )
    if not request.is_matched_to(command.institution_id):
        return Result.fail(
            ForbiddenError(
                "상담의뢰지에 매칭된 기관만 면담결과지를 작성할 수 있습니다.",
                code="INSTITUTION_MISMATCH",
            )
        )
    return Result.ok()


def _duplicate_session(counsel_request_id: UUID, session_number: int) -> ConflictError:
    return ConflictError(
        "해당 상담의뢰지의 해당 회차 면담결과지가 이미 존재합니다.",
        code="DUPLICATE_SESSION_NUMBER",
        details={
            "counsel_request_id": str(counsel_request_id),
            "session_number": session_number,
        },
    )


class CreateCounselReportUseCase(UseCase):
    """
    Start a draft report for one session of a counsel request.

    The request must be in progress and matched to the reporting
    institution, and it must concern the same child.
    """

    def __init__(
        self,
        report_repository: CounselReportRepository,
        request_repository: CounselRequestRepository,
    ):
        super().__init__()
        self._reports = report_repository
        self._requests = request_repository

    async def execute(
        self, command: CreateCounselReportCommand
    ) -> Result[CounselReportResponse, DomainError]:
        request = await self._requests.find_by_id(command.counsel_request_id)
        if request is None:
            return self.reject(counsel_request_not_found(command.counsel_request_id))
        accepted = _check_request_accepts(request, command)
        if accepted.is_failure:
            return self.reject(
                accepted.error, counsel_request_id=str(command.counsel_request_id)
            )

        session_number = command.session_number
        if session_number is None:
            session_number = await self._reports.next_session_number(
                command.counsel_request_id
            )
        elif await self._reports.find_by_request_and_session(
            command.counsel_request_id, session_number
        ):
            return self.reject(
                _duplicate_session(command.counsel_request_id, session_number)
            )

        created = CounselReport.create(
            counsel_request_id=command.counsel_request_id,
            child_id=command.child_id,
            counselor_id=command.counselor_id,
            institution_id=command.institution_id,
            session_number=session_number,
            report_date=command.report_date,
            center_name=command.center_name,
            counsel_reason=command.counsel_reason,
            counsel_content=command.counsel_content,
            counselor_signature=command.counselor_signature,
            center_feedback=command.center_feedback,
            home_feedback=command.home_feedback,
            attachment_urls=command.attachment_urls,
        )
        if created.is_failure:
            return self.reject(created.error)

        try:
            report = await self._reports.save(created.value)
        except ConflictError:
            return self.reject(
                _duplicate_session(command.counsel_request_id, session_number)
            )

        return self.succeed(
            to_counsel_report_response(report),
            report_id=str(report.id),
            session_number=session_number,
        )


class GetCounselReportUseCase(UseCase):
    def __init__(self, report_repository: CounselReportRepository):
        super().__init__()
        self._reports = report_repository

    async def execute(self, report_id: UUID) -> Result[CounselReportResponse, DomainError]:
        report = await self._reports.find_by_id(report_id)
        if report is None:
            return self.reject(_report_not_found(report_id))
        return self.succeed(to_counsel_report_response(report), report_id=str(report_id))


class GetCounselReportsByRequestUseCase(UseCase):
    """All reports of a counsel request, in session order."""

    def __init__(self, report_repository: CounselReportRepository):
        super().__init__()
        self._reports = report_repository

    async def execute(
        self, counsel_request_id: UUID
    ) -> Result[list[CounselReportResponse], DomainError]:
        reports = await self._reports.find_by_counsel_request_id(counsel_request_id)
        return self.succeed(
            [to_counsel_report_response(report) for report in reports],
            counsel_request_id=str(counsel_request_id),
            count=len(reports),
        )


class GetCounselorReportsUseCase(UseCase):
    def __init__(self, report_repository: CounselReportRepository):
        super().__init__()
        self._reports = report_repository

    async def execute(
        self, counselor_id: UUID, page: int = 1, limit: int = 10
    ) -> Result[CounselReportListResponse, DomainError]:
        paging = check_paging(page, limit)
        if paging.is_failure:
            return self.reject(paging.error)

        reports, total = await self._reports.find_by_counselor_id(
            counselor_id, page=page, limit=limit
        )
        return self.succeed(
            CounselReportListResponse.build(
                [to_counsel_report_response(report) for report in reports],
                total=total,
                page=page,
                limit=limit,
            ),
            counselor_id=str(counselor_id),
            total=total,
        )


class UpdateCounselReportUseCase(UseCase):
    """Edit a draft; only its author may do so."""

    def __init__(self, report_repository: CounselReportRepository):
        super().__init__()
        self._reports = report_repository

    async def execute(
        self, report_id: UUID, counselor_id: UUID, command: UpdateCounselReportCommand
    ) -> Result[CounselReportResponse, DomainError]:
        report = await self._reports.find_by_id(report_id)
        if report is None:
            return self.reject(_report_not_found(report_id))

        if not report.is_authored_by(counselor_id):
            return self.reject(
                ForbiddenError(
                    "본인이 작성한 면담결과지만 수정할 수 있습니다.", code="UNAUTHORIZED"
                ),
                report_id=str(report_id),
                counselor_id=str(counselor_id),
            )

        updated = report.update(
            counsel_reason=command.counsel_reason,
            counsel_content=command.counsel_content,
            center_feedback=command.center_feedback,
            home_feedback=command.home_feedback,
            counselor_signature=command.counselor_signature,
            attachment_urls=command.attachment_urls,
        )
        if updated.is_failure:
            return self.reject(updated.error, report_id=str(report_id))

        saved = await self._reports.save(report)
        return self.succeed(to_counsel_report_response(saved), report_id=str(report_id))


class SubmitCounselReportUseCase(UseCase):
    """DRAFT -> SUBMITTED, by the author."""

    def __init__(self, report_repository: CounselReportRepository):
        super().__init__()
        self._reports = report_repository

    async def execute(
        self, report_id: UUID, counselor_id: UUID
    ) -> Result[CounselReportResponse, DomainError]:
        report = await self._reports.find_by_id(report_id)
        if report is None:
            return self.reject(_report_not_found(report_id))

        if not report.is_authored_by(counselor_id):
            return self.reject(
                ForbiddenError(
                    "본인이 작성한 면담결과지만 제출할 수 있습니다.", code="UNAUTHORIZED"
                ),
                report_id=str(report_id),
                counselor_id=str(counselor_id),
            )

        submitted = report.submit()
        if submitted.is_failure:
            return self.reject(submitted.error, report_id=str(report_id))

        saved = await self._reports.save(report)
        return self.succeed(
            to_counsel_report_response(saved),
            report_id=str(report_id),
            status=saved.status.value,
        )


class _GuardianReportUseCase(UseCase):
    """Shared lookup for operations performed by the child's guardian."""

    def __init__(
        self,
        report_repository: CounselReportRepository,
        child_repository: ChildRepository,
    ):
        super().__init__()
        self._reports = report_repository
        self._children = child_repository

    async def _load_for_guardian(
        self, report_id: UUID, guardian_id: UUID
    ) -> Result[CounselReport, DomainError]:
        report = await self._reports.find_by_id(report_id)
        if report is None:
            return Result.fail(_report_not_found(report_id))

        child = await self._children.find_by_id(report.child_id)
        if child is None or child.guardian_id != guardian_id:
            return Result.fail(
                ForbiddenError(
                    "해당 아동의 보호자만 면담결과지를 처리할 수 있습니다.",
                    code="UNAUTHORIZED",
                    details={"report_id": str(report_id)},
                )
            )
        return Result.ok(report)


class ReviewCounselReportUseCase(_GuardianReportUseCase):
    """SUBMITTED -> REVIEWED: the guardian confirms having read the report."""

    async def execute(
        self, report_id: UUID, guardian_id: UUID
    ) -> Result[CounselReportResponse, DomainError]:
        loaded = await self._load_for_guardian(report_id, guardian_id)
        if loaded.is_failure:
            return self.reject(loaded.error, guardian_id=str(guardian_id))

        report = loaded.value
        reviewed = report.mark_as_reviewed()
        if reviewed.is_failure:
            return self.reject(reviewed.error, report_id=str(report_id))

        saved = await self._reports.save(report)
        return self.succeed(
            to_counsel_report_response(saved),
            report_id=str(report_id),
            status=saved.status.value,
        )


class ApproveCounselReportUseCase(_GuardianReportUseCase):
    """
    REVIEWED -> APPROVED with the guardian's feedback.

    The counselor is notified in the background; a failed notification does
    not affect the approval.
    """

    def __init__(
        self,
        report_repository: CounselReportRepository,
        child_repository: ChildRepository,
        notifications: NotificationGateway,
        dispatcher: BestEffortDispatcher,
    ):
        super().__init__(report_repository, child_repository)
        self._notifications = notifications
        self._dispatcher = dispatcher

    async def execute(
        self,
        report_id: UUID,
        guardian_id: UUID,
        command: ApproveCounselReportCommand,
    ) -> Result[CounselReportResponse, DomainError]:
        loaded = await self._load_for_guardian(report_id, guardian_id)
        if loaded.is_failure:
            return self.reject(loaded.error, guardian_id=str(guardian_id))

        report = loaded.value
        approved = report.approve_with_feedback(command.guardian_feedback)
        if approved.is_failure:
            return self.reject(approved.error, report_id=str(report_id))

        saved = await self._reports.save(report)

        self._dispatcher.dispatch(
            "report_approved_notification",
            lambda: self._notifications.send_report_approved(
                report_id=saved.id,
                counselor_id=saved.counselor_id,
                institution_id=saved.institution_id,
                session_number=saved.session_number,
            ),
        )

        return self.succeed(
            to_counsel_report_response(saved),
            report_id=str(report_id),
            status=saved.status.value,
        )


class RejectCounselReportUseCase(UseCase):
    """SUBMITTED -> DRAFT, by the report's institution."""

    def __init__(self, report_repository: CounselReportRepository):
        super().__init__()
        self._reports = report_repository

    async def execute(
        self, report_id: UUID, institution_id: UUID
    ) -> Result[CounselReportResponse, DomainError]:
        report = await self._reports.find_by_id(report_id)
        if report is None:
            return self.reject(_report_not_found(report_id))

        if report.institution_id != institution_id:
            return self.reject(
                ForbiddenError(
                    "소속 기관의 면담결과지만 반려할 수 있습니다.", code="UNAUTHORIZED"
                ),
                report_id=str(report_id),
                institution_id=str(institution_id),
            )

        rejected = report.reject()
        if rejected.is_failure:
            return self.reject(rejected.error, report_id=str(report_id))

        saved = await self._reports.save(report)
        return self.succeed(
            to_counsel_report_response(saved),
            report_id=str(report_id),
            status=saved.status.value,
        )
