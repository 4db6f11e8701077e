"""Tests for counsel report use cases."""

from datetime import date
from uuid import uuid4

import pytest

from carelink.application.dtos.counsel_report_dtos import (
    ApproveCounselReportCommand,
    CreateCounselReportCommand,
    UpdateCounselReportCommand,
)
from carelink.application.use_cases import (
    ApproveCounselReportUseCase,
    CreateCounselReportUseCase,
    GetCounselorReportsUseCase,
    GetCounselReportsByRequestUseCase,
    GetCounselReportUseCase,
    RejectCounselReportUseCase,
    ReviewCounselReportUseCase,
    SubmitCounselReportUseCase,
    UpdateCounselReportUseCase,
)
from carelink.domain.counsel_report import ReportStatus
from carelink.domain.counsel_request import CounselRequestStatus
from carelink.domain.shared import ErrorType
from carelink.tests.factories import build_child, build_counsel_request, build_report
from carelink.tests.fakes import RecordingNotificationGateway


def create_command(request, session_number=None, **overrides):
    fields = dict(
        counsel_request_id=request.id,
        child_id=request.child_id,
        counselor_id=request.matched_counselor_id or uuid4(),
        institution_id=request.matched_institution_id or uuid4(),
        session_number=session_number,
        report_date=date(2024, 3, 1),
        center_name="마음숲 상담센터",
        counsel_reason="정서 불안",
        counsel_content="미술치료 진행",
    )
    fields.update(overrides)
    return CreateCounselReportCommand(**fields)


@pytest.fixture
async def active_request(request_repository):
    request = build_counsel_request(status=CounselRequestStatus.IN_PROGRESS)
    await request_repository.save(request)
    return request


@pytest.fixture
async def guardian_child(child_repository):
    child = build_child()
    await child_repository.save(child)
    return child


async def store(report_repository, report):
    await report_repository.save(report)
    return report


class TestCreateCounselReport:
    @pytest.mark.asyncio
    async def test_session_number_defaults_to_next_free(
        self, report_repository, request_repository, active_request
    ):
        use_case = CreateCounselReportUseCase(report_repository, request_repository)

        first = await use_case.execute(create_command(active_request))
        second = await use_case.execute(create_command(active_request))

        assert first.value.session_number == 1
        assert second.value.session_number == 2
        assert second.value.status == ReportStatus.DRAFT

    @pytest.mark.asyncio
    async def test_duplicate_session_is_conflict(
        self, report_repository, request_repository, active_request
    ):
        use_case = CreateCounselReportUseCase(report_repository, request_repository)
        await use_case.execute(create_command(active_request, session_number=1))

        result = await use_case.execute(create_command(active_request, session_number=1))

        assert result.error.error_type == ErrorType.CONFLICT
        assert result.error.code == "DUPLICATE_SESSION_NUMBER"
        assert report_repository.save_calls == 1

    @pytest.mark.asyncio
    async def test_missing_content_rejected(
        self, report_repository, request_repository, active_request
    ):
        use_case = CreateCounselReportUseCase(report_repository, request_repository)

        result = await use_case.execute(create_command(active_request, counsel_content=" "))

        assert result.error.code == "MISSING_COUNSEL_CONTENT"
        assert report_repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_unknown_counsel_request(self, report_repository, request_repository):
        use_case = CreateCounselReportUseCase(report_repository, request_repository)
        unsaved = build_counsel_request(status=CounselRequestStatus.IN_PROGRESS)

        result = await use_case.execute(create_command(unsaved))

        assert result.error.error_type == ErrorType.NOT_FOUND
        assert result.error.code == "COUNSEL_REQUEST_NOT_FOUND"
        assert report_repository.save_calls == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status",
        [
            CounselRequestStatus.PENDING,
            CounselRequestStatus.RECOMMENDED,
            CounselRequestStatus.MATCHED,
            CounselRequestStatus.COMPLETED,
            CounselRequestStatus.REJECTED,
        ],
    )
    async def test_request_must_be_in_progress(
        self, report_repository, request_repository, status
    ):
        request = build_counsel_request(status=status)
        await request_repository.save(request)
        use_case = CreateCounselReportUseCase(report_repository, request_repository)

        result = await use_case.execute(create_command(request))

        assert result.error.error_type == ErrorType.BUSINESS_RULE
        assert result.error.code == "COUNSEL_REQUEST_NOT_IN_PROGRESS"
        assert report_repository.save_calls == 0

    @pytest.mark.asyncio
    async def test_other_child_is_rejected(
        self, report_repository, request_repository, active_request
    ):
        use_case = CreateCounselReportUseCase(report_repository, request_repository)

        result = await use_case.execute(create_command(active_request, child_id=uuid4()))

        assert result.error.code == "CHILD_MISMATCH"

    @pytest.mark.asyncio
    async def test_unmatched_institution_is_forbidden(
        self, report_repository, request_repository, active_request
    ):
        use_case = CreateCounselReportUseCase(report_repository, request_repository)

        result = await use_case.execute(
            create_command(active_request, institution_id=uuid4())
        )

        assert result.error.error_type == ErrorType.FORBIDDEN
        assert result.error.code == "INSTITUTION_MISMATCH"



class TestCounselorOperations:
    @pytest.mark.asyncio
    async def test_author_updates_draft(self, report_repository):
        report = await store(report_repository, build_report())

        result = await UpdateCounselReportUseCase(report_repository).execute(
            report.id, report.counselor_id, UpdateCounselReportCommand(home_feedback="가정 연계")
        )

        assert result.value.home_feedback == "가정 연계"

    @pytest.mark.asyncio
    async def test_other_counselor_cannot_update(self, report_repository):
        report = await store(report_repository, build_report())
        saves_before = report_repository.save_calls

        result = await UpdateCounselReportUseCase(report_repository).execute(
            report.id, uuid4(), UpdateCounselReportCommand(home_feedback="x")
        )

        assert result.error.error_type == ErrorType.FORBIDDEN
        assert result.error.code == "UNAUTHORIZED"
        assert report_repository.save_calls == saves_before

    @pytest.mark.asyncio
    async def test_submit(self, report_repository):
        report = await store(report_repository, build_report())

        result = await SubmitCounselReportUseCase(report_repository).execute(
            report.id, report.counselor_id
        )

        assert result.value.status == ReportStatus.SUBMITTED
        assert result.value.submitted_at is not None

    @pytest.mark.asyncio
    async def test_submit_twice_is_business_rule_error(self, report_repository):
        report = await store(report_repository, build_report(status=ReportStatus.SUBMITTED))

        result = await SubmitCounselReportUseCase(report_repository).execute(
            report.id, report.counselor_id
        )

        assert result.error.error_type == ErrorType.BUSINESS_RULE

    @pytest.mark.asyncio
    async def test_unknown_report(self, report_repository):
        result = await GetCounselReportUseCase(report_repository).execute(uuid4())

        assert result.error.code == "REPORT_NOT_FOUND"
        assert result.error.message == "면담결과지를 찾을 수 없습니다."


class TestGuardianOperations:
    @pytest.mark.asyncio
    async def test_guardian_reviews_submitted_report(
        self, report_repository, child_repository, guardian_child
    ):
        report = await store(
            report_repository,
            build_report(child_id=guardian_child.id, status=ReportStatus.SUBMITTED),
        )

        result = await ReviewCounselReportUseCase(report_repository, child_repository).execute(
            report.id, guardian_child.guardian_id
        )

        assert result.value.status == ReportStatus.REVIEWED
        assert result.value.reviewed_at is not None

    @pytest.mark.asyncio
    async def test_other_guardian_is_forbidden(
        self, report_repository, child_repository, guardian_child
    ):
        report = await store(
            report_repository,
            build_report(child_id=guardian_child.id, status=ReportStatus.SUBMITTED),
        )

        result = await ReviewCounselReportUseCase(report_repository, child_repository).execute(
            report.id, uuid4()
        )

        assert result.error.error_type == ErrorType.FORBIDDEN
        assert report_repository.items[report.id].status == ReportStatus.SUBMITTED

    @pytest.mark.asyncio
    async def test_approve_notifies_counselor(
        self,
        report_repository,
        child_repository,
        guardian_child,
        notifications,
        dispatcher,
    ):
        report = await store(
            report_repository,
            build_report(child_id=guardian_child.id, status=ReportStatus.REVIEWED),
        )
        use_case = ApproveCounselReportUseCase(
            report_repository, child_repository, notifications, dispatcher
        )

        result = await use_case.execute(
            report.id,
            guardian_child.guardian_id,
            ApproveCounselReportCommand(guardian_feedback="도움이 많이 되었습니다"),
        )
        await dispatcher.drain()

        assert result.value.status == ReportStatus.APPROVED
        assert result.value.guardian_feedback == "도움이 많이 되었습니다"
        assert notifications.approvals == [
            {
                "report_id": report.id,
                "counselor_id": report.counselor_id,
                "institution_id": report.institution_id,
                "session_number": 1,
            }
        ]

    @pytest.mark.asyncio
    async def test_failed_notification_does_not_fail_approval(
        self, report_repository, child_repository, guardian_child, dispatcher
    ):
        report = await store(
            report_repository,
            build_report(child_id=guardian_child.id, status=ReportStatus.REVIEWED),
        )
        use_case = ApproveCounselReportUseCase(
            report_repository,
            child_repository,
            RecordingNotificationGateway(error=ConnectionError("unreachable")),
            dispatcher,
        )

        result = await use_case.execute(
            report.id,
            guardian_child.guardian_id,
            ApproveCounselReportCommand(guardian_feedback="감사합니다"),
        )
        await dispatcher.drain()

        assert result.is_success
        assert report_repository.items[report.id].status == ReportStatus.APPROVED
        assert [f.name for f in dispatcher.failures] == ["report_approved_notification"]

    @pytest.mark.asyncio
    async def test_approval_requires_review_first(
        self, report_repository, child_repository, guardian_child, notifications, dispatcher
    ):
        report = await store(
            report_repository,
            build_report(child_id=guardian_child.id, status=ReportStatus.SUBMITTED),
        )
        use_case = ApproveCounselReportUseCase(
            report_repository, child_repository, notifications, dispatcher
        )

        result = await use_case.execute(
            report.id,
            guardian_child.guardian_id,
            ApproveCounselReportCommand(guardian_feedback="좋아요"),
        )

        assert result.error.message == "확인된 상태에서만 승인할 수 있습니다."
        assert dispatcher.pending == 0


class TestInstitutionOperations:
    @pytest.mark.asyncio
    async def test_institution_rejects_submitted_report(self, report_repository):
        report = await store(report_repository, build_report(status=ReportStatus.SUBMITTED))

        result = await RejectCounselReportUseCase(report_repository).execute(
            report.id, report.institution_id
        )

        assert result.value.status == ReportStatus.DRAFT
        assert result.value.submitted_at is None

    @pytest.mark.asyncio
    async def test_other_institution_cannot_reject(self, report_repository):
        report = await store(report_repository, build_report(status=ReportStatus.SUBMITTED))

        result = await RejectCounselReportUseCase(report_repository).execute(
            report.id, uuid4()
        )

        assert result.error.message == "소속 기관의 면담결과지만 반려할 수 있습니다."


class TestCounselReportQueries:
    @pytest.mark.asyncio
    async def test_reports_by_request_in_session_order(self, report_repository):
        request_id = uuid4()
        for number in (2, 1, 3):
            await store(
                report_repository,
                build_report(counsel_request_id=request_id, session_number=number),
            )

        result = await GetCounselReportsByRequestUseCase(report_repository).execute(request_id)

        assert [r.session_number for r in result.value] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_counselor_reports_paginated(self, report_repository):
        counselor_id = uuid4()
        for _ in range(5):
            await store(report_repository, build_report(counselor_id=counselor_id))

        result = await GetCounselorReportsUseCase(report_repository).execute(
            counselor_id, page=1, limit=2
        )

        assert result.value.total == 5
        assert result.value.total_pages == 3
        assert len(result.value.items) == 2
