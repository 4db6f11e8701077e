"""Tests for the CounselReport aggregate and its status lattice."""

from datetime import date
from uuid import uuid4

import pytest

from carelink.domain.counsel_report import (
    CounselReport,
    CounselReportStatusChanged,
    ReportStatus,
)
from carelink.domain.shared import BusinessRuleError, ValidationError
from carelink.tests.factories import build_report

ALL_STATUSES = list(ReportStatus)


class TestReportStatus:
    @pytest.mark.parametrize(
        "source,target,allowed",
        [
            (ReportStatus.DRAFT, ReportStatus.SUBMITTED, True),
            (ReportStatus.DRAFT, ReportStatus.REVIEWED, False),
            (ReportStatus.DRAFT, ReportStatus.APPROVED, False),
            (ReportStatus.SUBMITTED, ReportStatus.REVIEWED, True),
            (ReportStatus.SUBMITTED, ReportStatus.DRAFT, True),
            (ReportStatus.SUBMITTED, ReportStatus.APPROVED, False),
            (ReportStatus.REVIEWED, ReportStatus.APPROVED, True),
            (ReportStatus.REVIEWED, ReportStatus.DRAFT, False),
        ],
    )
    def test_transition_table(self, source, target, allowed):
        assert source.can_transition_to(target) is allowed

    @pytest.mark.parametrize("target", ALL_STATUSES)
    def test_approved_is_terminal(self, target):
        assert ReportStatus.APPROVED.is_terminal
        assert not ReportStatus.APPROVED.can_transition_to(target)

    def test_visibility_and_editability(self):
        assert ReportStatus.DRAFT.is_counselor_editable
        assert not ReportStatus.DRAFT.is_guardian_viewable
        for status in ALL_STATUSES[1:]:
            assert status.is_guardian_viewable
            assert not status.is_counselor_editable


class TestCounselReportCreation:
    def _create(self, **overrides):
        fields = dict(
            counsel_request_id=uuid4(),
            child_id=uuid4(),
            counselor_id=uuid4(),
            institution_id=uuid4(),
            session_number=1,
            report_date=date(2024, 3, 1),
            center_name="  마음숲 상담센터 ",
            counsel_reason="등교 거부",
            counsel_content="상담 진행",
        )
        fields.update(overrides)
        return CounselReport.create(**fields)

    def test_new_report_is_draft(self):
        report = self._create().value

        assert report.status == ReportStatus.DRAFT
        assert report.center_name == "마음숲 상담센터"
        assert report.attachment_urls == []

    def test_session_number_must_be_positive(self):
        error = self._create(session_number=0).error

        assert error.code == "INVALID_SESSION_NUMBER"
        assert error.message == "회차는 1 이상이어야 합니다."

    def test_missing_identifiers(self):
        assert self._create(child_id=None).error.code == "MISSING_REQUIRED_FIELDS"

    def test_missing_content(self):
        assert self._create(counsel_content="  ").error.code == "MISSING_COUNSEL_CONTENT"

    def test_missing_center_name(self):
        assert self._create(center_name="").error.code == "MISSING_CENTER_NAME"


class TestCounselReportLifecycle:
    def test_full_lifecycle(self):
        report = build_report()
        assert report.can_edit()
        assert not report.is_visible_to_guardian()

        assert report.submit().is_success
        assert report.submitted_at is not None
        assert not report.can_edit()
        assert report.is_visible_to_guardian()
        assert report.mark_as_reviewed().is_success
        assert report.reviewed_at is not None
        assert report.approve_with_feedback("  많은 도움이 되었습니다 ").is_success

        assert report.status == ReportStatus.APPROVED
        assert report.guardian_feedback == "많은 도움이 되었습니다"
        changes = [
            e.new_status
            for e in report.get_domain_events()
            if isinstance(e, CounselReportStatusChanged)
        ]
        assert changes == [
            ReportStatus.SUBMITTED,
            ReportStatus.REVIEWED,
            ReportStatus.APPROVED,
        ]

    def test_status_cannot_be_assigned_directly(self):
        report = build_report()

        with pytest.raises(AttributeError):
            report.status = ReportStatus.APPROVED

    def test_refused_transition_leaves_report_unchanged(self):
        report = build_report()

        result = report.set_status(ReportStatus.APPROVED)

        assert isinstance(result.error, BusinessRuleError)
        assert result.error.code == "INVALID_STATUS_TRANSITION"
        assert report.status == ReportStatus.DRAFT
        assert report.get_domain_events() == []

    def test_review_requires_submission(self):
        result = build_report().mark_as_reviewed()

        assert result.error.message == "제출된 상태에서만 확인 처리할 수 있습니다."

    def test_approval_requires_feedback(self):
        report = build_report(status=ReportStatus.REVIEWED)

        result = report.approve_with_feedback("   ")

        assert isinstance(result.error, ValidationError)
        assert result.error.code == "INVALID_FEEDBACK"
        assert report.status == ReportStatus.REVIEWED

    def test_reject_returns_submitted_report_to_draft(self):
        report = build_report(status=ReportStatus.SUBMITTED)

        assert report.reject().is_success
        assert report.status == ReportStatus.DRAFT
        assert report.submitted_at is None

    def test_reject_requires_submitted(self):
        report = build_report(status=ReportStatus.REVIEWED)

        assert report.reject().error.message == "제출된 상태에서만 반려할 수 있습니다."


class TestCounselReportUpdate:
    def test_update_keeps_omitted_fields(self):
        report = build_report()

        result = report.update(counsel_content="새 내용", attachment_urls=["a.png"])

        assert result.is_success
        assert report.counsel_content == "새 내용"
        assert report.counsel_reason == "또래 관계 어려움"
        assert report.attachment_urls == ["a.png"]

    def test_update_after_submission_fails(self):
        report = build_report(status=ReportStatus.SUBMITTED)

        result = report.update(counsel_content="변경")

        assert result.error.code == "CANNOT_UPDATE_SUBMITTED_REPORT"
        assert report.counsel_content != "변경"

    def test_blank_reason_is_rejected(self):
        result = build_report().update(counsel_reason="   ")

        assert result.error.code == "INVALID_COUNSEL_REASON"
