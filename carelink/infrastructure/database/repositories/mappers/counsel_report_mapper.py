"""
Mapper for converting between CounselReport domain entities and SQL records.

The lifecycle status is stored as its string value and restored without
replaying transitions.
"""

from carelink.domain.counsel_report import CounselReport, ReportStatus
from carelink.infrastructure.database.models import CounselReportRecord
from carelink.infrastructure.database.repositories.mappers.common import as_utc


class CounselReportMapper:
    @staticmethod
    def domain_to_sql(report: CounselReport) -> CounselReportRecord:
        """
        Convert a domain report to its SQL record.

        Args:
            report: Domain report to convert

        Returns:
            SQL record carrying every column of the report
        """
        return CounselReportRecord(
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
            status=report.status.value,
            submitted_at=report.submitted_at,
            reviewed_at=report.reviewed_at,
            guardian_feedback=report.guardian_feedback,
            created_at=report.created_at,
            updated_at=report.updated_at,
        )

    @staticmethod
    def sql_to_domain(record: CounselReportRecord) -> CounselReport:
        return CounselReport.restore(
            id=record.id,
            counsel_request_id=record.counsel_request_id,
            child_id=record.child_id,
            counselor_id=record.counselor_id,
            institution_id=record.institution_id,
            session_number=record.session_number,
            report_date=record.report_date,
            center_name=record.center_name,
            counselor_signature=record.counselor_signature,
            counsel_reason=record.counsel_reason,
            counsel_content=record.counsel_content,
            center_feedback=record.center_feedback,
            home_feedback=record.home_feedback,
            attachment_urls=list(record.attachment_urls or []),
            status=ReportStatus(record.status),
            submitted_at=as_utc(record.submitted_at),
            reviewed_at=as_utc(record.reviewed_at),
            guardian_feedback=record.guardian_feedback,
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
        )
