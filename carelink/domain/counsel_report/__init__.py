"""Per-session counsel reports and their review lifecycle."""

from carelink.domain.counsel_report.entities import CounselReport, CounselReportStatusChanged
from carelink.domain.counsel_report.repositories import CounselReportRepository
from carelink.domain.counsel_report.value_objects import ReportStatus

__all__ = [
    "CounselReport",
    "CounselReportStatusChanged",
    "CounselReportRepository",
    "ReportStatus",
]
