"""Counsel report Data Transfer Objects."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from carelink.domain.counsel_report import ReportStatus
from carelink.application.dtos.common import PaginatedResponse


class CreateCounselReportCommand(BaseModel):
    """DTO for starting a counsel report for one session."""

    counsel_request_id: UUID
    child_id: UUID
    counselor_id: UUID
    institution_id: UUID
    session_number: int | None = Field(
        None, description="Session number; the next free number when omitted"
    )
    report_date: date
    center_name: str | None = None
    counselor_signature: str | None = Field(None, description="Signature image URL")
    counsel_reason: str | None = None
    counsel_content: str | None = None
    center_feedback: str | None = None
    home_feedback: str | None = None
    attachment_urls: list[str] = Field(default_factory=list)


class UpdateCounselReportCommand(BaseModel):
    """DTO for editing a draft report. Omitted fields are left unchanged."""

    counsel_reason: str | None = None
    counsel_content: str | None = None
    center_feedback: str | None = None
    home_feedback: str | None = None
    counselor_signature: str | None = None
    attachment_urls: list[str] | None = None


class ApproveCounselReportCommand(BaseModel):
    """DTO for a guardian's approval."""

    guardian_feedback: str | None = Field(None, description="Feedback for the counselor")


class CounselReportResponse(BaseModel):
    """DTO for counsel report responses."""

    id: UUID
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
    status: ReportStatus
    submitted_at: datetime | None = None
    reviewed_at: datetime | None = None
    guardian_feedback: str | None = None
    created_at: datetime
    updated_at: datetime


CounselReportListResponse = PaginatedResponse[CounselReportResponse]
