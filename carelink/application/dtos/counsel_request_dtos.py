"""Counsel request Data Transfer Objects."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from carelink.domain.counsel_request import CareType, CounselRequestStatus, PriorityReason
from carelink.application.dtos.common import PaginatedResponse


class CreateCounselRequestCommand(BaseModel):
    """DTO for submitting a counsel request form."""

    child_id: UUID
    guardian_id: UUID
    center_name: str | None = None
    counselor_name: str | None = Field(None, description="Staff member filing the request")
    child_name: str | None = None
    care_type: CareType = CareType.GENERAL
    priority_reason: PriorityReason | None = Field(
        None, description="Required when care_type is PRIORITY"
    )
    request_date: date
    motivation: str | None = None
    goals: str | None = None


class MatchCounselRequestCommand(BaseModel):
    """DTO for matching a pending request with an institution and counselor."""

    institution_id: UUID
    counselor_id: UUID


class RejectCounselRequestCommand(BaseModel):
    reason: str | None = None


class CounselRequestResponse(BaseModel):
    """DTO for counsel request responses."""

    id: UUID
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
    status: CounselRequestStatus
    status_display_name: str
    matched_institution_id: UUID | None = None
    matched_counselor_id: UUID | None = None
    rejection_reason: str | None = None
    created_at: datetime
    updated_at: datetime


CounselRequestListResponse = PaginatedResponse[CounselRequestResponse]
