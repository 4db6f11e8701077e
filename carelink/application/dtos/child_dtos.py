"""Child Data Transfer Objects."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field


class RegisterChildCommand(BaseModel):
    """
    DTO for registering a child.

    Exactly one of ``guardian_id`` and ``institution_id`` must be given;
    the child type follows from which one.
    """

    name: str | None = None
    birth_date: date | None = None
    gender: str | None = Field(None, description="MALE, FEMALE or OTHER")
    guardian_id: UUID | None = Field(None, description="Parent guardian (REGULAR child)")
    institution_id: UUID | None = Field(
        None, description="Care facility (CARE_FACILITY child)"
    )
    medical_info: str | None = None
    special_needs: str | None = None


class ChildResponse(BaseModel):
    """DTO for child responses."""

    id: UUID
    child_type: str
    name: str
    birth_date: date
    gender: str
    age: int = Field(..., description="Age in completed years in the service timezone")
    guardian_id: UUID | None = None
    institution_id: UUID | None = None
    is_orphan: bool
    medical_info: str | None = None
    special_needs: str | None = None
    psychological_status: str
    created_at: datetime
    updated_at: datetime


class ChildSummaryResponse(ChildResponse):
    """Child with the number of counsel reports written about them."""

    counsel_report_count: int = 0
