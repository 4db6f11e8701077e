"""Care facility Data Transfer Objects."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from carelink.application.dtos.common import PaginatedResponse


class CreateCareFacilityCommand(BaseModel):
    """DTO for registering a care facility."""

    name: str | None = None
    address: str | None = None
    address_detail: str | None = None
    postal_code: str | None = None
    representative_name: str | None = None
    phone_number: str | None = Field(None, description="e.g. 02-1234-5678")
    capacity: int = Field(..., description="Number of children the facility can house")
    established_date: date
    introduction: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "사랑양육시설",
                "address": "서울특별시 강남구 테헤란로 123",
                "address_detail": "3층 301호",
                "postal_code": "06234",
                "representative_name": "김철수",
                "phone_number": "02-1234-5678",
                "capacity": 50,
                "established_date": "2015-03-15",
            }
        }
    )


class CareFacilityResponse(BaseModel):
    """DTO for care facility responses."""

    id: UUID
    name: str
    address: str
    address_detail: str | None = None
    postal_code: str | None = None
    full_address: str
    representative_name: str
    phone_number: str
    capacity: int
    established_date: date
    introduction: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


CareFacilityListResponse = PaginatedResponse[CareFacilityResponse]


class UpdateCareFacilityCommand(BaseModel):
    """DTO for editing a care facility. Omitted fields are left unchanged."""

    name: str | None = None
    address: str | None = None
    address_detail: str | None = None
    postal_code: str | None = None
    representative_name: str | None = None
    phone_number: str | None = None
    capacity: int | None = None
    introduction: str | None = None
    is_active: bool | None = None
