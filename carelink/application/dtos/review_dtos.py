"""
Review-related Data Transfer Objects.

Commands carry raw input; rating and content rules are enforced by the
domain value objects, so fields here accept raw values.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from carelink.application.dtos.common import PaginatedResponse


class CreateReviewCommand(BaseModel):
    """DTO for writing a review of an institution."""

    institution_id: UUID = Field(..., description="Reviewed institution")
    user_id: UUID = Field(..., description="Author of the review")
    rating: int | float | None = Field(None, description="Star rating, 1 to 5")
    content: str | None = Field(None, description="Review text, 10 to 1000 characters")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "institution_id": "7d3c1a52-3f2e-4b7c-9a3e-2b9f4a1c8e10",
                "user_id": "b8e2f0a4-5c6d-4e7f-8a9b-0c1d2e3f4a5b",
                "rating": 5,
                "content": "선생님들이 아이를 정말 세심하게 돌봐주십니다.",
            }
        }
    )


class UpdateReviewCommand(BaseModel):
    """DTO for editing a review. Omitted fields are left unchanged."""

    rating: int | float | None = None
    content: str | None = None


class ReviewResponse(BaseModel):
    """DTO for review responses."""

    id: UUID
    institution_id: UUID
    institution_name: str = ""
    user_id: UUID
    rating: int
    content: str
    helpful_count: int
    created_at: datetime
    updated_at: datetime


ReviewListResponse = PaginatedResponse[ReviewResponse]
