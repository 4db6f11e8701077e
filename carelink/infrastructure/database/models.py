"""
SQLModel database models for the care platform.

These models provide the ORM mapping between domain aggregates and the SQL
schema. Uniqueness rules that must hold under concurrent writes (one review
per user and institution, one report per request session, one account per
e-mail) are declared here as named constraints.
"""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, CheckConstraint, DateTime, UniqueConstraint
from sqlmodel import Column, Field, SQLModel, Text

from carelink.domain.shared.base import utc_now

REVIEW_UNIQUE_CONSTRAINT = "uq_reviews_user_institution"
COUNSEL_REPORT_UNIQUE_CONSTRAINT = "uq_counsel_reports_request_session"
USER_EMAIL_UNIQUE_CONSTRAINT = "uq_users_email"
CARE_FACILITY_NAME_UNIQUE_CONSTRAINT = "uq_care_facilities_name"


def _timestamp_column(nullable: bool = False) -> Column:
    return Column(DateTime(timezone=True), nullable=nullable)


class ReviewRecord(SQLModel, table=True):
    __tablename__ = "reviews"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    institution_id: UUID = Field(index=True)
    user_id: UUID = Field(index=True)
    rating: int
    content: str = Field(sa_column=Column(Text, nullable=False))
    helpful_count: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())

    __table_args__ = (
        UniqueConstraint("user_id", "institution_id", name=REVIEW_UNIQUE_CONSTRAINT),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating_range"),
        CheckConstraint("helpful_count >= 0", name="ck_reviews_helpful_count"),
    )


class CounselRequestRecord(SQLModel, table=True):
    __tablename__ = "counsel_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    child_id: UUID = Field(index=True)
    guardian_id: UUID = Field(index=True)
    center_name: str = Field(max_length=100)
    counselor_name: str = Field(max_length=50)
    child_name: str = Field(max_length=30)
    care_type: str = Field(max_length=20)
    priority_reason: str | None = Field(default=None, max_length=30)
    request_date: date
    motivation: str | None = Field(default=None, sa_column=Column(Text))
    goals: str | None = Field(default=None, sa_column=Column(Text))
    status: str = Field(max_length=20, index=True)
    matched_institution_id: UUID | None = Field(default=None, index=True)
    matched_counselor_id: UUID | None = Field(default=None, index=True)
    rejection_reason: str | None = Field(default=None, sa_column=Column(Text))
    created_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())


class CounselReportRecord(SQLModel, table=True):
    __tablename__ = "counsel_reports"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    counsel_request_id: UUID = Field(index=True)
    child_id: UUID = Field(index=True)
    counselor_id: UUID = Field(index=True)
    institution_id: UUID = Field(index=True)
    session_number: int
    report_date: date
    center_name: str = Field(max_length=100)
    counselor_signature: str | None = Field(default=None, max_length=500)
    counsel_reason: str = Field(sa_column=Column(Text, nullable=False))
    counsel_content: str = Field(sa_column=Column(Text, nullable=False))
    center_feedback: str | None = Field(default=None, sa_column=Column(Text))
    home_feedback: str | None = Field(default=None, sa_column=Column(Text))
    attachment_urls: list[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    status: str = Field(max_length=20, index=True)
    submitted_at: datetime | None = Field(
        default=None, sa_column=_timestamp_column(nullable=True)
    )
    reviewed_at: datetime | None = Field(
        default=None, sa_column=_timestamp_column(nullable=True)
    )
    guardian_feedback: str | None = Field(default=None, sa_column=Column(Text))
    created_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())

    __table_args__ = (
        UniqueConstraint(
            "counsel_request_id",
            "session_number",
            name=COUNSEL_REPORT_UNIQUE_CONSTRAINT,
        ),
        CheckConstraint("session_number >= 1", name="ck_counsel_reports_session"),
    )


class ChildRecord(SQLModel, table=True):
    __tablename__ = "children"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    child_type: str = Field(max_length=20)
    name: str = Field(max_length=30)
    birth_date: date
    gender: str = Field(max_length=10)
    guardian_id: UUID | None = Field(default=None, index=True)
    institution_id: UUID | None = Field(default=None, index=True)
    medical_info: str | None = Field(default=None, sa_column=Column(Text))
    special_needs: str | None = Field(default=None, sa_column=Column(Text))
    psychological_status: str = Field(default="NORMAL", max_length=20)
    created_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())

    __table_args__ = (
        # Exactly one of guardian_id / institution_id is set.
        CheckConstraint(
            "(guardian_id IS NULL) <> (institution_id IS NULL)",
            name="ck_children_single_parent",
        ),
    )


class UserRecord(SQLModel, table=True):
    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=100)
    password_hash: str = Field(max_length=255)
    real_name: str = Field(max_length=50)
    phone_number: str = Field(max_length=13)
    role: str = Field(max_length=20)
    is_email_verified: bool = Field(default=False)
    is_active: bool = Field(default=True)
    last_login_at: datetime | None = Field(
        default=None, sa_column=_timestamp_column(nullable=True)
    )
    refresh_token: str | None = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())

    __table_args__ = (UniqueConstraint("email", name=USER_EMAIL_UNIQUE_CONSTRAINT),)


class CareFacilityRecord(SQLModel, table=True):
    __tablename__ = "care_facilities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100, index=True)
    address: str = Field(max_length=200)
    address_detail: str | None = Field(default=None, max_length=100)
    postal_code: str | None = Field(default=None, max_length=5)
    representative_name: str = Field(max_length=50)
    phone_number: str = Field(max_length=20)
    capacity: int
    established_date: date
    introduction: str | None = Field(default=None, sa_column=Column(Text))
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())
    updated_at: datetime = Field(default_factory=utc_now, sa_column=_timestamp_column())

    __table_args__ = (
        CheckConstraint("capacity BETWEEN 1 AND 500", name="ck_care_facilities_capacity"),
        UniqueConstraint("name", name=CARE_FACILITY_NAME_UNIQUE_CONSTRAINT),
    )
