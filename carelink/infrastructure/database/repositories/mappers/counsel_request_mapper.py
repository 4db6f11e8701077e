"""Mapper between CounselRequest aggregates and ``counsel_requests`` rows."""

from carelink.domain.counsel_request import (
    CareType,
    CounselRequest,
    CounselRequestStatus,
    PriorityReason,
)
from carelink.infrastructure.database.models import CounselRequestRecord
from carelink.infrastructure.database.repositories.mappers.common import as_utc


class CounselRequestMapper:
    @staticmethod
    def domain_to_sql(request: CounselRequest) -> CounselRequestRecord:
        return CounselRequestRecord(
            id=request.id,
            child_id=request.child_id,
            guardian_id=request.guardian_id,
            center_name=request.center_name,
            counselor_name=request.counselor_name,
            child_name=request.child_name,
            care_type=request.care_type.value,
            priority_reason=request.priority_reason.value if request.priority_reason else None,
            request_date=request.request_date,
            motivation=request.motivation,
            goals=request.goals,
            status=request.status.value,
            matched_institution_id=request.matched_institution_id,
            matched_counselor_id=request.matched_counselor_id,
            rejection_reason=request.rejection_reason,
            created_at=request.created_at,
            updated_at=request.updated_at,
        )

    @staticmethod
    def sql_to_domain(record: CounselRequestRecord) -> CounselRequest:
        return CounselRequest.restore(
            id=record.id,
            child_id=record.child_id,
            guardian_id=record.guardian_id,
            center_name=record.center_name,
            counselor_name=record.counselor_name,
            child_name=record.child_name,
            care_type=CareType(record.care_type),
            priority_reason=PriorityReason(record.priority_reason)
            if record.priority_reason
            else None,
            request_date=record.request_date,
            motivation=record.motivation,
            goals=record.goals,
            status=CounselRequestStatus(record.status),
            matched_institution_id=record.matched_institution_id,
            matched_counselor_id=record.matched_counselor_id,
            rejection_reason=record.rejection_reason,
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
        )
