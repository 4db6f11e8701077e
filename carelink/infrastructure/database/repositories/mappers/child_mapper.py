from carelink.domain.child import (
    BirthDate,
    Child,
    ChildName,
    ChildType,
    Gender,
    PsychologicalStatus,
)
from carelink.infrastructure.database.models import ChildRecord
from carelink.infrastructure.database.repositories.mappers.common import as_utc


class ChildMapper:
    """Translate Child aggregates to and from ``children`` rows."""

    @staticmethod
    def domain_to_sql(child: Child) -> ChildRecord:
        return ChildRecord(
            id=child.id,
            child_type=child.child_type.value,
            name=child.name.value,
            birth_date=child.birth_date.value,
            gender=child.gender.value,
            guardian_id=child.guardian_id,
            institution_id=child.institution_id,
            medical_info=child.medical_info,
            special_needs=child.special_needs,
            psychological_status=child.psychological_status.value,
            created_at=child.created_at,
            updated_at=child.updated_at,
        )

    @staticmethod
    def sql_to_domain(record: ChildRecord) -> Child:
        return Child.restore(
            id=record.id,
            child_type=ChildType(record.child_type),
            name=ChildName.restore(record.name),
            birth_date=BirthDate.restore(record.birth_date),
            gender=Gender(record.gender),
            guardian_id=record.guardian_id,
            institution_id=record.institution_id,
            medical_info=record.medical_info,
            special_needs=record.special_needs,
            psychological_status=PsychologicalStatus(record.psychological_status),
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
        )
