"""Child aggregate root."""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from uuid import UUID

from carelink.domain.shared.base import AggregateRoot, DomainEvent
from carelink.domain.shared.exceptions import BusinessRuleError, DomainError, ValidationError
from carelink.domain.shared.result import Result
from carelink.domain.child.value_objects import BirthDate, ChildName, ChildType, Gender, PsychologicalStatus


class ChildRegistered(DomainEvent):
    """Event raised when a child is registered."""

    child_type: ChildType
    guardian_id: UUID | None = None
    institution_id: UUID | None = None


class ChildAdopted(DomainEvent):
    """Event raised when a care-facility child is adopted by a guardian."""

    former_institution_id: UUID
    guardian_id: UUID


class PsychologicalStatusChanged(DomainEvent):
    """Event raised when a child's detected risk level changes."""

    old_status: PsychologicalStatus
    new_status: PsychologicalStatus
    is_escalation: bool


@dataclass(frozen=True)
class StatusChange:
    """Direction of a psychological status update."""

    is_escalation: bool
    is_deescalation: bool


class Child(AggregateRoot):
    """
    A child registered with the service.

    Parentage is exclusive: a CARE_FACILITY child belongs to an institution
    and has no guardian, a REGULAR child has a guardian and no institution.
    Adoption is the only way to move from the first to the second.
    """

    child_type: ChildType
    name: ChildName
    birth_date: BirthDate
    gender: Gender
    guardian_id: UUID | None = None
    institution_id: UUID | None = None
    medical_info: str | None = None
    special_needs: str | None = None
    psychological_status: PsychologicalStatus = PsychologicalStatus.NORMAL

    @staticmethod
    def create(
        child_type: ChildType,
        name: ChildName,
        birth_date: BirthDate,
        gender: Gender,
        guardian_id: UUID | None = None,
        institution_id: UUID | None = None,
        medical_info: str | None = None,
        special_needs: str | None = None,
        psychological_status: PsychologicalStatus = PsychologicalStatus.NORMAL,
    ) -> Result["Child", ValidationError]:
        """
        Register a new child.

        Returns:
            Result holding the child, or a failure when the parentage fields
            do not match ``child_type``
        """
        parentage = _check_parentage(child_type, guardian_id, institution_id)
        if parentage.is_failure:
            return Result.fail(parentage.error)

        child = Child(
            child_type=child_type,
            name=name,
            birth_date=birth_date,
            gender=gender,
            guardian_id=guardian_id,
            institution_id=institution_id,
            medical_info=medical_info,
            special_needs=special_needs,
            psychological_status=psychological_status,
        )
        child.add_domain_event(
            ChildRegistered(
                aggregate_id=child.id,
                child_type=child_type,
                guardian_id=guardian_id,
                institution_id=institution_id,
            )
        )
        return Result.ok(child)

    @staticmethod
    def restore(
        id: UUID,
        child_type: ChildType,
        name: ChildName,
        birth_date: BirthDate,
        gender: Gender,
        guardian_id: UUID | None,
        institution_id: UUID | None,
        medical_info: str | None,
        special_needs: str | None,
        psychological_status: PsychologicalStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Child":
        return Child(
            id=id,
            child_type=child_type,
            name=name,
            birth_date=birth_date,
            gender=gender,
            guardian_id=guardian_id,
            institution_id=institution_id,
            medical_info=medical_info,
            special_needs=special_needs,
            psychological_status=psychological_status,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def is_orphan(self) -> bool:
        return self.child_type.is_orphan

    def age(self, tz: tzinfo, now: datetime | None = None) -> int:
        """Age in completed years, using the calendar date in ``tz``."""
        return self.birth_date.age_in(tz, now)

    def change_guardian(self, new_guardian_id: UUID | None) -> Result[None, DomainError]:
        if not new_guardian_id:
            return Result.fail(
                ValidationError("새로운 보호자 ID는 필수입니다", "guardian_id")
            )
        if self.child_type == ChildType.CARE_FACILITY:
            return Result.fail(
                BusinessRuleError(
                    "양육시설 아동은 보호자를 변경할 수 없습니다. 입양 절차를 이용해주세요."
                )
            )

        self.guardian_id = new_guardian_id
        self.mark_updated()
        return Result.ok()

    def process_adoption(self, guardian_id: UUID | None) -> Result[None, DomainError]:
        """
        Turn a CARE_FACILITY child into a REGULAR child of ``guardian_id``.

        The institution link is dropped; identity and history are kept.
        """
        if not guardian_id:
            return Result.fail(ValidationError("입양 부모 ID는 필수입니다", "guardian_id"))
        if self.child_type != ChildType.CARE_FACILITY:
            return Result.fail(BusinessRuleError("양육시설 아동만 입양 처리가 가능합니다"))

        former_institution_id = self.institution_id
        self.institution_id = None
        self.guardian_id = guardian_id
        self.child_type = ChildType.REGULAR
        self.mark_updated()
        self.add_domain_event(
            ChildAdopted(
                aggregate_id=self.id,
                former_institution_id=former_institution_id,
                guardian_id=guardian_id,
            )
        )
        return Result.ok()

    def update_psychological_status(
        self, new_status: PsychologicalStatus | None
    ) -> Result[StatusChange, ValidationError]:
        """
        Record a newly detected risk level.

        Returns:
            Result holding whether the change escalated or de-escalated;
            both flags are False when the status is unchanged
        """
        if new_status is None:
            return Result.fail(
                ValidationError("새로운 심리 상태는 필수입니다", "psychological_status")
            )

        previous = self.psychological_status
        if previous == new_status:
            return Result.ok(StatusChange(is_escalation=False, is_deescalation=False))

        change = StatusChange(
            is_escalation=previous.is_escalation_to(new_status),
            is_deescalation=previous.is_deescalation_to(new_status),
        )
        self.psychological_status = new_status
        self.mark_updated()
        self.add_domain_event(
            PsychologicalStatusChanged(
                aggregate_id=self.id,
                old_status=previous,
                new_status=new_status,
                is_escalation=change.is_escalation,
            )
        )
        return Result.ok(change)

    def is_at_risk_or_higher(self) -> bool:
        return self.psychological_status.is_at_risk_or_higher

    def is_high_risk(self) -> bool:
        return self.psychological_status.is_high_risk


def _check_parentage(
    child_type: ChildType, guardian_id: UUID | None, institution_id: UUID | None
) -> Result[None, ValidationError]:
    if child_type == ChildType.CARE_FACILITY:
        if not institution_id:
            return Result.fail(
                ValidationError("양육시설 아동은 양육시설 ID가 필수입니다", "institution_id")
            )
        if guardian_id:
            return Result.fail(
                ValidationError(
                    "양육시설 아동(고아)은 부모 보호자와 연결될 수 없습니다", "guardian_id"
                )
            )
    else:
        if institution_id:
            return Result.fail(
                ValidationError("일반 아동은 양육시설과 연결될 수 없습니다", "institution_id")
            )
        if not guardian_id:
            return Result.fail(
                ValidationError("일반 아동은 부모 보호자 ID가 필수입니다", "guardian_id")
            )
    return Result.ok()
