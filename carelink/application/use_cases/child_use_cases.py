"""Child registration and lookup use cases."""

import asyncio
from collections.abc import Callable
from datetime import datetime, tzinfo
from uuid import UUID

from carelink.core.config import settings
from carelink.domain.child import (
    BirthDate,
    Child,
    ChildName,
    ChildRepository,
    ChildType,
    Gender,
)
from carelink.domain.counsel_report import CounselReportRepository
from carelink.domain.institution import CareFacilityRepository
from carelink.domain.shared import DomainError, NotFoundError, Result, ValidationError, utc_now
from carelink.domain.user import UserRepository
from carelink.application.dtos.child_dtos import ChildResponse, ChildSummaryResponse, RegisterChildCommand
from carelink.application.use_cases.base import UseCase


def to_child_response(child: Child, tz: tzinfo, now: datetime | None = None) -> ChildResponse:
    return ChildResponse(**_child_fields(child, tz, now))


def _child_fields(child: Child, tz: tzinfo, now: datetime | None) -> dict:
    return {
        "id": child.id,
        "child_type": child.child_type.value,
        "name": child.name.value,
        "birth_date": child.birth_date.value,
        "gender": child.gender.value,
        "age": child.age(tz, now),
        "guardian_id": child.guardian_id,
        "institution_id": child.institution_id,
        "is_orphan": child.is_orphan,
        "medical_info": child.medical_info,
        "special_needs": child.special_needs,
        "psychological_status": child.psychological_status.value,
        "created_at": child.created_at,
        "updated_at": child.updated_at,
    }


def _check_parentage(command: RegisterChildCommand) -> Result[ChildType, ValidationError]:
    if command.guardian_id and command.institution_id:
        return Result.fail(
            ValidationError("보호자와 양육시설 ID는 동시에 제공할 수 없습니다", "guardian_id")
        )
    if command.guardian_id:
        return Result.ok(ChildType.REGULAR)
    if command.institution_id:
        return Result.ok(ChildType.CARE_FACILITY)
    return Result.fail(
        ValidationError("보호자 또는 양육시설 ID 중 하나는 필수입니다", "guardian_id")
    )


class RegisterChildUseCase(UseCase):
    """
    Register a child under exactly one of a guardian or a care facility.

    The child type follows from which parent is given: a guardian makes a
    REGULAR child, a care facility a CARE_FACILITY child.
    """

    def __init__(
        self,
        child_repository: ChildRepository,
        user_repository: UserRepository,
        facility_repository: CareFacilityRepository,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the use case.

        Args:
            child_repository: Child persistence
            user_repository: Used to check the guardian exists
            facility_repository: Used to check the care facility exists
            tz: Reference zone for birth-date checks and ages; defaults to
                the configured service timezone
            clock: Source of the current instant
        """
        super().__init__()
        self._children = child_repository
        self._users = user_repository
        self._facilities = facility_repository
        self._tz = tz or settings.service_timezone
        self._clock = clock

    async def execute(
        self, command: RegisterChildCommand
    ) -> Result[ChildResponse, DomainError]:
        parentage = _check_parentage(command)
        if parentage.is_failure:
            return self.reject(parentage.error)
        child_type = parentage.value

        if command.guardian_id and not await self._users.exists(command.guardian_id):
            return self.reject(
                NotFoundError(
                    f"보호자를 찾을 수 없습니다: {command.guardian_id}",
                    code="GUARDIAN_NOT_FOUND",
                )
            )
        if command.institution_id and not await self._facilities.exists(
            command.institution_id
        ):
            return self.reject(
                NotFoundError(
                    f"양육시설을 찾을 수 없습니다: {command.institution_id}",
                    code="INSTITUTION_NOT_FOUND",
                )
            )

        now = self._clock()
        name = ChildName.create(command.name)
        birth_date = BirthDate.create(command.birth_date, tz=self._tz, now=now)
        gender = Gender.parse(command.gender)
        checked = Result.combine([name, birth_date, gender])
        if checked.is_failure:
            return self.reject(checked.error)

        created = Child.create(
            child_type=child_type,
            name=name.value,
            birth_date=birth_date.value,
            gender=gender.value,
            guardian_id=command.guardian_id,
            institution_id=command.institution_id,
            medical_info=command.medical_info,
            special_needs=command.special_needs,
        )
        if created.is_failure:
            return self.reject(created.error)

        child = await self._children.save(created.value)
        return self.succeed(
            to_child_response(child, self._tz, now),
            child_id=str(child.id),
            child_type=child_type.value,
        )


class GetChildrenByGuardianUseCase(UseCase):
    """List a guardian's children with the number of counsel reports for each."""

    def __init__(
        self,
        child_repository: ChildRepository,
        report_repository: CounselReportRepository,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__()
        self._children = child_repository
        self._reports = report_repository
        self._tz = tz or settings.service_timezone
        self._clock = clock

    async def execute(
        self, guardian_id: UUID
    ) -> Result[list[ChildSummaryResponse], DomainError]:
        children = await self._children.find_by_guardian_id(guardian_id)
        counts = await asyncio.gather(
            *(self._reports.count_by_child_id(child.id) for child in children)
        )

        now = self._clock()
        summaries = [
            ChildSummaryResponse(
                **_child_fields(child, self._tz, now), counsel_report_count=count
            )
            for child, count in zip(children, counts)
        ]
        return self.succeed(
            summaries, guardian_id=str(guardian_id), count=len(summaries)
        )
