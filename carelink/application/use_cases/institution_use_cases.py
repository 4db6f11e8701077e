"""Care facility use cases."""

from collections.abc import Callable
from datetime import datetime, tzinfo
from uuid import UUID

from carelink.core.config import settings
from carelink.domain.institution import (
    Address,
    CareFacility,
    CareFacilityRepository,
    InstitutionName,
)
from carelink.domain.shared import (
    ConflictError,
    DomainError,
    NotFoundError,
    Result,
    today_in,
    utc_now,
)
from carelink.application.dtos.institution_dtos import (
    CareFacilityListResponse,
    CareFacilityResponse,
    CreateCareFacilityCommand,
    UpdateCareFacilityCommand,
)
from carelink.application.use_cases.base import UseCase, check_paging


def to_care_facility_response(facility: CareFacility) -> CareFacilityResponse:
    return CareFacilityResponse(
        id=facility.id,
        name=facility.name.value,
        address=facility.address.address,
        address_detail=facility.address.address_detail,
        postal_code=facility.address.postal_code,
        full_address=facility.address.full_address,
        representative_name=facility.representative_name,
        phone_number=facility.phone_number,
        capacity=facility.capacity,
        established_date=facility.established_date,
        introduction=facility.introduction,
        is_active=facility.is_active,
        created_at=facility.created_at,
        updated_at=facility.updated_at,
    )


def _duplicate_name(name: str) -> ConflictError:
    return ConflictError(
        f"이미 존재하는 기관명입니다: {name}", code="DUPLICATE_INSTITUTION_NAME"
    )


class CreateCareFacilityUseCase(UseCase):
    """
    Register a care facility.

    Facility names are unique. The name is checked before saving, and a
    concurrent registration that wins the race surfaces from the unique
    constraint as the same conflict.
    """

    def __init__(
        self,
        facility_repository: CareFacilityRepository,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__()
        self._facilities = facility_repository
        self._tz = tz or settings.service_timezone
        self._clock = clock

    async def execute(
        self, command: CreateCareFacilityCommand
    ) -> Result[CareFacilityResponse, DomainError]:
        name = InstitutionName.create(command.name)
        address = Address.create(
            command.address, command.address_detail, command.postal_code
        )
        checked = Result.combine([name, address])
        if checked.is_failure:
            return self.reject(checked.error)
        if await self._facilities.find_by_name(name.value.value) is not None:
            return self.reject(_duplicate_name(name.value.value))

        created = CareFacility.create(
            name=name.value,
            address=address.value,
            representative_name=command.representative_name,
            phone_number=command.phone_number,
            capacity=command.capacity,
            established_date=command.established_date,
            introduction=command.introduction,
            today=today_in(self._tz, self._clock()),
        )
        if created.is_failure:
            return self.reject(created.error)

        try:
            facility = await self._facilities.save(created.value)
        except ConflictError:
            return self.reject(_duplicate_name(name.value.value))
        return self.succeed(
            to_care_facility_response(facility), facility_id=str(facility.id)
        )


class GetCareFacilityUseCase(UseCase):
    def __init__(self, facility_repository: CareFacilityRepository):
        super().__init__()
        self._facilities = facility_repository

    async def execute(self, facility_id: UUID) -> Result[CareFacilityResponse, DomainError]:
        facility = await self._facilities.find_by_id(facility_id)
        if facility is None:
            return self.reject(
                NotFoundError("양육시설을 찾을 수 없습니다", code="INSTITUTION_NOT_FOUND"),
                facility_id=str(facility_id),
            )
        return self.succeed(
            to_care_facility_response(facility), facility_id=str(facility_id)
        )


class ListCareFacilitiesUseCase(UseCase):
    def __init__(self, facility_repository: CareFacilityRepository):
        super().__init__()
        self._facilities = facility_repository

    async def execute(
        self, page: int = 1, limit: int = 10
    ) -> Result[CareFacilityListResponse, DomainError]:
        paging = check_paging(page, limit)
        if paging.is_failure:
            return self.reject(paging.error)

        facilities, total = await self._facilities.find_all(page=page, limit=limit)
        return self.succeed(
            CareFacilityListResponse.build(
                [to_care_facility_response(f) for f in facilities],
                total=total,
                page=page,
                limit=limit,
            ),
            total=total,
        )


class UpdateCareFacilityUseCase(UseCase):
    """
    Edit a care facility's profile.

    Only the fields present in the command change. Address parts that are
    omitted keep their current values, and a new name must not belong to
    another facility.
    """

    def __init__(self, facility_repository: CareFacilityRepository):
        super().__init__()
        self._facilities = facility_repository

    async def execute(
        self, facility_id: UUID, command: UpdateCareFacilityCommand
    ) -> Result[CareFacilityResponse, DomainError]:
        facility = await self._facilities.find_by_id(facility_id)
        if facility is None:
            return self.reject(
                NotFoundError("양육시설을 찾을 수 없습니다", code="INSTITUTION_NOT_FOUND"),
                facility_id=str(facility_id),
            )

        if command.name is not None:
            name = InstitutionName.create(command.name)
            if name.is_failure:
                return self.reject(name.error, facility_id=str(facility_id))
            same_name = await self._facilities.find_by_name(name.value.value)
            if same_name is not None and same_name.id != facility_id:
                return self.reject(
                    _duplicate_name(name.value.value), facility_id=str(facility_id)
                )
            facility.update_name(name.value)

        if any(
            part is not None
            for part in (command.address, command.address_detail, command.postal_code)
        ):
            current = facility.address
            address = Address.create(
                command.address if command.address is not None else current.address,
                command.address_detail
                if command.address_detail is not None
                else current.address_detail,
                command.postal_code
                if command.postal_code is not None
                else current.postal_code,
            )
            if address.is_failure:
                return self.reject(address.error, facility_id=str(facility_id))
            facility.update_address(address.value)

        changes = []
        if command.representative_name is not None or command.phone_number is not None:
            changes.append(
                facility.update_representative(
                    command.representative_name
                    if command.representative_name is not None
                    else facility.representative_name,
                    command.phone_number
                    if command.phone_number is not None
                    else facility.phone_number,
                )
            )
        if command.capacity is not None:
            changes.append(facility.update_capacity(command.capacity))
        if command.introduction is not None:
            changes.append(facility.update_introduction(command.introduction))
        applied = Result.combine(changes)
        if applied.is_failure:
            return self.reject(applied.error, facility_id=str(facility_id))

        if command.is_active is True:
            facility.activate()
        elif command.is_active is False:
            facility.deactivate()

        try:
            saved = await self._facilities.save(facility)
        except ConflictError:
            return self.reject(
                _duplicate_name(facility.name.value), facility_id=str(facility_id)
            )
        return self.succeed(to_care_facility_response(saved), facility_id=str(facility_id))
