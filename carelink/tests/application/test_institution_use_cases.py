"""Tests for care facility use cases."""

from datetime import date
from uuid import uuid4

import pytest

from carelink.application.dtos.institution_dtos import (
    CreateCareFacilityCommand,
    UpdateCareFacilityCommand,
)
from carelink.application.use_cases import (
    CreateCareFacilityUseCase,
    GetCareFacilityUseCase,
    ListCareFacilitiesUseCase,
    UpdateCareFacilityUseCase,
)
from carelink.domain.shared import ErrorType
from carelink.tests.factories import build_facility
from carelink.tests.fakes import RacingCareFacilityRepository


def facility_command(**overrides):
    fields = dict(
        name="  사랑양육시설 ",
        address="서울특별시 강남구 테헤란로 123",
        address_detail="3층 301호",
        postal_code="06234",
        representative_name="김철수",
        phone_number="02-1234-5678",
        capacity=50,
        established_date=date(2015, 3, 15),
    )
    fields.update(overrides)
    return CreateCareFacilityCommand(**fields)


@pytest.mark.asyncio
async def test_create_care_facility(facility_repository, seoul, fixed_clock):
    use_case = CreateCareFacilityUseCase(facility_repository, tz=seoul, clock=fixed_clock)

    result = await use_case.execute(facility_command())

    assert result.value.name == "사랑양육시설"
    assert result.value.full_address == "서울특별시 강남구 테헤란로 123 3층 301호"
    assert facility_repository.save_calls == 1


@pytest.mark.asyncio
async def test_established_date_checked_against_service_day(
    facility_repository, seoul, fixed_clock
):
    use_case = CreateCareFacilityUseCase(facility_repository, tz=seoul, clock=fixed_clock)

    today = await use_case.execute(facility_command(established_date=date(2024, 6, 15)))
    tomorrow = await use_case.execute(
        facility_command(name="내일양육시설", established_date=date(2024, 6, 16))
    )

    assert today.is_success
    assert tomorrow.error.field_name == "established_date"


@pytest.mark.asyncio
async def test_invalid_name(facility_repository):
    result = await CreateCareFacilityUseCase(facility_repository).execute(
        facility_command(name="가")
    )

    assert result.error.message == "기관명은 최소 2자 이상이어야 합니다"


@pytest.mark.asyncio
async def test_duplicate_name_is_rejected(facility_repository):
    await facility_repository.save(build_facility(name="사랑양육시설"))
    saves_before = facility_repository.save_calls

    result = await CreateCareFacilityUseCase(facility_repository).execute(
        facility_command()
    )

    assert result.error.error_type == ErrorType.CONFLICT
    assert result.error.code == "DUPLICATE_INSTITUTION_NAME"
    assert result.error.message == "이미 존재하는 기관명입니다: 사랑양육시설"
    assert facility_repository.save_calls == saves_before


@pytest.mark.asyncio
async def test_name_taken_between_check_and_save():
    racing = RacingCareFacilityRepository()
    await racing.save(build_facility(name="사랑양육시설"))

    result = await CreateCareFacilityUseCase(racing).execute(facility_command())

    assert result.error.code == "DUPLICATE_INSTITUTION_NAME"
    assert len(racing.items) == 1


@pytest.mark.asyncio
async def test_get_missing_facility(facility_repository):
    result = await GetCareFacilityUseCase(facility_repository).execute(uuid4())

    assert result.error.code == "INSTITUTION_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_facilities_by_name(facility_repository):
    for name in ("하늘양육시설", "가람양육시설"):
        await facility_repository.save(build_facility(name=name))

    result = await ListCareFacilitiesUseCase(facility_repository).execute(page=1, limit=10)

    assert [f.name for f in result.value.items] == ["가람양육시설", "하늘양육시설"]
    assert result.value.total_pages == 1


class TestUpdateCareFacility:
    @pytest.fixture
    async def facility(self, facility_repository):
        facility = build_facility()
        await facility_repository.save(facility)
        return facility

    @pytest.mark.asyncio
    async def test_partial_address_keeps_other_parts(self, facility_repository, facility):
        result = await UpdateCareFacilityUseCase(facility_repository).execute(
            facility.id, UpdateCareFacilityCommand(address_detail="5층")
        )

        assert result.value.full_address == "서울특별시 강남구 테헤란로 123 5층"
        assert result.value.postal_code == "06234"

    @pytest.mark.asyncio
    async def test_updates_profile_fields(self, facility_repository, facility):
        result = await UpdateCareFacilityUseCase(facility_repository).execute(
            facility.id,
            UpdateCareFacilityCommand(
                name="새싹양육시설",
                representative_name="박영희",
                capacity=80,
                introduction="  아이들의 두 번째 집  ",
                is_active=False,
            ),
        )

        updated = result.value
        assert updated.name == "새싹양육시설"
        assert updated.representative_name == "박영희"
        assert updated.phone_number == "02-1234-5678"
        assert updated.capacity == 80
        assert updated.introduction == "아이들의 두 번째 집"
        assert not updated.is_active

    @pytest.mark.asyncio
    async def test_name_taken_by_other_facility(self, facility_repository, facility):
        await facility_repository.save(build_facility(name="하늘양육시설"))
        saves_before = facility_repository.save_calls

        result = await UpdateCareFacilityUseCase(facility_repository).execute(
            facility.id, UpdateCareFacilityCommand(name="하늘양육시설")
        )

        assert result.error.error_type == ErrorType.CONFLICT
        assert result.error.message == "이미 존재하는 기관명입니다: 하늘양육시설"
        assert facility_repository.save_calls == saves_before

    @pytest.mark.asyncio
    async def test_empty_representative_name_is_not_ignored(
        self, facility_repository, facility
    ):
        result = await UpdateCareFacilityUseCase(facility_repository).execute(
            facility.id, UpdateCareFacilityCommand(representative_name="")
        )

        assert result.error.message == "대표자명은 필수입니다"
        assert result.error.field_name == "representative_name"
        assert facility_repository.items[facility.id].representative_name == "김철수"

    @pytest.mark.asyncio
    async def test_empty_phone_number_is_not_ignored(self, facility_repository, facility):
        result = await UpdateCareFacilityUseCase(facility_repository).execute(
            facility.id, UpdateCareFacilityCommand(phone_number="")
        )

        assert result.is_failure
        assert result.error.field_name == "phone_number"

    @pytest.mark.asyncio
    async def test_keeping_own_name_is_allowed(self, facility_repository, facility):
        result = await UpdateCareFacilityUseCase(facility_repository).execute(
            facility.id, UpdateCareFacilityCommand(name=facility.name.value, capacity=40)
        )

        assert result.value.capacity == 40

    @pytest.mark.asyncio
    async def test_invalid_capacity_leaves_stored_facility(self, facility_repository, facility):
        result = await UpdateCareFacilityUseCase(facility_repository).execute(
            facility.id, UpdateCareFacilityCommand(representative_name="박영희", capacity=900)
        )

        assert result.error.message == "정원은 최대 500명까지 가능합니다"
        assert facility_repository.items[facility.id].representative_name == "김철수"

    @pytest.mark.asyncio
    async def test_unknown_facility(self, facility_repository):
        result = await UpdateCareFacilityUseCase(facility_repository).execute(
            uuid4(), UpdateCareFacilityCommand(capacity=10)
        )

        assert result.error.code == "INSTITUTION_NOT_FOUND"
