"""Tests for the Child aggregate and its value objects."""

from datetime import date, datetime, timezone
from uuid import uuid4
from zoneinfo import ZoneInfo

import pytest

from carelink.domain.child import (
    BirthDate,
    Child,
    ChildAdopted,
    ChildName,
    ChildType,
    Gender,
    PsychologicalStatus,
)
from carelink.domain.shared import BusinessRuleError, ValidationError
from carelink.tests.factories import build_child

SEOUL = ZoneInfo("Asia/Seoul")


class TestBirthDate:
    def test_future_date_in_reference_zone_is_rejected(self):
        # 2024-06-14 23:30 UTC is already 2024-06-15 in Seoul
        now = datetime(2024, 6, 14, 23, 30, tzinfo=timezone.utc)

        in_seoul = BirthDate.create(date(2024, 6, 15), tz=SEOUL, now=now)
        in_utc = BirthDate.create(date(2024, 6, 15), tz=timezone.utc, now=now)

        assert in_seoul.is_success
        assert in_utc.error.message == "생년월일은 미래 날짜일 수 없습니다"

    def test_more_than_150_years_ago_is_rejected(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)

        assert BirthDate.create(date(1873, 12, 31), now=now).is_failure
        assert BirthDate.create(date(1874, 1, 1), now=now).is_success

    def test_missing(self):
        assert BirthDate.create(None).error.message == "생년월일은 필수입니다"

    @pytest.mark.parametrize(
        "today,expected",
        [(date(2024, 4, 30), 8), (date(2024, 5, 1), 9), (date(2024, 12, 31), 9)],
    )
    def test_age_counts_completed_years(self, today, expected):
        assert BirthDate.restore(date(2015, 5, 1)).age(today) == expected

    def test_age_depends_on_zone(self):
        birth = BirthDate.restore(date(2015, 5, 1))
        # 2024-04-30 16:00 UTC is 2024-05-01 01:00 in Seoul
        now = datetime(2024, 4, 30, 16, 0, tzinfo=timezone.utc)

        assert birth.age_in(SEOUL, now) == 9
        assert birth.age_in(timezone.utc, now) == 8


class TestChildValueObjects:
    def test_name_is_trimmed(self):
        assert ChildName.create("  김민수 ").value.value == "김민수"

    @pytest.mark.parametrize("raw", ["male", "FEMALE", "Other"])
    def test_gender_parse_is_case_insensitive(self, raw):
        assert Gender.parse(raw).value == Gender(raw.upper())

    def test_gender_errors(self):
        assert Gender.parse(None).error.message == "성별은 필수입니다"
        assert Gender.parse("UNKNOWN").error.message == "유효하지 않은 성별입니다"

    def test_child_type_flags(self):
        assert ChildType.CARE_FACILITY.is_orphan
        assert ChildType.CARE_FACILITY.requires_institution
        assert ChildType.REGULAR.requires_guardian
        assert not ChildType.REGULAR.is_orphan

    def test_psychological_status_ordering(self):
        assert PsychologicalStatus.NORMAL.is_escalation_to(PsychologicalStatus.AT_RISK)
        assert PsychologicalStatus.HIGH_RISK.is_deescalation_to(PsychologicalStatus.NORMAL)
        assert PsychologicalStatus.AT_RISK.is_at_risk_or_higher
        assert not PsychologicalStatus.NORMAL.is_at_risk_or_higher


class TestChildParentage:
    def _create(self, child_type, guardian_id=None, institution_id=None):
        return Child.create(
            child_type=child_type,
            name=ChildName.create("이서연").value,
            birth_date=BirthDate.restore(date(2016, 2, 29)),
            gender=Gender.FEMALE,
            guardian_id=guardian_id,
            institution_id=institution_id,
        )

    def test_care_facility_child_needs_institution(self):
        result = self._create(ChildType.CARE_FACILITY)

        assert result.error.message == "양육시설 아동은 양육시설 ID가 필수입니다"

    def test_care_facility_child_cannot_have_guardian(self):
        result = self._create(
            ChildType.CARE_FACILITY, guardian_id=uuid4(), institution_id=uuid4()
        )

        assert result.error.field_name == "guardian_id"

    def test_regular_child_needs_guardian(self):
        result = self._create(ChildType.REGULAR)

        assert result.error.message == "일반 아동은 부모 보호자 ID가 필수입니다"

    def test_regular_child_cannot_have_institution(self):
        result = self._create(ChildType.REGULAR, guardian_id=uuid4(), institution_id=uuid4())

        assert result.error.message == "일반 아동은 양육시설과 연결될 수 없습니다"


class TestChildBehaviour:
    def test_adoption_turns_care_facility_child_into_regular(self):
        institution_id, guardian_id = uuid4(), uuid4()
        child = build_child(institution_id=institution_id)
        child_id = child.id

        result = child.process_adoption(guardian_id)

        assert result.is_success
        assert child.id == child_id
        assert child.child_type == ChildType.REGULAR
        assert child.guardian_id == guardian_id
        assert child.institution_id is None
        adopted = [e for e in child.get_domain_events() if isinstance(e, ChildAdopted)]
        assert adopted[0].former_institution_id == institution_id

    def test_only_care_facility_children_can_be_adopted(self):
        result = build_child().process_adoption(uuid4())

        assert isinstance(result.error, BusinessRuleError)

    def test_care_facility_child_guardian_cannot_change(self):
        child = build_child(institution_id=uuid4())

        assert isinstance(child.change_guardian(uuid4()).error, BusinessRuleError)
        assert isinstance(child.change_guardian(None).error, ValidationError)

    def test_regular_child_guardian_change(self):
        child = build_child()
        new_guardian = uuid4()

        assert child.change_guardian(new_guardian).is_success
        assert child.guardian_id == new_guardian

    def test_psychological_status_change_reports_direction(self):
        child = build_child()

        up = child.update_psychological_status(PsychologicalStatus.HIGH_RISK).value
        down = child.update_psychological_status(PsychologicalStatus.AT_RISK).value
        same = child.update_psychological_status(PsychologicalStatus.AT_RISK).value

        assert up.is_escalation and not up.is_deescalation
        assert down.is_deescalation and not down.is_escalation
        assert not same.is_escalation and not same.is_deescalation
        assert child.is_at_risk_or_higher()
        assert not child.is_high_risk()

    def test_age_uses_given_zone(self):
        child = build_child(birth_date=date(2015, 5, 1))
        now = datetime(2024, 4, 30, 16, 0, tzinfo=timezone.utc)

        assert child.age(SEOUL, now) == 9
