from carelink.domain.institution import Address, CareFacility, InstitutionName
from carelink.infrastructure.database.models import CareFacilityRecord
from carelink.infrastructure.database.repositories.mappers.common import as_utc


class CareFacilityMapper:
    """Translate CareFacility aggregates to and from ``care_facilities`` rows."""

    @staticmethod
    def domain_to_sql(facility: CareFacility) -> CareFacilityRecord:
        return CareFacilityRecord(
            id=facility.id,
            name=facility.name.value,
            address=facility.address.address,
            address_detail=facility.address.address_detail,
            postal_code=facility.address.postal_code,
            representative_name=facility.representative_name,
            phone_number=facility.phone_number,
            capacity=facility.capacity,
            established_date=facility.established_date,
            introduction=facility.introduction,
            is_active=facility.is_active,
            created_at=facility.created_at,
            updated_at=facility.updated_at,
        )

    @staticmethod
    def sql_to_domain(record: CareFacilityRecord) -> CareFacility:
        return CareFacility.restore(
            id=record.id,
            name=InstitutionName.restore(record.name),
            address=Address.restore(
                record.address, record.address_detail, record.postal_code
            ),
            representative_name=record.representative_name,
            phone_number=record.phone_number,
            capacity=record.capacity,
            established_date=record.established_date,
            introduction=record.introduction,
            is_active=record.is_active,
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
        )
