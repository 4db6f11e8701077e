"""Institutions (care facilities) that parent children and receive reviews."""

from carelink.domain.institution.entities import CareFacility
from carelink.domain.institution.repositories import CareFacilityRepository
from carelink.domain.institution.value_objects import Address, InstitutionName

__all__ = ["CareFacility", "CareFacilityRepository", "Address", "InstitutionName"]
