"""Children, their parentage and detected psychological status."""

from carelink.domain.child.entities import (
    Child,
    ChildAdopted,
    ChildRegistered,
    PsychologicalStatusChanged,
    StatusChange,
)
from carelink.domain.child.repositories import ChildRepository
from carelink.domain.child.value_objects import BirthDate, ChildName, ChildType, Gender, PsychologicalStatus

__all__ = [
    "Child",
    "ChildAdopted",
    "ChildRegistered",
    "PsychologicalStatusChanged",
    "StatusChange",
    "ChildRepository",
    "BirthDate",
    "ChildName",
    "ChildType",
    "Gender",
    "PsychologicalStatus",
]
