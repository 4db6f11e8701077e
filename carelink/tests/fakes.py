"""
In-memory doubles for the repository and service ports.

Repositories store deep copies, so a use case that mutates an aggregate
without saving it leaves the stored state untouched. Uniqueness rules are
enforced on ``save`` the way the SQL constraints enforce them, and every
repository counts its ``save`` calls.
"""

from uuid import UUID

from carelink.application.ports import NotificationGateway
from carelink.domain.child import Child, ChildRepository
from carelink.domain.counsel_report import (
    CounselReport,
    CounselReportRepository,
    ReportStatus,
)
from carelink.domain.counsel_request import (
    CounselRequest,
    CounselRequestRepository,
    CounselRequestStatus,
)
from carelink.domain.institution import CareFacility, CareFacilityRepository
from carelink.domain.review import Review, ReviewRepository
from carelink.domain.shared import ConflictError
from carelink.domain.user import Email, PasswordHasher, User, UserRepository


def _page(items: list, page: int, limit: int) -> tuple[list, int]:
    start = (page - 1) * limit
    return items[start : start + limit], len(items)


class InMemoryReviewRepository(ReviewRepository):
    def __init__(self) -> None:
        self.items: dict[UUID, Review] = {}
        self.save_calls = 0

    async def save(self, review: Review) -> Review:
        self.save_calls += 1
        for other in self.items.values():
            if (
                other.id != review.id
                and other.user_id == review.user_id
                and other.institution_id == review.institution_id
            ):
                raise ConflictError("duplicate review", code="UNIQUE_VIOLATION")
        self.items[review.id] = review.model_copy(deep=True)
        return review

    async def find_by_id(self, review_id: UUID) -> Review | None:
        stored = self.items.get(review_id)
        return stored.model_copy(deep=True) if stored else None

    async def find_by_institution_id(
        self, institution_id: UUID, page: int = 1, limit: int = 10
    ) -> tuple[list[Review], int]:
        matches = sorted(
            (r for r in self.items.values() if r.institution_id == institution_id),
            key=lambda r: r.created_at,
            reverse=True,
        )
        return _page(matches, page, limit)

    async def find_by_user_id(self, user_id: UUID) -> list[Review]:
        return [r for r in self.items.values() if r.user_id == user_id]

    async def exists_by_user_and_institution(
        self, user_id: UUID, institution_id: UUID
    ) -> bool:
        return any(
            r.user_id == user_id and r.institution_id == institution_id
            for r in self.items.values()
        )

    async def find_all(self, page: int = 1, limit: int = 10) -> tuple[list[Review], int]:
        return _page(list(self.items.values()), page, limit)

    async def delete(self, review_id: UUID) -> bool:
        return self.items.pop(review_id, None) is not None


class RacingReviewRepository(InMemoryReviewRepository):
    """Pre-check never sees the competing write; only ``save`` catches it."""

    async def exists_by_user_and_institution(
        self, user_id: UUID, institution_id: UUID
    ) -> bool:
        return False


class InMemoryCounselRequestRepository(CounselRequestRepository):
    def __init__(self) -> None:
        self.items: dict[UUID, CounselRequest] = {}
        self.save_calls = 0

    async def save(self, request: CounselRequest) -> CounselRequest:
        self.save_calls += 1
        self.items[request.id] = request.model_copy(deep=True)
        return request

    async def find_by_id(self, request_id: UUID) -> CounselRequest | None:
        stored = self.items.get(request_id)
        return stored.model_copy(deep=True) if stored else None

    async def find_by_child_id(self, child_id: UUID) -> list[CounselRequest]:
        return sorted(
            (r.model_copy(deep=True) for r in self.items.values() if r.child_id == child_id),
            key=lambda r: r.created_at,
            reverse=True,
        )

    async def find_by_institution_id(self, institution_id: UUID) -> list[CounselRequest]:
        return sorted(
            (
                r.model_copy(deep=True)
                for r in self.items.values()
                if r.matched_institution_id == institution_id
            ),
            key=lambda r: r.created_at,
            reverse=True,
        )

    async def find_by_status(
        self, status: CounselRequestStatus, page: int = 1, limit: int = 10
    ) -> tuple[list[CounselRequest], int]:
        matches = sorted(
            (r for r in self.items.values() if r.status == status),
            key=lambda r: r.created_at,
        )
        return _page(matches, page, limit)


class InMemoryCounselReportRepository(CounselReportRepository):
    def __init__(self) -> None:
        self.items: dict[UUID, CounselReport] = {}
        self.save_calls = 0

    async def save(self, report: CounselReport) -> CounselReport:
        self.save_calls += 1
        for other in self.items.values():
            if (
                other.id != report.id
                and other.counsel_request_id == report.counsel_request_id
                and other.session_number == report.session_number
            ):
                raise ConflictError("duplicate session", code="UNIQUE_VIOLATION")
        self.items[report.id] = report.model_copy(deep=True)
        return report

    async def find_by_id(self, report_id: UUID) -> CounselReport | None:
        stored = self.items.get(report_id)
        return stored.model_copy(deep=True) if stored else None

    async def find_by_request_and_session(
        self, counsel_request_id: UUID, session_number: int
    ) -> CounselReport | None:
        for report in self.items.values():
            if (
                report.counsel_request_id == counsel_request_id
                and report.session_number == session_number
            ):
                return report.model_copy(deep=True)
        return None

    async def find_by_counsel_request_id(
        self, counsel_request_id: UUID
    ) -> list[CounselReport]:
        return sorted(
            (r for r in self.items.values() if r.counsel_request_id == counsel_request_id),
            key=lambda r: r.session_number,
        )

    async def find_by_child_id(self, child_id: UUID) -> list[CounselReport]:
        return sorted(
            (r for r in self.items.values() if r.child_id == child_id),
            key=lambda r: r.session_number,
            reverse=True,
        )

    async def find_by_counselor_id(
        self, counselor_id: UUID, page: int = 1, limit: int = 10
    ) -> tuple[list[CounselReport], int]:
        matches = [r for r in self.items.values() if r.counselor_id == counselor_id]
        return _page(matches, page, limit)

    async def find_by_status(
        self, status: ReportStatus, page: int = 1, limit: int = 10
    ) -> tuple[list[CounselReport], int]:
        matches = [r for r in self.items.values() if r.status == status]
        return _page(matches, page, limit)

    async def count_by_child_id(self, child_id: UUID) -> int:
        return sum(1 for r in self.items.values() if r.child_id == child_id)

    async def next_session_number(self, counsel_request_id: UUID) -> int:
        numbers = [
            r.session_number
            for r in self.items.values()
            if r.counsel_request_id == counsel_request_id
        ]
        return max(numbers, default=0) + 1

    async def delete(self, report_id: UUID) -> bool:
        return self.items.pop(report_id, None) is not None


class InMemoryChildRepository(ChildRepository):
    def __init__(self) -> None:
        self.items: dict[UUID, Child] = {}
        self.save_calls = 0

    async def save(self, child: Child) -> Child:
        self.save_calls += 1
        self.items[child.id] = child.model_copy(deep=True)
        return child

    async def find_by_id(self, child_id: UUID) -> Child | None:
        stored = self.items.get(child_id)
        return stored.model_copy(deep=True) if stored else None

    async def find_by_guardian_id(self, guardian_id: UUID) -> list[Child]:
        return [c for c in self.items.values() if c.guardian_id == guardian_id]

    async def find_by_institution_id(self, institution_id: UUID) -> list[Child]:
        return [c for c in self.items.values() if c.institution_id == institution_id]

    async def exists(self, child_id: UUID) -> bool:
        return child_id in self.items

    async def delete(self, child_id: UUID) -> bool:
        return self.items.pop(child_id, None) is not None


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.items: dict[UUID, User] = {}
        self.save_calls = 0

    async def save(self, user: User) -> User:
        self.save_calls += 1
        for other in self.items.values():
            if other.id != user.id and other.email == user.email:
                raise ConflictError("duplicate email", code="UNIQUE_VIOLATION")
        self.items[user.id] = user.model_copy(deep=True)
        return user

    async def find_by_id(self, user_id: UUID) -> User | None:
        stored = self.items.get(user_id)
        return stored.model_copy(deep=True) if stored else None

    async def find_by_email(self, email: Email) -> User | None:
        for user in self.items.values():
            if user.email == email:
                return user.model_copy(deep=True)
        return None

    async def exists_by_email(self, email: Email) -> bool:
        return any(user.email == email for user in self.items.values())

    async def exists(self, user_id: UUID) -> bool:
        return user_id in self.items


class RacingUserRepository(InMemoryUserRepository):
    async def exists_by_email(self, email: Email) -> bool:
        return False


class InMemoryCareFacilityRepository(CareFacilityRepository):
    def __init__(self) -> None:
        self.items: dict[UUID, CareFacility] = {}
        self.save_calls = 0

    async def save(self, facility: CareFacility) -> CareFacility:
        self.save_calls += 1
        for other in self.items.values():
            if other.id != facility.id and other.name == facility.name:
                raise ConflictError("duplicate name", code="UNIQUE_VIOLATION")
        self.items[facility.id] = facility.model_copy(deep=True)
        return facility

    async def find_by_id(self, facility_id: UUID) -> CareFacility | None:
        stored = self.items.get(facility_id)
        return stored.model_copy(deep=True) if stored else None

    async def exists(self, facility_id: UUID) -> bool:
        return facility_id in self.items

    async def find_by_name(self, name: str) -> CareFacility | None:
        for facility in self.items.values():
            if facility.name.value == name:
                return facility.model_copy(deep=True)
        return None

    async def find_all(
        self, page: int = 1, limit: int = 10
    ) -> tuple[list[CareFacility], int]:
        ordered = sorted(self.items.values(), key=lambda f: f.name.value)
        return _page(ordered, page, limit)


class RacingCareFacilityRepository(InMemoryCareFacilityRepository):
    async def find_by_name(self, name: str) -> CareFacility | None:
        return None


class PlainTextHasher(PasswordHasher):
    """
    Reversible stand-in for the passlib hasher.

    ``legacy$`` values play the part of hashes from a retired scheme: they
    still verify and report ``needs_rehash``.
    """

    PREFIX = "plain$"
    LEGACY_PREFIX = "legacy$"

    def hash(self, plain: str) -> str:
        return f"{self.PREFIX}{plain}"

    def verify(self, plain: str, hashed: str) -> bool:
        return hashed in (f"{self.PREFIX}{plain}", f"{self.LEGACY_PREFIX}{plain}")

    def is_hash(self, value: str) -> bool:
        return value.startswith((self.PREFIX, self.LEGACY_PREFIX))

    def needs_rehash(self, hashed: str) -> bool:
        return hashed.startswith(self.LEGACY_PREFIX)


class RecordingNotificationGateway(NotificationGateway):
    """Records every notification; raises ``error`` instead when it is set."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.welcomes: list[dict] = []
        self.approvals: list[dict] = []

    async def send_welcome(self, user_id: UUID, email: str, real_name: str) -> None:
        if self.error:
            raise self.error
        self.welcomes.append({"user_id": user_id, "email": email, "real_name": real_name})

    async def send_report_approved(
        self,
        report_id: UUID,
        counselor_id: UUID,
        institution_id: UUID,
        session_number: int,
    ) -> None:
        if self.error:
            raise self.error
        self.approvals.append(
            {
                "report_id": report_id,
                "counselor_id": counselor_id,
                "institution_id": institution_id,
                "session_number": session_number,
            }
        )
