"""
Counsel request use cases.

A guardian files a request for a child. The request is routed to an
institution, either by selecting one of its recommendations or by a direct
match, and counseling then runs until it is completed or the request is
rejected.
"""

from collections.abc import Callable
from uuid import UUID

from carelink.domain.child import ChildRepository
from carelink.domain.counsel_request import (
    CounselRequest,
    CounselRequestRepository,
    CounselRequestStatus,
)
from carelink.domain.institution import CareFacilityRepository
from carelink.domain.shared import DomainError, NotFoundError, Result
from carelink.application.dtos.counsel_request_dtos import (
    CounselRequestListResponse,
    CounselRequestResponse,
    CreateCounselRequestCommand,
    MatchCounselRequestCommand,
    RejectCounselRequestCommand,
)
from carelink.application.use_cases.base import UseCase, check_paging


def to_counsel_request_response(request: CounselRequest) -> CounselRequestResponse:
    return CounselRequestResponse(
        id=request.id,
        child_id=request.child_id,
        guardian_id=request.guardian_id,
        center_name=request.center_name,
        counselor_name=request.counselor_name,
        child_name=request.child_name,
        care_type=request.care_type,
        priority_reason=request.priority_reason,
        request_date=request.request_date,
        motivation=request.motivation,
        goals=request.goals,
        status=request.status,
        status_display_name=request.status.display_name,
        matched_institution_id=request.matched_institution_id,
        matched_counselor_id=request.matched_counselor_id,
        rejection_reason=request.rejection_reason,
        created_at=request.created_at,
        updated_at=request.updated_at,
    )


def counsel_request_not_found(request_id: UUID) -> NotFoundError:
    return NotFoundError(
        "상담의뢰지를 찾을 수 없습니다.",
        code="COUNSEL_REQUEST_NOT_FOUND",
        details={"counsel_request_id": str(request_id)},
    )


def _institution_not_found(institution_id: UUID) -> NotFoundError:
    return NotFoundError(
        "기관을 찾을 수 없습니다",
        code="INSTITUTION_NOT_FOUND",
        details={"institution_id": str(institution_id)},
    )


class CreateCounselRequestUseCase(UseCase):
    """Receive a counsel request for a registered child."""

    def __init__(
        self,
        request_repository: CounselRequestRepository,
        child_repository: ChildRepository,
    ):
        super().__init__()
        self._requests = request_repository
        self._children = child_repository

    async def execute(
        self, command: CreateCounselRequestCommand
    ) -> Result[CounselRequestResponse, DomainError]:
        if not await self._children.exists(command.child_id):
            return self.reject(
                NotFoundError(
                    "아동을 찾을 수 없습니다",
                    code="CHILD_NOT_FOUND",
                    details={"child_id": str(command.child_id)},
                )
            )

        created = CounselRequest.create(
            child_id=command.child_id,
            guardian_id=command.guardian_id,
            center_name=command.center_name,
            counselor_name=command.counselor_name,
            child_name=command.child_name,
            care_type=command.care_type,
            priority_reason=command.priority_reason,
            request_date=command.request_date,
            motivation=command.motivation,
            goals=command.goals,
        )
        if created.is_failure:
            return self.reject(created.error, child_id=str(command.child_id))

        request = await self._requests.save(created.value)
        return self.succeed(
            to_counsel_request_response(request),
            counsel_request_id=str(request.id),
            child_id=str(request.child_id),
        )


class GetCounselRequestUseCase(UseCase):
    def __init__(self, request_repository: CounselRequestRepository):
        super().__init__()
        self._requests = request_repository

    async def execute(self, request_id: UUID) -> Result[CounselRequestResponse, DomainError]:
        request = await self._requests.find_by_id(request_id)
        if request is None:
            return self.reject(counsel_request_not_found(request_id))
        return self.succeed(
            to_counsel_request_response(request), counsel_request_id=str(request_id)
        )


class GetCounselRequestsByChildUseCase(UseCase):
    def __init__(self, request_repository: CounselRequestRepository):
        super().__init__()
        self._requests = request_repository

    async def execute(
        self, child_id: UUID
    ) -> Result[list[CounselRequestResponse], DomainError]:
        requests = await self._requests.find_by_child_id(child_id)
        return self.succeed(
            [to_counsel_request_response(request) for request in requests],
            child_id=str(child_id),
            count=len(requests),
        )


class ListCounselRequestsByStatusUseCase(UseCase):
    """Work queue of requests in one status, oldest first."""

    def __init__(self, request_repository: CounselRequestRepository):
        super().__init__()
        self._requests = request_repository

    async def execute(
        self, status: CounselRequestStatus, page: int = 1, limit: int = 10
    ) -> Result[CounselRequestListResponse, DomainError]:
        paging = check_paging(page, limit)
        if paging.is_failure:
            return self.reject(paging.error)

        requests, total = await self._requests.find_by_status(status, page=page, limit=limit)
        return self.succeed(
            CounselRequestListResponse.build(
                [to_counsel_request_response(request) for request in requests],
                total=total,
                page=page,
                limit=limit,
            ),
            status=status.value,
            total=total,
        )


class _CounselRequestTransition(UseCase):
    """Load a request, apply one lifecycle step, save it."""

    def __init__(self, request_repository: CounselRequestRepository):
        super().__init__()
        self._requests = request_repository

    async def _apply(
        self,
        request_id: UUID,
        step: Callable[[CounselRequest], Result[None, DomainError]],
    ) -> Result[CounselRequestResponse, DomainError]:
        request = await self._requests.find_by_id(request_id)
        if request is None:
            return self.reject(counsel_request_not_found(request_id))

        old_status = request.status
        moved = step(request)
        if moved.is_failure:
            return self.reject(moved.error, counsel_request_id=str(request_id))

        saved = await self._requests.save(request)
        return self.succeed(
            to_counsel_request_response(saved),
            counsel_request_id=str(request_id),
            old_status=old_status.value,
            status=saved.status.value,
        )


class MarkCounselRequestRecommendedUseCase(_CounselRequestTransition):
    """PENDING -> RECOMMENDED once recommendations for the request are in."""

    async def execute(self, request_id: UUID) -> Result[CounselRequestResponse, DomainError]:
        return await self._apply(request_id, lambda r: r.mark_as_recommended())


class _InstitutionTransition(_CounselRequestTransition):
    def __init__(
        self,
        request_repository: CounselRequestRepository,
        facility_repository: CareFacilityRepository,
    ):
        super().__init__(request_repository)
        self._facilities = facility_repository


class SelectInstitutionUseCase(_InstitutionTransition):
    """RECOMMENDED -> MATCHED with the institution the guardian picked."""

    async def execute(
        self, request_id: UUID, institution_id: UUID
    ) -> Result[CounselRequestResponse, DomainError]:
        if not await self._facilities.exists(institution_id):
            return self.reject(
                _institution_not_found(institution_id), counsel_request_id=str(request_id)
            )
        return await self._apply(request_id, lambda r: r.select_institution(institution_id))


class MatchCounselRequestUseCase(_InstitutionTransition):
    """PENDING -> MATCHED with an institution and counselor, skipping recommendation."""

    async def execute(
        self, request_id: UUID, command: MatchCounselRequestCommand
    ) -> Result[CounselRequestResponse, DomainError]:
        if not await self._facilities.exists(command.institution_id):
            return self.reject(
                _institution_not_found(command.institution_id),
                counsel_request_id=str(request_id),
            )
        return await self._apply(
            request_id,
            lambda r: r.match_with(command.institution_id, command.counselor_id),
        )


class StartCounselingUseCase(_CounselRequestTransition):
    """MATCHED -> IN_PROGRESS."""

    async def execute(self, request_id: UUID) -> Result[CounselRequestResponse, DomainError]:
        return await self._apply(request_id, lambda r: r.start_counseling())


class CompleteCounselingUseCase(_CounselRequestTransition):
    """IN_PROGRESS -> COMPLETED."""

    async def execute(self, request_id: UUID) -> Result[CounselRequestResponse, DomainError]:
        return await self._apply(request_id, lambda r: r.complete_counseling())


class RejectCounselRequestUseCase(_CounselRequestTransition):
    async def execute(
        self, request_id: UUID, command: RejectCounselRequestCommand
    ) -> Result[CounselRequestResponse, DomainError]:
        return await self._apply(request_id, lambda r: r.reject(command.reason))

