"""Counsel request repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from carelink.domain.counsel_request.entities import CounselRequest
from carelink.domain.counsel_request.value_objects import CounselRequestStatus


class CounselRequestRepository(ABC):
    @abstractmethod
    async def save(self, request: CounselRequest) -> CounselRequest:
        """
        Insert or update a counsel request.

        Raises:
            RepositoryError: If persistence fails
        """

    @abstractmethod
    async def find_by_id(self, request_id: UUID) -> CounselRequest | None:
        """Find a counsel request by its ID."""

    @abstractmethod
    async def find_by_child_id(self, child_id: UUID) -> list[CounselRequest]:
        """All requests for a child, newest first."""

    @abstractmethod
    async def find_by_institution_id(self, institution_id: UUID) -> list[CounselRequest]:
        """Requests matched to an institution, newest first."""

    @abstractmethod
    async def find_by_status(
        self, status: CounselRequestStatus, page: int = 1, limit: int = 10
    ) -> tuple[list[CounselRequest], int]:
        """Page through requests in a given status, oldest first."""
