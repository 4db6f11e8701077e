"""
Base repository implementation shared by the SQL repositories.

Domain aggregates are converted to SQLModel records through a mapper and
written with ``Session.merge`` so one ``save`` covers insert and update.
Storage failures surface as domain errors: unique-constraint violations as
``ConflictError``, anything else as ``RepositoryError``.
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from carelink.core.observability import get_logger
from carelink.domain.shared import ConflictError, RepositoryError

RecordType = TypeVar("RecordType", bound=SQLModel)
EntityType = TypeVar("EntityType")

logger = get_logger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell a unique-constraint violation apart from other integrity failures."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    # SQLite only reports the constraint kind in the message
    return "unique constraint" in str(orig).lower()


class SQLRepository(Generic[RecordType, EntityType]):
    """
    Generic persistence helpers for one aggregate type.

    Subclasses set ``record_class`` and ``mapper`` (a class exposing static
    ``domain_to_sql`` / ``sql_to_domain``) and implement their domain
    repository interface on top of the protected helpers.
    """

    record_class: type[RecordType]
    mapper: Any

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    @property
    def table_name(self) -> str:
        return self.record_class.__tablename__

    def _save(self, entity: EntityType) -> EntityType:
        """
        Insert or update an aggregate.

        Raises:
            ConflictError: If a unique constraint is violated
            RepositoryError: If the database operation fails
        """
        record = self.mapper.domain_to_sql(entity)
        try:
            self.session.merge(record)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if not is_unique_violation(e):
                logger.error(
                    "Integrity constraint violated", table=self.table_name, error=str(e.orig)
                )
                raise RepositoryError(
                    f"Integrity error during save: {str(e.orig)}",
                    details={"table": self.table_name},
                ) from e
            logger.warning(
                "Unique constraint violated", table=self.table_name, error=str(e.orig)
            )
            raise ConflictError(
                f"Conflicting {self.table_name} row",
                code="UNIQUE_VIOLATION",
                details={"table": self.table_name},
            ) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise RepositoryError(f"Database error during save: {str(e)}") from e
        return entity

    def _get(self, entity_id: UUID) -> EntityType | None:
        try:
            record = self.session.get(self.record_class, entity_id)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Database error during get_by_id: {str(e)}") from e
        return self.mapper.sql_to_domain(record) if record else None

    def _first(self, *where: Any) -> EntityType | None:
        statement = select(self.record_class).where(*where).limit(1)
        try:
            record = self.session.exec(statement).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Database error during find: {str(e)}") from e
        return self.mapper.sql_to_domain(record) if record else None

    def _list(self, *where: Any, order_by: Any = None) -> list[EntityType]:
        statement = select(self.record_class).where(*where)
        if order_by is not None:
            statement = statement.order_by(order_by)
        try:
            records = self.session.exec(statement).all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Database error during list: {str(e)}") from e
        return [self.mapper.sql_to_domain(record) for record in records]

    def _count(self, *where: Any) -> int:
        statement = select(func.count()).select_from(self.record_class).where(*where)
        try:
            return self.session.exec(statement).one()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Database error during count: {str(e)}") from e

    def _page(
        self, *where: Any, order_by: Any, page: int, limit: int
    ) -> tuple[list[EntityType], int]:
        """
        One page of matching aggregates plus the total match count.

        Args:
            where: Filter clauses
            order_by: Ordering of the full result set
            page: 1-based page number
            limit: Page size

        Returns:
            The requested page and the total number of matches
        """
        statement = (
            select(self.record_class)
            .where(*where)
            .order_by(order_by)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        try:
            records = self.session.exec(statement).all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Database error during list: {str(e)}") from e
        return [self.mapper.sql_to_domain(r) for r in records], self._count(*where)

    def _exists(self, *where: Any) -> bool:
        return self._count(*where) > 0

    def _delete(self, entity_id: UUID) -> bool:
        try:
            record = self.session.get(self.record_class, entity_id)
            if record is None:
                return False
            self.session.delete(record)
            self.session.commit()
            return True
        except SQLAlchemyError as e:
            self.session.rollback()
            raise RepositoryError(f"Database error during delete: {str(e)}") from e
