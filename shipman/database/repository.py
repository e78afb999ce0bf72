"""Generic single-table repository.

Every public operation issues exactly one SQL statement on the injected
session and maps store failures onto the domain exception hierarchy. There
are no retries: whatever the store reports is surfaced to the caller.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import ColumnElement, delete, func, insert, literal, select, update
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession

from shipman.config import settings
from shipman.database.base import Base
from shipman.exceptions import (
    ConstraintViolationException,
    DeadlineExceededException,
    NotFoundException,
    ResourceExhaustedException,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Columns owned by the store; never written by callers.
STORE_MANAGED_COLUMNS = frozenset({"id", "created_at", "updated_at"})


def _as_dict(data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return dict(data)


def _constraint_details(error: sa_exc.IntegrityError) -> list[dict]:
    orig = getattr(error, "orig", None)
    cause = getattr(orig, "__cause__", None)
    return [
        {
            "constraint": getattr(cause, "constraint_name", None),
            "sqlstate": getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None),
        }
    ]


class BaseRepository(Generic[ModelT]):
    """CRUD over one table, parameterized by its ORM model.

    Subclasses set ``model`` and add the list and narrow-update operations
    their table needs.
    """

    model: ClassVar[type[Base]]

    def __init__(self, session: AsyncSession, *, timeout: float | None = None) -> None:
        self.session = session
        self.timeout = timeout if timeout is not None else settings.statement_timeout_seconds

    # ------------------------------------------------------------------
    # Statement execution
    # ------------------------------------------------------------------

    async def _execute(self, statement, timeout: float | None = None):
        deadline = timeout if timeout is not None else self.timeout
        name = self.model.__name__
        try:
            async with asyncio.timeout(deadline):
                return await self.session.execute(statement)
        except TimeoutError as exc:
            # Must precede the OSError clause: TimeoutError subclasses OSError.
            logger.warning("%s statement exceeded its %.1fs deadline", name, deadline)
            raise DeadlineExceededException(
                f"{name} operation exceeded its {deadline}s deadline"
            ) from exc
        except sa_exc.IntegrityError as exc:
            logger.warning("%s write rejected by constraint: %s", name, exc.orig)
            raise ConstraintViolationException(
                f"{name} write violates a store constraint",
                details=_constraint_details(exc),
            ) from exc
        except (
            sa_exc.TimeoutError,
            sa_exc.OperationalError,
            sa_exc.InterfaceError,
            OSError,
        ) as exc:
            logger.warning("%s operation could not reach the store: %s", name, exc)
            raise ResourceExhaustedException(
                "Database connection unavailable"
            ) from exc

    # ------------------------------------------------------------------
    # Value preparation
    # ------------------------------------------------------------------

    @classmethod
    def _columns(cls) -> Mapping[str, Any]:
        return cls.model.__table__.columns

    @classmethod
    def _insert_values(cls, data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
        """Writable values for an INSERT.

        Absent values are omitted for columns with a store default so the
        store applies it; every other absent value is written as NULL.
        """
        columns = cls._columns()
        values: dict[str, Any] = {}
        for key, value in _as_dict(data).items():
            if key in STORE_MANAGED_COLUMNS or key not in columns:
                continue
            if value is None and columns[key].server_default is not None:
                continue
            values[key] = value
        return values

    @classmethod
    def _update_values(cls, data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
        """Writable values for a full-row overwrite; absent means NULL."""
        columns = cls._columns()
        return {
            key: value
            for key, value in _as_dict(data).items()
            if key not in STORE_MANAGED_COLUMNS and key in columns
        }

    @classmethod
    def _keep_existing(cls, column_name: str, value: Any) -> ColumnElement:
        """``COALESCE(:value, column)`` typed with the column's own codec."""
        column = cls._columns()[column_name]
        return func.coalesce(literal(value, column.type), getattr(cls.model, column_name))

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def create(
        self, data: BaseModel | Mapping[str, Any], *, timeout: float | None = None
    ) -> ModelT:
        """Insert a row and return the persisted row.

        The result is a new ORM instance read back through ``RETURNING``, carrying
        the generated id, timestamps and store defaults. ``data`` is never
        updated in place.
        """
        statement = (
            insert(self.model)
            .values(**self._insert_values(data))
            .returning(self.model)
        )
        result = await self._execute(statement, timeout)
        entity = result.scalar_one()
        logger.debug("Created %s %s", self.model.__name__, entity.id)
        return entity

    async def get(self, entity_id: uuid.UUID, *, timeout: float | None = None) -> ModelT:
        statement = (
            select(self.model)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self._execute(statement, timeout)
        entity = result.scalar_one_or_none()
        if entity is None:
            raise NotFoundException(f"{self.model.__name__} {entity_id} not found")
        return entity

    async def update(
        self,
        entity_id: uuid.UUID,
        data: BaseModel | Mapping[str, Any],
        *,
        timeout: float | None = None,
    ) -> ModelT:
        """Overwrite every editable column carried by ``data``."""
        return await self._apply_update(entity_id, self._update_values(data), timeout)

    async def delete(self, entity_id: uuid.UUID, *, timeout: float | None = None) -> None:
        """Hard delete; an unknown id is not an error."""
        statement = (
            delete(self.model)
            .where(self.model.id == entity_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._execute(statement, timeout)
        logger.debug(
            "Deleted %s %s (%s row(s))", self.model.__name__, entity_id, result.rowcount
        )

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    async def _patch(
        self,
        entity_id: uuid.UUID,
        values: Mapping[str, Any],
        *,
        keep_existing: Iterable[str] = (),
        timeout: float | None = None,
    ) -> ModelT:
        """Narrow update of ``values``; columns in ``keep_existing`` ignore absent values."""
        keep = set(keep_existing)
        assignments = {
            name: self._keep_existing(name, value) if name in keep else value
            for name, value in values.items()
        }
        return await self._apply_update(entity_id, assignments, timeout)

    async def _apply_update(
        self,
        entity_id: uuid.UUID,
        assignments: Mapping[str, Any],
        timeout: float | None,
    ) -> ModelT:
        statement = (
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**assignments, updated_at=func.clock_timestamp())
            .returning(self.model)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        result = await self._execute(statement, timeout)
        entity = result.scalar_one_or_none()
        if entity is None:
            raise NotFoundException(f"{self.model.__name__} {entity_id} not found")
        logger.debug("Updated %s %s", self.model.__name__, entity_id)
        return entity

    async def _list(
        self,
        *criteria: ColumnElement[bool],
        order_by: Iterable[Any],
        limit: int | None = None,
        offset: int | None = None,
        timeout: float | None = None,
    ) -> list[ModelT]:
        statement = select(self.model)
        if criteria:
            statement = statement.where(*criteria)
        statement = statement.order_by(*order_by)
        if limit is not None:
            statement = statement.limit(limit)
        if offset:
            statement = statement.offset(offset)
        result = await self._execute(statement, timeout)
        return list(result.scalars().all())
