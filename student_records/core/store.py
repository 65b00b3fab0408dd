"""Record store gateway: one connection per unit of work."""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Connection, Engine, text
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import SQLAlchemyError

from student_records.core.exceptions import StoreError
from student_records.core.statements import inline_params

logger = logging.getLogger(__name__)


def _driver_message(exc: SQLAlchemyError) -> str:
    # DBAPIError keeps the raw driver exception on .orig
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class StoreTransaction:
    """Statements executed on a single connection inside one transaction."""

    def __init__(self, connection: Connection, inline_literals: bool = False):
        self.connection = connection
        self.inline_literals = inline_literals

    def _run(self, sql: str, params: Mapping[str, Any] | None) -> CursorResult:
        if self.inline_literals:
            rendered = inline_params(sql, params)
            logger.debug(f"[STORE] {rendered}")
            return self.connection.exec_driver_sql(rendered)
        logger.debug(f"[STORE] {sql} params={dict(params or {})}")
        return self.connection.execute(text(sql), dict(params or {}))

    def execute(
        self,
        sql: str,
        params: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Run one statement and return its rows as dicts."""
        result = self._run(sql, params)
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings().all()]

    def insert(
        self,
        sql: str,
        params: Mapping[str, Any] | None,
        key: str,
    ) -> Any | None:
        """
        Run an INSERT and return the generated value of ``key``.

        Uses RETURNING where the dialect supports it, then the cursor's
        lastrowid. Returns None when the store reports neither.
        """
        if self.connection.dialect.insert_returning:
            row = self._run(f"{sql} RETURNING {key}", params).first()
            return row[0] if row is not None else None

        result = self._run(sql, params)
        try:
            lastrowid = result.lastrowid
        except (AttributeError, SQLAlchemyError):
            logger.debug("[STORE] Driver does not report lastrowid")
            return None
        return lastrowid or None


class StoreGateway:
    """Executes SQL against the configured store.

    Every call checks out its own connection and releases it before
    returning or raising. Failures surface as :class:`StoreError` carrying
    the driver's message.
    """

    def __init__(self, engine: Engine, inline_literals: bool = False):
        self.engine = engine
        self.inline_literals = inline_literals

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Open a connection and transaction shared by several statements."""
        try:
            with self.engine.begin() as connection:
                yield StoreTransaction(connection, self.inline_literals)
        except SQLAlchemyError as e:
            message = _driver_message(e)
            logger.debug(f"[STORE] Statement failed: {message}")
            raise StoreError(store_error=message) from e

    def execute(
        self,
        sql: str,
        params: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Run a single statement in its own connection and transaction."""
        with self.transaction() as tx:
            return tx.execute(sql, params)
