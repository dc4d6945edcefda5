"""SQLAlchemy-backed connection wrapper for quick queries."""

from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import DBAPIError
from sqlalchemy.pool import QueuePool

from quick_builder import ExecutionFailure
from quick_builder.adapt_sql import bind_args
from .quick import QuickQuery

logger = logging.getLogger(__name__)

class SqlCon(QuickQuery):
    """SQL connection wrapper providing the quick_* CRUD helpers.

    ``log_queries`` turns on one debug record per quick query, with bind
    values shortened and non-ASCII data hidden. ``echo`` is passed straight
    to SQLAlchemy.
    """
    def __init__(
        self, conn: str, pool_size: int = 5, pool_timeout: int = 30,
        echo: bool = False, log_queries: bool = False
    ):
        self.url = make_url(conn)
        pool_args: Dict[str, Any] = {}
        if self.url.get_backend_name() != 'sqlite':
            pool_args = dict(poolclass=QueuePool, pool_size=pool_size,
                             pool_timeout=pool_timeout, pool_recycle=3600)
        self.engine = create_engine(conn, echo=echo, **pool_args)
        self.db = self._get_dialect()
        self.paramstyle = self.engine.dialect.paramstyle
        super().__init__(self.db, paramstyle=self.paramstyle, log_queries=log_queries)
        try:
            with self.engine.connect():
                pass
        except DBAPIError as e:
            raise self._failed(e, 'connect') from e

    def _get_dialect(self) -> str:
        """Get database dialect from the engine."""
        dialect = self.engine.dialect.name.lower()
        return 'postgresql' if dialect == 'postgres' else dialect

    @contextmanager
    def connect(self):
        """Context-managed connection."""
        conn = self.engine.connect()
        try:
            yield conn
        finally:
            conn.close()

    def quote(self, name: str) -> str:
        """Quote an identifier with the dialect's rules, always delimiting it."""
        return self.engine.dialect.identifier_preparer.quote_identifier(name)

    def _args(self, params: Optional[Sequence[Any]]):
        """Bind list shaped for this driver's paramstyle."""
        return bind_args(params or [], self.paramstyle)

    def _failed(self, e: DBAPIError, sql: str) -> ExecutionFailure:
        """Log a driver error and wrap it as ExecutionFailure."""
        logger.debug(f'Statement failed: {sql} | {e.orig}')
        return ExecutionFailure(f'Query execution failed: {e.orig}', orig=e.orig)

    def execute(self, sql: str, params: Optional[Sequence[Any]] = None) -> int:
        """Run a statement in its own transaction; returns the affected row count."""
        try:
            with self.engine.begin() as conn:
                return conn.exec_driver_sql(sql, self._args(params)).rowcount
        except DBAPIError as e:
            raise self._failed(e, sql) from e

    def fetch_one(self, sql: str, params: Optional[Sequence[Any]] = None) -> Optional[Dict[str, Any]]:
        """First row of the result as a dict, or None."""
        try:
            with self.connect() as conn:
                row = conn.exec_driver_sql(sql, self._args(params)).mappings().first()
        except DBAPIError as e:
            raise self._failed(e, sql) from e
        return dict(row) if row is not None else None

    def fetch_all(self, sql: str, params: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """All rows of the result as a list of dicts."""
        try:
            with self.connect() as conn:
                return [dict(row) for row in conn.exec_driver_sql(sql, self._args(params)).mappings().all()]
        except DBAPIError as e:
            raise self._failed(e, sql) from e

    def close(self):
        """Dispose of engine resources."""
        self.engine.dispose()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
