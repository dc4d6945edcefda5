"""Quick CRUD helpers on top of a minimal connection interface."""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
import logging

from quick_builder import Cardinality, Query, SQLBuilder
from .audit import format_query

logger = logging.getLogger(__name__)

class QuickQuery:
    """Convenience insert/update/delete/select over plain dicts.

    Subclasses supply the connection primitives ``quote``, ``execute``,
    ``fetch_one`` and ``fetch_all``. Every table and column name is passed
    through ``quote`` and every value is sent as a bind parameter.

        con.quick_insert('employees', {'name': 'Bob', 'age': 30})
        con.quick_update('employees', {'id': 42}, {'status': 'done'})
        con.quick_delete('employees', {'id': [1, 2, 3]})
        row = con.quick_select_one('employees', {'id': 42})
        rows = con.quick_select('employees', {'price': {'>': 15}})
    """
    def __init__(self, dialect: str = 'default', paramstyle: Optional[str] = None,
                 log_queries: bool = False):
        self.log_queries = log_queries
        self.builder = SQLBuilder(dialect, quote=self.quote, paramstyle=paramstyle)

    def quote(self, name: str) -> str:
        """Quote a table or column name; supplied by the connection."""
        raise NotImplementedError

    def execute(self, sql: str, params: Optional[Sequence[Any]] = None) -> int:
        """Run a statement; returns the affected row count."""
        raise NotImplementedError

    def fetch_one(self, sql: str, params: Optional[Sequence[Any]] = None) -> Optional[Dict[str, Any]]:
        """First result row as a dict, or None."""
        raise NotImplementedError

    def fetch_all(self, sql: str, params: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """All result rows as dicts."""
        raise NotImplementedError

    def quick_insert(self, table: str, data: Mapping[str, Any]) -> int:
        """Insert one row; returns the affected row count."""
        return self.run(self.builder.insert(table, data))

    def quick_update(self, table: str, where: Mapping[str, Any], data: Mapping[str, Any]) -> int:
        """Update rows matching ``where``; returns the affected row count.

        ``where={}`` is accepted and updates every row in the table.
        """
        return self.run(self.builder.update(table, where, data))

    def quick_delete(self, table: str, where: Mapping[str, Any]) -> int:
        """Delete rows matching ``where``; ``{}`` deletes every row."""
        return self.run(self.builder.delete(table, where))

    def quick_select(self, table: str, where: Mapping[str, Any],
                     cardinality: Union[Cardinality, str] = Cardinality.MANY
                     ) -> Union[Optional[Dict[str, Any]], List[Dict[str, Any]]]:
        """Select rows matching ``where``.

        With ``Cardinality.ONE`` the query is capped at one row and the result
        is that row as a dict, or None when nothing matched. Otherwise a list
        of dicts is returned, possibly empty.
        """
        return self.run(self.builder.select(table, where, cardinality))

    def quick_select_one(self, table: str, where: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """First row matching ``where`` as a dict, or None."""
        return self.quick_select(table, where, Cardinality.ONE)

    def run(self, query: Query):
        """Execute a built query and shape its result by kind and cardinality."""
        if self.log_queries:
            logger.debug(format_query(query))
        if query.kind != 'SELECT':
            return self.execute(query.sql, query.params)
        if query.cardinality is Cardinality.ONE:
            return self.fetch_one(query.sql, query.params)
        return self.fetch_all(query.sql, query.params)
