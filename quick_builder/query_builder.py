"""SQL query builder for quick SELECT, INSERT, UPDATE and DELETE statements."""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Union

from .adapt_sql import binder, escape_percent
from .conditions import parse_where, render_where
from .errors import InvalidCardinality, InvalidFieldMap, InvalidOperationKind, InvalidTableName
from .mappings import limit_one, paramstyles, query_types, quote_chars

class Cardinality(str, Enum):
    """How many rows a SELECT caller wants back."""
    ONE = 'one'
    MANY = 'many'

class Query(NamedTuple):
    """A built statement: SQL text plus its ordered bind parameters."""
    kind: str
    sql: str
    params: List[Any]
    cardinality: Optional[Cardinality] = None

class SQLBuilder:
    """Builds parameterised statements from table names and plain dicts.

    Table and column names always go through ``quote``; values only ever
    travel as bind parameters. Without a ``quote`` callable the dialect's
    quote characters are used, doubling any embedded closing quote.
    """
    def __init__(self, dialect: str = 'default', quote: Optional[Callable[[str], str]] = None,
                 paramstyle: Optional[str] = None):
        """Initialize with database dialect and optional connection quoting."""
        self.dialect = dialect.lower()
        self.quote_char = quote_chars.get(self.dialect, quote_chars['default'])
        self.paramstyle = (paramstyle or paramstyles.get(self.dialect, 'qmark')).lower()
        self._quote = quote or self._quote_identifier

    def _quote_identifier(self, name: str) -> str:
        """Delimit with the dialect quote characters, doubling embedded closers."""
        start, end = self.quote_char
        return f'{start}{name.replace(end, end * 2)}{end}'

    def quote(self, name: str) -> str:
        """Quote a table or column name for splicing into SQL text."""
        return escape_percent(self._quote(name), self.paramstyle)

    def build(self, kind: str, table: str, data: Optional[Mapping] = None,
              where: Optional[Mapping] = None,
              cardinality: Union[Cardinality, str, None] = None) -> Query:
        """Validate the arguments for ``kind`` and assemble the statement.

        Everything is checked before any SQL text is produced, so a bad
        argument never yields a partial query.
        """
        if not isinstance(kind, str) or kind.upper() not in query_types:
            raise InvalidOperationKind(f'Unrecognised query type {kind!r}')
        kind = kind.upper()
        if not isinstance(table, str) or not table.strip():
            raise InvalidTableName(f'Expected table name as a plain string, got {table!r}')
        if kind in ('INSERT', 'UPDATE'):
            self._check_fields(data)
        conditions = parse_where(where) if kind in ('SELECT', 'UPDATE', 'DELETE') else []
        cardinality = self._check_cardinality(cardinality) if kind == 'SELECT' else None

        params: List[Any] = []
        bind = binder(params, self.paramstyle)
        tbl = self.quote(table)

        if kind == 'SELECT':
            top = 'TOP 1 ' if cardinality is Cardinality.ONE and self.dialect == 'mssql' else ''
            sql = f'SELECT {top}* FROM {tbl}'
        elif kind == 'INSERT':
            cols = ', '.join(self.quote(k) for k in data)
            phs = ', '.join(bind(v) for v in data.values())
            sql = f'INSERT INTO {tbl} ({cols}) VALUES ({phs})'
        elif kind == 'UPDATE':
            sets = ', '.join(f'{self.quote(k)} = {bind(v)}' for k, v in data.items())
            sql = f'UPDATE {tbl} SET {sets}'
        else:
            sql = f'DELETE FROM {tbl}'

        where_sql = render_where(conditions, self.quote, bind)
        if where_sql:
            sql += f' WHERE {where_sql}'
        if cardinality is Cardinality.ONE and self.dialect != 'mssql':
            sql += limit_one.get(self.dialect, ' LIMIT 1')
        return Query(kind, sql, params, cardinality)

    @staticmethod
    def _check_cardinality(cardinality: Union[Cardinality, str, None]) -> Cardinality:
        """Coerce 'one'/'many' in any case to Cardinality; MANY when unset."""
        if cardinality is None:
            return Cardinality.MANY
        if isinstance(cardinality, Cardinality):
            return cardinality
        if isinstance(cardinality, str) and cardinality.lower() in ('one', 'many'):
            return Cardinality(cardinality.lower())
        raise InvalidCardinality(f"Expected cardinality 'one' or 'many', got {cardinality!r}")

    @staticmethod
    def _check_fields(data: Any) -> None:
        """Reject missing, empty or badly keyed column/value mappings."""
        if not isinstance(data, Mapping) or not data:
            raise InvalidFieldMap('Expected a non-empty mapping of column names to values')
        bad = [k for k in data if not isinstance(k, str) or not k]
        if bad:
            raise InvalidFieldMap(f'Invalid column names: {bad}')

    def select(self, table: str, where: Optional[Mapping],
               cardinality: Union[Cardinality, str] = Cardinality.MANY) -> Query:
        """Generate SELECT query; ``Cardinality.ONE`` caps it at one row."""
        return self.build('SELECT', table, where=where, cardinality=cardinality)

    def insert(self, table: str, data: Mapping) -> Query:
        """Generate INSERT query for a single row."""
        return self.build('INSERT', table, data=data)

    def update(self, table: str, where: Optional[Mapping], data: Mapping) -> Query:
        """Generate UPDATE query. An empty ``where`` updates every row in the table."""
        return self.build('UPDATE', table, data=data, where=where)

    def delete(self, table: str, where: Optional[Mapping]) -> Query:
        """Generate DELETE query. An empty ``where`` deletes every row in the table."""
        return self.build('DELETE', table, where=where)

    def preview(self, query: Query) -> Dict[str, Any]:
        """Plain dict form of a built query, for JSON responses."""
        return {'sql': query.sql, 'params': list(query.params)}
