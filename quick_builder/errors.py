"""Exception types raised while building and executing quick queries."""

from typing import Optional

class QuickQueryError(Exception):
    """Base class for every error raised by quick_builder and quickdb."""

class QueryError(QuickQueryError, ValueError):
    """The call was malformed; raised before any SQL is built or executed."""

class InvalidOperationKind(QueryError):
    """Query type is not one of SELECT, INSERT, UPDATE, DELETE."""

class InvalidTableName(QueryError):
    """Table name is missing, empty or not a plain string."""

class InvalidFieldMap(QueryError):
    """INSERT/UPDATE called without a non-empty column/value mapping."""

class InvalidPredicateMap(QueryError):
    """SELECT/UPDATE/DELETE called without a mapping of where conditions."""

class InvalidCardinality(QueryError):
    """SELECT cardinality is not one of 'one' or 'many'."""

class UnrecognizedOperator(QueryError):
    """A where condition used an operator outside the whitelist."""

class ExecutionFailure(QuickQueryError):
    """The database driver rejected or failed to run a statement."""
    def __init__(self, message: str, orig: Optional[BaseException] = None):
        super().__init__(message)
        self.orig = orig
