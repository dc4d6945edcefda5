"""Builder subpackage for generating parameterised CRUD statements."""

from .query_builder import SQLBuilder, Query, Cardinality
from .conditions import Condition, Equals, In, Compare, parse_where
from .json_handler import json_select, json_insert, json_update, json_delete
from .adapt_sql import placeholder, bind_args
from .errors import (
    QuickQueryError, QueryError, InvalidOperationKind, InvalidTableName,
    InvalidFieldMap, InvalidPredicateMap, InvalidCardinality, UnrecognizedOperator,
    ExecutionFailure
)

__all__ = [
    'SQLBuilder',
    'Query',
    'Cardinality',
    'Condition',
    'Equals',
    'In',
    'Compare',
    'parse_where',
    'json_select',
    'json_insert',
    'json_update',
    'json_delete',
    'placeholder',
    'bind_args',
    'QuickQueryError',
    'QueryError',
    'InvalidOperationKind',
    'InvalidTableName',
    'InvalidFieldMap',
    'InvalidPredicateMap',
    'InvalidCardinality',
    'UnrecognizedOperator',
    'ExecutionFailure',
]
