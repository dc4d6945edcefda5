"""Condition parsing for SQL WHERE clauses.

A where mapping such as::

    {'id': 42, 'deleted_at': None, 'author': ['Bob', 'Mary'], 'price': {'>': 15}}

is parsed into one :class:`Condition` per test. There are exactly three kinds:
:class:`Equals` (``= ?`` or ``IS NULL``), :class:`In` (``IN (?, ...)``) and
:class:`Compare` (``<op> ?`` with a whitelisted operator).
"""

from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Tuple

from .errors import InvalidPredicateMap, UnrecognizedOperator
from .mappings import valid_operators

Binder = Callable[[Any], str]

_SEQUENCE_TYPES = (list, tuple, set, frozenset)

class Condition:
    """Represents a single SQL condition on one column."""
    __slots__ = ('field',)

    def __init__(self, field: str):
        if not isinstance(field, str) or not field:
            raise InvalidPredicateMap(f'Invalid field name: {field!r}')
        self.field = field

    def to_sql(self, column: str, bind: Binder) -> str:
        """Render against the already quoted ``column``; ``bind`` registers values."""
        raise NotImplementedError

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def __repr__(self) -> str:
        return f'{type(self).__name__}{self._key()!r}'

    def _key(self) -> Tuple[Any, ...]:
        return (self.field,)

    @classmethod
    def from_input(cls, field: str, value: Any) -> List['Condition']:
        """Create the conditions described by one where-mapping entry."""
        if isinstance(value, Condition):
            if value.field != field:
                raise InvalidPredicateMap(
                    f'Condition on {value.field!r} given under where key {field!r}')
            return [value]
        if isinstance(value, Mapping):
            if not value:
                raise InvalidPredicateMap(f'Empty operator mapping for field {field!r}')
            return [Compare(field, op, operand) for op, operand in value.items()]
        if isinstance(value, _SEQUENCE_TYPES):
            return [In(field, value)]
        return [Equals(field, value)]

class Equals(Condition):
    """``col = ?``, or ``col IS NULL`` when the value is None."""
    __slots__ = ('value',)

    def __init__(self, field: str, value: Any):
        super().__init__(field)
        self.value = value

    def _key(self):
        return (self.field, self.value)

    def to_sql(self, column, bind):
        if self.value is None:
            return f'{column} IS NULL'
        return f'{column} = {bind(self.value)}'

class In(Condition):
    """``col IN (?, ?, ...)`` over a sequence of values.

    An empty sequence renders as ``1 = 0`` so that it matches no rows on every
    backend instead of relying on how a driver treats ``IN ()``.
    """
    __slots__ = ('values',)

    def __init__(self, field: str, values: Any):
        super().__init__(field)
        self.values = tuple(values)

    def _key(self):
        return (self.field, self.values)

    def to_sql(self, column, bind):
        if not self.values:
            return '1 = 0'
        return f'{column} IN ({", ".join(bind(v) for v in self.values)})'

class Compare(Condition):
    """``col <op> ?`` with ``op`` from the operator whitelist."""
    __slots__ = ('op', 'value')

    def __init__(self, field: str, op: str, value: Any):
        super().__init__(field)
        if not isinstance(op, str) or op.strip().upper() not in valid_operators:
            raise UnrecognizedOperator(f"Unrecognised operator {op!r} for field {field!r}")
        self.op = op.strip().upper()
        self.value = value

    def _key(self):
        return (self.field, self.op, self.value)

    def to_sql(self, column, bind):
        return f'{column} {self.op} {bind(self.value)}'

def parse_where(where: Optional[Mapping]) -> List[Condition]:
    """Parse a where mapping into conditions, validating every entry up front."""
    if where is None or not isinstance(where, Mapping):
        raise InvalidPredicateMap(f'Expected a mapping of where conditions, got {type(where).__name__}')
    conditions: List[Condition] = []
    for field, value in where.items():
        conditions.extend(Condition.from_input(field, value))
    return conditions

def render_where(conditions: List[Condition], quote: Callable[[str], str], bind: Binder) -> str:
    """Join rendered conditions with AND; empty when there is nothing to filter on."""
    return ' AND '.join(c.to_sql(quote(c.field), bind) for c in conditions)
