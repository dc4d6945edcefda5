"""Dialect-specific placeholder and bind parameter adaptation."""

from typing import Any, Dict, List, Sequence, Tuple, Union

def placeholder(paramstyle: str, position: int) -> str:
    """Placeholder text for the bind parameter at 1-based ``position``."""
    p = paramstyle.lower()
    if p == 'qmark':
        return '?'
    if p in ('format', 'pyformat'):
        return '%s'
    if p == 'numeric':
        return f':{position}'
    if p == 'named':
        return f':p{position}'
    raise ValueError(f'Unknown paramstyle: {paramstyle}')

def escape_percent(sql: str, paramstyle: str) -> str:
    """Double literal ``%`` for drivers that treat it as a format marker."""
    if paramstyle.lower() in ('format', 'pyformat'):
        return sql.replace('%', '%%')
    return sql

def bind_args(params: Sequence[Any], paramstyle: str) -> Union[Tuple[Any, ...], Dict[str, Any]]:
    """Shape an ordered bind list the way the DBAPI driver expects it."""
    p = paramstyle.lower()
    if p == 'named':
        return {f'p{i}': v for i, v in enumerate(params, 1)}
    if p in ('qmark', 'format', 'pyformat', 'numeric'):
        return tuple(params)
    raise ValueError(f'Unknown paramstyle: {paramstyle}')

def binder(params: List[Any], paramstyle: str):
    """Return a function that appends a value to ``params`` and yields its placeholder."""
    def bind(value: Any) -> str:
        params.append(value)
        return placeholder(paramstyle, len(params))
    return bind
