"""Formatting of query diagnostics for the debug log."""

from typing import Any, Iterable

from quick_builder import Query

NON_ASCII = '[non-ASCII data not logged]'
MAX_PARAM_LENGTH = 50

def format_param(value: Any) -> str:
    """Render one bind value for the log: non-ASCII hidden, long values truncated."""
    if value is None:
        return 'None'
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if not raw.isascii():
            return NON_ASCII
        text = raw.decode('ascii')
    else:
        text = str(value)
        if not text.isascii():
            return NON_ASCII
    if len(text) > MAX_PARAM_LENGTH:
        return text[:MAX_PARAM_LENGTH - 3] + '...'
    return text

def format_params(params: Iterable[Any]) -> str:
    """Comma-joined log rendering of a bind list."""
    return ','.join(format_param(p) for p in params)

def format_query(query: Query) -> str:
    """One-line description of a query about to run."""
    return f'Executing {query.kind} query {query.sql} with params {format_params(query.params)}'
