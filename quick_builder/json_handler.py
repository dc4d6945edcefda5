"""JSON payload handling for quick queries."""

from collections.abc import Mapping
from typing import Any, Dict

from .query_builder import Cardinality, Query, SQLBuilder

def _check_payload(payload: Any) -> Dict[str, Any]:
    """Copy of the payload, which must be a JSON object."""
    if not isinstance(payload, Mapping):
        raise ValueError('Expected a JSON object payload')
    return dict(payload)

def json_select(payload: Dict[str, Any], builder: SQLBuilder) -> Query:
    """Generate SELECT query from JSON payload.

    ``cardinality`` is ``"one"`` or ``"many"`` (default); ``where`` is required,
    ``{}`` selects every row.
    """
    payload = _check_payload(payload)
    return builder.select(payload.get('table'), payload.get('where'),
                          payload.get('cardinality', Cardinality.MANY))

def json_insert(payload: Dict[str, Any], builder: SQLBuilder) -> Query:
    """Generate INSERT query from JSON payload."""
    payload = _check_payload(payload)
    return builder.insert(payload.get('table'), payload.get('data'))

def json_update(payload: Dict[str, Any], builder: SQLBuilder) -> Query:
    """Generate UPDATE query from JSON payload."""
    payload = _check_payload(payload)
    return builder.update(payload.get('table'), payload.get('where'), payload.get('data'))

def json_delete(payload: Dict[str, Any], builder: SQLBuilder) -> Query:
    """Generate DELETE query from JSON payload."""
    payload = _check_payload(payload)
    return builder.delete(payload.get('table'), payload.get('where'))
