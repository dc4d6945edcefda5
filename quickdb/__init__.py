from .conn import SqlCon
from .quick import QuickQuery
from .audit import format_query, format_param

__all__ = ['SqlCon', 'QuickQuery', 'format_query', 'format_param']
