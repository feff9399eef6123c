from .dialects import Dialect, Engine, get_dialect
from .sql_writer import SqlWriter

__all__ = [
    'Dialect',
    'Engine',
    'get_dialect',
    'SqlWriter'
]
