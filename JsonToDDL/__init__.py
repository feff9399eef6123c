from .core.normalizer import JsonNormalizer
from .core.analyzer import ValueKind, classify_value
from .core.table_builder import TableBuilder
from .database.dialects import Dialect, Engine, get_dialect
from .database.sql_writer import SqlWriter
from .errors import JsonToSqlError, MalformedInputError, UnsupportedTypeError
from .options import GenerationOptions

from .main import DialectScript, generate_dialect_script, process_json_to_sql

__all__ = [
    "process_json_to_sql",
    "generate_dialect_script",
    "DialectScript",
    "JsonNormalizer",
    "TableBuilder",
    "SqlWriter",
    "ValueKind",
    "classify_value",
    "Dialect",
    "Engine",
    "get_dialect",
    "GenerationOptions",
    "JsonToSqlError",
    "MalformedInputError",
    "UnsupportedTypeError",
]
