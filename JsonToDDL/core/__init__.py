from .normalizer import JsonNormalizer
from .analyzer import ValueKind, classify_value
from .table_builder import TableBuilder

__all__ = [
    'JsonNormalizer',
    'ValueKind',
    'classify_value',
    'TableBuilder'
]
