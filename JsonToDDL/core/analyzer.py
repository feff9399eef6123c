# Contains the value-kind classification shared by the table builder and the writer
import logging
import math
import re
from enum import Enum

import pandas as pd

from ..errors import UnsupportedTypeError

logger = logging.getLogger(__name__)

# ISO-8601 timestamps: yyyy-MM-ddTHH:mm:ss with optional fraction and offset
_DATE_PATTERN = re.compile(
    r"\d{4}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12]\d|3[01])"
    r"T(?:[01]\d|2[0-3]):[0-5]\d:[0-5]\d(?:\.\d{1,7})?(?:Z|[+-]\d{2}:\d{2})?"
)


class ValueKind(Enum):
    OBJECT = "Object"
    ARRAY = "Array"
    STRING = "String"
    INTEGER = "Integer"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    DATE = "Date"
    NULL = "Null"
    UNSUPPORTED = "Unsupported"

    @property
    def is_scalar(self):
        return self in SCALAR_KINDS


SCALAR_KINDS = frozenset({
    ValueKind.STRING,
    ValueKind.INTEGER,
    ValueKind.FLOAT,
    ValueKind.BOOLEAN,
    ValueKind.DATE,
})


def is_date_string(value):
    """
    Check whether a string should be treated as a timestamp rather than text.

    Only full ISO-8601 timestamps qualify ("2021-03-04T05:06:07", optionally with
    fractional seconds and a "Z" or "+hh:mm" offset). Plain dates stay text.
    """
    if not 19 <= len(value) <= 40 or not value[0].isdigit() or value[10] != "T":
        return False
    if not _DATE_PATTERN.fullmatch(value):
        return False
    try:
        pd.Timestamp(value)
    except (ValueError, OverflowError):
        # Matches the pattern but is not a real calendar date (e.g. February 30)
        return False
    return True


def format_date_string(value):
    """Reformat a timestamp string as 'YYYY-MM-DD HH:MM:SS' in its own wall-clock time."""
    return pd.Timestamp(value).strftime("%Y-%m-%d %H:%M:%S")


def classify_value(value):
    """
    Determine the JSON kind of a parsed value.

    Args:
        value: Any value produced by json.loads

    Returns:
        ValueKind: The value's kind; UNSUPPORTED for anything JSON cannot produce
    """
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        if pd.isna(value):
            return ValueKind.NULL
        return ValueKind.FLOAT if math.isfinite(value) else ValueKind.UNSUPPORTED
    if isinstance(value, str):
        return ValueKind.DATE if is_date_string(value) else ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    if value is None:
        return ValueKind.NULL
    return ValueKind.UNSUPPORTED


def kind_name(value, kind=None):
    """Human-readable kind of a value for error messages."""
    kind = kind or classify_value(value)
    if kind is ValueKind.UNSUPPORTED:
        return type(value).__name__
    return kind.value


def member_path(path, key):
    return f"{path}.{key}"


def element_path(path, index):
    return f"{path}[{index}]"


def array_row_template(array, path, strict=False):
    """
    Describe the child table an array turns into by sampling its first element.

    Scalar arrays become a single "value" column typed from element 0; arrays of
    objects take element 0's shape. Only element 0 decides the shape, so
    keys that only appear in later objects get no column.

    Args:
        array: The JSON array
        path: JSON path of the array, used in error messages
        strict: Reject arrays that contain null elements

    Returns:
        dict or None: A sample row to build the child table from, or None for an empty array

    Raises:
        UnsupportedTypeError: If element 0 is an array or an unsupported value, or in strict mode any element is null
    """
    if not array:
        return None

    if strict:
        for index, item in enumerate(array):
            if classify_value(item) is ValueKind.NULL:
                raise UnsupportedTypeError(element_path(path, index), ValueKind.NULL.value, context="array")

    first = array[0]
    kind = classify_value(first)
    if kind is ValueKind.OBJECT:
        if any(isinstance(item, dict) and item.keys() - first.keys() for item in array[1:]):
            logger.warning("Array at '%s' has objects with keys missing from its first element; "
                           "those keys get no column", path)
        return first
    if kind.is_scalar:
        return {"value": first}
    if kind is ValueKind.NULL:
        return {"value": None}
    raise UnsupportedTypeError(element_path(path, 0), kind_name(first, kind), context="array")
