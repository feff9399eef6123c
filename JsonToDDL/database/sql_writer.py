# Contains INSERT statement generation
import logging
import re

from ..core.analyzer import (
    ValueKind,
    array_row_template,
    classify_value,
    element_path,
    format_date_string,
    kind_name,
    member_path,
)
from ..errors import UnsupportedTypeError
from ..options import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)


def make_sql_safe(name):
    """
    Make a JSON key usable as a SQL identifier.

    Characters outside [A-Za-z0-9_] become underscores and a leading digit gets an
    underscore prefix. Keys that are already valid identifiers come back unchanged.

    Args:
        name: Original name

    Returns:
        str: SQL-safe name
    """
    if not name:
        return "_empty"
    safe_name = re.sub(r"[^a-zA-Z0-9_]", "_", str(name))
    return f"_{safe_name}" if safe_name[0].isdigit() else safe_name


def table_name_for(parent_table_name, table_name):
    """Name of the table a key maps to: the parent's name and the key joined by '_'."""
    if parent_table_name is None:
        return table_name
    return f"{parent_table_name}_{table_name}"


def column_names_for(value, parent_table_name=None):
    """
    Give every key of an object a unique column (or child table) name.

    Keys go through make_sql_safe, and a name already taken by "id", the
    "<parent>_id" foreign key or an earlier key gets "_1", "_2", ... appended.
    Names are compared case-insensitively because SQLite and MySQL do so.
    The table builder and the writer both call this, so DDL and DML agree.

    Args:
        value: The JSON object
        parent_table_name: Full name of the parent table, None for the root

    Returns:
        dict: JSON key -> name, in the object's key order
    """
    used = {"id"}
    if parent_table_name is not None:
        used.add(f"{parent_table_name}_id".lower())

    names = {}
    for key in value:
        name = make_sql_safe(key)
        candidate = name
        suffix = 0
        while candidate.lower() in used:
            suffix += 1
            candidate = f"{name}_{suffix}"
        used.add(candidate.lower())
        names[key] = candidate
    return names


def format_literal(value, kind, dialect):
    """
    Format a scalar JSON value as a SQL literal for the given dialect.

    Args:
        value: The scalar value
        kind: Its ValueKind
        dialect: Target Dialect

    Returns:
        str: The literal
    """
    if kind is ValueKind.BOOLEAN:
        return dialect.boolean_literal(value)
    elif kind is ValueKind.INTEGER:
        return str(int(value))
    elif kind is ValueKind.FLOAT:
        # repr always uses '.' as the decimal point
        return repr(float(value))
    elif kind is ValueKind.DATE:
        return dialect.quote_string(format_date_string(value))
    elif kind is ValueKind.STRING:
        return dialect.quote_string(value)
    raise ValueError(f"{kind.value} values have no SQL literal")


class SqlWriter:
    """
    Generates INSERT statements that recreate a JSON object's values.

    Child rows reference their parent through "(SELECT MAX(id) FROM parent)", i.e. the
    most recently inserted parent row. The generated script is only correct when it
    runs start-to-finish in a single session with no other writers on those tables.
    """

    def __init__(self, dialect, options=DEFAULT_OPTIONS):
        self.dialect = dialect
        self.options = options

    def emit(self, value, parent_table_name=None, table_name="main", path=None):
        """
        Generate the INSERT statement for one object and, after it, those of its children.

        Args:
            value: The JSON object
            parent_table_name: Full name of the parent table, None for the root
            table_name: Name of this object's table relative to its parent
            path: JSON path of the object, used in error messages

        Returns:
            str: Newline-separated statements, each terminated by ';'

        Raises:
            UnsupportedTypeError: If a value cannot be inserted
        """
        full_name = table_name_for(parent_table_name, table_name)
        path = path or table_name

        columns = []
        values = []
        if parent_table_name is not None:
            columns.append(f"{parent_table_name}_id")
            values.append(self._parent_id(parent_table_name))

        names = column_names_for(value, parent_table_name)
        children = []
        for key, item in value.items():
            column_name = names[key]
            item_path = member_path(path, key)
            kind = classify_value(item)

            if kind.is_scalar:
                columns.append(column_name)
                values.append(format_literal(item, kind, self.dialect))
            elif kind is ValueKind.OBJECT:
                children.append(self.emit(item, full_name, column_name, item_path))
            elif kind is ValueKind.ARRAY:
                children.extend(self._emit_array(item, full_name, column_name, item_path))
            elif kind is ValueKind.NULL:
                # Nulls are left out of the row; the column defaults to null
                if self.options.strict:
                    raise UnsupportedTypeError(item_path, kind.value)
            else:
                raise UnsupportedTypeError(item_path, kind_name(item, kind))

        logger.debug("Emitting row for %s with %d column(s)", full_name, len(columns))
        return "\n".join([self._insert(full_name, columns, values)] + children)

    def _emit_array(self, array, parent_table_name, key, path):
        """
        Generate one row per array element in the "<parent>_<key>" table.

        Whether the rows are scalar "value" rows or object rows is decided by element 0,
        the same element the table definition was sampled from.
        """
        if array_row_template(array, path, self.options.strict) is None:
            return []

        object_rows = classify_value(array[0]) is ValueKind.OBJECT
        table_name = table_name_for(parent_table_name, key)
        statements = []

        for index, item in enumerate(array):
            item_path = element_path(path, index)
            kind = classify_value(item)

            if kind is ValueKind.NULL:
                if self.options.strict:
                    raise UnsupportedTypeError(item_path, kind.value, context="array")
                if not object_rows:
                    statements.append(self._insert(
                        table_name,
                        [f"{parent_table_name}_id"],
                        [self._parent_id(parent_table_name)],
                    ))
            elif object_rows and kind is ValueKind.OBJECT:
                statements.append(self.emit(item, parent_table_name, key, item_path))
            elif not object_rows and kind.is_scalar:
                statements.append(self._insert(
                    table_name,
                    [f"{parent_table_name}_id", "value"],
                    [self._parent_id(parent_table_name), format_literal(item, kind, self.dialect)],
                ))
            else:
                raise UnsupportedTypeError(item_path, kind_name(item, kind), context="array")

        return statements

    def _insert(self, table_name, columns, values):
        table = self.dialect.quote_identifier(table_name)
        if not columns:
            return f"INSERT INTO {table} {self.dialect.empty_insert};"
        quoted = ", ".join(self.dialect.quote_identifier(column) for column in columns)
        return f"INSERT INTO {table} ({quoted}) VALUES ({', '.join(values)});"

    def _parent_id(self, parent_table_name):
        quote = self.dialect.quote_identifier
        return f"(SELECT MAX({quote('id')}) FROM {quote(parent_table_name)})"
