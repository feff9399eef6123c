# Contains CREATE TABLE generation
import logging

from .analyzer import (
    ValueKind,
    array_row_template,
    classify_value,
    element_path,
    kind_name,
    member_path,
)
from ..database.sql_writer import column_names_for, table_name_for
from ..errors import UnsupportedTypeError
from ..options import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)


class TableBuilder:
    """
    Builds table definitions from the shape of a JSON object.

    Scalars become columns. Nested objects and non-empty arrays become child tables
    named "<parent>_<key>", each with an "id" primary key and a "<parent>_id" foreign
    key. Child definitions always come after their parent's so the script can run top
    to bottom.
    """

    def __init__(self, dialect, options=DEFAULT_OPTIONS):
        self.dialect = dialect
        self.options = options

    def synthesize(self, value, parent_table_name=None, table_name="main", path=None):
        """
        Generate the CREATE TABLE statement for an object followed by those of its children.

        Args:
            value: The JSON object
            parent_table_name: Full name of the parent table, None for the root
            table_name: Name of this object's table relative to its parent
            path: JSON path of the object, used in error messages

        Returns:
            str: Newline-separated statements, each terminated by ';'

        Raises:
            UnsupportedTypeError: If a value has no column or table mapping
        """
        full_name = table_name_for(parent_table_name, table_name)
        path = path or table_name

        quote = self.dialect.quote_identifier
        parent_column = f"{parent_table_name}_id"
        columns = [self.dialect.primary_key_column()]
        if parent_table_name is not None:
            columns.append(f"{quote(parent_column)} integer not null")

        names = column_names_for(value, parent_table_name)
        # Child tables are generated now but written after this table
        children = []
        for key, item in value.items():
            column_name = names[key]
            item_path = member_path(path, key)
            kind = classify_value(item)

            if kind is ValueKind.OBJECT:
                children.append(self.synthesize(item, full_name, column_name, item_path))
            elif kind is ValueKind.ARRAY:
                template = array_row_template(item, item_path, self.options.strict)
                if template is not None:
                    children.append(self.synthesize(template, full_name, column_name, element_path(item_path, 0)))
            else:
                columns.append(f"{quote(column_name)} {self._column_type(item, kind, item_path)} null default null")

        if parent_table_name is not None:
            columns.append(f"FOREIGN KEY ({quote(parent_column)}) REFERENCES {quote(parent_table_name)}({quote('id')})")

        create = "CREATE TABLE IF NOT EXISTS" if self.options.if_not_exists else "CREATE TABLE"
        statement = f"{create} {quote(full_name)} ({', '.join(columns)}){self.dialect.table_options(self.options)};"
        logger.debug("Synthesized table %s with %d child table(s)", full_name, len(children))

        return "\n".join([statement] + children)

    def _column_type(self, value, kind, path):
        """Map a scalar (or null) value kind to the dialect's column type."""
        if kind is ValueKind.INTEGER:
            return "integer"
        elif kind is ValueKind.FLOAT:
            return "float"
        elif kind is ValueKind.BOOLEAN:
            return "boolean"
        elif kind is ValueKind.DATE:
            return self.dialect.date_type
        elif kind is ValueKind.STRING:
            return self.dialect.text_column_type(self.options)
        elif kind is ValueKind.NULL and not self.options.strict:
            # The real type is unknown, text accepts anything inserted later
            return self.dialect.text_column_type(self.options)
        raise UnsupportedTypeError(path, kind_name(value, kind))
