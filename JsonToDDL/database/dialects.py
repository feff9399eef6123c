# Contains the per-engine SQL fragments used by the table builder and the writer
from dataclasses import dataclass
from enum import Enum


class Engine(Enum):
    """Supported SQL engines, listed in the order their output is printed."""
    SQLITE = "sqlite"
    MYSQL = "mysql"
    POSTGRES = "postgres"

    @classmethod
    def parse(cls, name):
        """
        Look up an engine by its name, case-insensitively.

        Raises:
            ValueError: If the name is not one of the supported engines
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            supported = ", ".join(engine.value for engine in cls)
            raise ValueError(f"Unknown SQL engine '{name}' (supported: {supported})") from None


@dataclass(frozen=True)
class Dialect:
    """
    Spelling differences between engines. Holds no state beyond these strings.
    """
    engine: Engine
    label: str
    primary_key_type: str
    text_type: str
    date_type: str
    true_literal: str
    false_literal: str
    empty_insert: str
    identifier_quote: str = '"'
    escape_backslashes: bool = False
    has_table_options: bool = False

    def quote_identifier(self, name):
        """Quote a table or column name so reserved words (order, group, user) stay usable."""
        quote = self.identifier_quote
        return quote + name.replace(quote, quote * 2) + quote

    def primary_key_column(self):
        return f"{self.quote_identifier('id')} {self.primary_key_type}"

    def text_column_type(self, options):
        return f"{self.text_type}({options.text_length})"

    def boolean_literal(self, value):
        return self.true_literal if value else self.false_literal

    def table_options(self, options):
        """Suffix placed after the closing parenthesis of CREATE TABLE."""
        if not self.has_table_options:
            return ""
        return (f" ENGINE {options.storage_engine}"
                f" CHARACTER SET {options.character_set} COLLATE {options.collation}")

    def quote_string(self, value):
        """Single-quote a string, escaping embedded quotes (and backslashes for MySQL)."""
        if self.escape_backslashes:
            value = value.replace("\\", "\\\\")
        return "'" + value.replace("'", "''") + "'"


_DIALECTS = {
    Engine.SQLITE: Dialect(
        engine=Engine.SQLITE,
        label="SQLite",
        primary_key_type="integer primary key autoincrement",
        text_type="text",
        date_type="datetime",
        true_literal="true",
        false_literal="false",
        empty_insert="DEFAULT VALUES",
    ),
    Engine.MYSQL: Dialect(
        engine=Engine.MYSQL,
        label="MySQL",
        primary_key_type="integer primary key auto_increment",
        text_type="text",
        date_type="datetime",
        true_literal="1",
        false_literal="0",
        empty_insert="() VALUES ()",
        identifier_quote="`",
        escape_backslashes=True,
        has_table_options=True,
    ),
    Engine.POSTGRES: Dialect(
        engine=Engine.POSTGRES,
        label="Postgres",
        primary_key_type="serial primary key",
        text_type="varchar",
        date_type="date",
        true_literal="true",
        false_literal="false",
        empty_insert="DEFAULT VALUES",
    ),
}


def get_dialect(engine):
    """
    Return the Dialect for an Engine member or engine name.

    Args:
        engine: Engine member or its name ("sqlite", "mysql", "postgres")

    Returns:
        Dialect: The engine's SQL fragments
    """
    return _DIALECTS[Engine.parse(engine)]
