import pytest

from JsonToDDL.database.dialects import Engine, get_dialect
from JsonToDDL.options import GenerationOptions


def test_parse_is_case_insensitive():
    assert Engine.parse("MySQL") is Engine.MYSQL
    assert Engine.parse(" postgres ") is Engine.POSTGRES
    assert Engine.parse(Engine.SQLITE) is Engine.SQLITE


def test_parse_rejects_unknown_engine():
    with pytest.raises(ValueError, match="oracle"):
        Engine.parse("oracle")


def test_every_engine_has_a_dialect():
    for engine in Engine:
        assert get_dialect(engine).engine is engine
        assert get_dialect(engine.value) is get_dialect(engine)


@pytest.mark.parametrize("engine, primary_key", [
    (Engine.SQLITE, '"id" integer primary key autoincrement'),
    (Engine.MYSQL, "`id` integer primary key auto_increment"),
    (Engine.POSTGRES, '"id" serial primary key'),
])
def test_primary_key_clause(engine, primary_key):
    assert get_dialect(engine).primary_key_column() == primary_key


def test_quote_identifier(sqlite, mysql, postgres):
    assert sqlite.quote_identifier("order") == '"order"'
    assert postgres.quote_identifier("user") == '"user"'
    assert mysql.quote_identifier("group") == "`group`"
    assert sqlite.quote_identifier('a"b') == '"a""b"'
    assert mysql.quote_identifier("a`b") == "`a``b`"


def test_text_and_date_types(sqlite, mysql, postgres):
    options = GenerationOptions()
    assert sqlite.text_column_type(options) == "text(65535)"
    assert mysql.text_column_type(options) == "text(65535)"
    assert postgres.text_column_type(options) == "varchar(65535)"
    assert postgres.text_column_type(GenerationOptions(text_length=255)) == "varchar(255)"
    assert (sqlite.date_type, mysql.date_type, postgres.date_type) == ("datetime", "datetime", "date")


def test_boolean_literals(sqlite, mysql, postgres):
    assert (mysql.boolean_literal(True), mysql.boolean_literal(False)) == ("1", "0")
    assert (sqlite.boolean_literal(True), sqlite.boolean_literal(False)) == ("true", "false")
    assert (postgres.boolean_literal(True), postgres.boolean_literal(False)) == ("true", "false")


def test_table_options_only_for_mysql(sqlite, mysql, postgres):
    options = GenerationOptions()
    assert mysql.table_options(options) == " ENGINE InnoDB CHARACTER SET utf8 COLLATE utf8_general_ci"
    assert sqlite.table_options(options) == ""
    assert postgres.table_options(options) == ""


def test_table_options_are_configurable(mysql):
    options = GenerationOptions(character_set="utf8mb4", collation="utf8mb4_unicode_ci", storage_engine="MyISAM")
    assert mysql.table_options(options) == " ENGINE MyISAM CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"


def test_quote_string_escapes_quotes(sqlite, mysql):
    assert sqlite.quote_string("O'Brien") == "'O''Brien'"
    assert sqlite.quote_string("C:\\temp") == "'C:\\temp'"
    assert mysql.quote_string("C:\\temp") == "'C:\\\\temp'"


def test_text_length_must_be_positive():
    with pytest.raises(ValueError):
        GenerationOptions(text_length=0)
