# Contains the main entry points: the library function and the command line
import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from .core.normalizer import JsonNormalizer
from .core.table_builder import TableBuilder
from .database.dialects import Engine, get_dialect
from .database.sql_writer import SqlWriter, make_sql_safe
from .errors import JsonToSqlError, MalformedInputError
from .options import DEFAULT_OPTIONS, GenerationOptions

logger = logging.getLogger(__name__)


@dataclass
class DialectScript:
    """The statements generated for one engine."""
    engine: Engine
    ddl: str
    dml: Optional[str] = None

    def render(self):
        """Header line, DDL block and, when present, the insert block."""
        lines = [f"-- {get_dialect(self.engine).label}", self.ddl]
        if self.dml is not None:
            lines += ["-- Insert", self.dml]
        return "\n".join(lines) + "\n"


def ordered_engines(dialects):
    """Deduplicate the requested engines and put them in output order."""
    requested = {Engine.parse(dialect) for dialect in dialects}
    if not requested:
        raise ValueError("At least one SQL engine must be selected")
    return [engine for engine in Engine if engine in requested]


def generate_dialect_script(document, dialect, table_name="main", insert=False, options=DEFAULT_OPTIONS):
    """
    Run one dialect pass: table definitions and, if requested, insert statements.

    Args:
        document: The root JSON object
        dialect: Engine member or engine name
        table_name: Name of the root table
        insert: Also generate INSERT statements
        options: GenerationOptions

    Returns:
        DialectScript: The complete output of this pass

    Raises:
        UnsupportedTypeError: If the document holds a value that cannot be mapped;
            nothing of this pass is returned in that case
    """
    sql_dialect = get_dialect(dialect)
    root_name = make_sql_safe(table_name)

    ddl = TableBuilder(sql_dialect, options).synthesize(document, None, root_name, path=table_name)
    dml = None
    if insert:
        dml = SqlWriter(sql_dialect, options).emit(document, None, root_name, path=table_name)

    logger.debug("Generated %s script for table %s", sql_dialect.label, root_name)
    return DialectScript(engine=sql_dialect.engine, ddl=ddl, dml=dml)


def process_json_to_sql(json_data, dialects, table_name="main", insert=False, options=None):
    """
    Processes JSON data into SQL scripts for the selected engines.

    Args:
        json_data: The JSON data to process (string or dict)
        dialects: Engines to generate for (Engine members or names)
        table_name: Name for the root table (default: "main")
        insert: Also generate INSERT statements for the document's values
        options: GenerationOptions, defaults apply when None

    Returns:
        str: For each engine (SQLite, MySQL, Postgres order) a header line, the
            CREATE TABLE block, the insert block when requested, and a blank line

    Raises:
        MalformedInputError: If json_data is not a JSON object
        UnsupportedTypeError: If the document holds a value that cannot be mapped
    """
    document = JsonNormalizer.load(json_data)
    options = options or DEFAULT_OPTIONS

    scripts = [
        generate_dialect_script(document, engine, table_name, insert, options)
        for engine in ordered_engines(dialects)
    ]
    return "\n".join(script.render() for script in scripts)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="json-to-ddl",
        description="Infer SQL tables from a JSON object and print CREATE TABLE (and INSERT) statements.",
    )
    parser.add_argument("-f", "--file", required=True, help="Path to the JSON file ('-' for standard input).")
    parser.add_argument("-t", "--table", default="main", help="Name of the main table.")
    parser.add_argument("-o", "--output", help="Write the script to this file instead of standard output.")
    parser.add_argument("--character", default=DEFAULT_OPTIONS.character_set, help="MySQL table character set.")
    parser.add_argument("--collate", default=DEFAULT_OPTIONS.collation, help="MySQL table collation.")
    parser.add_argument("--storage-engine", default=DEFAULT_OPTIONS.storage_engine, help="MySQL storage engine.")
    parser.add_argument("--text-length", type=int, default=DEFAULT_OPTIONS.text_length,
                        help="Width of text/varchar columns.")
    parser.add_argument("--no-if-not-exists", action="store_true",
                        help="Emit plain CREATE TABLE instead of CREATE TABLE IF NOT EXISTS.")
    parser.add_argument("--strict", action="store_true", help="Reject null values instead of mapping them to text.")
    parser.add_argument("--insert", action="store_true", help="Also print INSERT statements for the data.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to standard error.")

    dbms = parser.add_argument_group("DBMS", "At least one engine is required.")
    for engine in Engine:
        dbms.add_argument(f"--{engine.value}", dest="engines", action="append_const", const=engine,
                          help=f"{get_dialect(engine).label} engine")
    return parser


def _read_source(path):
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv=None):
    """
    Command line entry point.

    Returns:
        int: 0 on success, 1 if a dialect pass failed, 2 if the input could not be used
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.engines:
        parser.error("one of the arguments --sqlite --mysql --postgres is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = GenerationOptions(
            character_set=args.character,
            collation=args.collate,
            storage_engine=args.storage_engine,
            text_length=args.text_length,
            if_not_exists=not args.no_if_not_exists,
            strict=args.strict,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        document = JsonNormalizer.load(_read_source(args.file))
    except OSError as e:
        print(f"The JSON file could not be read.\nError: {e}", file=sys.stderr)
        return 2
    except MalformedInputError as e:
        print(f"The JSON file could not be parsed.\nError: {e}", file=sys.stderr)
        return 2

    # Each engine is an independent pass; a failing one does not stop the others
    blocks = []
    status = 0
    for engine in ordered_engines(args.engines):
        try:
            script = generate_dialect_script(document, engine, args.table, args.insert, options)
        except JsonToSqlError as e:
            logger.debug("%s pass failed", engine.value, exc_info=True)
            print(f"Parsing error ({get_dialect(engine).label}): {e}", file=sys.stderr)
            status = 1
            continue
        blocks.append(script.render())

    text = "\n".join(blocks)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)
    return status


if __name__ == "__main__":
    sys.exit(main())
