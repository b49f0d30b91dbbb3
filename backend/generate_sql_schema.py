import logging
import sys
from typing import Optional

from sqlalchemy import Enum
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.schema import CreateIndex, CreateTable

from config import settings
from database import Base, engine

logger = logging.getLogger(__name__)

DIALECTS = {
    "sqlite": sqlite.dialect,
    "postgresql": postgresql.dialect,
    "mysql": mysql.dialect,
}


def get_all_metadata():
    """Import every model and return Base.metadata."""
    import models  # noqa: F401

    return Base.metadata


def render_schema_sql(dialect_name: Optional[str] = None) -> str:
    """Return CREATE TABLE/INDEX statements for all tables, parents first.

    Without a dialect name the configured database's dialect is used.
    """
    if dialect_name is None:
        dialect = engine.dialect
    elif dialect_name in DIALECTS:
        dialect = DIALECTS[dialect_name]()
    else:
        raise ValueError(f"Unsupported dialect: {dialect_name}")

    metadata = get_all_metadata()
    statements = [f"-- TermoFlexPro schema ({dialect.name})"]

    # Postgres needs the enum types before the tables that use them
    if dialect.name == "postgresql":
        enum_types = {}
        for table in metadata.sorted_tables:
            for column in table.columns:
                if isinstance(column.type, Enum) and column.type.name not in enum_types:
                    enum_types[column.type.name] = column.type.enums
        for name, values in enum_types.items():
            literals = ", ".join(f"'{v}'" for v in values)
            statements.append(f"CREATE TYPE {name} AS ENUM ({literals});")

    # metadata.sorted_tables orders tables so referenced ones come first
    for table in metadata.sorted_tables:
        logger.debug("Rendering DDL for table %s", table.name)
        statements.append(str(CreateTable(table).compile(dialect=dialect)).strip() + ";")
        for index in sorted(table.indexes, key=lambda ix: ix.name):
            statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip() + ";")

    return "\n\n".join(statements) + "\n"


def generate_sql_schema(output_file: Optional[str] = None, dialect_name: Optional[str] = None) -> str:
    """Write the schema DDL to a file and return its path."""
    output_file = output_file or settings.SCHEMA_OUTPUT
    sql = render_schema_sql(dialect_name)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(sql)
    logger.info("Schema SQL written to %s", output_file)
    return output_file


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
    dialect_arg = sys.argv[1] if len(sys.argv) > 1 else None
    generate_sql_schema(dialect_name=dialect_arg)
