"""Interactive command line for building a database schema."""

from __future__ import annotations

import sys

from axisql.database import Database, DatabaseError, DataType, TableNotFoundError

PROMPT = "> "

_TYPES = {
    "STRING": DataType.STRING,
    "NUMBER": DataType.NUMBER,
    "BOOLEAN": DataType.BOOLEAN,
    "BINARY": DataType.BINARY,
}


def process_command(db: Database, command: str) -> str:
    """Apply one command to db and return the message it produces.

    Raises ValueError for an unknown command or data type, and DatabaseError
    when the database rejects the change.
    """
    if command.startswith("CREATE DATABASE "):
        fresh = Database(command[len("CREATE DATABASE "):])
        db.name = fresh.name
        db.tables.clear()
        return f"AXISQL:: Data base '{db.name}' created!."
    if command.startswith("CREATE TABLE "):
        name = command[len("CREATE TABLE "):]
        db.create_table(name)
        return f"AXISQL:: Table '{name}' created in the data base '{db.name}'."
    if command.startswith("ADD COLUMN "):
        words = command[len("ADD COLUMN "):].split()
        table_name, column_name, type_name = (words + ["", "", ""])[:3]
        if type_name not in _TYPES:
            raise ValueError(f"Unknown data type '{type_name}'")
        db.add_column(table_name, column_name, _TYPES[type_name])
        return f"AXISQL:: Column '{column_name}' added to the table '{table_name}'."
    if command == "SHOW DATABASE":
        return "\n" + db.show().rstrip("\n")
    raise ValueError(f"Unknown command '{command}'")


def _report(db: Database, command: str) -> str:
    try:
        return process_command(db, command)
    except TableNotFoundError as exc:
        return str(exc)
    except DatabaseError as exc:
        return f"ERROR:: {exc}"
    except ValueError as exc:
        return f"Error: {exc}"


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input until EXIT or end of input."""
    db = Database("")
    print("AXISQL CLI - Enter commands:")
    while True:
        print(PROMPT, end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            break
        command = line.split("\n", 1)[0]
        if command == "EXIT":
            break
        print(_report(db, command))
    print("Exiting AXISQL CLI...")
    return 0