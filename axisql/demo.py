"""Build and print a small sample database."""

from __future__ import annotations

from axisql.cli import process_command
from axisql.database import Database

DEMO_COMMANDS = (
    "CREATE DATABASE potato_express",
    "CREATE TABLE user",
    "ADD COLUMN user 1 NUMBER",
    "ADD COLUMN user Nombre STRING",
    "ADD COLUMN user true BOOLEAN",
    "ADD COLUMN user avatar BINARY",
)


def _build(log) -> Database:
    db = Database("")
    for command in DEMO_COMMANDS:
        log(process_command(db, command))
    return db


def build_demo_database() -> Database:
    """Return the sample database with its user table and columns."""
    return _build(lambda message: None)


def main(argv: list[str] | None = None) -> int:
    """Print the steps of building the sample database, then its listing."""
    print("AXISQL - SQL Database Engine\n")
    db = _build(print)
    print(process_command(db, "SHOW DATABASE"))
    return 0