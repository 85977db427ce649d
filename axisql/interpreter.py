"""Interpreter for .axisql script files."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import TextIO

from axisql.functions import (
    Row,
    format_groups,
    format_join,
    group_by_age,
    join_records,
    order_by_age,
)

RED = "\033[1;31m"
RESET = "\033[0m"

MAX_FUNCTIONS = 20
TOKEN_LIMIT = 49
EXTENSION = ".axisql"
USAGE = "Usage: axisql ./PATH/TO/AXISQL.axisql"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class InterpreterError(Exception):
    """Raised when a script or statement cannot be processed.

    A fatal error stops the processing of the rest of a file.
    """

    def __init__(self, message: str, fatal: bool = False) -> None:
        super().__init__(message)
        self.fatal = fatal


@dataclass
class _Function:
    name: str
    body: str


class FunctionRegistry:
    """A bounded list of user-defined functions."""

    def __init__(self, capacity: int = MAX_FUNCTIONS) -> None:
        self.capacity = capacity
        self._functions: list[_Function] = []

    def __len__(self) -> int:
        return len(self._functions)

    def create(self, name: str, body: str) -> None:
        """Register a function under the given name."""
        if len(self._functions) >= self.capacity:
            raise InterpreterError("Maximum number of functions reached.")
        self._functions.append(_Function(name, body))

    def execute(self, name: str) -> str:
        """Return the body of the first function with the given name."""
        for function in self._functions:
            if function.name == name:
                return function.body
        raise InterpreterError(f"Function '{name}' not found.")


def is_axisql_file(filename: str) -> bool:
    """Tell whether the text after the last dot of filename is the script extension."""
    dot = filename.rfind(".")
    return dot >= 0 and filename[dot:] == EXTENSION


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _scan(text: str, pattern: str) -> list[str]:
    """Match text against a pattern of literal words and %s fields.

    Whitespace in the pattern matches any run of whitespace, including none;
    each %s takes up to TOKEN_LIMIT non-space characters. Returns the fields
    captured before the first mismatch.
    """
    values: list[str] = []
    pos = 0
    for index, piece in enumerate(pattern.split()):
        if index:
            pos = _skip_space(text, pos)
        if piece == "%s":
            pos = _skip_space(text, pos)
            end = pos
            while end < len(text) and not text[end].isspace() and end - pos < TOKEN_LIMIT:
                end += 1
            if end == pos:
                break
            values.append(text[pos:end])
            pos = end
        elif text.startswith(piece, pos):
            pos += len(piece)
        else:
            break
    return values


def _cut(text: str) -> str:
    """Drop everything from the first semicolon on."""
    return text.split(";", 1)[0]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _is_skipped(line: str) -> bool:
    return not line or line.startswith("--") or ("/*" in line and "*/" in line)


class Interpreter:
    """Runs script statements against a current database, table and result set."""

    def __init__(self, results: list[Row] | None = None, out: TextIO | None = None) -> None:
        self.current_db = ""
        self.current_table = ""
        self.results: list[Row] = list(results) if results is not None else []
        self.out = out

    def execute_line(self, line: str) -> list[str]:
        """Execute one statement and return the lines of output it produces."""
        line = line.split("\n", 1)[0]
        if _is_skipped(line):
            return []
        if line.startswith("CREATE DATABASE"):
            values = _scan(line, "CREATE DATABASE %s")
            if values:
                self.current_db = _cut(values[0])
            return [f"Database '{self.current_db}' has been created successfully."]
        if line.startswith("USE DATABASE"):
            values = _scan(line, "USE DATABASE %s")
            if values:
                self.current_db = _cut(values[0])
            return [f"Switched to database '{self.current_db}'."]
        if line.startswith("CREATE TABLE"):
            if not self.current_db:
                raise InterpreterError(
                    "No database selected. Use 'USE DATABASE <name>' before creating a table."
                )
            values = _scan(line, "CREATE TABLE %s")
            if values:
                self.current_table = _cut(values[0])
            return [
                f"Table '{self.current_table}' has been created in database '{self.current_db}'."
            ]
        if line.startswith("INSERT INTO"):
            values = _scan(line, "INSERT INTO %s")
            if values:
                self.current_table = values[0]
            return [
                f"Record inserted into table '{self.current_table}' in database '{self.current_db}'."
            ]
        if line.startswith("SELECT"):
            return self._select(line)
        if line.startswith("UPDATE"):
            return self._update(line)
        return []

    def _select(self, line: str) -> list[str]:
        values = _scan(line, "SELECT * FROM %s")
        if values:
            self.current_table = values[0]
        output = [
            f"Query executed on table '{self.current_table}' in database "
            f"'{self.current_db}': displaying results."
        ]
        if "ORDER BY" in line:
            self.results = order_by_age(self.results)
        if "JOIN" in line:
            values = _scan(line, "SELECT * FROM %s JOIN %s")
            if values:
                self.current_table = values[0]
            join_table = values[1] if len(values) > 1 else ""
            output.append(
                f"Executing JOIN between '{self.current_table}' and '{join_table}' "
                f"in database '{self.current_db}'."
            )
            joined = join_records(self.results, self.results)
            output.extend(format_join(joined).splitlines())
        if "GROUP BY" in line:
            output.extend(format_groups(group_by_age(self.results)).splitlines())
        return output

    def _update(self, line: str) -> list[str]:
        values = _scan(line, "UPDATE %s SET %s = %s WHERE %s = %s")
        if len(values) < 5 or not _cut(values[0]):
            raise InterpreterError(
                "Invalid UPDATE syntax or missing table name.", fatal=True
            )
        table = _cut(values[0])
        column, value, condition_column = values[1], values[2], values[3]
        condition_value = _cut(values[4])
        updated = 0
        if condition_column == "name" and column == "age":
            for row in self.results:
                if row.name == condition_value:
                    row.age = _atoi(value)
                    updated += 1
        if not updated:
            raise InterpreterError(f"No matching records found in table '{table}'.")
        return [f"Updated {updated} record(s) in table '{table}'."]

    def _write(self, text: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(text + "\n")

    def run_file(self, path: str) -> bool:
        """Execute every statement of a script file, writing output as it goes.

        Returns True when the whole file was processed, False when a fatal
        statement error stopped it. Raises InterpreterError when the file has
        the wrong extension or cannot be opened.
        """
        if not is_axisql_file(path):
            raise InterpreterError("The file does not have the .axisql extension")
        try:
            handle = open(path, encoding="utf-8", errors="replace")
        except OSError as exc:
            raise InterpreterError(f"Could not open file {path}") from exc
        with handle:
            for raw in handle:
                try:
                    lines = self.execute_line(raw)
                except InterpreterError as exc:
                    self._write(f"{RED}Error: {exc}{RESET}")
                    if exc.fatal:
                        return False
                    continue
                for text in lines:
                    self._write(text)
        self._write("File processed successfully.")
        return True


def process_axisql_file(filepath: str, out: TextIO | None = None) -> bool:
    """Run a script file, reporting errors to out; return True on full success."""
    interpreter = Interpreter(out=out)
    try:
        return interpreter.run_file(filepath)
    except InterpreterError as exc:
        interpreter._write(f"{RED}Error: {exc}{RESET}")
        return False


def main(argv: list[str] | None = None) -> int:
    """Run the script named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    process_axisql_file(args[0])
    return 0