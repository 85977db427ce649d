"""In-memory database schema and a simple record store."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAX_TABLES = 10
MAX_RECORDS = 100
MAX_COLUMNS = 10
NAME_LENGTH = 50


def _truncate(name: str) -> str:
    """Clip a name to the space a fixed-size name field can hold."""
    return name[: NAME_LENGTH - 1]


class DatabaseError(Exception):
    """Raised when an operation on the database cannot be carried out."""


class TableNotFoundError(DatabaseError):
    """Raised when a table with the requested name does not exist."""

    def __init__(self, table_name: str) -> None:
        super().__init__(f"Table '{table_name}' not found.")
        self.table_name = table_name


class DataType(IntEnum):
    """Column data types."""

    STRING = 0
    NUMBER = 1
    BOOLEAN = 2
    BINARY = 3


@dataclass
class Column:
    """A named, typed column of a table."""

    name: str
    type: DataType

    def __post_init__(self) -> None:
        self.name = _truncate(self.name)
        self.type = DataType(self.type)


@dataclass
class Table:
    """A table holding up to MAX_COLUMNS columns."""

    name: str
    columns: list[Column] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _truncate(self.name)


@dataclass
class Database:
    """A named database holding up to MAX_TABLES tables."""

    name: str
    tables: list[Table] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = _truncate(self.name)

    def create_table(self, name: str) -> Table:
        """Add an empty table and return it."""
        if len(self.tables) >= MAX_TABLES:
            raise DatabaseError("No more tables can be added.")
        table = Table(name)
        self.tables.append(table)
        return table

    def _find_table(self, table_name: str) -> Table:
        for table in self.tables:
            if table.name == table_name:
                return table
        raise TableNotFoundError(table_name)

    def add_column(self, table_name: str, column_name: str, type: DataType) -> Column:
        """Append a column to the first table with the given name and return it."""
        table = self._find_table(table_name)
        if len(table.columns) >= MAX_COLUMNS:
            raise DatabaseError(
                "The table already has the maximum number of columns allowed."
            )
        column = Column(column_name, DataType(type))
        table.columns.append(column)
        return column

    def show(self) -> str:
        """Return a text listing of the database, its tables and columns."""
        lines = [f"Data base: {self.name}"]
        for table in self.tables:
            lines.append(f"  Table: {table.name}")
            lines.extend(
                f"    - {column.name} ({int(column.type)})" for column in table.columns
            )
        return "\n".join(lines) + "\n"


@dataclass
class Record:
    """A stored record: an identifier and a name."""

    id: int
    name: str

    def __post_init__(self) -> None:
        self.name = _truncate(self.name)


class RecordStore:
    """An ordered collection of records with a fixed capacity."""

    def __init__(self, capacity: int = MAX_RECORDS) -> None:
        self.capacity = capacity
        self._records: list[Record] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))

    def create(self, id: int, name: str) -> Record:
        """Append a new record and return it."""
        if len(self._records) >= self.capacity:
            raise DatabaseError("Database is full.")
        record = Record(id, name)
        self._records.append(record)
        return record

    def _index_of(self, id: int) -> int:
        for index, record in enumerate(self._records):
            if record.id == id:
                return index
        raise DatabaseError(f"Record with ID {id} not found.")

    def delete(self, id: int) -> Record:
        """Remove the first record with the given id and return it."""
        return self._records.pop(self._index_of(id))

    def read(self) -> list[Record]:
        """Return the current records in insertion order."""
        return list(self._records)

    def update(self, id: int, new_name: str) -> Record:
        """Rename the first record with the given id and return it."""
        record = self._records[self._index_of(id)]
        record.name = _truncate(new_name)
        return record