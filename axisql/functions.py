"""Query helper functions over rows carrying an id, a name and an age."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

MAX_AGE = 150
DEFAULT_CASE_RESULT = "DEFAULT"


@dataclass
class Row:
    """A row with an id, a name and an age."""

    id: int
    name: str
    age: int


@dataclass
class CaseCondition:
    """One branch of a CASE expression: a value to match and its result."""

    condition: str
    result: str


def where_filter(record: Row, min_age: int) -> bool:
    """Tell whether the row's age is at least min_age."""
    return record.age >= min_age


def order_by_age(records: Iterable[Row]) -> list[Row]:
    """Return the rows sorted by ascending age."""
    return sorted(records, key=lambda row: row.age)


def join_records(table1: Iterable[Row], table2: Iterable[Row]) -> list[Row]:
    """Return rows of table1 once for every row of table2 with the same id."""
    right_ids = [row.id for row in table2]
    return [left for left in table1 for right_id in right_ids if left.id == right_id]


def format_join(rows: Iterable[Row]) -> str:
    """Render joined rows as a tab-separated table."""
    lines = ["ID\tName\tAge", "-" * 20]
    lines.extend(f"{row.id}\t{row.name}\t{row.age}" for row in rows)
    return "\n".join(lines) + "\n"


def group_by_age(records: Iterable[Row]) -> dict[int, int]:
    """Count rows per age, returning ages in ascending order."""
    counts = Counter()
    for row in records:
        if not 0 <= row.age < MAX_AGE:
            raise ValueError(f"age {row.age} is outside 0..{MAX_AGE - 1}")
        counts[row.age] += 1
    return dict(sorted(counts.items()))


def format_groups(counts: dict[int, int]) -> str:
    """Render age counts as a tab-separated table."""
    lines = ["Age\tCount", "-" * 16]
    lines.extend(f"{age}\t{count}" for age, count in sorted(counts.items()) if count > 0)
    return "\n".join(lines) + "\n"


def case_when(value: str, conditions: Iterable[CaseCondition]) -> str:
    """Return the result of the first condition equal to value, else DEFAULT."""
    return next(
        (c.result for c in conditions if c.condition == value), DEFAULT_CASE_RESULT
    )


def _moment(moment: datetime | None) -> datetime:
    return datetime.now() if moment is None else moment


def get_date(moment: datetime | None = None) -> str:
    """Format a moment (local now by default) as YYYY-MM-DD."""
    return _moment(moment).strftime("%Y-%m-%d")


def get_now(moment: datetime | None = None) -> str:
    """Format a moment (local now by default) as YYYY-MM-DD HH:MM:SS."""
    return _moment(moment).strftime("%Y-%m-%d %H:%M:%S")


def get_time(moment: datetime | None = None) -> str:
    """Format a moment (local now by default) as HH:MM:SS."""
    return _moment(moment).strftime("%H:%M:%S")