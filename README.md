# axisql

A small in-memory database engine with three ways in: an interactive
command shell that builds a schema, an interpreter for `.axisql` script
files, and a demo that builds a sample schema.

## Installation

```
pip install axisql
```

## Interactive shell

```
axiscli
```

Type one command per line. Input ends with `EXIT` or at end of input.

```
CREATE DATABASE shop
CREATE TABLE user
ADD COLUMN user name STRING
ADD COLUMN user age NUMBER
SHOW DATABASE
EXIT
```

A column type is one of `STRING`, `NUMBER`, `BOOLEAN` or `BINARY`.
`SHOW DATABASE` lists the tables and their columns, each column with the
number of its type (0 for `STRING` through 3 for `BINARY`). A database
holds at most 10 tables and a table at most 10 columns. Names are clipped
to 49 characters.

## Script interpreter

```
axisql ./queries/example.axisql
```

The file name must end in `.axisql`. The interpreter skips blank lines,
lines that begin with `--`, and lines that hold both `/*` and `*/`. Each
recognised statement prints a confirmation:

- `CREATE DATABASE <name>` and `USE DATABASE <name>` set the current
  database.
- `CREATE TABLE <name>` sets the current table; it is an error when no
  database has been set.
- `INSERT INTO <name>` sets the current table.
- `SELECT * FROM <name>` sets the current table. With `ORDER BY` the
  interpreter's result rows are sorted by age; with `JOIN` they are joined
  with themselves on id and printed; with `GROUP BY` a count per age is
  printed.
- `UPDATE <table> SET age = <n> WHERE name = <value>` sets the age of the
  result rows with that name. A statement that does not match this form
  stops the script.

Other lines are ignored. Errors are printed in red.

## Demo

```
axisql-demo
```

This builds the `potato_express` database with a `user` table and four
columns, and prints its listing.

## Library use

```python
from axisql.database import Database, DataType, RecordStore
from axisql.functions import Row, order_by_age, group_by_age, format_groups

db = Database("shop")
db.create_table("user")
db.add_column("user", "name", DataType.STRING)
print(db.show())

store = RecordStore()
store.create(1, "Ana")
store.update(1, "Ana Maria")
print(store.read())

rows = order_by_age([Row(1, "Ana", 30), Row(2, "Luis", 22)])
print(format_groups(group_by_age(rows)))
```

`axisql.database` raises `DatabaseError` when a limit is reached or a
record is missing, and `TableNotFoundError` for an unknown table.
`RecordStore` holds at most 100 records by default.

`axisql.functions` also provides `where_filter`, `join_records`,
`format_join`, `case_when` with `CaseCondition`, and `get_date`, `get_now`
and `get_time`, which format a given `datetime` or the local current time.
`group_by_age` raises `ValueError` for an age outside 0 to 149.

`axisql.interpreter` provides `Interpreter` (whose `execute_line` returns
the output lines of one statement, and `run_file` runs a whole script),
`FunctionRegistry` (at most 20 named function bodies), `is_axisql_file`
and `process_axisql_file`. `axisql.cli` provides `process_command`, and
`axisql.demo` provides `build_demo_database`.

## What it does not do

Everything lives in memory; nothing is saved to disk. The script
interpreter keeps only the names of the current database and table: it
does not create tables or store inserted rows, and `SELECT` and `UPDATE`
work on the interpreter's own list of result rows, which is empty when a
script is run from the command line. The record store is a library class
only; no command reaches it.