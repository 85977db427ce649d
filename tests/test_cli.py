import io

import pytest

from axisql.cli import main, process_command
from axisql.database import Database, DataType, TableNotFoundError


def test_create_database_resets_tables():
    db = Database("old")
    db.create_table("stale")
    message = process_command(db, "CREATE DATABASE shop")
    assert db.name == "shop"
    assert db.tables == []
    assert message == "AXISQL:: Data base 'shop' created!."


def test_create_table_adds_table():
    db = Database("shop")
    message = process_command(db, "CREATE TABLE items")
    assert [table.name for table in db.tables] == ["items"]
    assert message == "AXISQL:: Table 'items' created in the data base 'shop'."


@pytest.mark.parametrize("type_name", ["STRING", "NUMBER", "BOOLEAN", "BINARY"])
def test_add_column_types(type_name):
    db = Database("shop")
    process_command(db, "CREATE TABLE items")
    process_command(db, f"ADD COLUMN items price {type_name}")
    column = db.tables[0].columns[0]
    assert column.name == "price"
    assert column.type is DataType[type_name]


def test_add_column_unknown_type():
    db = Database("shop")
    process_command(db, "CREATE TABLE items")
    with pytest.raises(ValueError, match="Unknown data type 'FLOAT'"):
        process_command(db, "ADD COLUMN items price FLOAT")
    assert db.tables[0].columns == []


def test_add_column_missing_type():
    db = Database("shop")
    with pytest.raises(ValueError, match="Unknown data type"):
        process_command(db, "ADD COLUMN items")


def test_add_column_unknown_table():
    db = Database("shop")
    with pytest.raises(TableNotFoundError):
        process_command(db, "ADD COLUMN ghost price NUMBER")


def test_show_database_matches_show():
    db = Database("shop")
    process_command(db, "CREATE TABLE items")
    process_command(db, "ADD COLUMN items price NUMBER")
    assert process_command(db, "SHOW DATABASE") == "\n" + db.show().rstrip("\n")


@pytest.mark.parametrize("command", ["CREATE DATABASE", "DROP TABLE items", "show database"])
def test_unknown_command(command):
    with pytest.raises(ValueError, match="Unknown command"):
        process_command(Database("shop"), command)


def test_main_session(monkeypatch, capsys):
    commands = "CREATE DATABASE shop\nCREATE TABLE items\nADD COLUMN ghost a NUMBER\nSHOW DATABASE\nEXIT\nCREATE TABLE late\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(commands))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("AXISQL CLI - Enter commands:\n")
    assert "Table: items" in out
    assert "Table 'ghost' not found." in out
    assert "late" not in out
    assert out.endswith("Exiting AXISQL CLI...\n")


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("BOGUS"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Error: Unknown command 'BOGUS'" in out
    assert out.endswith("Exiting AXISQL CLI...\n")