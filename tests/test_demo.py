from axisql.database import DataType
from axisql.demo import build_demo_database, main


def test_demo_database_structure():
    db = build_demo_database()
    assert db.name == "potato_express"
    assert [table.name for table in db.tables] == ["user"]
    columns = db.tables[0].columns
    assert [column.name for column in columns] == ["1", "Nombre", "true", "avatar"]
    assert [column.type for column in columns] == [
        DataType.NUMBER,
        DataType.STRING,
        DataType.BOOLEAN,
        DataType.BINARY,
    ]


def test_demo_builds_fresh_database_each_time():
    first = build_demo_database()
    first.create_table("extra")
    second = build_demo_database()
    assert len(second.tables) == 1


def test_main_prints_listing(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("AXISQL - SQL Database Engine\n\n")
    assert "AXISQL:: Data base 'potato_express' created!." in out
    assert out.endswith(build_demo_database().show())