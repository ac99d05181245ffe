# tests/test_init_db.py

from sqlalchemy import inspect

from scripts.init_db import init_schema
from tests.conftest import page_row


def test_init_schema_recreates_tables(engine, insert_pages):
    insert_pages([page_row(1)])

    init_schema(engine)

    assert set(inspect(engine).get_table_names()) >= {"pages", "categories"}
    with engine.connect() as conn:
        assert conn.exec_driver_sql("SELECT COUNT(*) FROM pages").scalar_one() == 0
