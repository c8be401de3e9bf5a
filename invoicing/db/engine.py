# invoicing/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from invoicing.core.config import get_settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@lru_cache
def get_engine() -> Engine:
    url = get_settings().DATABASE_URL
    is_sqlite = url.startswith("sqlite")

    # Sync endpoints run in a threadpool, so SQLite connections cross threads
    connect_args = {"check_same_thread": False} if is_sqlite else {}

    # echo=True if you want to see SQL printed in the terminal
    engine = create_engine(url, future=True, connect_args=connect_args)

    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine
