import logging
import pytest
from sqlalchemy import create_engine, text
from floorstatus.config import AppConfig
from floorstatus.logger import LOGGER

# Rows are inserted out of order so that ordering comes from the query
DEFAULT_ROWS = [
    (12, 8, 0),
    (3, 2, 1),
    (0, 6, 0),
    (5, 4, 1),
    (1, 4, 0),
    (11, 10, 1),
    (7, 2, 0),
]

def seed_sqlite(path, rows):
    """Create the reservation table in a SQLite file, bypassing the read-only guard."""
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as conn:
        conn.execute(text(
            'CREATE TABLE "Table" ('
            "table_id INTEGER PRIMARY KEY, "
            "seats INTEGER NOT NULL, "
            "is_reserved BOOLEAN NOT NULL)"
        ))
        for table_id, seats, is_reserved in rows:
            conn.execute(
                text('INSERT INTO "Table" (table_id, seats, is_reserved) VALUES (:i, :s, :r)'),
                {"i": table_id, "s": seats, "r": is_reserved},
            )
    engine.dispose()
    return f"sqlite:///{path}"

@pytest.fixture
def seeded_db(tmp_path):
    """Returns a factory: seeded_db(rows) -> connection string."""
    counter = {"n": 0}

    def _seed(rows=DEFAULT_ROWS):
        counter["n"] += 1
        return seed_sqlite(tmp_path / f"floor_{counter['n']}.db", rows)

    return _seed

@pytest.fixture
def floor_db(seeded_db):
    return seeded_db()

@pytest.fixture
def config_for():
    def _config(connection_string):
        return AppConfig(connection_strings={"DefaultConnection": connection_string})
    return _config

@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    for handler in list(LOGGER.handlers):
        LOGGER.removeHandler(handler)
    LOGGER.setLevel(logging.NOTSET)

@pytest.fixture
def package_logs(caplog):
    """Log records emitted by the floorstatus logger tree."""
    def _records():
        return [r for r in caplog.records if r.name.startswith("floorstatus")]
    return _records
